import logging
from sfconv.core.errors import EmptyRingsError, ShapeError, UnsupportedKindError
from sfconv.core.models import Coordinate, Geometry, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon
from sfconv.core.nodes import ListNode, MatrixNode, Node, NullNode
from sfconv.core.vector import GeometryHandle, handle_class
from sfconv.enums.geometry_kind import GeometryKind
from sfconv.parsers.coordinates import matrix_to_coords, matrix_to_points, node_type_name


logger = logging.getLogger(__name__)


def build_point(node: MatrixNode) -> Point:
    coords = matrix_to_coords(node)
    if len(coords) != 1:
        raise ShapeError(f'POINT needs a matrix with exactly 1 row, got {len(coords)}', expected=1, actual=len(coords))
    return Point(coords[0])


def build_multipoint(node: MatrixNode) -> MultiPoint:
    return MultiPoint(matrix_to_points(node))


def build_linestring(node: MatrixNode) -> LineString:
    return LineString(matrix_to_coords(node))


def _children(node: ListNode, kind: GeometryKind) -> tuple[Node, ...]:
    if not isinstance(node, ListNode):
        raise ShapeError(
            f'{kind} must be a list node, got {node_type_name(node)}',
            expected='ListNode',
            actual=node_type_name(node),
        )
    return node.children


def build_multilinestring(node: ListNode) -> MultiLineString:
    return MultiLineString(tuple(build_linestring(child) for child in _children(node, GeometryKind.MULTILINESTRING)))


def build_polygon(node: ListNode) -> Polygon:
    rings = _children(node, GeometryKind.POLYGON)
    if len(rings) == 0:
        raise EmptyRingsError(expected='>= 1', actual=len(rings))

    exterior = build_linestring(rings[0])
    interiors = tuple(build_linestring(ring) for ring in rings[1:])
    return Polygon(exterior=exterior, interiors=interiors)


def build_multipolygon(node: ListNode) -> MultiPolygon:
    return MultiPolygon(tuple(build_polygon(child) for child in _children(node, GeometryKind.MULTIPOLYGON)))


def node_kind(node: Node | None) -> GeometryKind | None:
    if node is None or isinstance(node, NullNode):
        return None
    try:
        return GeometryKind.from_tag(node.tag)
    except UnsupportedKindError as e:
        logger.debug('Node converted to an absent geometry: %s', e)
        return None


def build_geometry(node: Node | None) -> Geometry | None:
    """
    Decode a tagged node into a geometry value.

    The branch is chosen by the node's geometry tag (``classes[1]``). Null nodes
    and tags outside the six supported kinds give None; malformed nodes raise
    ShapeError or EmptyRingsError.
    """
    kind = node_kind(node)

    if kind is None:
        return None
    elif kind == GeometryKind.POINT:
        return build_point(node)
    elif kind == GeometryKind.MULTIPOINT:
        return build_multipoint(node)
    elif kind == GeometryKind.LINESTRING:
        return build_linestring(node)
    elif kind == GeometryKind.MULTILINESTRING:
        return build_multilinestring(node)
    elif kind == GeometryKind.POLYGON:
        return build_polygon(node)
    else:
        return build_multipolygon(node)


def build_handle(node: Node | None) -> GeometryHandle | None:
    kind = node_kind(node)
    if kind is None:
        return None
    return GeometryHandle(geometry=build_geometry(node), classes=handle_class(kind))


def point(x: float, y: float) -> GeometryHandle:
    return GeometryHandle(
        geometry=Point(Coordinate(float(x), float(y))),
        classes=handle_class(GeometryKind.POINT),
    )
