import logging
import numpy as np
from sfconv.core.constants import COORDINATE_COLUMNS
from sfconv.core.models import Geometry, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon
from sfconv.core.nodes import NULL, ListNode, MatrixNode, Node, sfg_class
from sfconv.enums.geometry_kind import GeometryKind
from sfconv.utils import geometry_kind


logger = logging.getLogger(__name__)


def new_matrix(coords: np.ndarray, kind: GeometryKind) -> MatrixNode:
    coords = np.asarray(coords, dtype=np.float64).reshape(-1, COORDINATE_COLUMNS)
    return MatrixNode(
        values=tuple(coords.ravel(order='F').tolist()),
        dim=(int(coords.shape[0]), COORDINATE_COLUMNS),
        classes=sfg_class(kind),
    )


def from_point(point: Point) -> MatrixNode:
    return new_matrix(np.array([point.coord.as_tuple()]), GeometryKind.POINT)


def from_multipoint(multipoint: MultiPoint) -> MatrixNode:
    return new_matrix(multipoint.coords_array(), GeometryKind.MULTIPOINT)


def from_linestring(linestring: LineString) -> MatrixNode:
    return new_matrix(linestring.coords_array(), GeometryKind.LINESTRING)


def from_multilinestring(multilinestring: MultiLineString) -> ListNode:
    return ListNode(
        children=tuple(from_linestring(line) for line in multilinestring.lines),
        classes=sfg_class(GeometryKind.MULTILINESTRING),
    )


def from_polygon(polygon: Polygon) -> ListNode:
    # ring 0 is the exterior
    return ListNode(
        children=tuple(from_linestring(ring) for ring in polygon.rings),
        classes=sfg_class(GeometryKind.POLYGON),
    )


def from_multipolygon(multipolygon: MultiPolygon) -> ListNode:
    return ListNode(
        children=tuple(from_polygon(polygon) for polygon in multipolygon.polygons),
        classes=sfg_class(GeometryKind.MULTIPOLYGON),
    )


def to_node(geometry: Geometry | None) -> Node:
    if geometry is None:
        return NULL

    kind = geometry_kind(geometry)
    if kind is None:
        logger.debug('%s cannot be represented as a tagged node, using a null node', type(geometry).__name__)
        return NULL
    elif kind == GeometryKind.POINT:
        return from_point(geometry)
    elif kind == GeometryKind.MULTIPOINT:
        return from_multipoint(geometry)
    elif kind == GeometryKind.LINESTRING:
        return from_linestring(geometry)
    elif kind == GeometryKind.MULTILINESTRING:
        return from_multilinestring(geometry)
    elif kind == GeometryKind.POLYGON:
        return from_polygon(geometry)
    else:
        return from_multipolygon(geometry)
