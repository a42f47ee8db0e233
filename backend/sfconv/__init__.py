from sfconv.core.errors import (
    EmptyRingsError,
    GeometryCodecError,
    NotAGeometryVectorError,
    ShapeError,
    UnsupportedKindError,
)
from sfconv.core.models import (
    Coordinate,
    Geometry,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    from_shapely,
)
from sfconv.core.nodes import NULL, ListNode, MatrixNode, Node, NullNode
from sfconv.core.vector import (
    GeometryHandle,
    GeometryVector,
    as_vector,
    determine_collection_kind,
    determine_vector_kind,
    element_kind,
    is_vector,
    require_vector,
    vector_class,
)
from sfconv.enums.element_error_policy import ElementErrorPolicy
from sfconv.enums.geometry_kind import GeometryKind
from sfconv.enums.vector_kind import VectorKind
from sfconv.parsers.geometry import build_geometry, build_handle, point
from sfconv.parsers.vector import ElementFailure, VectorConversion, nodes_to_geometries, nodes_to_vector
from sfconv.serializers.geometry import to_node
from sfconv.serializers.vector import geometries_to_nodes, vector_to_nodes
