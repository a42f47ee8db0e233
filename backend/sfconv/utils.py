from sfconv.core.models import Geometry, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon
from sfconv.enums.geometry_kind import GeometryKind


_KIND_BY_TYPE: dict[type, GeometryKind] = {
    Point: GeometryKind.POINT,
    MultiPoint: GeometryKind.MULTIPOINT,
    LineString: GeometryKind.LINESTRING,
    MultiLineString: GeometryKind.MULTILINESTRING,
    Polygon: GeometryKind.POLYGON,
    MultiPolygon: GeometryKind.MULTIPOLYGON,
}


def geometry_kind(geometry: Geometry) -> GeometryKind | None:
    # exact type match, subclasses are not part of the closed model
    return _KIND_BY_TYPE.get(type(geometry))
