from dataclasses import dataclass
from typing import Any, Iterable
import numpy as np
import shapely
from shapely.geometry.base import BaseGeometry


@dataclass(frozen=True)
class Coordinate:
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


def _coords_array(coords: Iterable[Coordinate]) -> np.ndarray:
    return np.array([c.as_tuple() for c in coords], dtype=np.float64).reshape(-1, 2)


## Geometry values

@dataclass(frozen=True)
class Point:
    coord: Coordinate

    @property
    def x(self) -> float:
        return self.coord.x

    @property
    def y(self) -> float:
        return self.coord.y

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {'type': 'Point', 'coordinates': self.coord.as_tuple()}

    def to_shapely(self) -> shapely.Point:
        return shapely.Point(self.x, self.y)


@dataclass(frozen=True)
class MultiPoint:
    points: tuple[Point, ...] = ()

    def coords_array(self) -> np.ndarray:
        return _coords_array(p.coord for p in self.points)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {'type': 'MultiPoint', 'coordinates': [p.coord.as_tuple() for p in self.points]}

    def to_shapely(self) -> shapely.MultiPoint:
        return shapely.MultiPoint([p.to_shapely() for p in self.points])


@dataclass(frozen=True)
class LineString:
    # Path order; duplicates and degenerate lengths are kept as given.
    coords: tuple[Coordinate, ...] = ()

    def coords_array(self) -> np.ndarray:
        return _coords_array(self.coords)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {'type': 'LineString', 'coordinates': [c.as_tuple() for c in self.coords]}

    def to_shapely(self) -> shapely.LineString:
        return shapely.LineString(self.coords_array())


@dataclass(frozen=True)
class MultiLineString:
    lines: tuple[LineString, ...] = ()

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {
            'type': 'MultiLineString',
            'coordinates': [[c.as_tuple() for c in line.coords] for line in self.lines],
        }

    def to_shapely(self) -> shapely.MultiLineString:
        return shapely.MultiLineString([line.coords_array() for line in self.lines])


@dataclass(frozen=True)
class Polygon:
    exterior: LineString
    interiors: tuple[LineString, ...] = ()

    @property
    def rings(self) -> tuple[LineString, ...]:
        return (self.exterior, *self.interiors)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {
            'type': 'Polygon',
            'coordinates': [[c.as_tuple() for c in ring.coords] for ring in self.rings],
        }

    def to_shapely(self) -> shapely.Polygon:
        if not self.exterior.coords:
            return shapely.Polygon()
        return shapely.Polygon(
            self.exterior.coords_array(),
            [ring.coords_array() for ring in self.interiors],
        )


@dataclass(frozen=True)
class MultiPolygon:
    polygons: tuple[Polygon, ...] = ()

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {
            'type': 'MultiPolygon',
            'coordinates': [
                [[c.as_tuple() for c in ring.coords] for ring in polygon.rings]
                for polygon in self.polygons
            ],
        }

    def to_shapely(self) -> shapely.MultiPolygon:
        return shapely.MultiPolygon([polygon.to_shapely() for polygon in self.polygons])


Geometry = Point | MultiPoint | LineString | MultiLineString | Polygon | MultiPolygon


## shapely interop

def coordinates_from_array(array: np.ndarray) -> tuple[Coordinate, ...]:
    return tuple(Coordinate(float(x), float(y)) for x, y in array[:, :2])


def _line_from_shapely(geom: BaseGeometry) -> LineString:
    return LineString(coordinates_from_array(shapely.get_coordinates(geom)))


def _polygon_from_shapely(geom: shapely.Polygon) -> Polygon:
    if geom.is_empty:
        return Polygon(exterior=LineString())
    return Polygon(
        exterior=_line_from_shapely(geom.exterior),
        interiors=tuple(_line_from_shapely(ring) for ring in geom.interiors),
    )


def from_shapely(geom: BaseGeometry | None) -> Geometry | None:
    """
    Convert a shapely geometry into the value model.

    Kinds the model cannot represent (GeometryCollection, LinearRing, an empty
    Point) give None. Z values are dropped. shapely itself drops empty members
    of multi geometries and closes open rings, so those come back without them.
    """
    if geom is None:
        return None

    geom_type = geom.geom_type
    if geom_type == 'Point':
        if geom.is_empty:
            return None
        return Point(Coordinate(float(geom.x), float(geom.y)))
    elif geom_type == 'MultiPoint':
        return MultiPoint(tuple(Point(c) for c in coordinates_from_array(shapely.get_coordinates(geom))))
    elif geom_type == 'LineString':
        return _line_from_shapely(geom)
    elif geom_type == 'MultiLineString':
        return MultiLineString(tuple(_line_from_shapely(line) for line in geom.geoms))
    elif geom_type == 'Polygon':
        return _polygon_from_shapely(geom)
    elif geom_type == 'MultiPolygon':
        return MultiPolygon(tuple(_polygon_from_shapely(polygon) for polygon in geom.geoms))
    return None
