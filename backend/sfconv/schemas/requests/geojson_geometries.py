from pydantic import BaseModel
from sfconv.schemas.responses.geojson import Geometry, GeometryCollection


class GeoJSONGeometries(BaseModel):
    geometries: list[Geometry | GeometryCollection | None]
