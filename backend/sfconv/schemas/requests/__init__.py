from sfconv.schemas.requests.geojson_geometries import GeoJSONGeometries
from sfconv.schemas.requests.node_vector import NodeVector
