from sfconv.schemas.responses.conversion import ElementFailure, NodeList, VectorFeatureCollection
from sfconv.schemas.responses.geojson import Feature, FeatureCollection
