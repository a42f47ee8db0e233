from pydantic import BaseModel
from sfconv.schemas.nodes import NodeModel
from sfconv.schemas.responses.geojson import FeatureCollection


class ElementFailure(BaseModel):
    index: int
    error: str
    message: str

class VectorFeatureCollection(FeatureCollection):
    vector_class: list[str]
    failures: list[ElementFailure] = []

class NodeList(BaseModel):
    nodes: list[NodeModel]
    vector_class: list[str]
