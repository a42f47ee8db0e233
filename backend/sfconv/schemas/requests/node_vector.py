from pydantic import BaseModel, Field
from sfconv.enums.element_error_policy import ElementErrorPolicy
from sfconv.schemas.nodes import NodeModel


class NodeVector(BaseModel):
    nodes: list[NodeModel]
    on_error: ElementErrorPolicy | None = Field(
        None,
        description="'absent' replaces failing elements by null geometries, 'raise' rejects the request"
    )
