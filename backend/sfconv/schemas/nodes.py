from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field
from sfconv.core.nodes import NULL, ListNode, MatrixNode, Node, NullNode


class MatrixNodeModel(BaseModel):
    kind: Literal["matrix"] = "matrix"
    classes: list[str] = Field(default_factory=list, description="Class stack, e.g. ['XY', 'LINESTRING', 'sfg']")
    values: list[float] = Field(..., description="Column-major buffer: all x values, then all y values")
    dim: list[int] | None = Field(None, description="[rows, columns]")

    def to_node(self) -> MatrixNode:
        return MatrixNode(
            values=tuple(self.values),
            dim=None if self.dim is None else tuple(self.dim),
            classes=tuple(self.classes),
        )

class ListNodeModel(BaseModel):
    kind: Literal["list"] = "list"
    classes: list[str] = Field(default_factory=list)
    children: list["NodeModel"]

    def to_node(self) -> ListNode:
        return ListNode(
            children=tuple(child.to_node() for child in self.children),
            classes=tuple(self.classes),
        )

class NullNodeModel(BaseModel):
    kind: Literal["null"] = "null"

    def to_node(self) -> NullNode:
        return NULL

NodeModel = Annotated[
    Union[MatrixNodeModel, ListNodeModel, NullNodeModel],
    Field(discriminator="kind"),
]

ListNodeModel.model_rebuild()


def node_to_model(node: Node) -> MatrixNodeModel | ListNodeModel | NullNodeModel:
    if isinstance(node, MatrixNode):
        return MatrixNodeModel(
            classes=list(node.classes),
            values=list(node.values),
            dim=None if node.dim is None else list(node.dim),
        )
    if isinstance(node, ListNode):
        return ListNodeModel(
            classes=list(node.classes),
            children=[node_to_model(child) for child in node.children],
        )
    return NullNodeModel()
