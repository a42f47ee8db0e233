from typing import Iterable
from sfconv.core.models import Geometry
from sfconv.core.nodes import Node
from sfconv.core.vector import GeometryVector, require_vector
from sfconv.serializers.geometry import to_node


def geometries_to_nodes(geometries: Iterable[Geometry | None]) -> list[Node]:
    return [to_node(geometry) for geometry in geometries]


def vector_to_nodes(vector: GeometryVector) -> list[Node]:
    require_vector(vector)
    return geometries_to_nodes(vector.geometries())
