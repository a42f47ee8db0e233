from dataclasses import dataclass
from sfconv.core.constants import DIMENSION_TAG, SFG_CLASS


def sfg_class(tag: str) -> tuple[str, str, str]:
    return (DIMENSION_TAG, tag, SFG_CLASS)


def _tag(classes: tuple[str, ...]) -> str | None:
    # classes[0] is the coordinate dimension ("XY"), classes[1] the geometry kind
    if len(classes) < 2:
        return None
    return classes[1]


@dataclass(frozen=True)
class MatrixNode:
    """Flat column-major buffer: values[j * nrow + i] is row i, column j."""
    values: tuple[float, ...]
    dim: tuple[int, ...] | None
    classes: tuple[str, ...] = ()

    @property
    def tag(self) -> str | None:
        return _tag(self.classes)


@dataclass(frozen=True)
class ListNode:
    children: tuple['Node', ...]
    classes: tuple[str, ...] = ()

    @property
    def tag(self) -> str | None:
        return _tag(self.classes)


@dataclass(frozen=True)
class NullNode:

    @property
    def tag(self) -> None:
        return None


NULL = NullNode()

Node = MatrixNode | ListNode | NullNode
