"""
Geometry vectors: ordered, possibly sparse collections of geometry handles.

A vector's container class is computed once, when the vector is built, from the
per-element classes of its non-null handles:

- one distinct element kind  -> ``sfconv_<kind>``
- several kinds              -> ``sfconv_geometrycollection``
- no non-null element at all -> ``sfconv_unknown``
"""

from dataclasses import dataclass
from typing import Iterable, Iterator
from sfconv.core.constants import HANDLE_CLASS, LIST_CLASS, VECTOR_CLASS, VECTOR_PREFIX
from sfconv.core.errors import NotAGeometryVectorError, UnsupportedKindError
from sfconv.core.models import Geometry
from sfconv.enums.geometry_kind import GeometryKind
from sfconv.enums.vector_kind import VectorKind
from sfconv.utils import geometry_kind

_HANDLE_NAMES = {kind.handle_name for kind in GeometryKind}
_VECTOR_NAMES = {kind.value for kind in VectorKind}


def handle_class(kind: GeometryKind) -> tuple[str, str]:
    return (kind.handle_name, HANDLE_CLASS)


@dataclass(frozen=True)
class GeometryHandle:
    geometry: Geometry
    classes: tuple[str, ...]

    def __post_init__(self):
        if not self.classes or self.classes[0] not in _HANDLE_NAMES:
            raise UnsupportedKindError(self.classes[0] if self.classes else None)

        kind = geometry_kind(self.geometry)
        if kind is None:
            raise UnsupportedKindError(type(self.geometry).__name__)
        if kind.handle_name != self.classes[0]:
            raise ValueError(
                f'handle class {self.classes[0]!r} does not match its {type(self.geometry).__name__} geometry'
            )

    @classmethod
    def wrap(cls, geometry: Geometry) -> 'GeometryHandle':
        kind = geometry_kind(geometry)
        if kind is None:
            raise UnsupportedKindError(type(geometry).__name__)
        return cls(geometry=geometry, classes=handle_class(kind))

    @property
    def kind(self) -> str:
        return self.classes[0]


def classify(tags: Iterable[str]) -> VectorKind:
    kinds = set(tags)
    if len(kinds) > 1:
        return VectorKind.GEOMETRYCOLLECTION
    if not kinds:
        return VectorKind.UNKNOWN
    return VectorKind(kinds.pop().lower())


def determine_vector_kind(elements: Iterable[GeometryHandle | None]) -> VectorKind:
    return classify(element.kind for element in elements if element is not None)


def determine_collection_kind(geometries: Iterable[Geometry | None]) -> VectorKind:
    tags = []
    for geometry in geometries:
        if geometry is None:
            continue
        kind = geometry_kind(geometry)
        if kind is None:
            raise UnsupportedKindError(type(geometry).__name__)
        tags.append(kind.value)
    return classify(tags)


def vector_class(kind: VectorKind | str) -> tuple[str, str, str]:
    name = str(kind).lower()
    if name not in _VECTOR_NAMES:
        raise NotAGeometryVectorError(VECTOR_PREFIX + name)
    return (VECTOR_PREFIX + name, VECTOR_CLASS, LIST_CLASS)


@dataclass(frozen=True)
class GeometryVector:
    elements: tuple[GeometryHandle | None, ...]
    classes: tuple[str, ...]

    @classmethod
    def from_handles(cls, handles: Iterable[GeometryHandle | None]) -> 'GeometryVector':
        elements = tuple(handles)
        return cls(elements=elements, classes=vector_class(determine_vector_kind(elements)))

    @property
    def kind(self) -> VectorKind:
        return VectorKind(element_kind(self))

    def geometries(self) -> list[Geometry | None]:
        return [None if element is None else element.geometry for element in self.elements]

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[GeometryHandle | None]:
        return iter(self.elements)

    def __getitem__(self, index: int) -> GeometryHandle | None:
        return self.elements[index]


def as_vector(handles: Iterable[GeometryHandle | None], kind: VectorKind | str) -> GeometryVector:
    return GeometryVector(elements=tuple(handles), classes=vector_class(kind))


def _outer_class(obj) -> str | None:
    classes = getattr(obj, 'classes', None)
    if not classes:
        return None
    first = classes[0]
    return first if isinstance(first, str) else None


def is_vector(obj) -> bool:
    cls = _outer_class(obj)
    if cls is None or not cls.startswith(VECTOR_PREFIX):
        return False
    return cls.removeprefix(VECTOR_PREFIX) in _VECTOR_NAMES


def require_vector(obj) -> None:
    if not is_vector(obj):
        raise NotAGeometryVectorError(_outer_class(obj))


def element_kind(obj) -> str:
    require_vector(obj)
    return _outer_class(obj).removeprefix(VECTOR_PREFIX)
