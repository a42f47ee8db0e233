import logging
from dataclasses import dataclass
from typing import Callable, Iterable, TypeVar
from sfconv.core.errors import EmptyRingsError, GeometryCodecError, ShapeError
from sfconv.core.models import Geometry
from sfconv.core.nodes import Node
from sfconv.core.settings import Settings
from sfconv.core.vector import GeometryVector
from sfconv.enums.element_error_policy import ElementErrorPolicy
from sfconv.parsers.geometry import build_geometry, build_handle


logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass(frozen=True)
class ElementFailure:
    index: int
    error: GeometryCodecError

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass(frozen=True)
class VectorConversion:
    vector: GeometryVector
    failures: tuple[ElementFailure, ...] = ()

    @property
    def failure_count(self) -> int:
        return len(self.failures)


def resolve_policy(policy: ElementErrorPolicy | str | None) -> ElementErrorPolicy:
    return ElementErrorPolicy(policy if policy is not None else Settings.ON_ELEMENT_ERROR)


def _convert_elements(
    nodes: Iterable[Node | None],
    convert: Callable[[Node | None], T],
    policy: ElementErrorPolicy,
) -> tuple[list[T | None], list[ElementFailure]]:
    results: list[T | None] = []
    failures: list[ElementFailure] = []

    for i, node in enumerate(nodes):
        try:
            results.append(convert(node))
        except (ShapeError, EmptyRingsError) as e:
            e.with_index(i)
            if policy == ElementErrorPolicy.RAISE:
                raise
            failures.append(ElementFailure(index=i, error=e))
            results.append(None)

    if failures:
        logger.warning(
            '%d of %d geometries could not be decoded and were replaced by absent geometries (first: %s)',
            len(failures), len(results), failures[0].message,
        )
    return results, failures


def nodes_to_vector(nodes: Iterable[Node | None], policy: ElementErrorPolicy | str | None = None) -> VectorConversion:
    handles, failures = _convert_elements(nodes, build_handle, resolve_policy(policy))
    return VectorConversion(
        vector=GeometryVector.from_handles(handles),
        failures=tuple(failures),
    )


def nodes_to_geometries(nodes: Iterable[Node | None], policy: ElementErrorPolicy | str | None = None) -> list[Geometry | None]:
    geometries, _ = _convert_elements(nodes, build_geometry, resolve_policy(policy))
    return geometries
