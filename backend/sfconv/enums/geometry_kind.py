from enum import StrEnum
from sfconv.core.errors import UnsupportedKindError


class GeometryKind(StrEnum):
    POINT = 'POINT'
    MULTIPOINT = 'MULTIPOINT'
    LINESTRING = 'LINESTRING'
    MULTILINESTRING = 'MULTILINESTRING'
    POLYGON = 'POLYGON'
    MULTIPOLYGON = 'MULTIPOLYGON'

    @classmethod
    def from_tag(cls, tag: str | None) -> 'GeometryKind':
        try:
            return cls(tag)
        except ValueError:
            raise UnsupportedKindError(tag) from None

    @property
    def handle_name(self) -> str:
        return self.value.lower()

