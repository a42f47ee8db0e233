from typing import Any


class GeometryCodecError(Exception):
    """Base error for every failure raised by the codec."""

    index: int | None = None

    def with_index(self, index: int) -> 'GeometryCodecError':
        self.index = index
        return self

    def _located(self, message: str) -> str:
        if self.index is None:
            return message
        return f'element {self.index}: {message}'


class ShapeError(GeometryCodecError, ValueError):
    """A node does not have the shape required at its position."""

    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        super().__init__(message)
        self.message = message
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return self._located(self.message)


class EmptyRingsError(GeometryCodecError, ValueError):
    """A polygon list node has no rings, so there is no exterior."""

    def __init__(self, expected: Any = '>= 1', actual: Any = 0):
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return self._located(
            f'polygon has {self.actual} rings, expected {self.expected}: an exterior ring is required'
        )


class NotAGeometryVectorError(GeometryCodecError, TypeError):

    def __init__(self, tag: str | None):
        super().__init__(tag)
        self.tag = tag

    def __str__(self) -> str:
        if self.tag is None:
            return 'object is not a geometry vector: it has no class'
        return f'object is not a geometry vector: unrecognised class {self.tag!r}'


class UnsupportedKindError(GeometryCodecError):
    """Tag outside the geometry vocabulary. Converted to an absent geometry, never surfaced."""

    def __init__(self, tag: str | None):
        super().__init__(tag)
        self.tag = tag

    def __str__(self) -> str:
        return self._located(f'unsupported geometry kind: {self.tag!r}')
