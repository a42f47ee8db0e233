from enum import StrEnum


class VectorKind(StrEnum):
    POINT = 'point'
    MULTIPOINT = 'multipoint'
    LINESTRING = 'linestring'
    MULTILINESTRING = 'multilinestring'
    POLYGON = 'polygon'
    MULTIPOLYGON = 'multipolygon'
    GEOMETRYCOLLECTION = 'geometrycollection'
    # no non-null element to classify
    UNKNOWN = 'unknown'
