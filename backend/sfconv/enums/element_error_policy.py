from enum import StrEnum


class ElementErrorPolicy(StrEnum):
    ABSENT = 'absent'
    RAISE = 'raise'
