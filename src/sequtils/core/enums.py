"""Enumerations used throughout the sequtils package."""

from enum import Enum


class Absent(Enum):
    """Sentinel for "no element", distinct from ``None``.

    Returned by accessors such as ``head`` or ``nth`` when the requested
    position does not exist, so a sequence that holds ``None`` stays
    distinguishable from an empty one.
    """

    ABSENT = "absent"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent.ABSENT


class FillBoundsPolicy(Enum):
    """How ``fill`` treats bounds that fall outside the sequence."""

    CLAMP = "clamp"
    REJECT = "reject"
