"""sequtils: pure utility functions over ordered sequences."""

from sequtils.core import ABSENT, NOT_FOUND, Absent, FillBoundsPolicy
from sequtils.functional import (
    chunk,
    compact,
    drop,
    drop_right,
    drop_right_while,
    drop_while,
    fill,
    find_index,
    find_last_index,
    head,
    initial,
    is_falsy,
    is_truthy,
    last,
    nth,
    zip,
)

__all__ = [
    "ABSENT",
    "Absent",
    "NOT_FOUND",
    "FillBoundsPolicy",
    "chunk",
    "compact",
    "head",
    "last",
    "initial",
    "nth",
    "drop",
    "drop_right",
    "drop_while",
    "drop_right_while",
    "fill",
    "find_index",
    "find_last_index",
    "zip",
    "is_truthy",
    "is_falsy",
]
