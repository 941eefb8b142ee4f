"""Functional primitives for sequtils.

This package provides the sequence utilities themselves. Every function is
stateless and side-effect-free, so they can be composed freely into larger
data processing pipelines.
"""

from sequtils.functional.arrays import (
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
    last,
    nth,
    zip,
)
from sequtils.functional.truthiness import is_falsy, is_truthy

__all__ = [
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
