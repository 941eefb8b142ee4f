"""Core types, sentinels and settings shared by the sequence utilities."""

from sequtils.core.enums import ABSENT, Absent, FillBoundsPolicy
from sequtils.core.types import NOT_FOUND, Maybe, Predicate, IndexedPredicate

__all__ = [
    "ABSENT",
    "Absent",
    "FillBoundsPolicy",
    "NOT_FOUND",
    "Maybe",
    "Predicate",
    "IndexedPredicate",
]
