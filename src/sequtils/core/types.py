"""Reusable type definitions for the sequtils package.

This module provides type aliases and constrained types shared by the
sequence utilities, together with the pydantic adapters used to validate
scalar arguments.

Type Aliases:
    Predicate: A callable over an element returning a truthy/falsy result.
    IndexedPredicate: A predicate that also receives the index and sequence.
    Maybe: Either an element or the ``ABSENT`` sentinel.
    Index: A plain integer offset (negative values count from the end).
    ChunkSize: A strictly positive integer.
    Count: An integer number of elements to remove.
"""

from typing import Annotated, Any, Callable, Sequence, TypeVar, Union

import annotated_types as at
import numpy as np
from pydantic import Strict, TypeAdapter, ValidationError

from sequtils.core.enums import Absent
from sequtils.logger.logger import logger

__all__ = [
    "T",
    "Predicate",
    "IndexedPredicate",
    "AnyPredicate",
    "Maybe",
    "Index",
    "ChunkSize",
    "Count",
    "NOT_FOUND",
    "validate_index",
    "validate_chunk_size",
    "validate_count",
]

T = TypeVar("T")

Predicate = Callable[[T], Any]
IndexedPredicate = Callable[[T, int, Sequence[T]], Any]
AnyPredicate = Union[Predicate, IndexedPredicate]

Maybe = Union[T, Absent]

# Strict ints so that bools, floats and strings are rejected instead of coerced
Index = Annotated[int, Strict()]
ChunkSize = Annotated[int, Strict(), at.Ge(1)]
Count = Annotated[int, Strict()]

NOT_FOUND = -1

_index_adapter = TypeAdapter(Index)
_chunk_size_adapter = TypeAdapter(ChunkSize)
_count_adapter = TypeAdapter(Count)


def _validate(name: str, value: Any, adapter: TypeAdapter) -> int:
    """Run ``value`` through ``adapter``, reporting failures as ValueError.

    NumPy integer scalars are accepted and converted to ``int`` first.

    Raises:
        ValueError: If the value does not satisfy the constraint.
    """
    if isinstance(value, np.integer):
        value = int(value)
    try:
        return adapter.validate_python(value)
    except ValidationError as e:
        reason = e.errors()[0]["msg"]
        logger.debug(f"Rejected {name}={value!r}: {reason}")
        raise ValueError(f"Invalid value for '{name}': {value!r} ({reason})") from e


def validate_index(value: Any, name: str = "index") -> int:
    """Validate an index argument (any int, negative allowed)."""
    return _validate(name, value, _index_adapter)


def validate_chunk_size(value: Any, name: str = "size") -> int:
    """Validate a chunk size (int >= 1)."""
    return _validate(name, value, _chunk_size_adapter)


def validate_count(value: Any, name: str = "n") -> int:
    """Validate an element count (negative values are treated as zero by callers)."""
    return _validate(name, value, _count_adapter)
