"""Sequence utilities.

This module provides a small set of pure functions for working with ordered,
finite, in-memory sequences: splitting into chunks, compacting, reading and
slicing from either end, dropping by count or predicate, filling a range,
searching for an index and zipping several sequences together.

Any object supporting ``len()`` and integer indexing is accepted (lists,
tuples, strings, 1-D ``numpy.ndarray``). Inputs are never mutated and every
sequence-valued result is a new ``list``.

Conventions:
    - Missing elements are reported with the ``ABSENT`` sentinel, missing
      indices with ``NOT_FOUND`` (``-1``). Neither case raises.
    - Invalid arguments (a chunk size below 1, a non-integer count, ``fill``
      bounds outside the sequence under ``FillBoundsPolicy.REJECT``) raise
      ``ValueError``.
    - Predicates may take no arguments, ``(value)``, ``(value, index)`` or
      ``(value, index, sequence)`` and are called at most once per element.

Examples:
    >>> from sequtils.functional.arrays import chunk, drop_while, zip
    >>> chunk(["a", "b", "c", "d"], 3)
    [['a', 'b', 'c'], ['d']]
    >>> drop_while([1, 2, 3, 4, 5, 1], lambda value: value < 3)
    [3, 4, 5, 1]
    >>> zip(["a", "b"], [1, 2], [True, False])
    [('a', 1, True), ('b', 2, False)]
"""

import builtins
import inspect
import typing as tp

from sequtils.core.enums import ABSENT, FillBoundsPolicy
from sequtils.core.types import (
    NOT_FOUND,
    AnyPredicate,
    Maybe,
    T,
    validate_chunk_size,
    validate_count,
    validate_index,
)
from sequtils.functional.truthiness import is_truthy
from sequtils.logger.logger import logger

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
]


def _positional_arity(func: tp.Callable) -> int:
    """Number of positional arguments (0 to 3) a predicate should receive."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins do not expose a signature; they get the value only
        return 1

    # Only required positional parameters receive arguments
    count = 0
    for param in signature.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return 3
        if (
            param.kind
            in (
                inspect.Parameter.POSITIONAL_ONLY,
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
            )
            and param.default is inspect.Parameter.empty
        ):
            count += 1
    return min(count, 3)


def _bind_predicate(
    predicate: AnyPredicate, sequence: tp.Sequence[T]
) -> tp.Callable[[int], bool]:
    """Turn a predicate of up to three arguments into a test over an index."""
    arity = _positional_arity(predicate)
    if arity == 0:
        return lambda i: bool(predicate())
    if arity == 1:
        return lambda i: bool(predicate(sequence[i]))
    if arity == 2:
        return lambda i: bool(predicate(sequence[i], i))
    return lambda i: bool(predicate(sequence[i], i, sequence))


# =============================================================================
# Chunking And Compaction
# =============================================================================


def chunk(sequence: tp.Sequence[T], size: int = 1) -> tp.List[tp.List[T]]:
    """Split a sequence into consecutive chunks of ``size`` elements.

    If the sequence can't be split evenly, the final chunk holds the remaining
    elements. The number of chunks is ``ceil(len(sequence) / size)``.

    Args:
        sequence: The sequence to split.
        size: Maximum length of each chunk. Must be an integer >= 1.

    Returns:
        A list of chunks, each a new list.

    Raises:
        ValueError: If ``size`` is not an integer >= 1.

    Example:
        >>> chunk(["a", "b", "c", "d"], 2)
        [['a', 'b'], ['c', 'd']]
        >>> chunk(["a", "b", "c"])
        [['a'], ['b'], ['c']]
    """
    size = validate_chunk_size(size)
    return [list(sequence[i : i + size]) for i in range(0, len(sequence), size)]


def compact(
    sequence: tp.Sequence[T], predicate: tp.Callable[[T], tp.Any] = is_truthy
) -> tp.List[T]:
    """Return the elements of ``sequence`` that are truthy, in order.

    The default rule drops ``0``, ``None``, ``ABSENT``, NaN, ``False`` and
    ``""`` and keeps everything else (see
    :mod:`sequtils.functional.truthiness`). A custom ``predicate`` can be
    supplied for element types that need a different rule.

    Example:
        >>> compact([1, None, 2, float("nan"), 0, 3])
        [1, 2, 3]
    """
    return [value for value in sequence if predicate(value)]


# =============================================================================
# Edge Accessors
# =============================================================================


def head(sequence: tp.Sequence[T]) -> Maybe[T]:
    """First element of ``sequence``, or ``ABSENT`` if it is empty."""
    return sequence[0] if len(sequence) else ABSENT


def last(sequence: tp.Sequence[T]) -> Maybe[T]:
    """Last element of ``sequence``, or ``ABSENT`` if it is empty."""
    return sequence[len(sequence) - 1] if len(sequence) else ABSENT


def initial(sequence: tp.Sequence[T]) -> tp.List[T]:
    """All elements but the last. An empty sequence yields ``[]``."""
    return list(sequence[: max(len(sequence) - 1, 0)])


def nth(sequence: tp.Sequence[T], index: int = 0) -> Maybe[T]:
    """Element at ``index``, or ``ABSENT`` when out of range.

    Indices are non-negative offsets; a negative index is out of range.

    Example:
        >>> nth([1, 2, 3], 1)
        2
        >>> nth([1, 2, 3], 5)
        ABSENT
    """
    index = validate_index(index)
    if 0 <= index < len(sequence):
        return sequence[index]
    return ABSENT


# =============================================================================
# Drop Family
# =============================================================================


def drop(sequence: tp.Sequence[T], n: int = 1) -> tp.List[T]:
    """Remove the first ``n`` elements.

    ``n`` larger than the sequence yields ``[]``; negative ``n`` removes
    nothing.

    Example:
        >>> drop([1, 2, 3, 4], 2)
        [3, 4]
        >>> drop([1, 2, 3, 4])
        [2, 3, 4]
    """
    n = validate_count(n)
    return list(sequence[min(max(n, 0), len(sequence)) :])


def drop_right(sequence: tp.Sequence[T], n: int = 1) -> tp.List[T]:
    """Remove the last ``n`` elements.

    Example:
        >>> drop_right([1, 2, 3, 4], 2)
        [1, 2]
    """
    n = validate_count(n)
    return list(sequence[: len(sequence) - min(max(n, 0), len(sequence))])


def drop_while(sequence: tp.Sequence[T], predicate: AnyPredicate) -> tp.List[T]:
    """Remove elements from the front while ``predicate`` holds.

    Scanning stops at the first element for which the predicate is false;
    that element and everything after it are kept.

    Args:
        sequence: The sequence to scan.
        predicate: Called as ``predicate(value)``, ``predicate(value, index)``
            or ``predicate(value, index, sequence)`` depending on how many
            positional parameters it accepts.

    Returns:
        The remaining elements as a new list.
    """
    test = _bind_predicate(predicate, sequence)
    start = 0
    length = len(sequence)
    while start < length and test(start):
        start += 1
    return list(sequence[start:])


def drop_right_while(
    sequence: tp.Sequence[T], predicate: AnyPredicate
) -> tp.List[T]:
    """Remove elements from the back while ``predicate`` holds.

    Example:
        >>> drop_right_while([5, 4, 3, 2, 1], lambda value: value < 3)
        [5, 4, 3]
    """
    test = _bind_predicate(predicate, sequence)
    end = len(sequence)
    while end > 0 and test(end - 1):
        end -= 1
    return list(sequence[:end])


# =============================================================================
# Fill
# =============================================================================


def _resolve_bound(
    name: str, bound: int, length: int, policy: FillBoundsPolicy
) -> int:
    bound = validate_index(bound, name)
    if 0 <= bound <= length:
        return bound
    if policy is FillBoundsPolicy.REJECT:
        raise ValueError(
            f"'{name}'={bound} is outside the sequence bounds [0, {length}]."
        )
    clamped = min(max(bound, 0), length)
    logger.debug(f"Clamped fill bound {name}={bound} to {clamped}")
    return clamped


def fill(
    sequence: tp.Sequence[T],
    value: tp.Any,
    from_included: int = 0,
    to_excluded: tp.Optional[int] = None,
    *,
    policy: FillBoundsPolicy = FillBoundsPolicy.CLAMP,
) -> tp.List[tp.Any]:
    """Return a copy of ``sequence`` with a range of positions set to ``value``.

    Every position ``i`` with ``from_included <= i < to_excluded`` holds
    ``value`` in the result; the remaining positions keep their element. The
    input sequence is left untouched.

    Args:
        sequence: The source sequence.
        value: The value written into the range.
        from_included: First position to fill.
        to_excluded: Position to stop before. ``None`` means the end of the
            sequence.
        policy: ``FillBoundsPolicy.CLAMP`` clamps bounds below 0 to 0 and
            bounds past the end to ``len(sequence)``.
            ``FillBoundsPolicy.REJECT`` raises instead.

    Returns:
        A new list of the same length as ``sequence``.

    Raises:
        ValueError: If a bound is not an integer, or lies outside
            ``[0, len]`` under ``FillBoundsPolicy.REJECT``.

    Example:
        >>> fill([4, 6, 8, 10], "*", 1, 3)
        [4, '*', '*', 10]
    """
    policy = FillBoundsPolicy(policy)
    length = len(sequence)
    if to_excluded is None:
        to_excluded = length
    start = _resolve_bound("from_included", from_included, length, policy)
    end = _resolve_bound("to_excluded", to_excluded, length, policy)

    result = list(sequence)
    if start < end:
        result[start:end] = [value] * (end - start)
    return result


# =============================================================================
# Index Search
# =============================================================================


def find_index(
    sequence: tp.Sequence[T], predicate: AnyPredicate, from_index: int = 0
) -> int:
    """Index of the first element satisfying ``predicate``, scanning forward.

    Args:
        sequence: The sequence to search.
        predicate: Called with ``(value)``, ``(value, index)`` or
            ``(value, index, sequence)``.
        from_index: Position to start from. Negative values are clamped to 0;
            a start at or past the end finds nothing.

    Returns:
        The matching index, or ``NOT_FOUND`` (-1).

    Example:
        >>> find_index([4, 6, 6, 8, 10], lambda value: value == 6, 2)
        2
    """
    from_index = validate_index(from_index, "from_index")
    length = len(sequence)
    if from_index < 0:
        logger.debug(f"Clamped from_index={from_index} to 0")
        from_index = 0

    test = _bind_predicate(predicate, sequence)
    for i in range(from_index, length):
        if test(i):
            return i
    return NOT_FOUND


def find_last_index(
    sequence: tp.Sequence[T],
    predicate: AnyPredicate,
    from_index: tp.Optional[int] = None,
) -> int:
    """Index of the last element satisfying ``predicate``, scanning backward.

    The scan runs from ``from_index`` down to and including index 0.

    Args:
        sequence: The sequence to search.
        predicate: Called with ``(value)``, ``(value, index)`` or
            ``(value, index, sequence)``.
        from_index: Position to start from, ``len(sequence) - 1`` by default.
            Values past the end are clamped to the last index; a negative
            start finds nothing.

    Returns:
        The matching index, or ``NOT_FOUND`` (-1).

    Example:
        >>> find_last_index([4, 6, 8, 6, 10], lambda value: value == 6)
        3
        >>> find_last_index([4, 6, 6, 8, 10], lambda value: value == 6, 1)
        1
    """
    length = len(sequence)
    if from_index is None:
        from_index = length - 1
    from_index = validate_index(from_index, "from_index")
    if from_index >= length:
        logger.debug(f"Clamped from_index={from_index} to {length - 1}")
        from_index = length - 1

    test = _bind_predicate(predicate, sequence)
    for i in range(from_index, -1, -1):
        if test(i):
            return i
    return NOT_FOUND


# =============================================================================
# Zip
# =============================================================================


def zip(*sequences: tp.Sequence[tp.Any]) -> tp.List[tp.Tuple[tp.Any, ...]]:
    """Group the i-th elements of each sequence into tuples.

    The result is truncated to the shortest input; no inputs yields ``[]``.

    Example:
        >>> zip([1, 2, 3], [4, 5])
        [(1, 4), (2, 5)]
    """
    return list(builtins.zip(*sequences))
