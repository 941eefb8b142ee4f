"""Explicit truthiness rule used by ``compact``.

Python's own ``bool()`` treats empty containers as false and NaN as true,
which differs from the falsy set the sequence utilities are defined against.
This module spells that set out as a plain predicate:

    - numeric zero (``0``, ``0.0``, ``0j``, NumPy zero scalars)
    - NaN (float, complex, Decimal or NumPy floating scalars)
    - ``None`` and the ``ABSENT`` sentinel
    - ``False`` (and ``numpy.False_``)
    - the empty string

Every other value, including empty lists, dicts and tuples, is truthy.
"""

import cmath
import numbers
import typing as tp
from decimal import Decimal

import numpy as np

from sequtils.core.enums import Absent

__all__ = ["is_truthy", "is_falsy"]


def _is_nan(value: tp.Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, np.generic):
        return bool(np.isnan(value)) if np.issubdtype(value.dtype, np.inexact) else False
    if isinstance(value, numbers.Complex):
        return cmath.isnan(value)
    return False


def is_falsy(value: tp.Any) -> bool:
    """Return True if ``value`` belongs to the falsy set."""
    if value is None or isinstance(value, Absent):
        return True
    if isinstance(value, (bool, np.bool_)):
        return not value
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (numbers.Number, np.number)):
        return _is_nan(value) or value == 0
    return False


def is_truthy(value: tp.Any) -> bool:
    """Return True if ``value`` is outside the falsy set.

    Example:
        >>> [is_truthy(v) for v in (1, 0, float("nan"), "", [], None)]
        [True, False, False, False, True, False]
    """
    return not is_falsy(value)
