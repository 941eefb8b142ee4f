import numpy as np
import pytest
from sequtils.core.enums import ABSENT, Absent, FillBoundsPolicy
from sequtils.core.types import (
    NOT_FOUND,
    validate_chunk_size,
    validate_count,
    validate_index,
)


def test_absent_sentinel():
    assert ABSENT is Absent.ABSENT
    assert not ABSENT
    assert ABSENT is not None
    assert repr(ABSENT) == "ABSENT"


def test_not_found_value():
    assert NOT_FOUND == -1


def test_fill_bounds_policy_from_string():
    assert FillBoundsPolicy("clamp") is FillBoundsPolicy.CLAMP
    assert FillBoundsPolicy("reject") is FillBoundsPolicy.REJECT


def test_validate_chunk_size():
    assert validate_chunk_size(3) == 3
    assert validate_chunk_size(np.int32(2)) == 2
    for bad in (0, -1, 1.0, "2", True, None):
        with pytest.raises(ValueError):
            validate_chunk_size(bad)


def test_validate_index_and_count():
    assert validate_index(-5) == -5
    assert validate_count(0) == 0
    with pytest.raises(ValueError, match="from_index"):
        validate_index(2.5, "from_index")
    with pytest.raises(ValueError):
        validate_count(False)
