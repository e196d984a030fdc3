"""Tests for MismatchedSizeError."""
from __future__ import annotations

import pytest

from tick_vector import MismatchedSizeError


class TestMismatchedSizeError:
    def test_carries_both_lengths(self) -> None:
        err = MismatchedSizeError(2, 3)
        assert err.lhs_length == 2
        assert err.rhs_length == 3
        assert err.sizes == (2, 3)

    def test_message(self) -> None:
        err = MismatchedSizeError(4, 2)
        assert str(err) == (
            "The left hand side, and the right hand side have mis-matched sizes. "
            "4 and 2 respectively"
        )

    def test_caught_as_value_error(self) -> None:
        with pytest.raises(ValueError, match="mis-matched sizes"):
            raise MismatchedSizeError(1, 5)
