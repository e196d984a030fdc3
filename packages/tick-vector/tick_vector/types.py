"""Shared types and protocols for tick-vector."""
from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, Union

Number = Union[float, int]
Points = tuple[float, ...]

# Type-level length, e.g. Vector[Literal[3]].
N = TypeVar("N", bound=int)


class SupportsPoints(Protocol):
    @property
    def points(self) -> Sequence[Number]: ...

    @property
    def length(self) -> int: ...


class MismatchedSizeError(ValueError):
    """Raised when the operands of a binary vector operation differ in length."""

    def __init__(self, lhs_length: int, rhs_length: int) -> None:
        self.lhs_length = lhs_length
        self.rhs_length = rhs_length
        super().__init__(
            "The left hand side, and the right hand side have mis-matched sizes. "
            f"{lhs_length} and {rhs_length} respectively"
        )

    @property
    def sizes(self) -> tuple[int, int]:
        return (self.lhs_length, self.rhs_length)
