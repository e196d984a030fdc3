"""Vector - generic fixed-length vector backed by tick_vector.ops."""
from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Sequence, TypeVar

from tick_vector import ops
from tick_vector.types import N, Number, Points, SupportsPoints

V = TypeVar("V", bound="Vector[Any]")

BinaryOp = Callable[[Sequence[Number], Sequence[Number]], Points]


class Vector(Generic[N]):
    """A length-N sequence of numbers with element-wise arithmetic.

    ``length`` is fixed at construction and the caller guarantees that
    ``points`` holds exactly that many numbers. Binary operations compare the
    declared lengths of both operands and raise
    :class:`~tick_vector.types.MismatchedSizeError` before computing anything.
    All arithmetic returns a new vector of the receiver's own type.
    """

    __slots__ = ("_points", "_length")

    def __init__(self, points: Iterable[Number], length: N) -> None:
        self._points: list[Number] = list(points)
        self._length: N = length

    @classmethod
    def from_points(cls, points: Iterable[Number], length: N) -> Vector[N]:
        """Wrap ``points`` in a generic :class:`Vector`.

        Always returns the generic type, even when called on ``Vector2`` and
        friends; construct those directly with ``Vector2(points)``.
        """
        return Vector(points, length)

    @classmethod
    def from_scalar(cls, value: Number, length: N) -> Vector[N]:
        """Create a vector where every element equals ``value``."""
        return Vector(ops.fill(value, length), length)

    @property
    def points(self) -> Points:
        return tuple(self._points)

    @property
    def length(self) -> N:
        return self._length

    def _wrap(self: V, points: Sequence[Number]) -> V:
        return Vector(points, self._length)  # type: ignore[return-value]

    def _binary(self: V, rhs: SupportsPoints, op: BinaryOp) -> V:
        ops.check_sizes(self._length, rhs.length)
        return self._wrap(op(self._points, rhs.points))

    def add(self: V, rhs: SupportsPoints) -> V:
        return self._binary(rhs, ops.add)

    def sub(self: V, rhs: SupportsPoints) -> V:
        return self._binary(rhs, ops.sub)

    def mul(self: V, rhs: SupportsPoints) -> V:
        """Multiply each element by the matching element of ``rhs``."""
        return self._binary(rhs, ops.mul)

    def div(self: V, rhs: SupportsPoints) -> V:
        """Divide element-wise. Zero divisors give ``inf`` or ``nan``."""
        return self._binary(rhs, ops.div)

    def pow(self: V, exponent: Number) -> V:
        return self._wrap(ops.power(self._points, exponent))

    def dot(self, rhs: SupportsPoints) -> Number:
        ops.check_sizes(self._length, rhs.length)
        return ops.dot(self._points, rhs.points)

    @property
    def size(self) -> float:
        """Magnitude: the square root of the dot product with itself."""
        return ops.magnitude(self._points)

    @property
    def sum(self) -> Number:
        return ops.total(self._points)

    @property
    def unit(self: V) -> V:
        return self._wrap(ops.normalize(self._points))

    # -- Python protocol --

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Number]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Number:
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._length == other._length and self._points == other._points

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._points!r}, {self._length!r})"

    def _coerce(self, other: object) -> Vector[Any] | None:
        if isinstance(other, Vector):
            return other
        if isinstance(other, (int, float)):
            return Vector(ops.fill(other, self._length), self._length)
        return None

    def __add__(self: V, other: object) -> V:
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.add(rhs)

    def __sub__(self: V, other: object) -> V:
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.sub(rhs)

    def __mul__(self: V, other: object) -> V:
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.mul(rhs)

    def __truediv__(self: V, other: object) -> V:
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.div(rhs)

    def __radd__(self: V, other: object) -> V:
        return self.__add__(other)

    def __rmul__(self: V, other: object) -> V:
        return self.__mul__(other)

    def __rsub__(self: V, other: object) -> V:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._wrap(ops.sub(lhs.points, self._points))

    def __rtruediv__(self: V, other: object) -> V:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._wrap(ops.div(lhs.points, self._points))

    def __pow__(self: V, exponent: object) -> V:
        if not isinstance(exponent, (int, float)):
            return NotImplemented
        return self.pow(exponent)
