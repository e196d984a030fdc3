"""Vector2, Vector3, Vector4 - fixed-length vectors with named axes."""
from __future__ import annotations

from typing import Any, ClassVar, Iterable, Literal, Sequence, TypeVar

from tick_vector import ops
from tick_vector.types import N, Number, SupportsPoints
from tick_vector.vector import Vector

F = TypeVar("F", bound="FixedVector[Any]")


def _axis(index: int, name: str) -> property:
    def getter(self: Vector[Any]) -> Number:
        return self._points[index]

    def setter(self: Vector[Any], value: Number) -> None:
        self._points[index] = value

    return property(getter, setter, doc=f"The {name} component (index {index}).")


class FixedVector(Vector[N]):
    """Base for vectors whose length is a class constant.

    Arithmetic results are wrapped back into the concrete subclass. Named-axis
    setters on the subclasses are the only way to change a vector in place.
    """

    __slots__ = ()

    dimension: ClassVar[int]

    def __init__(self, points: Iterable[Number]) -> None:
        super().__init__(points, self.dimension)  # type: ignore[arg-type]

    @classmethod
    def from_scalar(cls: type[F], value: Number) -> F:  # type: ignore[override]
        return cls(ops.fill(value, cls.dimension))

    def _wrap(self: F, points: Sequence[Number]) -> F:
        return type(self)(points)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._points!r})"


class Vector2(FixedVector[Literal[2]]):
    __slots__ = ()

    dimension = 2

    x = _axis(0, "x")
    y = _axis(1, "y")


class Vector3(FixedVector[Literal[3]]):
    __slots__ = ()

    dimension = 3

    x = _axis(0, "x")
    y = _axis(1, "y")
    z = _axis(2, "z")

    def cross(self, rhs: SupportsPoints) -> Vector3:
        """Cross product with another length-3 vector.

        Components are ``(y*rz - z*ry, z*rx - x*rz, z*ry - y*rx)``.
        """
        ops.check_sizes(self._length, rhs.length)
        return Vector3(ops.cross3(self._points, rhs.points))


class Vector4(FixedVector[Literal[4]]):
    __slots__ = ()

    dimension = 4

    x = _axis(0, "x")
    y = _axis(1, "y")
    z = _axis(2, "z")
    w = _axis(3, "w")
