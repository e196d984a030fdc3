"""tick-vector - Fixed-length numeric vectors for the tick engine."""
from __future__ import annotations

from tick_vector import ops
from tick_vector.fixed import FixedVector, Vector2, Vector3, Vector4
from tick_vector.types import MismatchedSizeError, Number, Points, SupportsPoints
from tick_vector.vector import Vector

__all__ = [
    "FixedVector",
    "MismatchedSizeError",
    "Number",
    "Points",
    "SupportsPoints",
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "ops",
]
