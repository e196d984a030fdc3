"""Element-wise vector math over plain sequences of numbers.

Every function here is pure: inputs are never mutated and results are new
tuples (or scalars). Division and exponentiation follow IEEE-754 double
semantics, so ``1 / 0`` is ``inf`` and ``0 / 0`` is ``nan`` instead of an
exception. Binary functions raise :class:`MismatchedSizeError` before touching
any element when the operands differ in length.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence

from tick_vector.types import MismatchedSizeError, Number, Points

logger = logging.getLogger(__name__)


def check_sizes(lhs_length: int, rhs_length: int) -> None:
    if lhs_length != rhs_length:
        logger.debug("mismatched vector sizes: %d and %d", lhs_length, rhs_length)
        raise MismatchedSizeError(lhs_length, rhs_length)


def _pairs(a: Sequence[Number], b: Sequence[Number]) -> zip[tuple[Number, Number]]:
    check_sizes(len(a), len(b))
    return zip(a, b, strict=True)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value == int(value) and int(value) % 2 == 1


def _as_float(value: Number) -> float:
    """Convert to a double, saturating ints too large to represent at ``±inf``."""
    try:
        return float(value)
    except OverflowError:
        return -math.inf if value < 0 else math.inf


def divide(numerator: Number, denominator: Number) -> float:
    """Scalar division with IEEE-754 results for zero divisors."""
    num = _as_float(numerator)
    den = _as_float(denominator)
    if den == 0:
        if math.isnan(num) or num == 0:
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def raise_to(base: Number, exponent: Number) -> float:
    """Scalar exponentiation on doubles with IEEE-754 results instead of exceptions."""
    x = _as_float(base)
    e = _as_float(exponent)
    try:
        result = x**e
    except ZeroDivisionError:
        # 0 ** negative
        if _is_odd_integer(e):
            return math.copysign(math.inf, x)
        return math.inf
    except OverflowError:
        if x < 0 and _is_odd_integer(e):
            return -math.inf
        return math.inf
    if isinstance(result, complex):
        # negative base, fractional exponent
        return math.nan
    return result


def add(a: Sequence[Number], b: Sequence[Number]) -> Points:
    return tuple(ai + bi for ai, bi in _pairs(a, b))


def sub(a: Sequence[Number], b: Sequence[Number]) -> Points:
    return tuple(ai - bi for ai, bi in _pairs(a, b))


def mul(a: Sequence[Number], b: Sequence[Number]) -> Points:
    return tuple(ai * bi for ai, bi in _pairs(a, b))


def div(a: Sequence[Number], b: Sequence[Number]) -> Points:
    return tuple(divide(ai, bi) for ai, bi in _pairs(a, b))


def power(a: Sequence[Number], exponent: Number) -> Points:
    return tuple(raise_to(ai, exponent) for ai in a)


def total(a: Sequence[Number]) -> Number:
    return sum(a, 0)


def dot(a: Sequence[Number], b: Sequence[Number]) -> Number:
    return total(mul(a, b))


def magnitude(a: Sequence[Number]) -> float:
    return math.sqrt(_as_float(dot(a, a)))


def normalize(a: Sequence[Number]) -> Points:
    """Divide every element by the magnitude. The zero vector gives all ``nan``."""
    mag = magnitude(a)
    return tuple(divide(ai, mag) for ai in a)


def fill(value: Number, length: int) -> Points:
    return tuple(value for _ in range(length))


def cross3(a: Sequence[Number], b: Sequence[Number]) -> Points:
    """Three-component cross product.

    The z component is ``a.z*b.y - a.y*b.x``, which keeps the established
    behaviour of this library rather than the textbook ``a.x*b.y - a.y*b.x``.
    """
    check_sizes(len(a), len(b))
    ax, ay, az = a
    bx, by, bz = b
    return (
        ay * bz - az * by,
        az * bx - ax * bz,
        az * by - ay * bx,
    )
