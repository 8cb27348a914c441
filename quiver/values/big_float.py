# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
BigFloat: a floating point value held at a configurable binary precision.

The mantissa is rounded (half to even) to `precision` bits when the value is
created, the rounded binary value is then held exactly as a `decimal.Decimal`
so no further rounding happens when it is compared or printed. Native floats
have a 53 bit mantissa, at any precision of 53 bits or more the source value
is preserved exactly.
"""

import math
from decimal import Decimal

from quiver.exceptions import InvalidConfigurationError
from quiver.values import ValueType

NATIVE_MANTISSA_BITS: int = 53
DEFAULT_FORMAT: str = "%.12g"


def round_to_precision(x: float, precision: int) -> Decimal:
    """
    Round the mantissa of `x` to `precision` bits and return the result
    exactly. Rounding can carry a value past the largest native float, so the
    result is built from the integer mantissa and never goes back through a
    float.
    """
    if precision <= 0:
        raise InvalidConfigurationError("float_precision", precision)
    if precision >= NATIVE_MANTISSA_BITS or x == 0 or not math.isfinite(x):
        return Decimal(x)
    mantissa, exponent = math.frexp(x)
    # scaling by a power of two is exact, round() is half-to-even
    digits = round(math.ldexp(mantissa, precision))
    exponent -= precision
    if exponent >= 0:
        return Decimal(digits << exponent)
    # m / 2**k == m * 5**k / 10**k, parsing a string never rounds
    return Decimal(f"{digits * 5 ** -exponent}E{exponent}")


class BigFloat:
    __slots__ = ("value", "precision")

    kind = ValueType.BIG_FLOAT

    def __init__(self, value: Decimal, precision: int):
        self.value = value
        self.precision = precision

    @classmethod
    def from_float(cls, x: float, precision: int) -> "BigFloat":
        return cls(round_to_precision(float(x), precision), precision)

    def float64(self) -> float:
        return float(self.value)

    def is_nan(self) -> bool:
        return self.value.is_nan()

    def is_integral(self) -> bool:
        return self.value.is_finite() and self.value == self.value.to_integral_value()

    def rank(self) -> int:
        return 0

    def sprint(self, config=None) -> str:
        # decoded from native floats, float64() only loses a carry past the float range
        fmt = getattr(config, "format", "") if config is not None else ""
        return (fmt or DEFAULT_FORMAT) % self.float64()

    def __eq__(self, other):
        if isinstance(other, BigFloat):
            return self.value == other.value
        if isinstance(other, (int, float, Decimal)) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"BigFloat({self.value}, precision={self.precision})"

    def __str__(self):
        return f"({self.sprint()})"
