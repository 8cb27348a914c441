# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
The values the array language works with.

The set of kinds is closed: exact integers (plain Python ints), arbitrary
precision floats (BigFloat), materialized vectors, matrices and read-only
views over Arrow columns. Each non-int kind carries its tag in a `kind`
class attribute, `value_type` returns the tag for any value and refuses
anything outside the set.
"""

from enum import Enum

from quiver.exceptions import IncompatibleTypesError
from quiver.exceptions import UnsupportedTypeError


class ValueType(str, Enum):
    INT = "int"
    BIG_FLOAT = "bigfloat"
    VECTOR = "vector"
    MATRIX = "matrix"
    ARROW_VECTOR = "arrowvector"

    def __str__(self):
        return self.value


SCALAR_TYPES = (ValueType.INT, ValueType.BIG_FLOAT)


def value_type(value) -> ValueType:
    """Return the kind tag of `value`, raising UnsupportedTypeError for foreign objects."""
    # bool is an int subclass but isn't a number in the language
    if isinstance(value, int) and not isinstance(value, bool):
        return ValueType.INT
    kind = getattr(type(value), "kind", None)
    if isinstance(kind, ValueType):
        return kind
    raise UnsupportedTypeError(type(value).__name__)


def is_scalar(value) -> bool:
    return value_type(value) in SCALAR_TYPES


def to_bool(value) -> bool:
    """Interpret the result of a comparison, which the evaluator reports as 1 or 0."""
    kind = value_type(value)
    if kind == ValueType.INT:
        if value not in (0, 1):
            raise IncompatibleTypesError(message=f"Bad boolean value {value}, expected 0 or 1.")
        return value == 1
    if kind == ValueType.BIG_FLOAT:
        if value.value not in (0, 1):
            raise IncompatibleTypesError(message=f"Bad boolean value {value}, expected 0 or 1.")
        return value.value == 1
    raise IncompatibleTypesError(message=f"Expected a boolean scalar, found {kind}.")


from quiver.values.big_float import BigFloat  # noqa: E402
from quiver.values.vector import Matrix  # noqa: E402
from quiver.values.vector import Vector  # noqa: E402

__all__ = (
    "BigFloat",
    "Matrix",
    "SCALAR_TYPES",
    "ValueType",
    "Vector",
    "is_scalar",
    "to_bool",
    "value_type",
)
