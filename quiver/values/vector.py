# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Materialized vectors and matrices.

A Vector owns its elements and is mutable, it is what chunked views turn into
whenever an operation can't be answered without copying. A Matrix is a Vector
with a shape.
"""

from functools import reduce
from operator import mul
from typing import Iterable
from typing import Sequence

from quiver.exceptions import RangeError
from quiver.exceptions import ShapeMismatchError
from quiver.values import ValueType
from quiver.values import value_type


def _algorithms():
    from quiver.vectors import algorithms

    return algorithms


class Vector:
    """An owned, ordered sequence of decoded values."""

    __slots__ = ("_elems",)

    kind = ValueType.VECTOR

    def __init__(self, elems: Iterable = ()):
        self._elems = list(elems)

    def get(self, i: int):
        if i < 0 or i >= len(self._elems):
            raise RangeError(begin=i, length=len(self._elems))
        return self._elems[i]

    def __len__(self):
        return len(self._elems)

    def __getitem__(self, i):
        return self._elems[i]

    def __setitem__(self, i, value):
        self._elems[i] = value

    def __iter__(self):
        return iter(self._elems)

    def __eq__(self, other):
        if isinstance(other, Vector):
            return self._elems == other._elems
        if isinstance(other, list):
            return self._elems == other
        return NotImplemented

    def __repr__(self):
        return f"Vector({self._elems!r})"

    def __str__(self):
        return f"({self.sprint()})"

    def to_list(self) -> list:
        return list(self._elems)

    def rank(self) -> int:
        return 1

    def copy(self) -> "Vector":
        return Vector(self._elems)

    def all_ints(self) -> bool:
        return all(value_type(e) == ValueType.INT for e in self._elems)

    def all_chars(self) -> bool:
        return _algorithms().all_chars(self)

    def sprint(self, config=None) -> str:
        return _algorithms().sprint(self, config)

    def slice(self, begin: int, end: int) -> "Vector":
        _algorithms().check_slice_bounds(begin, end, len(self._elems))
        return Vector(self._elems[begin:end])

    def rotate(self, n: int):
        return _algorithms().rotate(self, n)

    def reverse(self) -> "Vector":
        return _algorithms().reverse(self)

    def grade(self, context) -> "Vector":
        return _algorithms().grade(self, context)

    def sorted_copy(self, context) -> "Vector":
        return _algorithms().sorted_copy(self, context)

    def contains(self, context, x) -> bool:
        return _algorithms().contains(self, context, x)

    def shrink(self):
        return _algorithms().shrink(self)


class Matrix:
    """A Vector of data laid out according to `shape`, row-major."""

    __slots__ = ("shape", "data")

    kind = ValueType.MATRIX

    def __init__(self, shape: Sequence[int], data: Vector):
        shape = tuple(int(s) for s in shape)
        if any(s < 0 for s in shape) or reduce(mul, shape, 1) != len(data):
            raise ShapeMismatchError(shape, len(data))
        self.shape = shape
        self.data = data if isinstance(data, Vector) else Vector(data)

    def __len__(self):
        return len(self.data)

    def __eq__(self, other):
        if isinstance(other, Matrix):
            return self.shape == other.shape and self.data == other.data
        return NotImplemented

    def __repr__(self):
        return f"Matrix(shape={list(self.shape)}, data={self.data.to_list()!r})"

    def rank(self) -> int:
        return len(self.shape)

    def sprint(self, config=None) -> str:
        if self.rank() <= 1 or len(self.data) == 0:
            return self.data.sprint(config)
        row_length = self.shape[-1]
        rows = (
            self.data.slice(start, start + row_length).sprint(config)
            for start in range(0, len(self.data), row_length)
        )
        return "\n".join(rows)
