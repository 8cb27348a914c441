# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
ArrowVector: a read-only vector over a chunked Arrow column.

The column is borrowed, never copied or changed. Elements are decoded on
access: every integer width decodes to a Python int and float32/float64
decode to a BigFloat at the precision configured on the owning context.
Operations which need a changed sequence (rotate, reverse, sort) hand back a
materialized Vector, slicing hands back another ArrowVector over the same
buffers.
"""

from __future__ import annotations

from typing import Any
from typing import Callable
from typing import Dict
from typing import List
from typing import Optional

import numpy
import pyarrow

from quiver.context import Config
from quiver.exceptions import NullValuesNotSupportedError
from quiver.exceptions import RangeError
from quiver.exceptions import UnsupportedTypeError
from quiver.values import BigFloat
from quiver.values import ValueType
from quiver.values import Vector
from quiver.vectors import algorithms
from quiver.vectors.chunk_resolver import ChunkResolver


def _decode_int(raw: numpy.generic, precision: int) -> int:
    return int(raw)


def _decode_float(raw: numpy.generic, precision: int) -> BigFloat:
    # float32 widens to float64 exactly
    return BigFloat.from_float(float(raw), precision)


INTEGER_TYPES = (
    pyarrow.int8(),
    pyarrow.int16(),
    pyarrow.int32(),
    pyarrow.int64(),
    pyarrow.uint8(),
    pyarrow.uint16(),
    pyarrow.uint32(),
    pyarrow.uint64(),
)
FLOAT_TYPES = (pyarrow.float32(), pyarrow.float64())

DECODERS: Dict[pyarrow.DataType, Callable[[Any, int], Any]] = {
    **{data_type: _decode_int for data_type in INTEGER_TYPES},
    **{data_type: _decode_float for data_type in FLOAT_TYPES},
}


class ArrowVector:
    """Read-only Vector implementation backed by a ``pyarrow.ChunkedArray``."""

    __slots__ = ("_column", "_resolver", "_config", "_chunk_values")

    kind = ValueType.ARROW_VECTOR

    def __init__(self, column, config: Optional[Config] = None):
        if isinstance(column, pyarrow.Array):
            column = pyarrow.chunked_array([column], type=column.type)
        if not isinstance(column, pyarrow.ChunkedArray):
            raise TypeError("ArrowVector requires a pyarrow.ChunkedArray or pyarrow.Array")
        if column.null_count:
            raise NullValuesNotSupportedError(column.null_count)
        self._column = column
        self._resolver = ChunkResolver(column)
        self._config = config if config is not None else Config()
        self._chunk_values: List[Optional[numpy.ndarray]] = [None] * column.num_chunks

    # -------- Core metadata --------
    @property
    def length(self) -> int:
        return self._resolver.num_rows

    @property
    def data_type(self) -> pyarrow.DataType:
        return self._column.type

    @property
    def config(self) -> Config:
        return self._config

    def __len__(self):
        return self._resolver.num_rows

    def rank(self) -> int:
        return 1

    def to_arrow(self) -> pyarrow.ChunkedArray:
        return self._column

    # -------- Element access --------
    def _values(self, chunk: int) -> numpy.ndarray:
        values = self._chunk_values[chunk]
        if values is None:
            values = self._column.chunk(chunk).to_numpy(zero_copy_only=True)
            self._chunk_values[chunk] = values
        return values

    def get(self, i: int):
        """Decode the element at logical row `i`."""
        if i < 0 or i >= self._resolver.num_rows:
            raise RangeError(begin=i, length=self._resolver.num_rows)
        decoder = DECODERS.get(self._column.type)
        if decoder is None:
            raise UnsupportedTypeError(self._column.type)
        chunk, offset = self._resolver.resolve(i)
        return decoder(self._values(chunk)[offset], self._config.float_precision)

    def __getitem__(self, i):
        if isinstance(i, slice):
            if i.step not in (None, 1):
                raise RangeError(message="ArrowVector slices must be contiguous.")
            # only negative ends are resolved, out of range bounds are not clamped
            begin = 0 if i.start is None else i.start
            end = len(self) if i.stop is None else i.stop
            if begin < 0:
                begin += len(self)
            if end < 0:
                end += len(self)
            return self.slice(begin, end)
        if i < 0:
            i += len(self)
        return self.get(i)

    def __iter__(self):
        for i in range(len(self)):
            yield self.get(i)

    # -------- Zero-copy operations --------
    def slice(self, begin: int, end: int) -> "ArrowVector":
        """Return the rows `[begin, end)` as a view sharing this column's buffers."""
        algorithms.check_slice_bounds(begin, end, len(self))
        return ArrowVector(self._column.slice(begin, end - begin), self._config)

    # -------- Materializing operations --------
    def to_vector(self) -> Vector:
        return algorithms.to_vector(self)

    def copy(self) -> Vector:
        # arrow vectors are read only, so a copy is a regular vector
        return self.to_vector()

    def to_type(self, target: ValueType, op: str = "convert"):
        return algorithms.to_type(self, target, op)

    def rotate(self, n: int):
        return algorithms.rotate(self, n)

    def reverse(self) -> Vector:
        return algorithms.reverse(self)

    def grade(self, context) -> Vector:
        return algorithms.grade(self, context)

    def sorted_copy(self, context) -> Vector:
        return algorithms.sorted_copy(self, context)

    def contains(self, context, x) -> bool:
        return algorithms.contains(self, context, x)

    def shrink(self):
        return algorithms.shrink(self)

    # -------- Content predicates --------
    def all_ints(self) -> bool:
        """Every element decodes to an int, known from the declared type alone."""
        return len(self) == 0 or self._column.type in INTEGER_TYPES

    def all_chars(self) -> bool:
        return algorithms.all_chars(self)

    # -------- Display --------
    def sprint(self, config: Optional[Config] = None) -> str:
        return algorithms.sprint(self, config if config is not None else self._config)

    def __str__(self):
        return f"({self.sprint()})"

    def __repr__(self):
        return f"<ArrowVector type={self._column.type} len={len(self)} chunks={self._column.num_chunks}>"
