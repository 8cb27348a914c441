# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Conversion of values back into Arrow columns.

This is the reverse of ArrowVector: scalars become a one row column, a
Vector becomes one contiguous buffer, and an ArrowVector hands back the
column it was built over without copying it.
"""

import logging
from typing import List
from typing import Optional

import numpy
import pyarrow

from quiver.exceptions import ArrayWithMixedTypesError
from quiver.exceptions import ConversionError
from quiver.values import BigFloat
from quiver.values import ValueType
from quiver.values import value_type

logger = logging.getLogger(__name__)

INT64_MIN = int(numpy.iinfo(numpy.int64).min)
INT64_MAX = int(numpy.iinfo(numpy.int64).max)
UINT64_MAX = int(numpy.iinfo(numpy.uint64).max)


def _int_array(values: List[int]) -> pyarrow.Array:
    if all(INT64_MIN <= v <= INT64_MAX for v in values):
        return pyarrow.array(numpy.array(values, dtype=numpy.int64))
    if all(0 <= v <= UINT64_MAX for v in values):
        return pyarrow.array(numpy.array(values, dtype=numpy.uint64))
    raise ConversionError(
        ValueType.INT, "arrow column", "Integer values exceed the range of a 64 bit column."
    )


def _float_array(values: List[BigFloat]) -> pyarrow.Array:
    return pyarrow.array(numpy.array([v.float64() for v in values], dtype=numpy.float64))


def to_arrow_column(value) -> pyarrow.ChunkedArray:
    """Build a single chunk Arrow column holding `value`."""
    kind = value_type(value)

    if kind == ValueType.ARROW_VECTOR:
        return value.to_arrow()
    if kind == ValueType.INT:
        return pyarrow.chunked_array([_int_array([value])])
    if kind == ValueType.BIG_FLOAT:
        return pyarrow.chunked_array([_float_array([value])])
    if kind == ValueType.VECTOR:
        elems = value.to_list()
        kinds = {value_type(e) for e in elems}
        logger.debug("converting vector of %d elements to an arrow column", len(elems))
        if not kinds:
            return pyarrow.chunked_array([pyarrow.array([], type=pyarrow.int64())])
        if kinds == {ValueType.INT}:
            return pyarrow.chunked_array([_int_array(elems)])
        if kinds == {ValueType.BIG_FLOAT}:
            return pyarrow.chunked_array([_float_array(elems)])
        if len(kinds) > 1:
            raise ArrayWithMixedTypesError({str(k) for k in kinds})
        raise ConversionError(
            kind, "arrow column", f"Vectors of {kinds.pop()} cannot be stored in a column."
        )

    raise ConversionError(kind, "arrow column")


def to_arrow_table(value, name: Optional[str] = None) -> pyarrow.Table:
    """
    Build a single column table holding `value`. Unless a name is given the
    column is called "I" when it holds integers and "F" otherwise.
    """
    column = to_arrow_column(value)
    if name is None:
        name = "I" if pyarrow.types.is_integer(column.type) else "F"
    return pyarrow.Table.from_arrays([column], names=[name])
