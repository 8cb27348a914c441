# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
quiver: read-only Arrow columns as vectors for an array language.

Chunked, strongly typed Arrow columns are presented as one dimensional
vectors of exact integers and arbitrary precision floats. Indexing and
slicing work against the Arrow buffers directly, operations which produce
a new sequence materialize a Vector.

Main exports:
- ArrowVector: read-only vector over a pyarrow.ChunkedArray
- Vector, Matrix, BigFloat: the materialized value kinds
- Context, Config: the evaluation context and its settings
- to_arrow_column, to_arrow_table: values back into Arrow
"""

from quiver.__version__ import __author__
from quiver.__version__ import __build__
from quiver.__version__ import __version__
from quiver.context import Config
from quiver.context import Context
from quiver.interop import to_arrow_column
from quiver.interop import to_arrow_table
from quiver.values import BigFloat
from quiver.values import Matrix
from quiver.values import ValueType
from quiver.values import Vector
from quiver.values import value_type
from quiver.vectors import ArrowVector

__all__ = (
    "ArrowVector",
    "BigFloat",
    "Config",
    "Context",
    "Matrix",
    "ValueType",
    "Vector",
    "to_arrow_column",
    "to_arrow_table",
    "value_type",
    "__author__",
    "__build__",
    "__version__",
)
