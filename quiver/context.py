# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
The evaluation context.

The context is what the vector layer sees of the interpreter: the settings
which change how values are decoded and reported (index origin, float
precision, number format), the comparison operators used by the ordering
algorithms, and the global namespace columns are bound into.

`Context.eval_binary` only knows how to compare scalars. An interpreter
with a richer value system subclasses Context and overrides it, the vector
algorithms only ever call it with "<", ">=" and "==".
"""

import logging
import operator
from difflib import get_close_matches
from typing import Any
from typing import Callable
from typing import Dict
from typing import Optional

import pyarrow

from quiver import config as defaults
from quiver.exceptions import IncompatibleTypesError
from quiver.exceptions import InvalidConfigurationError
from quiver.exceptions import InvalidOperatorError
from quiver.exceptions import VariableNotFoundError
from quiver.values import ValueType
from quiver.values import value_type

logger = logging.getLogger(__name__)

COMPARISONS: Dict[str, Callable[[Any, Any], bool]] = {
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "==": operator.eq,
    "!=": operator.ne,
}


class Config:
    """Settings owned by a context and referenced by the views it creates."""

    __slots__ = ("_origin", "_float_precision", "_format")

    def __init__(
        self,
        origin: Optional[int] = None,
        float_precision: Optional[int] = None,
        format: Optional[str] = None,
    ):
        self.origin = defaults.INDEX_ORIGIN if origin is None else origin
        self.float_precision = (
            defaults.FLOAT_PRECISION if float_precision is None else float_precision
        )
        self.format = defaults.NUMBER_FORMAT if format is None else format

    @property
    def origin(self) -> int:
        return self._origin

    @origin.setter
    def origin(self, value: int):
        if value not in (0, 1) or isinstance(value, bool):
            raise InvalidConfigurationError("origin", value, "Index origin must be 0 or 1.")
        self._origin = int(value)

    @property
    def float_precision(self) -> int:
        return self._float_precision

    @float_precision.setter
    def float_precision(self, value: int):
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise InvalidConfigurationError(
                "float_precision", value, "Float precision must be a positive number of bits."
            )
        self._float_precision = value

    @property
    def format(self) -> str:
        return self._format

    @format.setter
    def format(self, value: str):
        if not isinstance(value, str):
            raise InvalidConfigurationError("format", value)
        self._format = value

    def __repr__(self):
        return (
            f"Config(origin={self._origin}, float_precision={self._float_precision}, "
            f"format={self._format!r})"
        )


def _as_number(value):
    kind = value_type(value)
    if kind == ValueType.INT:
        return value
    if kind == ValueType.BIG_FLOAT:
        return value.value
    return None


class Context:
    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else Config()
        self.globals: Dict[str, Any] = {}

    # -------- Comparison dispatch --------
    def eval_binary(self, left, op: str, right) -> int:
        """Apply the comparison `op` to two scalars, returning 1 for true and 0 for false."""
        comparison = COMPARISONS.get(op)
        if comparison is None:
            raise InvalidOperatorError(op)
        lhs, rhs = _as_number(left), _as_number(right)
        if lhs is None or rhs is None:
            raise IncompatibleTypesError(value_type(left), value_type(right), op)
        # NaN is unordered and unequal to everything
        if (hasattr(lhs, "is_nan") and lhs.is_nan()) or (hasattr(rhs, "is_nan") and rhs.is_nan()):
            return int(op == "!=")
        return int(comparison(lhs, rhs))

    # -------- Global namespace --------
    def assign_global(self, name: str, value) -> None:
        value_type(value)
        self.globals[name] = value

    def lookup(self, name: str):
        if name not in self.globals:
            suggestion = get_close_matches(name, list(self.globals), n=1)
            raise VariableNotFoundError(name, suggestion[0] if suggestion else None)
        return self.globals[name]

    def load_globals_from_table(self, table: pyarrow.Table) -> None:
        """Bind every column of `table` as a global holding an ArrowVector."""
        from quiver.vectors.arrow_vector import ArrowVector

        for name, column in zip(table.column_names, table.columns):
            self.assign_global(name, ArrowVector(column, self.config))
            logger.debug(
                "bound column %s (%s, %d rows, %d chunks)",
                name,
                column.type,
                len(column),
                column.num_chunks,
            )
