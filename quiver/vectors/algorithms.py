# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Vector algorithms.

Everything here works over any source which provides `get(i)` and `len()`,
that is both chunked ArrowVectors and materialized Vectors. Algorithms which
order elements don't compare values themselves, they ask the evaluation
context through `eval_binary` because comparison is an operator of the
language and may involve any numeric type.
"""

import logging
from functools import cmp_to_key
from typing import Callable
from typing import Protocol

from quiver.exceptions import ConversionError
from quiver.exceptions import RangeError
from quiver.values import Matrix
from quiver.values import ValueType
from quiver.values import Vector
from quiver.values import to_bool
from quiver.values import value_type

logger = logging.getLogger(__name__)


class ValueGetter(Protocol):
    def get(self, i: int): ...

    def __len__(self) -> int: ...


def _predicate(context, op: str) -> Callable[[object, object], bool]:
    def predicate(left, right) -> bool:
        return to_bool(context.eval_binary(left, op, right))

    return predicate


def _kind(source):
    return getattr(type(source), "kind", type(source).__name__)


def check_slice_bounds(begin: int, end: int, length: int) -> None:
    if begin < 0 or end > length or begin > end:
        raise RangeError(begin=begin, end=end, length=length)


def to_vector(source: ValueGetter) -> Vector:
    """Copy every element of `source` into a new, independent Vector."""
    length = len(source)
    if _kind(source) == ValueType.ARROW_VECTOR:
        logger.debug("materializing %d rows", length)
    return Vector([source.get(i) for i in range(length)])


def to_type(source: ValueGetter, target: ValueType, op: str = "convert"):
    if target in (ValueType.ARROW_VECTOR, ValueType.VECTOR):
        return to_vector(source)
    if target == ValueType.MATRIX:
        return Matrix([len(source)], to_vector(source))
    raise ConversionError(_kind(source), target, f"{op}: cannot convert {_kind(source)} to {target}")


def rotate(source: ValueGetter, n: int):
    """
    Return the elements of `source` rotated left by `n`.

    An empty source is returned as is and a single element source returns
    that element, not a one element vector.
    """
    length = len(source)
    if length == 0:
        return source
    if length == 1:
        return source.get(0)
    n %= length
    elems = [source.get(i) for i in range(n, length)]
    elems.extend(source.get(i) for i in range(n))
    return Vector(elems)


def reverse(source: ValueGetter) -> Vector:
    result = to_vector(source)
    i, j = 0, len(result) - 1
    while i < j:
        result[i], result[j] = result[j], result[i]
        i, j = i + 1, j - 1
    return result


def grade(source: ValueGetter, context) -> Vector:
    """
    Return the indexes, offset by the index origin, which sort `source` into
    increasing order. Equal elements keep their original relative order.
    """
    less = _predicate(context, "<")
    values = [source.get(i) for i in range(len(source))]

    def compare(i: int, j: int) -> int:
        if less(values[i], values[j]):
            return -1
        if less(values[j], values[i]):
            return 1
        return 0

    # list.sort is stable
    order = sorted(range(len(values)), key=cmp_to_key(compare))
    origin = context.config.origin
    return Vector(i + origin for i in order)


def sorted_copy(source: ValueGetter, context) -> Vector:
    """Return a copy of `source` in ascending order."""
    less = _predicate(context, "<")
    result = to_vector(source)

    def compare(left, right) -> int:
        if less(left, right):
            return -1
        if less(right, left):
            return 1
        return 0

    return Vector(sorted(result, key=cmp_to_key(compare)))


def contains(source: ValueGetter, context, x) -> bool:
    """
    Report whether `x` is in `source`, which must already be in ascending
    order. The result is meaningless for an unsorted source.
    """
    greater_equal = _predicate(context, ">=")
    equal = _predicate(context, "==")
    lo, hi = 0, len(source)
    # find the first position holding a value >= x
    while lo < hi:
        mid = (lo + hi) // 2
        if greater_equal(source.get(mid), x):
            hi = mid
        else:
            lo = mid + 1
    return lo < len(source) and equal(source.get(lo), x)


def membership(context, u: ValueGetter, v: ValueGetter) -> Vector:
    """
    Report, for each element of `u`, 1 if it is an element of `v` and 0 if not.

    `v` is sorted once and then binary searched, so the cost is
    O(nV log nV + nU log nV).
    """
    sorted_v = sorted_copy(v, context)
    return Vector(int(contains(sorted_v, context, u.get(i))) for i in range(len(u)))


def shrink(source: ValueGetter):
    """A single element source collapses to its element, anything else is unchanged."""
    if len(source) == 1:
        return source.get(0)
    return source


def all_chars(source: ValueGetter) -> bool:
    """
    Report whether every element is a character. None of the value kinds a
    vector can hold is a character, so only an empty source qualifies.
    """
    return len(source) == 0


def sprint(source: ValueGetter, config=None) -> str:
    """Render the elements, space separated unless they are all characters."""
    separator = "" if all_chars(source) else " "
    parts = []
    for i in range(len(source)):
        element = source.get(i)
        if value_type(element) == ValueType.INT:
            fmt = getattr(config, "format", "") if config is not None else ""
            parts.append(fmt % element if fmt else str(element))
        else:
            parts.append(element.sprint(config))
    return separator.join(parts)
