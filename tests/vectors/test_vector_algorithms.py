import os
import sys

sys.path.insert(1, os.path.join(sys.path[0], "../.."))

import pyarrow
import pytest

from quiver import ArrowVector
from quiver import BigFloat
from quiver import Config
from quiver import Context
from quiver import Vector
from quiver.exceptions import IncompatibleTypesError
from quiver.vectors import algorithms


class RecordingContext(Context):
    """Context which remembers the operators it was asked to evaluate."""

    def __init__(self, config=None):
        super().__init__(config)
        self.operators = []

    def eval_binary(self, left, op, right):
        self.operators.append(op)
        return super().eval_binary(left, op, right)


class DescendingContext(Context):
    """Context where "less than" means "greater than", so sorts run backwards."""

    def eval_binary(self, left, op, right):
        flipped = {"<": ">", ">=": "<=", "==": "=="}[op]
        return super().eval_binary(left, flipped, right)


def _column(values, chunk_size=2, data_type=pyarrow.int64(), config=None):
    chunks = [values[i : i + chunk_size] for i in range(0, len(values), chunk_size)] or [[]]
    column = pyarrow.chunked_array([pyarrow.array(c, type=data_type) for c in chunks], type=data_type)
    return ArrowVector(column, config)


def test_grade_example_origin_one():
    context = Context(Config(origin=1))
    assert _column([3, 1, 4, 1, 5]).grade(context) == [2, 4, 1, 3, 5]


def test_grade_example_origin_zero():
    context = Context(Config(origin=0))
    assert _column([3, 1, 4, 1, 5]).grade(context) == [1, 3, 0, 2, 4]


def test_grade_is_stable_for_equal_values():
    context = Context(Config(origin=0))
    # 2 and 2.0 compare equal, so they must stay in their original order
    source = Vector([2, BigFloat.from_float(2.0, 64), 1, 2, BigFloat.from_float(1.0, 64)])
    order = algorithms.grade(source, context).to_list()
    assert order == [2, 4, 0, 1, 3]


def test_grade_only_uses_less_than():
    context = RecordingContext(Config(origin=1))
    _column([5, 3, 9, 1]).grade(context)
    assert context.operators
    assert set(context.operators) == {"<"}


def test_grade_follows_the_context_ordering():
    context = DescendingContext(Config(origin=1))
    assert _column([3, 1, 4, 1, 5]).grade(context) == [5, 3, 1, 2, 4]


def test_grade_of_floats():
    context = Context(Config(origin=0))
    vec = _column([2.5, -1.0, 0.0], data_type=pyarrow.float32())
    assert vec.grade(context) == [1, 2, 0]


def test_grade_empty():
    assert _column([]).grade(Context()) == []


def test_grade_can_reenter_the_context():
    class ReentrantContext(Context):
        depth = 0

        def eval_binary(self, left, op, right):
            # comparing may evaluate other expressions, including another grade
            if self.depth == 0:
                self.depth += 1
                try:
                    assert algorithms.grade(Vector([2, 1]), self) == [1, 0]
                finally:
                    self.depth -= 1
            return super().eval_binary(left, op, right)

    context = ReentrantContext(Config(origin=0))
    assert _column([3, 1, 2]).grade(context) == [1, 2, 0]


def test_rotate_example():
    assert _column([3, 1, 4, 1, 5]).rotate(2) == [4, 1, 5, 3, 1]


@pytest.mark.parametrize("n, expected", [(0, [1, 2, 3, 4]), (5, [2, 3, 4, 1]), (-1, [4, 1, 2, 3]), (-6, [3, 4, 1, 2])])
def test_rotate_normalizes_n(n, expected):
    assert _column([1, 2, 3, 4], chunk_size=3).rotate(n) == expected


def test_rotate_empty_is_a_no_op():
    vec = _column([])
    assert vec.rotate(3) is vec


def test_rotate_single_element_returns_the_scalar():
    assert _column([7]).rotate(1) == 7
    assert isinstance(_column([7]).rotate(0), int)


def test_rotate_returns_new_vector():
    source = Vector([1, 2, 3])
    rotated = source.rotate(1)
    rotated[0] = 99
    assert source == [1, 2, 3]


def test_reverse():
    assert _column([1, 2, 3, 4, 5], chunk_size=2).reverse() == [5, 4, 3, 2, 1]
    assert _column([1, 2, 3, 4]).reverse() == [4, 3, 2, 1]
    assert _column([]).reverse() == []


def test_sorted_copy():
    context = Context()
    vec = _column([3, 1, 4, 1, 5])
    assert vec.sorted_copy(context) == [1, 1, 3, 4, 5]
    # the source is untouched
    assert vec.to_vector() == [3, 1, 4, 1, 5]


def test_sorted_copy_of_materialized_vector():
    source = Vector([BigFloat.from_float(0.5, 53), 3, -2])
    result = source.sorted_copy(Context())
    assert result.to_list() == [-2, BigFloat.from_float(0.5, 53), 3]
    assert source.to_list()[1] == 3


def test_contains_example():
    context = Context()
    ordered = _column([3, 1, 4, 1, 5]).sorted_copy(context)
    assert ordered.contains(context, 4)
    assert not ordered.contains(context, 2)


def test_contains_edges():
    context = Context()
    ordered = _column([1, 3, 5, 7], chunk_size=3)
    assert ordered.contains(context, 1)
    assert ordered.contains(context, 7)
    assert not ordered.contains(context, 0)
    assert not ordered.contains(context, 8)
    assert not _column([]).contains(context, 1)


def test_contains_uses_greater_equal_then_equal():
    context = RecordingContext()
    _column([1, 2, 3]).contains(context, 2)
    assert set(context.operators) == {">=", "=="}
    assert context.operators[-1] == "=="


def test_contains_mixed_kinds():
    context = Context()
    ordered = _column([0.5, 1.0, 2.0], data_type=pyarrow.float64())
    assert ordered.contains(context, 1)
    assert not ordered.contains(context, 3)


def test_membership():
    context = Context()
    u = Vector([4, 2, 9, 1])
    v = _column([3, 1, 4, 1, 5])
    assert algorithms.membership(context, u, v) == [1, 0, 0, 1]


def test_shrink():
    assert algorithms.shrink(Vector([5])) == 5
    vec = Vector([5, 6])
    assert algorithms.shrink(vec) is vec


def test_bad_comparison_result_is_an_error():
    class BrokenContext(Context):
        def eval_binary(self, left, op, right):
            return 2

    with pytest.raises(IncompatibleTypesError):
        _column([2, 1]).grade(BrokenContext())


def test_to_vector_from_any_getter():
    class Squares:
        def get(self, i):
            return i * i

        def __len__(self):
            return 4

    assert algorithms.to_vector(Squares()) == [0, 1, 4, 9]


if __name__ == "__main__":  # pragma: no cover
    from tests.tools import run_tests

    run_tests()
