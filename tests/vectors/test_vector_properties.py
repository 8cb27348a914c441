"""
Property checks over randomly chunked columns.

Each test builds a number of columns with random values and random chunk
boundaries (including empty chunks) and checks the vector operations against
plain Python lists.
"""

import os
import sys

sys.path.insert(1, os.path.join(sys.path[0], "../.."))

import random

import pyarrow
import pytest

from quiver import ArrowVector
from quiver import Config
from quiver import Context

SEED: int = random.randint(0, 2**32 - 1)
ROUNDS: int = 25


def _random_column(rng, data_type=pyarrow.int32(), max_length=40):
    length = rng.randint(0, max_length)
    if pyarrow.types.is_floating(data_type):
        values = [rng.choice([0.5, -1.25, 3.0, 2.75, -8.0]) for _ in range(length)]
    elif pyarrow.types.is_unsigned_integer(data_type):
        values = [rng.randint(0, 10) for _ in range(length)]
    else:
        values = [rng.randint(-5, 5) for _ in range(length)]
    chunks = []
    start = 0
    while start < length:
        size = rng.randint(0, 6)
        chunks.append(values[start : start + size])
        start += size
    if not chunks or rng.random() < 0.3:
        chunks.append([])
    column = pyarrow.chunked_array(
        [pyarrow.array(c, type=data_type) for c in chunks], type=data_type
    )
    return values, column


@pytest.mark.parametrize("data_type", [pyarrow.int8(), pyarrow.uint16(), pyarrow.float64()])
def test_get_matches_flattened_chunks(data_type):
    rng = random.Random(SEED)
    for _ in range(ROUNDS):
        values, column = _random_column(rng, data_type)
        vec = ArrowVector(column)
        assert len(vec) == len(values), SEED
        assert [vec.get(i) for i in range(len(vec))] == values, SEED


def test_rotate_then_rotate_back_is_identity():
    rng = random.Random(SEED)
    for _ in range(ROUNDS):
        values, column = _random_column(rng)
        vec = ArrowVector(column)
        length = len(values)
        if length < 2:
            continue
        n = rng.randint(1, length - 1)
        assert vec.rotate(n).rotate(length - n) == values, SEED


def test_grade_is_a_sorting_permutation():
    rng = random.Random(SEED)
    for origin in (0, 1):
        context = Context(Config(origin=origin))
        for _ in range(ROUNDS):
            values, column = _random_column(rng)
            vec = ArrowVector(column, context.config)
            order = vec.grade(context).to_list()
            assert sorted(order) == [i + origin for i in range(len(values))], SEED
            graded = [values[i - origin] for i in order]
            assert graded == sorted(values), SEED


def test_grade_is_stable():
    rng = random.Random(SEED)
    context = Context(Config(origin=0))
    for _ in range(ROUNDS):
        values, column = _random_column(rng)
        order = ArrowVector(column).grade(context).to_list()
        expected = sorted(range(len(values)), key=lambda i: values[i])
        assert order == expected, SEED


@pytest.mark.parametrize("data_type", [pyarrow.int64(), pyarrow.float32()])
def test_contains_agrees_with_linear_scan(data_type):
    rng = random.Random(SEED)
    context = Context()
    for _ in range(ROUNDS):
        _, column = _random_column(rng, data_type)
        vec = ArrowVector(column)
        ordered = vec.sorted_copy(context)
        for probe in (-9, -5, -1, 0, 2, 3, 5, 9):
            expected = any(context.eval_binary(e, "==", probe) for e in ordered)
            assert ordered.contains(context, probe) == expected, SEED


def test_to_vector_is_idempotent():
    rng = random.Random(SEED)
    for _ in range(ROUNDS):
        _, column = _random_column(rng, pyarrow.float64())
        vec = ArrowVector(column)
        assert vec.to_vector() == vec.to_vector(), SEED


def test_slices_match_list_slices():
    rng = random.Random(SEED)
    for _ in range(ROUNDS):
        values, column = _random_column(rng)
        vec = ArrowVector(column)
        begin = rng.randint(0, len(values))
        end = rng.randint(begin, len(values))
        view = vec.slice(begin, end)
        assert view.to_vector() == values[begin:end], SEED
        if end > begin:
            inner_end = rng.randint(0, end - begin)
            assert view.slice(0, inner_end).to_vector() == values[begin : begin + inner_end], SEED


if __name__ == "__main__":  # pragma: no cover
    from tests.tools import run_tests

    run_tests()
