import pytest

from ml.datasets import (AND_TRAINING_SET, GATES, OR_TRAINING_SET, XOR_TRAINING_SET,
                         input_vectors, truth_table)
from ml.errors import InvalidArgument


def _rows(table):
    return [(tuple(int(v) for v in x), y) for x, y in table]


def test_input_vectors_are_lexicographic():
    vectors = [tuple(int(v) for v in x) for x in input_vectors(2)]
    assert vectors == [(0, 0), (0, 1), (1, 0), (1, 1)]
    assert len(input_vectors()) == 16


def test_and_table():
    rows = _rows(AND_TRAINING_SET)
    assert len(rows) == 16
    assert [y for _, y in rows] == [0] * 15 + [1]


def test_or_table():
    rows = _rows(OR_TRAINING_SET)
    assert [y for _, y in rows] == [0] + [1] * 15


def test_xor_table_marks_exactly_one_input():
    positives = [x for x, y in _rows(XOR_TRAINING_SET) if y == 1]
    assert positives == [(0, 0, 0, 1), (0, 0, 1, 0), (0, 1, 0, 0), (1, 0, 0, 0)]
    assert dict(_rows(XOR_TRAINING_SET))[(0, 1, 1, 1)] == 0


def test_two_input_xor_is_classic_xor():
    assert [y for _, y in truth_table('xor', 2)] == [0, 1, 1, 0]


def test_unknown_gate():
    with pytest.raises(InvalidArgument):
        truth_table('NAND')
    assert sorted(GATES) == ['AND', 'OR', 'XOR']


def test_bad_input_count():
    with pytest.raises(InvalidArgument):
        input_vectors(0)
