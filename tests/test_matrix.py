import pytest

from algobox.matrix import Matrix


def test_addition_elementwise():
    result = Matrix([[1, 2], [3, 4]]) + Matrix([[10, 20], [30, 40]])
    assert result == Matrix([[11, 22], [33, 44]])


def test_addition_commutes():
    a = Matrix([[1, -2, 3]])
    b = Matrix([[4, 5, -6]])
    assert a + b == b + a


def test_zero_is_identity():
    a = Matrix([[7, 8], [9, 10], [11, 12]])
    zero = Matrix([[0, 0]] * 3)
    assert a + zero == a


def test_shape():
    assert Matrix([[1, 2, 3], [4, 5, 6]]).shape == (2, 3)


def test_shape_mismatch():
    with pytest.raises(ValueError, match="Invalid"):
        Matrix([[1, 2]]) + Matrix([[1], [2]])


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])


def test_format():
    assert Matrix([[1, 2], [3, 4]]).format() == "1 2\n3 4"


def test_add_non_matrix():
    with pytest.raises(TypeError):
        Matrix([[1]]) + 1