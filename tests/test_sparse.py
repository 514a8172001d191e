import random

import pytest

from datalabs.sparse import (
    Matrix,
    MatrixError,
    SparseMatrix,
    SparseVector,
    dense_multiply,
    random_matrix,
    random_vector,
    sparse_multiply,
    to_sparse_matrix,
    to_sparse_vector,
    transpose,
)

EXAMPLE = [[1, 2, 3], [4, 0, 6], [2, 1, 0]]


def _expand(result, width):
    dense = [0] * width
    for value, column in zip(result.values, result.columns):
        dense[column] = value
    return dense


def test_transpose_worked_example():
    assert transpose(Matrix(EXAMPLE)).data == [[1, 4, 2], [2, 0, 1], [3, 6, 0]]


def test_compressed_form_of_worked_example():
    sparse = to_sparse_matrix(transpose(Matrix(EXAMPLE)))
    assert sparse == SparseMatrix(
        values=[1, 4, 2, 2, 1, 3, 6],
        columns=[0, 1, 2, 0, 2, 0, 1],
        row_starts=[0, 3, 5, 7],
    )


def test_transpose_twice_is_identity():
    matrix = random_matrix(4, 7, 30, random.Random(1))
    assert transpose(transpose(matrix)) == matrix


def test_sparse_vector_keeps_nonzero_positions():
    assert to_sparse_vector([0, 5, 0, 7]) == SparseVector(values=[5, 7], indices=[1, 3])


def test_sparse_and_dense_products_agree_on_example():
    matrix = Matrix(EXAMPLE)
    vector = [1, 0, 3]
    result = sparse_multiply(vector, matrix)
    assert _expand(result, matrix.cols) == dense_multiply(vector, matrix)
    assert result.row_starts == [0, len(result.values)]


@pytest.mark.parametrize("seed", range(5))
def test_sparse_and_dense_products_agree_on_random(seed):
    rng = random.Random(seed)
    matrix = random_matrix(6, 9, 50, rng)
    vector = random_vector(6, 20, rng)
    vector[0] = 1
    matrix.data[0][0] = 1
    result = sparse_multiply(vector, matrix)
    assert _expand(result, matrix.cols) == dense_multiply(vector, matrix)
    assert all(result.values)


def test_dense_product_length_is_column_count():
    matrix = random_matrix(3, 8, 0, random.Random(2))
    assert len(dense_multiply([1, 1, 1], matrix)) == 8


def test_missing_operand():
    with pytest.raises(MatrixError) as info:
        dense_multiply(None, Matrix(EXAMPLE))
    assert info.value.code == MatrixError.Code.NOT_ENOUGH_OPERANDS


def test_length_mismatch():
    with pytest.raises(MatrixError) as info:
        sparse_multiply([1, 2], Matrix(EXAMPLE))
    assert info.value.code == MatrixError.Code.ROWS_NOT_EQUAL_COLUMNS


def test_zero_vector_gives_empty_product():
    with pytest.raises(MatrixError) as info:
        sparse_multiply([0, 0, 0], Matrix(EXAMPLE))
    assert info.value.code == MatrixError.Code.EMPTY_MULT


def test_error_message():
    assert str(MatrixError(MatrixError.Code.EMPTY_MATRIX)) == "Пустая матрица."


def test_all_zero_matrix_at_hundred_percent():
    matrix = random_matrix(5, 5, 100, random.Random(3))
    assert to_sparse_matrix(matrix).values == []


def test_random_elements_below_limit():
    vector = random_vector(200, 0, random.Random(4))
    assert all(0 <= value < 100 for value in vector)


def test_random_is_reproducible():
    first = random_matrix(4, 4, 40, random.Random(9))
    second = random_matrix(4, 4, 40, random.Random(9))
    assert first == second


@pytest.mark.parametrize("percent", [-1, 101])
def test_bad_percent(percent):
    with pytest.raises(MatrixError) as info:
        random_vector(3, percent, random.Random(0))
    assert info.value.code == MatrixError.Code.BAD_PERCENT


def test_bad_sizes():
    with pytest.raises(MatrixError) as info:
        random_matrix(0, 3, 10)
    assert info.value.code == MatrixError.Code.BAD_ROW
    with pytest.raises(MatrixError) as info:
        random_vector(0, 10)
    assert info.value.code == MatrixError.Code.BAD_VEC_LEN


def test_ragged_matrix_rejected():
    with pytest.raises(MatrixError) as info:
        Matrix([[1, 2], [3]])
    assert info.value.code == MatrixError.Code.BAD_CLM


def test_row_starts_are_monotonic():
    sparse = to_sparse_matrix(random_matrix(7, 5, 60, random.Random(5)))
    assert len(sparse.row_starts) == 8
    assert sparse.row_starts == sorted(sparse.row_starts)
    assert sparse.row_starts[-1] == len(sparse.values) == len(sparse.columns)