"""Dense and compressed-row matrices and vector-by-matrix multiplication."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum

RECOMMENDED_TOP_X_LIMIT = 15
RECOMMENDED_TOP_Y_LIMIT = 15
TOP_ELEM_LIMIT = 100
NUMBER_OF_SHORT_PRINT = 3

_INT_SIZE = 4
_POINTER_SIZE = 8
_MATRIX_HEADER = 16
_VECTOR_HEADER = 24
_SPARSE_HEADER = 24


class MatrixError(Exception):
    """Raised when a matrix or vector cannot be built or multiplied."""

    class Code(IntEnum):
        """Reasons an operation on matrices and vectors fails."""

        NO_ERROR = 0
        ALLOCATION_FAILED = 10
        BAD_ROW = 11
        BAD_CLM = 12
        EMPTY_MATRIX = 13
        BAD_PERCENT = 14
        BAD_VEC_ELEM = 15
        BAD_VEC_LEN = 16
        EMPTY_VECTOR = 17
        ROWS_NOT_EQUAL_COLUMNS = 18
        EMPTY_RES = 19
        NOT_ENOUGH_OPERANDS = 20
        EMPTY_MULT = 21

    def __init__(self, code):
        self.code = MatrixError.Code(code)
        super().__init__(_MESSAGES.get(self.code, "No such process"))


_Code = MatrixError.Code

_MESSAGES = {
    _Code.ALLOCATION_FAILED: "Не удалось выделить память.",
    _Code.BAD_ROW: "Неправильно введен ряд матрицы.",
    _Code.BAD_CLM: "Неправильно введен столбец матрицы.",
    _Code.EMPTY_MATRIX: "Пустая матрица.",
    _Code.BAD_PERCENT: "Неправильно введен процент.",
    _Code.BAD_VEC_ELEM: "Неправильно введен элемент вектора.",
    _Code.BAD_VEC_LEN: "Неправильно введена длина вектора.",
    _Code.EMPTY_VECTOR: "Пустой вектор.",
    _Code.ROWS_NOT_EQUAL_COLUMNS: (
        "Длина вектора не равна кол-ву столбцов матрицы. Умножение невозможно."
    ),
    _Code.EMPTY_RES: "Умножение еще не проводилось.",
    _Code.NOT_ENOUGH_OPERANDS: (
        "Недостаточно операндов умножения. Не были введены матрица или вектор."
    ),
    _Code.EMPTY_MULT: "Результат умножения пуст.",
}


@dataclass
class Matrix:
    """A rectangular matrix of integers stored row by row."""

    data: list

    def __post_init__(self):
        self.data = [list(row) for row in self.data]
        if not self.data or not self.data[0]:
            raise MatrixError(_Code.BAD_ROW)
        width = len(self.data[0])
        if any(len(row) != width for row in self.data):
            raise MatrixError(_Code.BAD_CLM)

    @property
    def rows(self):
        return len(self.data)

    @property
    def cols(self):
        return len(self.data[0])

    @property
    def nbytes(self):
        """Memory a row-pointer layout of this matrix occupies."""
        return (
            self.rows * _POINTER_SIZE
            + self.rows * self.cols * _INT_SIZE
            + _MATRIX_HEADER
        )


@dataclass
class SparseVector:
    """Non-zero values of a vector together with their positions."""

    values: list = field(default_factory=list)
    indices: list = field(default_factory=list)


@dataclass
class SparseMatrix:
    """A matrix in compressed-row form.

    ``values`` holds the non-zero elements row by row, ``columns`` the column
    of each, and ``row_starts`` where each row begins in ``values``.
    """

    values: list = field(default_factory=list)
    columns: list = field(default_factory=list)
    row_starts: list = field(default_factory=lambda: [0])

    @property
    def nbytes(self):
        """Memory the three arrays and their headers occupy."""
        arrays = (self.values, self.columns, self.row_starts)
        return _SPARSE_HEADER + sum(
            len(array) * _INT_SIZE + _VECTOR_HEADER for array in arrays
        )


def _check_percent(zero_percent):
    if not 0 <= zero_percent <= 100:
        raise MatrixError(_Code.BAD_PERCENT)


def _random_element(rng, zero_percent):
    if rng.randint(1, 100) <= zero_percent:
        return 0
    return rng.randrange(TOP_ELEM_LIMIT)


def random_matrix(rows, cols, zero_percent, rng=None):
    """Build a matrix whose elements are zero with the given chance in percent."""
    if rows <= 0 or cols <= 0:
        raise MatrixError(_Code.BAD_ROW)
    _check_percent(zero_percent)
    rng = rng or random.Random()
    return Matrix(
        [[_random_element(rng, zero_percent) for _ in range(cols)] for _ in range(rows)]
    )


def random_vector(length, zero_percent, rng=None):
    """Build a list whose elements are zero with the given chance in percent."""
    if length <= 0:
        raise MatrixError(_Code.BAD_VEC_LEN)
    _check_percent(zero_percent)
    rng = rng or random.Random()
    return [_random_element(rng, zero_percent) for _ in range(length)]


def to_sparse_vector(values):
    """Keep only the non-zero elements of a vector and where they stand."""
    pairs = [(value, index) for index, value in enumerate(values) if value]
    return SparseVector(
        values=[value for value, _ in pairs],
        indices=[index for _, index in pairs],
    )


def to_sparse_matrix(matrix):
    """Convert a dense matrix to compressed-row form."""
    sparse = SparseMatrix()
    for row in matrix.data:
        for column, value in enumerate(row):
            if value:
                sparse.values.append(value)
                sparse.columns.append(column)
        sparse.row_starts.append(len(sparse.values))
    return sparse


def transpose(matrix):
    """Return a new matrix with rows and columns swapped."""
    return Matrix([list(column) for column in zip(*matrix.data)])


def _check_operands(vector, matrix):
    if vector is None or matrix is None:
        raise MatrixError(_Code.NOT_ENOUGH_OPERANDS)
    if len(vector) != matrix.rows:
        raise MatrixError(_Code.ROWS_NOT_EQUAL_COLUMNS)


def dense_multiply(vector, matrix):
    """Multiply a row vector by a matrix the ordinary way."""
    _check_operands(vector, matrix)
    return [
        sum(weight * value for weight, value in zip(vector, column))
        for column in zip(*matrix.data)
    ]


def sparse_multiply(vector, matrix):
    """Multiply a row vector by a matrix through compressed-row forms.

    The result is a one-row compressed matrix holding the non-zero elements
    of the product.
    """
    _check_operands(vector, matrix)
    packed_vector = to_sparse_vector(vector)
    packed = to_sparse_matrix(transpose(matrix))
    if not packed_vector.values or not packed.values:
        raise MatrixError(_Code.EMPTY_MULT)

    result = SparseMatrix()
    bounds = zip(packed.row_starts, packed.row_starts[1:])
    for column, (start, end) in enumerate(bounds):
        total = sum(
            value * vector[row]
            for value, row in zip(packed.values[start:end], packed.columns[start:end])
        )
        if total:
            result.values.append(total)
            result.columns.append(column)
    result.row_starts.append(len(result.values))
    return result