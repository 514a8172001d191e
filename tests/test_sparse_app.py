import io

import pytest

from datalabs.sparse import Matrix, MatrixError, SparseMatrix, dense_multiply, sparse_multiply
from datalabs.sparse_app import (
    MATRIX_HEADER,
    SparseShell,
    format_matrix,
    format_sparse,
    format_vector,
)

MATRIX_INPUT = "1\n2\n2\n1\n2\n3\n4\n"
VECTOR_INPUT = "3\n2\n5\n6\n"


def run_shell(text):
    out = io.StringIO()
    shell = SparseShell(io.StringIO(text), out)
    code = shell.run()
    return shell, out.getvalue(), code


def message(code):
    return str(MatrixError(code))


def test_input_matrix_and_exit():
    shell, output, code = run_shell(MATRIX_INPUT + "0\n")
    assert shell.matrix.data == [[1, 2], [3, 4]]
    assert code == 0
    assert "Прощайте." in output


def test_input_vector():
    shell, _, _ = run_shell(VECTOR_INPUT + "0\n")
    assert shell.vector == [5, 6]


def test_dense_multiply_and_print():
    shell, output, _ = run_shell(MATRIX_INPUT + VECTOR_INPUT + "5\n7\n0\n")
    expected = dense_multiply([5, 6], Matrix([[1, 2], [3, 4]]))
    assert shell.dense_result == expected
    assert format_vector(expected) in output
    assert "Памяти использовано" in output


def test_sparse_multiply_and_print():
    shell, output, _ = run_shell(MATRIX_INPUT + VECTOR_INPUT + "6\n7\n0\n")
    expected = sparse_multiply([5, 6], Matrix([[1, 2], [3, 4]]))
    assert shell.sparse_result == expected
    assert format_sparse(expected) in output


def test_multiply_without_operands():
    shell, output, _ = run_shell("5\n0\n")
    assert message(MatrixError.Code.NOT_ENOUGH_OPERANDS) in output
    assert shell.dense_result is None


def test_multiply_size_mismatch():
    _, output, _ = run_shell(MATRIX_INPUT + "3\n3\n1\n1\n1\n5\n0\n")
    assert message(MatrixError.Code.ROWS_NOT_EQUAL_COLUMNS) in output


@pytest.mark.parametrize(
    "command, code",
    [
        ("7", MatrixError.Code.EMPTY_RES),
        ("9", MatrixError.Code.EMPTY_MATRIX),
        ("10", MatrixError.Code.EMPTY_VECTOR),
    ],
)
def test_empty_state_errors(command, code):
    _, output, _ = run_shell(command + "\n0\n")
    assert message(code) in output


@pytest.mark.parametrize("command", ["42", "abc"])
def test_unknown_command(command):
    _, output, _ = run_shell(command + "\n0\n")
    assert "Была введена неверная команда." in output


def test_random_matrix_all_zero_then_empty_mult():
    shell, output, _ = run_shell("2\n3\n4\n100\n4\n3\n0\n6\n0\n")
    assert shell.matrix.rows == 3
    assert shell.matrix.cols == 4
    assert all(value == 0 for row in shell.matrix.data for value in row)
    assert len(shell.vector) == 3
    assert message(MatrixError.Code.EMPTY_MULT) in output
    assert shell.sparse_result is None


def test_random_matrix_bad_percent():
    shell, output, _ = run_shell("2\n2\n2\n150\n0\n")
    assert shell.matrix is None
    assert message(MatrixError.Code.BAD_PERCENT) in output


def test_large_matrix_declined():
    shell, _, _ = run_shell("1\n20\n2\nn\n0\n")
    assert shell.matrix is None


def test_bad_matrix_size():
    shell, output, _ = run_shell("1\n0\n2\n0\n")
    assert shell.matrix is None
    assert message(MatrixError.Code.BAD_ROW) in output


def test_print_matrix_command():
    _, output, _ = run_shell(MATRIX_INPUT + "9\n0\n")
    assert format_matrix(Matrix([[1, 2], [3, 4]])) in output


def test_format_matrix_small():
    text = format_matrix(Matrix([[1, 2], [3, 4]]))
    assert text == MATRIX_HEADER + "\n1\t2\t\n3\t4\t\n"


def test_format_matrix_tall_short():
    matrix = Matrix([[i, i] for i in range(20)])
    text = format_matrix(matrix, full=False)
    assert text.startswith(MATRIX_HEADER + "\n0\t0\t\n1\t1\t\n2\t2\t\n")
    assert text.endswith("17\t17\t\n18\t18\t\n19\t19\t\n")
    assert "10\t10\t" not in text


def test_format_matrix_tall_full():
    matrix = Matrix([[i, i] for i in range(20)])
    lines = format_matrix(matrix, full=True).splitlines()
    assert len(lines) == matrix.rows + 1


def test_format_matrix_wide_short():
    matrix = Matrix([list(range(20)), list(range(20))])
    lines = format_matrix(matrix, full=False).splitlines()[1:]
    assert len(lines) == 2
    assert all(line == "0\t1\t2\t.  .\t17\t18\t19\t" for line in lines)


def test_format_vector_short_and_full():
    values = list(range(20))
    assert format_vector(values, full=False) == "0\t1\t2\t3\t4\t..\t15\t16\t17\t18\t19\t\n"
    assert format_vector(values, full=True).split() == [str(v) for v in values]


def test_format_sparse():
    result = SparseMatrix(values=[7], columns=[2], row_starts=[0, 1])
    assert format_sparse(result) == "Non zero elems:     7 \nColumns:  2 \nIA:  0  1 \n"