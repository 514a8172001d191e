"""Interactive shell for multiplying a row vector by a dense or sparse matrix."""

from __future__ import annotations

import argparse
import random
import re
import shutil
import subprocess
import sys
import time
from enum import IntEnum

from datalabs.sparse import (
    NUMBER_OF_SHORT_PRINT,
    RECOMMENDED_TOP_X_LIMIT,
    RECOMMENDED_TOP_Y_LIMIT,
    Matrix,
    MatrixError,
    dense_multiply,
    random_matrix,
    random_vector,
    sparse_multiply,
    to_sparse_matrix,
    transpose,
)

_RED = "\033[0;31m"
_YELLOW = "\x1b[33m"
_RESET = "\033[0m"
_INTEGER = re.compile(r"[+-]?\d+")
_Code = MatrixError.Code

MATRIX_HEADER = "-------- Матрица --------"
UNKNOWN_ERROR = "No such process"

INTRO = (
    "Данная программа производит умножение вектора-строки на матрицу "
    "в обычном виде или разреженном."
)

HELP = (
    "\n\n1  -- ввод матрицы.\n"
    "2  -- генерация случайной матрицы.\n"
    "3  -- ввод вектора-строки.\n"
    "4  -- генерация случайного вектора-строки\n"
    "5  -- умножение обычным алгоритмом.\n"
    "6  -- умножение в разреженном виде.\n"
    "7  -- вывод результата умножения.\n"
    "8  -- очистить экран.\n"
    "9  -- напечатать матрицу на экран\n"
    "10 -- напечатать вектор на экран\n"
    "0  -- выход из программы."
)

_VECTOR_SHORT = 5
_DOTS = ".\t" * (NUMBER_OF_SHORT_PRINT * 2 + 1)
_GAP = f"\n{_DOTS}\n{_DOTS}\n\n"


class _Command(IntEnum):
    EXIT = 0
    INPUT_MATRIX = 1
    GEN_RND_MATRIX = 2
    INPUT_VECTOR = 3
    GEN_RND_VECTOR = 4
    DEFAULT_MULT = 5
    SPARSE_MULT = 6
    PRINT_RES = 7
    CLEAN_SCREEN = 8
    PRINT_MATRIX = 9
    PRINT_VECTOR = 10
    CURRENT_MEM = 30


class _InputError(Exception):
    """An input failure that has no error code of its own."""


def _cells(values):
    return "".join(f"{value}\t" for value in values)


def _is_large(matrix):
    return matrix.cols > RECOMMENDED_TOP_X_LIMIT or matrix.rows > RECOMMENDED_TOP_Y_LIMIT


def format_matrix(matrix, full=True):
    """Render a matrix; a large one may be shown by its corners only."""
    n = NUMBER_OF_SHORT_PRINT
    parts = [MATRIX_HEADER + "\n"]
    rows, cols = matrix.rows, matrix.cols
    if full or not _is_large(matrix):
        parts.extend(_cells(row) + "\n" for row in matrix.data)
    elif rows > RECOMMENDED_TOP_Y_LIMIT and cols < RECOMMENDED_TOP_X_LIMIT:
        parts.extend(_cells(row) + "\n" for row in matrix.data[:n])
        parts.append(_GAP)
        parts.extend(_cells(row) + "\n" for row in matrix.data[-n:])
    elif rows < RECOMMENDED_TOP_Y_LIMIT and cols > RECOMMENDED_TOP_X_LIMIT:
        parts.extend(
            _cells(row[:n]) + ".  .\t" + _cells(row[-n:]) + "\n" for row in matrix.data
        )
    else:
        clipped = [_cells(row[:n]) + ". .\t" + _cells(row[-n:]) + "\n" for row in matrix.data]
        parts.extend(clipped[:n])
        parts.append(_GAP)
        parts.extend(clipped[-n:])
    return "".join(parts)


def format_vector(vector, full=True):
    """Render a vector; a long one may be shown by its ends only."""
    if full or len(vector) <= RECOMMENDED_TOP_X_LIMIT:
        return _cells(vector) + "\n"
    return _cells(vector[:_VECTOR_SHORT]) + "..\t" + _cells(vector[-_VECTOR_SHORT:]) + "\n"


def format_sparse(result):
    """Render a compressed-row result as its three arrays."""
    values = "".join(f"{value:5d} " for value in result.values)
    columns = "".join(f"{column:2d} " for column in result.columns)
    starts = "".join(f"{start:2d} " for start in result.row_starts)
    return f"Non zero elems: {values}\nColumns: {columns}\nIA: {starts}\n"


def _split_ns(elapsed_ns):
    return divmod(elapsed_ns, 10**9)


class SparseShell:
    """Reads numbered commands from a text stream and multiplies matrices."""

    def __init__(self, stdin=None, stdout=None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._tokens = self._token_stream()
        self.rng = random.Random()
        self.matrix = None
        self.vector = None
        self.dense_result = None
        self.sparse_result = None
        self.last_mult = None
        self._commands = {
            _Command.INPUT_MATRIX: self._input_matrix,
            _Command.GEN_RND_MATRIX: self._random_matrix,
            _Command.INPUT_VECTOR: self._input_vector,
            _Command.GEN_RND_VECTOR: self._random_vector,
            _Command.DEFAULT_MULT: self._dense_mult,
            _Command.SPARSE_MULT: self._sparse_mult,
            _Command.PRINT_RES: self._print_result,
            _Command.CLEAN_SCREEN: lambda: self._external(["clear"]),
            _Command.PRINT_MATRIX: self._print_matrix,
            _Command.PRINT_VECTOR: lambda: self._print_vector(self.vector),
            _Command.CURRENT_MEM: lambda: None,
        }

    def _token_stream(self):
        for line in self._stdin:
            yield from line.split()

    def _write(self, text):
        self._stdout.write(text)

    def _say(self, text=""):
        self._stdout.write(text + "\n")

    def _external(self, args):
        isatty = getattr(self._stdout, "isatty", None)
        if not (isatty and isatty()) or shutil.which(args[0]) is None:
            return
        self._stdout.flush()
        subprocess.run(args, check=False)

    def _read_int(self):
        token = next(self._tokens, None)
        if token is None or not _INTEGER.fullmatch(token):
            return None
        return int(token)

    def _int(self, prompt, code):
        self._write(prompt)
        value = self._read_int()
        if value is None:
            raise MatrixError(code)
        return value

    def _ask(self, message):
        self._write(f"{message} (y/n): ")
        return next(self._tokens, None) == "y"

    def _error(self, message):
        self._say(f"{_RED}Ошибка: {_RESET}{message}")

    def _read_size(self):
        rows = self._int("Введите кол-во строк: ", _Code.BAD_ROW)
        cols = self._int("Введите кол-во столбцов: ", _Code.BAD_CLM)
        if rows <= 0 or cols <= 0:
            raise MatrixError(_Code.BAD_ROW)
        return rows, cols

    def _read_percent(self):
        percent = self._int("Введите процент нулей: (0% - 100%): ", _Code.BAD_PERCENT)
        if not 0 <= percent <= 100:
            raise MatrixError(_Code.BAD_PERCENT)
        return percent

    def _input_matrix(self):
        rows, cols = self._read_size()
        if cols > RECOMMENDED_TOP_X_LIMIT or rows > RECOMMENDED_TOP_Y_LIMIT:
            if not self._ask("Введен большой размер матрицы, продолжить ввод?"):
                return
        self.matrix = Matrix([[0] * cols for _ in range(rows)])
        self._say("Начинаем ввод матрицы.")
        for r, row in enumerate(self.matrix.data):
            for c in range(cols):
                self._write(f"matrix[{r}][{c}] = ")
                value = self._read_int()
                if value is None:
                    raise _InputError(UNKNOWN_ERROR)
                row[c] = value

    def _random_matrix(self):
        rows, cols = self._read_size()
        percent = self._read_percent()
        self.matrix = random_matrix(rows, cols, percent, self.rng)

    def _input_vector(self):
        length = self._int("Введите длину вектора: ", _Code.BAD_VEC_LEN)
        if length <= 0:
            raise MatrixError(_Code.BAD_VEC_LEN)
        if length > RECOMMENDED_TOP_X_LIMIT:
            if not self._ask("Введен большой размер вектора, продолжить?"):
                return
        self.vector = [0] * length
        for index in range(length):
            self._write(f"Элемент [{index}] = ")
            value = self._read_int()
            if value is None:
                raise MatrixError(_Code.BAD_VEC_ELEM)
            self.vector[index] = value

    def _random_vector(self):
        length = self._int("Введите длину вектора: ", _Code.BAD_VEC_LEN)
        if length <= 0:
            raise MatrixError(_Code.BAD_VEC_LEN)
        percent = self._read_percent()
        self.vector = random_vector(length, percent, self.rng)

    def _dense_mult(self):
        self.last_mult = None
        start = time.perf_counter_ns()
        result = dense_multiply(self.vector, self.matrix)
        seconds, nanos = _split_ns(time.perf_counter_ns() - start)
        self.dense_result = result
        self.last_mult = _Command.DEFAULT_MULT
        self._write(f"\n\n{_YELLOW}Время:{_RESET} {seconds}s {nanos}ns\n")
        self._write(f"{_YELLOW}Памяти использовано: {self.matrix.nbytes} B{_RESET}")

    def _sparse_mult(self):
        self.last_mult = None
        start = time.perf_counter_ns()
        result = sparse_multiply(self.vector, self.matrix)
        seconds, nanos = _split_ns(time.perf_counter_ns() - start)
        self.sparse_result = result
        self.last_mult = _Command.SPARSE_MULT
        used = to_sparse_matrix(transpose(self.matrix)).nbytes
        self._write(f"Время умножения {seconds} s {nanos} ns\n")
        self._write(f"{_YELLOW}Памяти использовано: {used} B{_RESET}")

    def _print_result(self):
        if self.last_mult is _Command.DEFAULT_MULT:
            self._print_vector(self.dense_result)
        elif self.last_mult is _Command.SPARSE_MULT:
            self._write(format_sparse(self.sparse_result))
        else:
            raise MatrixError(_Code.EMPTY_RES)

    def _print_matrix(self):
        if self.matrix is None:
            raise MatrixError(_Code.EMPTY_MATRIX)
        full = True
        if _is_large(self.matrix):
            full = self._ask("Размер матрицы очень большой. Напечатать ее полностью?:")
        self._write(format_matrix(self.matrix, full))

    def _print_vector(self, vector):
        if vector is None:
            raise MatrixError(_Code.EMPTY_VECTOR)
        full = True
        if len(vector) > RECOMMENDED_TOP_X_LIMIT:
            full = self._ask("Размер вектора очень большой. Напечатать полностью?")
        self._write(format_vector(vector, full))

    def run(self):
        """Greet the user and process commands until 0 or end of input."""
        self._external(["figlet", "-f", "slant", "Sparse matrixes"])
        self._say(INTRO)
        while True:
            self._say(HELP)
            self._write("\nВведите комманду: ")
            token = next(self._tokens, None)
            if token is None:
                break
            number = int(token) if _INTEGER.fullmatch(token) else -1
            if number == _Command.EXIT:
                self._say("Прощайте.")
                break
            handler = self._commands.get(number)
            if handler is None:
                self._error("Была введена неверная команда.")
                continue
            try:
                handler()
            except (MatrixError, _InputError) as error:
                self._error(str(error))
        return 0


def main(argv=None):
    """Run the matrix shell on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Multiply a row vector by a dense or sparse matrix."
    )
    parser.parse_args(argv)
    return SparseShell(sys.stdin, sys.stdout).run()


if __name__ == "__main__":
    sys.exit(main())