# datalabs

Small console programs built around classic data structures, each also
usable as a library. Messages shown to the user are in Russian.

| Command             | What it does                                                              |
|---------------------|---------------------------------------------------------------------------|
| `datalabs-bigfloat` | Divides a long real number (up to 30 mantissa digits) by a long integer   |
| `datalabs-sparse`   | Multiplies a row vector by a matrix, densely or in compressed-row form    |
| `datalabs-stacks`   | Compares an array-based stack with a linked-list stack on a run search    |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The programs

### Long number division

```
datalabs-bigfloat [REAL] [INTEGER]
```

The real number and the integer may be given as arguments; any that is
missing is read from standard input. The real number must carry a sign, a
mantissa of at most 30 digits with an optional decimal point, the letter `e`
or `E` and a signed exponent of at most 5 digits, for example `+123.3e+3`.
The integer must carry a sign and have at most 30 digits, for example
`+123412`. The quotient is printed as `Результат: ±0.dddd…E±n`, rounded in
its last digit. Input errors, division by zero and exponent overflow are
printed to standard error, and the exit status is the number of the error
(see `datalabs.bigfloat.ErrorCode`).

### Sparse matrices

```
datalabs-sparse
```

A numbered menu: `1` enter a matrix, `2` generate a random one (you give the
percentage of zeros), `3` enter a row vector, `4` generate a random one,
`5` multiply the plain way, `6` multiply in compressed-row form, `7` print
the last result, `8` clear the screen, `9` print the matrix, `10` print the
vector, `0` quit. Each multiplication reports its time and the memory its
layout takes. Large matrices and vectors can be printed in shortened form.

### Stacks

```
datalabs-stacks
```

A numbered menu: `1` enter a sequence, `2`/`4` print the array or list
stack, `3`/`5` push an element onto it, `6` print every run of strictly
decreasing values, in reverse order, found in both stacks and compare their
times and memory, `7` print the menu, `8` clear the screen, `9` load a
sequence of whitespace-separated integers from a file, `0` quit.

Clearing the screen (and the banner of the matrix program) runs the external
`clear` and `figlet` commands, only when output is a terminal and the
command is installed.

## Using the library

```python
from datalabs.bigfloat_cli import divide_strings

print(divide_strings("+123.3e+3", "+341"))
```

```python
from datalabs.sparse import Matrix, dense_multiply, sparse_multiply

matrix = Matrix([[1, 2, 3], [4, 0, 6], [2, 1, 0]])
print(dense_multiply([1, 0, 3], matrix))    # [7, 5, 3]
result = sparse_multiply([1, 0, 3], matrix)
print(result.values, result.columns, result.row_starts)  # [7, 5, 3] [0, 1, 2] [0, 3]
```

```python
from datalabs.stacks import ArrayStack
from datalabs.stack_app import find_runs

stack = ArrayStack(10)
for value in (3, 2, 4, 5, 1):
    stack.push(value)
print(find_runs(stack))   # [[1, 5], [2, 3]]
print(stack.pop())        # 1
```

```python
from datalabs.cars import Car, CarError, UsedCondition

car = Car("Lada", "Russia", 500000, "white",
          used=UsedCondition(prod_year=2015, mileage=80000, repair_num=0, owner_num=1))
car.validate()
try:
    Car("Lada", "Russia", 0, "white", warranty=3).validate()
except CarError as error:
    print(error.code)     # ErrorCode.BAD_COST
```

Modules:

- `datalabs.bigfloat` – `BigFloat`, `divide`, `BigFloatError`, `ErrorCode`, `error_message`
- `datalabs.bigfloat_cli` – `parse_float`, `parse_long_int`, `format_result`, `divide_strings`
- `datalabs.sparse` – `Matrix`, `SparseMatrix`, `SparseVector`, `random_matrix`, `random_vector`,
  `to_sparse_vector`, `to_sparse_matrix`, `transpose`, `dense_multiply`, `sparse_multiply`
- `datalabs.sparse_app` – `SparseShell`, `format_matrix`, `format_vector`, `format_sparse`
- `datalabs.stacks` – `ArrayStack`, `ListStack`, `StackError`, `error_message`
- `datalabs.stack_app` – `StackShell`, `find_runs`, `parse_sequence`
- `datalabs.cars` – `Car`, `UsedCondition`, `CarError`, `ErrorCode`, `error_message`

## What is not included

`datalabs.cars` only defines a car record and checks it against the input
rules. There is no car table program: no command to keep, sort or search a
table of cars, and no reading or writing of car tables to files.