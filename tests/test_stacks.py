import pytest

from datalabs.stacks import ArrayStack, ListStack, StackError, error_message

KINDS = ["array", "list"]


@pytest.mark.parametrize("kind", KINDS)
def test_push_pop_is_lifo(kind):
    stack = ArrayStack() if kind == "array" else ListStack()
    for value in (1, 2, 3):
        stack.push(value)
    assert len(stack) == 3
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert len(stack) == 0


@pytest.mark.parametrize("kind", KINDS)
def test_pop_empty_underflows(kind):
    stack = ArrayStack() if kind == "array" else ListStack()
    with pytest.raises(StackError) as info:
        stack.pop()
    assert info.value.code is StackError.Code.STACK_UNDERFLOW


@pytest.mark.parametrize("kind", KINDS)
def test_iteration_from_bottom(kind):
    stack = ArrayStack() if kind == "array" else ListStack()
    for value in (4, 5, 6):
        stack.push(value)
    assert list(stack) == [4, 5, 6]


@pytest.mark.parametrize("kind", KINDS)
def test_copy_is_independent(kind):
    stack = ArrayStack() if kind == "array" else ListStack()
    for value in (7, 8, 9):
        stack.push(value)
    duplicate = stack.copy()
    assert list(duplicate) == list(stack)
    assert duplicate.pop() == 9
    assert len(stack) == 3
    assert list(stack) == [7, 8, 9]


@pytest.mark.parametrize("kind", KINDS)
def test_format_empty_raises(kind):
    stack = ArrayStack() if kind == "array" else ListStack()
    with pytest.raises(StackError) as info:
        stack.format()
    assert info.value.code is StackError.Code.EMPTY_STACK


@pytest.mark.parametrize("kind", KINDS)
def test_overflow(kind):
    stack = ArrayStack(capacity=2) if kind == "array" else ListStack(capacity=2)
    with pytest.raises(StackError) as info:
        for value in range(10):
            stack.push(value)
    assert info.value.code is StackError.Code.STACK_OVERFLOW
    assert len(stack) < 10


def test_array_overflow_at_capacity():
    stack = ArrayStack(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackError):
        stack.push(3)
    assert list(stack) == [1, 2]


def test_array_format():
    stack = ArrayStack()
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.format() == "\nLen 3\nHEAD 1 -> 2 -> 3 TAIL\n"


def test_list_format():
    stack = ListStack()
    stack.push(1)
    stack.push(2)
    text = stack.format()
    parts = text.split(" -> ")
    assert len(parts) == 2
    assert parts[0].split(" (")[0] == "HEAD 1"
    assert parts[1].split(" (")[0] == "2"
    assert parts[0].split(" (")[1].startswith("0x")
    assert parts[1].split(" (")[1].startswith("0x")
    assert text.endswith(") TAIL")


def test_error_messages():
    assert error_message(StackError.Code.EMPTY_STACK) == "Стек пуст."
    assert error_message(StackError.Code.STACK_UNDERFLOW) == "no such process"
    error = StackError(StackError.Code.STACK_OVERFLOW)
    assert str(error) == "Стек полон, добавление невозможно."