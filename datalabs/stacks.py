"""Integer stacks kept in a fixed-size array or in a linked list."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

INITIAL_CAPACITY = 5000
LIST_MAX_LEN = 5000

YELLOW = "\x1b[33m"
RED = "\033[0;31m"
RESET = "\033[0m"


class StackError(Exception):
    """Raised when a stack operation or a sequence input fails."""

    class Code(IntEnum):
        """Reasons a stack operation fails."""

        NO_ERROR = 0
        ALLOC_FAILED = 1
        BAD_SEQ_LEN = 2
        STACK_UNDERFLOW = 3
        EMPTY_STACK = 4
        BAD_ELEM = 5
        NOT_INPUTTED = 6
        UNEXISTING_FILE = 7
        BAD_FILE = 8
        EMPTY_FILE = 9
        STACK_OVERFLOW = 10
        TOO_BIG_LEN = 11

    def __init__(self, code):
        self.code = StackError.Code(code)
        super().__init__(error_message(self.code))


_Code = StackError.Code

_MESSAGES = {
    _Code.ALLOC_FAILED: "Не удалось выделить память.",
    _Code.BAD_SEQ_LEN: "Неправильно введена длина последовательности.",
    _Code.EMPTY_STACK: "Стек пуст.",
    _Code.BAD_ELEM: "Неправильно введен элемент последовательности.",
    _Code.NOT_INPUTTED: "Последовательность еще не была введена.",
    _Code.UNEXISTING_FILE: "Такой файл не существует.",
    _Code.BAD_FILE: "Файл содержит некорректные данные.",
    _Code.EMPTY_FILE: "Файл пуст.",
    _Code.STACK_OVERFLOW: "Стек полон, добавление невозможно.",
    _Code.TOO_BIG_LEN: "Введена слишком большая длина последовательности.",
}


def error_message(code):
    """Return the user-facing message for an error code."""
    return _MESSAGES.get(code, "no such process")


class ArrayStack:
    """A stack stored in an array of fixed capacity."""

    def __init__(self, capacity=INITIAL_CAPACITY):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items = []

    def push(self, value):
        """Put a value on top; raise when the array is full."""
        if len(self._items) >= self.capacity:
            raise StackError(_Code.STACK_OVERFLOW)
        self._items.append(value)

    def pop(self):
        """Remove and return the top value."""
        if not self._items:
            raise StackError(_Code.STACK_UNDERFLOW)
        return self._items.pop()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        """Yield values from the bottom to the top."""
        return iter(list(self._items))

    def copy(self):
        """Return an independent stack with the same values and capacity."""
        duplicate = ArrayStack(self.capacity)
        duplicate._items = list(self._items)
        return duplicate

    def format(self):
        """Render the stack from bottom (HEAD) to top (TAIL)."""
        if not self._items:
            raise StackError(_Code.EMPTY_STACK)
        chain = " -> ".join(str(value) for value in self._items)
        return f"\nLen {len(self._items)}\nHEAD {chain} TAIL\n"


@dataclass(slots=True)
class _Node:
    value: int
    below: _Node | None


class ListStack:
    """A stack stored as a singly linked list of nodes."""

    def __init__(self, capacity=LIST_MAX_LEN):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._top = None
        self._length = 0

    def push(self, value):
        """Put a value on top; raise when the list is past its limit."""
        if self._length > self.capacity:
            raise StackError(_Code.STACK_OVERFLOW)
        self._top = _Node(value, self._top)
        self._length += 1

    def pop(self):
        """Remove and return the top value."""
        if self._top is None:
            raise StackError(_Code.STACK_UNDERFLOW)
        node = self._top
        self._top = node.below
        self._length -= 1
        return node.value

    def __len__(self):
        return self._length

    def _nodes(self):
        nodes = []
        node = self._top
        while node is not None:
            nodes.append(node)
            node = node.below
        nodes.reverse()
        return nodes

    def __iter__(self):
        """Yield values from the bottom to the top."""
        return iter([node.value for node in self._nodes()])

    def copy(self):
        """Return an independent stack with the same values and capacity."""
        duplicate = ListStack(self.capacity)
        for value in self:
            duplicate._top = _Node(value, duplicate._top)
            duplicate._length += 1
        return duplicate

    def format(self):
        """Render the stack from bottom (HEAD) to top (TAIL) with node addresses."""
        nodes = self._nodes()
        if not nodes:
            raise StackError(_Code.EMPTY_STACK)
        chain = " -> ".join(f"{node.value} ({id(node):#x})" for node in nodes)
        return f"HEAD {chain} TAIL"