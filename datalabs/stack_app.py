"""Interactive shell comparing an array stack with a linked-list stack."""

from __future__ import annotations

import argparse
import re
import shutil
import subprocess
import sys
import time
from enum import IntEnum
from pathlib import Path

from datalabs.stacks import (
    LIST_MAX_LEN,
    RED,
    RESET,
    YELLOW,
    ArrayStack,
    ListStack,
    StackError,
)

_Code = StackError.Code
_INTEGER = re.compile(r"[+-]?\d+")

_NODE_SIZE = 16
_INT_SIZE = 4

NOT_FOUND = "Не найдено такой подпоследовательности."


class _Menu(IntEnum):
    EXIT = 0
    INPUT_SEQUENCE = 1
    PRINT_STACK_ARRAY = 2
    ADD_ELEM_ARRAY = 3
    PRINT_STACK_LIST = 4
    ADD_ELEM_LIST = 5
    FIND_SEQUENCES = 6
    PRINT_HELP = 7
    CLEAR_SCREEN = 8
    READ_FROM_FILE = 9
    UNKNOWN = 10


MENU = (
    f"\t{_Menu.INPUT_SEQUENCE} -- Ввести последовательность\n"
    f"\t{_Menu.PRINT_STACK_ARRAY} -- Напечатать состояние стека-массива\n"
    f"\t{_Menu.ADD_ELEM_ARRAY} -- Добавить элемент в стек-массив\n"
    f"\t{_Menu.PRINT_STACK_LIST} -- Напечатать состояние стека-списка\n"
    f"\t{_Menu.ADD_ELEM_LIST} -- Добавить элемент в стек-список\n"
    f"\t{_Menu.FIND_SEQUENCES} -- Напечатать в обратном порядке убывающие "
    "подпоследовательности\n"
    f"\t{_Menu.PRINT_HELP} -- Напечатать меню\n"
    f"\t{_Menu.CLEAR_SCREEN} -- Очистить экран\n"
    f"\t{_Menu.READ_FROM_FILE} -- Считать последовательность из файла\n"
    f"\t{_Menu.EXIT} -- Выход из программы\n"
)


def find_runs(stack):
    """Pop a copy of the stack and collect the strictly increasing runs.

    Values come off the top first, so each run is a decreasing stretch of
    the sequence read in reverse. Only runs of two or more values are kept.
    The stack itself is left unchanged.
    """
    if not len(stack):
        raise StackError(_Code.EMPTY_STACK)
    work = stack.copy()
    runs = []
    current = [work.pop()]
    while len(work):
        value = work.pop()
        if current[-1] < value:
            current.append(value)
            continue
        if len(current) > 1:
            runs.append(current)
        current = [value]
    if len(current) > 1:
        runs.append(current)
    return runs


def parse_sequence(text):
    """Read whitespace-separated integers; raise on anything else."""
    values = []
    for token in text.split():
        if not _INTEGER.fullmatch(token):
            raise StackError(_Code.BAD_FILE)
        values.append(int(token))
    return values


def _split_ns(nanoseconds):
    return divmod(nanoseconds, 10**9)


class StackShell:
    """Reads numbered menu choices from a text stream and works on two stacks."""

    def __init__(self, stdin=None, stdout=None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._tokens = self._token_stream()
        self.array_stack = None
        self.list_stack = None
        self._commands = {
            _Menu.INPUT_SEQUENCE: self._input_sequence,
            _Menu.PRINT_STACK_ARRAY: lambda: self._print_stack(self.array_stack),
            _Menu.ADD_ELEM_ARRAY: self._add_array,
            _Menu.PRINT_STACK_LIST: lambda: self._print_stack(self.list_stack),
            _Menu.ADD_ELEM_LIST: self._add_list,
            _Menu.FIND_SEQUENCES: self._find_sequences,
            _Menu.PRINT_HELP: lambda: self._write(MENU),
            _Menu.CLEAR_SCREEN: lambda: self._external(["clear"]),
            _Menu.READ_FROM_FILE: self._read_file,
        }

    def _token_stream(self):
        for line in self._stdin:
            yield from line.split()

    def _write(self, text):
        self._stdout.write(text)

    def _say(self, text=""):
        self._stdout.write(text + "\n")

    def _error(self, message):
        self._say(f"{RED}Ошибка: {RESET}{message}")

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

    def _input_sequence(self):
        self._write(
            "Введите длину последовательности. "
            f"Максимальная длина {LIST_MAX_LEN}: "
        )
        length = self._read_int()
        if length is None or length <= 0:
            raise StackError(_Code.BAD_SEQ_LEN)
        if length > LIST_MAX_LEN:
            raise StackError(_Code.TOO_BIG_LEN)
        self.array_stack = ArrayStack()
        self.list_stack = ListStack()
        for number in range(1, length + 1):
            self._write(f"Введите {number}:{length} элемент: ")
            value = self._read_int()
            if value is None:
                raise StackError(_Code.BAD_ELEM)
            self.array_stack.push(value)
        for value in self.array_stack:
            self.list_stack.push(value)

    def _print_stack(self, stack):
        if stack is None:
            raise StackError(_Code.EMPTY_STACK)
        self._write(stack.format())

    def _read_element(self):
        self._say("Введите элемент")
        value = self._read_int()
        if value is None:
            raise StackError(_Code.BAD_ELEM)
        return value

    def _add_array(self):
        if self.array_stack is None:
            self.array_stack = ArrayStack()
        self.array_stack.push(self._read_element())

    def _add_list(self):
        if self.list_stack is None:
            self.list_stack = ListStack()
        self.list_stack.push(self._read_element())

    def _search(self, stack, title, label):
        self._say(f"{YELLOW}{title}{RESET}")
        start = time.process_time_ns()
        runs = find_runs(stack)
        for number, run in enumerate(runs, start=1):
            cells = "".join(f"{value} " for value in run)
            self._say(f"Последовательность #{number}\t{cells}")
        if not runs:
            self._say(NOT_FOUND)
        elapsed = time.process_time_ns() - start
        seconds, nanos = _split_ns(elapsed)
        self._write(f"\n\n{YELLOW}{label}{RESET} {seconds}s {nanos}ns\n")
        return elapsed

    def _find_sequences(self):
        if self.array_stack is None or self.list_stack is None:
            raise StackError(_Code.NOT_INPUTTED)
        array_ns = self._search(
            self.array_stack,
            "Поиск подпоследовательностей в стеке-массиве",
            "Время поиска в стеке-массиве: ",
        )
        list_ns = self._search(
            self.list_stack,
            "Поиск подпоследовательностей в стеке-списке",
            "Время поиска в стеке-списке: ",
        )
        seconds, nanos = _split_ns(abs(list_ns - array_ns))
        winner = "Стек-массив" if array_ns < list_ns else "Стек-список"
        self._say(f"{winner} оказался быстрее на {seconds}с {nanos}нс")
        self._write(f"{YELLOW}Потребление памяти:\n{RESET}")
        self._say(f"\tСписок:\t{len(self.list_stack) * _NODE_SIZE:6d} Б")
        self._say(f"\tМассив:\t{len(self.array_stack) * _INT_SIZE:6d} Б")

    def _read_file(self):
        self._write("Введите имя файла: ")
        name = next(self._tokens, "")
        self._write("Открытие файла\t\t........\t\t")
        try:
            text = Path(name).read_text(encoding="utf-8")
        except (OSError, ValueError):
            self._say("Ошибка.")
            raise StackError(_Code.UNEXISTING_FILE) from None
        self._say("Готово.")
        self.array_stack = ArrayStack()
        self.list_stack = ListStack()
        self._write("Считывание\t\t........\t\t")
        try:
            values = parse_sequence(text)
        except StackError:
            self.array_stack = None
            self.list_stack = None
            self._say("Ошибка.")
            raise
        for value in values:
            try:
                self.array_stack.push(value)
                self.list_stack.push(value)
            except StackError:
                self._say("Ошибка.")
                raise StackError(_Code.STACK_OVERFLOW) from None
        self._say("Готово.")
        if not values:
            raise StackError(_Code.EMPTY_FILE)

    def run(self):
        """Show the menu and process choices until 0 or end of input."""
        start = time.process_time_ns()
        self._write(MENU)
        while True:
            self._write("\nВыберите пункт меню: ")
            token = next(self._tokens, None)
            if token is None:
                break
            choice = int(token) if _INTEGER.fullmatch(token) else _Menu.UNKNOWN
            if choice == _Menu.EXIT:
                self._say("Прощайте.")
                break
            handler = self._commands.get(choice)
            if handler is None:
                self._error("Неизвестная команда.\n")
                self._write(MENU)
                continue
            try:
                handler()
            except StackError as error:
                self._error(str(error))
        seconds, nanos = _split_ns(time.process_time_ns() - start)
        self._write(f"\n\n{YELLOW}Время исполнения: {RESET} {seconds}s {nanos}ns\n")
        return 0


def main(argv=None):
    """Run the stack shell on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Find decreasing runs using an array stack and a list stack."
    )
    parser.parse_args(argv)
    return StackShell(sys.stdin, sys.stdout).run()


if __name__ == "__main__":
    sys.exit(main())