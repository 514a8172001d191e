"""Reading numbers and dividing a real number by a long integer."""

from __future__ import annotations

import argparse
import string
import sys

from datalabs.bigfloat import (
    EXP_LENGTH,
    MANTISSA_LENGTH,
    BigFloat,
    BigFloatError,
    ErrorCode,
    divide,
)

_RED = "\033[0;31m"
_RESET = "\033[0m"

GREETING = (
    "Вычисление частного двух действительный чисел\n"
    "Правила ввода действительного числа:\n"
    "\t1. Знак перед числом обязателен к вводу: + или -\n"
    "\t2. Знак экспоненты обязателен к вводу: 'e'или 'E'\n"
    "\t3. Знак порядка обязателен к вводу: + или -\n"
    "\t4. Можно написать ведущие нули\n"
    "\t5. Целая часть отделяется от дробной исключительно точкой: '.'\n"
    "\t6. Ограничения на ввод действительного числа: \n"
    "\t\tмаксимальная длина - 39 символов: 1 символ на знак числа,"
    "1 на точку, \n\t\t30 символов на мантиссу, \n"
    "\t\t1 символ на знак порядка, \n\t\t1 символ на знак экспоненты, \n"
    "\t\t5 цифр на порядок.\n"
    "Пример ввода: +123.3e+3\n"
    "Правила ввода целого числа:\n"
    "\t1. Максимальная длинна целой части - 30 цифр\n"
    "\t2. Первый знак всегда '+' или '-' и он обязателен к вводу\n"
    "Пример вводы: +123412\n"
)

_SIGNS = ("+", "-")


def _scan_float(text):
    """Check the layout of a real number; return its digit counts and signs."""
    if not text or text[0] not in _SIGNS:
        raise BigFloatError(ErrorCode.INCORRECT_SIGN)
    positive = text[0] == "+"
    e_count = 0
    mantissa_len = 0
    exponent_len = 0
    exponent_sign = 1
    before_e = True

    chars = iter(text[1:])
    for ch in chars:
        if ch.lower() == "e":
            e_count += 1
            before_e = False
            sign = next(chars, "")
            if sign not in _SIGNS:
                raise BigFloatError(ErrorCode.SIGN_AFTER_E)
            exponent_sign *= 1 if sign == "+" else -1
        elif ch == ".":
            if not before_e:
                raise BigFloatError(ErrorCode.INCORRECT_DIGIT)
        elif ch in string.digits:
            if before_e:
                mantissa_len += 1
            else:
                exponent_len += 1
        else:
            raise BigFloatError(ErrorCode.INCORRECT_DIGIT)

    if e_count != 1:
        raise BigFloatError(ErrorCode.INCORRECT_E)
    if mantissa_len > MANTISSA_LENGTH - 1:
        raise BigFloatError(ErrorCode.TOO_LONG_MANT)
    if exponent_len > EXP_LENGTH:
        raise BigFloatError(ErrorCode.TOO_LONG_EXP)
    if mantissa_len == 0:
        raise BigFloatError(ErrorCode.ZERO_LEN_MANT)
    if exponent_len == 0:
        raise BigFloatError(ErrorCode.ZERO_LEN_EXP)
    return positive, mantissa_len, exponent_len, exponent_sign


def parse_float(text):
    """Read a real number such as ``+123.3e+3``."""
    positive, mantissa_len, exponent_len, exponent_sign = _scan_float(text)

    dots = text.count(".")
    if dots > 1:
        raise BigFloatError(ErrorCode.SINGLETON_DOT)
    dot_pos = text.index(".") - 1 if dots else MANTISSA_LENGTH

    exponent = exponent_sign * int(text[-exponent_len:])
    mantissa_part = text[1 : 1 + mantissa_len + (1 if dots else 0)]
    digits = [int(ch) for ch in mantissa_part if ch != "."]

    return BigFloat(
        positive=positive,
        digits=digits,
        dot_pos=dot_pos,
        exponent=exponent,
        length=mantissa_len,
    )


def parse_long_int(text):
    """Read a signed integer of up to 30 digits such as ``+341``."""
    if not text or text[0] not in _SIGNS:
        raise BigFloatError(ErrorCode.INCORRECT_SIGN)
    body = text[1:]
    if not body:
        raise BigFloatError(ErrorCode.ZERO_LEN_BIGINT)
    if len(body) > MANTISSA_LENGTH - 1:
        raise BigFloatError(ErrorCode.TOO_LONG_BIGINT)
    if any(ch not in string.digits for ch in body):
        raise BigFloatError(ErrorCode.INCORRECT_DIGIT)
    return BigFloat(
        positive=text[0] == "+",
        digits=[int(ch) for ch in body],
        dot_pos=MANTISSA_LENGTH,
        exponent=0,
        length=len(body),
    )


def format_result(value):
    """Render a quotient as ``Результат: +0.5E0``."""
    sign = "+" if value.positive else "-"
    mantissa = "".join(str(d) for d in value.digits[1 : value.length])
    exp_sign = "+" if value.exponent > 0 else ""
    return f"Результат: {sign}0.{mantissa}E{exp_sign}{value.exponent}"


def _quotient(dividend, divisor):
    for number in (divisor, dividend):
        number.normalise()
    for number in (divisor, dividend):
        number.remove_lead_zeros()
    for number in (divisor, dividend):
        number.right_shift()
    return divide(dividend, divisor)


def divide_strings(real, integer):
    """Divide a real number written as text by an integer written as text."""
    dividend = parse_float(real)
    divisor = parse_long_int(integer)
    return format_result(_quotient(dividend, divisor))


def _tokens(stream):
    for line in stream:
        yield from line.split()


def _report(error):
    print(f"{_RED}{error}{_RESET}", file=sys.stderr)
    return int(error.code)


def main(argv=None):
    """Ask for a real number and an integer and print their quotient."""
    parser = argparse.ArgumentParser(
        description="Divide a real number by a long integer."
    )
    parser.add_argument("real", nargs="?", help="real number, e.g. +123.3e+3")
    parser.add_argument("integer", nargs="?", help="integer, e.g. +341")
    args = parser.parse_args(argv)

    print(GREETING)
    tokens = _tokens(sys.stdin)

    real = args.real
    if real is None:
        print("Введите действительное число – пример: -341.3e+4")
        real = next(tokens, "")
    try:
        dividend = parse_float(real)
    except BigFloatError as error:
        return _report(error)

    integer = args.integer
    if integer is None:
        print("Введите целое число – пример: +341")
        integer = next(tokens, "")
    try:
        divisor = parse_long_int(integer)
        result = _quotient(dividend, divisor)
    except BigFloatError as error:
        return _report(error)

    print(format_result(result))
    return int(ErrorCode.NO_ERROR)


if __name__ == "__main__":
    sys.exit(main())