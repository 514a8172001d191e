"""Decimal floating-point numbers with a 30-digit mantissa and their division."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import IntEnum

MANTISSA_LENGTH = 31
EXP_LENGTH = 5
MAX_EXPONENT = 99999

# Digits that take part in comparisons.
_COMPARED = MANTISSA_LENGTH - 1
# Quotient digits are produced up to (not including) this position.
_QUOTIENT_END = MANTISSA_LENGTH - 2


class ErrorCode(IntEnum):
    """Reasons a number cannot be read or divided."""

    NO_ERROR = 0
    DIVISION_BY_ZERO = 1
    OVERFLOW_MANT = 2
    OVERFLOW_EXP = 3
    INCORRECT_E = 4
    INCORRECT_SIGN = 5
    INCORRECT_DIGIT = 6
    SINGLETON_DOT = 7
    TOO_LONG_MANT = 8
    TOO_LONG_EXP = 9
    SIGN_AFTER_E = 10
    ZERO_LEN_MANT = 11
    ZERO_LEN_EXP = 12
    TOO_LONG_BIGINT = 13
    ZERO_LEN_BIGINT = 14


_MESSAGES = {
    ErrorCode.DIVISION_BY_ZERO: "Ошибка: деление на ноль",
    ErrorCode.OVERFLOW_MANT: "Ошибка: переполнение мантиссы",
    ErrorCode.OVERFLOW_EXP: "Ошибка: переполнение порядка",
    ErrorCode.INCORRECT_E: "Ошибка: в числе должен быть только один символ E",
    ErrorCode.INCORRECT_SIGN: "Ошибка: первый знак в числе должен быть '+' или '-'",
    ErrorCode.INCORRECT_DIGIT: "Ошибка: был встречен некорректный символ",
    ErrorCode.SINGLETON_DOT: "Ошибка: точка должна быть только одна",
    ErrorCode.TOO_LONG_MANT: (
        "Ошибка: была введена слишком длинная мантисса. Предел – 30 символов"
    ),
    ErrorCode.TOO_LONG_EXP: (
        "Ошибка: был введен слишком длинный порядок. Предел - 5 символов"
    ),
    ErrorCode.SIGN_AFTER_E: "Ошибка: после знака E должен стоять знак '+' или '-'",
    ErrorCode.ZERO_LEN_MANT: "Ошибка: Вы не ввели мантиссу числа",
    ErrorCode.ZERO_LEN_EXP: "Ошибка: Вы не ввели порядок числа",
    ErrorCode.TOO_LONG_BIGINT: (
        "Ошибка: Вы ввели слишком длинное целое число. "
        "Максимальная длинна 30 символов"
    ),
    ErrorCode.ZERO_LEN_BIGINT: "Ошибка: Вы не ввели длинное целое число.",
}


def error_message(code):
    """Return the user-facing message for an error code."""
    return _MESSAGES.get(code, "No such process")


class BigFloatError(Exception):
    """Raised when a number cannot be read or an operation fails."""

    def __init__(self, code):
        self.code = ErrorCode(code)
        super().__init__(error_message(self.code))


@dataclass
class BigFloat:
    """A signed decimal mantissa of fixed width with a separate exponent.

    ``dot_pos`` is the number of digits before the decimal point, or
    ``MANTISSA_LENGTH`` when the number was written without a point.
    """

    positive: bool = True
    digits: list = field(default_factory=lambda: [0] * MANTISSA_LENGTH)
    dot_pos: int = 0
    exponent: int = 0
    length: int = 0

    def __post_init__(self):
        if len(self.digits) > MANTISSA_LENGTH:
            raise ValueError(f"mantissa holds at most {MANTISSA_LENGTH} digits")
        self.digits = list(self.digits) + [0] * (MANTISSA_LENGTH - len(self.digits))

    def is_zero(self):
        """True when every mantissa digit is zero."""
        return not any(self.digits)

    def normalise(self):
        """Bring the mantissa to the form 0.d1d2... and adjust the exponent."""
        if self.is_zero():
            return
        if self.dot_pos != MANTISSA_LENGTH:
            first = next(i for i, digit in enumerate(self.digits) if digit)
            if first > self.dot_pos:
                self.exponent -= first
            for _ in range(first):
                self._shift_left()
                self.length -= 1
            self.exponent += self.dot_pos
        else:
            i = self.length - 1
            while i >= 0 and not self.digits[i]:
                self.exponent += 1
                self.length -= 1
                i -= 1
            self.exponent += self.length

    def remove_lead_zeros(self):
        """Drop zero digits from the end of the mantissa."""
        i = self.length - 1
        while i >= 0 and not self.digits[i]:
            i -= 1
            self.length -= 1
            if i < self.dot_pos - 1:
                self.exponent += 1

    def right_shift(self):
        """Move the digits one place right when the first digit is not zero."""
        if self.digits[0]:
            self.digits[1:] = self.digits[:-1]
            self.digits[0] = 0
            self.length += 1
            self.dot_pos -= 1

    def _copy(self):
        return dataclasses.replace(self, digits=list(self.digits))

    def _shift_left(self):
        self.digits[: _COMPARED - 1] = self.digits[1:_COMPARED]

    def _offset(self):
        self.digits[: _COMPARED - 1] = self.digits[1:_COMPARED]
        self.digits[_COMPARED - 1] = 0

    def _not_less(self, other):
        return self.digits[:_COMPARED] >= other.digits[:_COMPARED]

    def _subtract(self, other):
        """Subtract the other mantissa in place; False if it is larger."""
        if not self._not_less(other):
            return False
        minuend = self.digits
        for base in range(MANTISSA_LENGTH - 1, -1, -1):
            if minuend[base] >= other.digits[base]:
                minuend[base] -= other.digits[base]
                continue
            lender = base - 1
            while lender > 0 and minuend[lender] == 0:
                lender -= 1
            minuend[lender] -= 1
            for position in range(lender + 1, base):
                minuend[position] += 9
            minuend[base] += 10 - other.digits[base]
        return True

    def _quotient_digit(self, divisor):
        count = 0
        while self._subtract(divisor):
            count += 1
        self._offset()
        return count


def divide(dividend, divisor):
    """Divide two prepared numbers and return the quotient.

    Both operands are expected to be normalised, stripped of trailing zeros
    and shifted right by one place. The operands are left unchanged.
    """
    if divisor.is_zero():
        raise BigFloatError(ErrorCode.DIVISION_BY_ZERO)
    if dividend.is_zero():
        return BigFloat(positive=True, dot_pos=0, exponent=0, length=1)
    if abs(dividend.exponent - divisor.exponent) > MAX_EXPONENT:
        raise BigFloatError(ErrorCode.OVERFLOW_EXP)

    rest = dividend._copy()
    if not rest._not_less(divisor):
        rest.exponent -= 1
        rest._offset()

    digits = [0] * MANTISSA_LENGTH
    digits[1] = rest._quotient_digit(divisor)

    position = 2
    while position < _QUOTIENT_END:
        if rest.is_zero():
            break
        if rest._not_less(divisor):
            digits[position] = rest._quotient_digit(divisor)
        else:
            rest._offset()
            digits[position] = 0
        position += 1
    length = position

    if position == _QUOTIENT_END and rest._quotient_digit(divisor) >= 5:
        digits[_QUOTIENT_END - 1] += 1

    carried = False
    for position in range(_QUOTIENT_END - 1, -1, -1):
        digits[position] += int(carried)
        if digits[position] == 10:
            digits[position] = 0
            carried = True
        else:
            break

    if digits[0] == 1:
        digits[1:_QUOTIENT_END + 1] = digits[:_QUOTIENT_END]
        digits[0] = 0
    else:
        carried = False

    exponent = rest.exponent - divisor.exponent + int(carried) + 1
    if exponent > MAX_EXPONENT:
        raise BigFloatError(ErrorCode.OVERFLOW_EXP)

    return BigFloat(
        positive=dividend.positive == divisor.positive,
        digits=digits,
        dot_pos=0,
        exponent=exponent,
        length=length,
    )