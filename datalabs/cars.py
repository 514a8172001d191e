"""Car records for the sortable car table and the errors reported about them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

BRAND_LEN = 20
COUNTRY_LEN = 20
COLOR_LEN = 10


class ErrorCode(IntEnum):
    """Reasons a car record or a table operation is rejected."""

    NO_ERROR = 0
    BAD_BRAND = 1
    BAD_COUNTRY = 2
    BAD_COST = 3
    BAD_COLOR = 4
    BAD_YES_NO = 5
    BAD_WARRANTY = 6
    BAD_PROD_YEAR = 7
    BAD_MILEAGE = 8
    BAD_REPAIR_NUM = 9
    BAD_OWNER_NUM = 10
    BAD_RECORD_NUM = 11
    BAD_FILENAME = 12
    UNEXISTING_FILE = 13
    BAD_FILE = 14
    INDEX_OUT_OF_BOUNDS = 30
    VECTOR_UNDERFLOW = 31
    VECTOR_OVERFLOW = 32


_MESSAGES = {
    ErrorCode.BAD_BRAND: "Бренд был введен неверно.",
    ErrorCode.BAD_COUNTRY: "Страна была введена неверно.",
    ErrorCode.BAD_COST: "Цена была введена неверно.",
    ErrorCode.BAD_COLOR: "Цвет машины был введен неверно.",
    ErrorCode.BAD_YES_NO: "Был неправильно дан ответ на y/n вопрос.",
    ErrorCode.BAD_WARRANTY: "Гарантия была введена неправильно.",
    ErrorCode.BAD_PROD_YEAR: "Год производства был введен неправильно.",
    ErrorCode.BAD_MILEAGE: "Пробег был введен неправильно.",
    ErrorCode.BAD_REPAIR_NUM: "Количество починок было введено неправильно.",
    ErrorCode.BAD_OWNER_NUM: "Количество бывших владельцов было введено неправильно.",
    ErrorCode.BAD_RECORD_NUM: "Номер записи был введен неправильно.",
    ErrorCode.BAD_FILENAME: "Было введено неправильное имя файла.",
    ErrorCode.UNEXISTING_FILE: "Такой файла не существует.",
    ErrorCode.BAD_FILE: "Неправильный файл.",
    ErrorCode.INDEX_OUT_OF_BOUNDS: "Неправильный индекс вектора.",
    ErrorCode.VECTOR_UNDERFLOW: "Попытка удалить элемент из пустого вектора.",
    ErrorCode.VECTOR_OVERFLOW: "Произошло переполнение вектора.",
}


def error_message(code):
    """Return the user-facing message for an error code."""
    return _MESSAGES.get(code, "No such process")


class CarError(Exception):
    """Raised when a car record or a table operation is rejected."""

    def __init__(self, code):
        self.code = ErrorCode(code)
        super().__init__(error_message(self.code))


@dataclass
class UsedCondition:
    """What is known about a car that has had owners before."""

    prod_year: int
    mileage: int
    repair_num: int
    owner_num: int


@dataclass
class Car:
    """A row of the car table: a new car has a warranty, a used one a history."""

    brand: str
    country: str
    cost: int
    color: str
    warranty: int | None = None
    used: UsedCondition | None = None

    @property
    def is_new(self):
        return self.used is None

    def validate(self):
        """Check the record against the input rules; return it when it passes."""
        _check_word(self.brand, BRAND_LEN, ErrorCode.BAD_BRAND)
        _check_word(self.country, COUNTRY_LEN, ErrorCode.BAD_COUNTRY)
        if self.cost <= 0:
            raise CarError(ErrorCode.BAD_COST)
        _check_word(self.color, COLOR_LEN, ErrorCode.BAD_COLOR)

        if (self.warranty is None) == (self.used is None):
            raise CarError(ErrorCode.BAD_YES_NO)

        if self.used is None:
            if self.warranty < 0:
                raise CarError(ErrorCode.BAD_WARRANTY)
            return self

        used = self.used
        if used.prod_year <= 0:
            raise CarError(ErrorCode.BAD_PROD_YEAR)
        if used.mileage < 0:
            raise CarError(ErrorCode.BAD_MILEAGE)
        if used.repair_num < 0:
            raise CarError(ErrorCode.BAD_REPAIR_NUM)
        if used.owner_num < 1:
            raise CarError(ErrorCode.BAD_OWNER_NUM)
        return self


def _check_word(value, limit, code):
    if not value or len(value) > limit or any(ch.isspace() for ch in value):
        raise CarError(code)