import pytest

from datalabs.cars import (
    BRAND_LEN,
    COLOR_LEN,
    Car,
    CarError,
    ErrorCode,
    UsedCondition,
    error_message,
)


def new_car(**changes):
    fields = dict(brand="Lada", country="Russia", cost=500, color="red", warranty=3)
    fields.update(changes)
    return Car(**fields)


def used_car(**changes):
    history = dict(prod_year=2010, mileage=1000, repair_num=0, owner_num=1)
    history.update(changes)
    return Car("Lada", "Russia", 300, "blue", used=UsedCondition(**history))


def test_error_message_known_code():
    assert error_message(ErrorCode.BAD_BRAND) == "Бренд был введен неверно."


def test_error_message_vector_code():
    assert error_message(ErrorCode.VECTOR_OVERFLOW) == "Произошло переполнение вектора."


def test_error_message_unknown_code():
    assert error_message(999) == "No such process"


def test_car_error_carries_code_and_message():
    error = CarError(ErrorCode.BAD_COST)
    assert error.code is ErrorCode.BAD_COST
    assert str(error) == "Цена была введена неверно."


def test_is_new_follows_condition():
    assert new_car().is_new is True
    assert used_car().is_new is False


def test_brand_at_limit_is_accepted():
    car = new_car(brand="b" * BRAND_LEN)
    assert car.validate() is car


def test_color_at_limit_is_accepted():
    car = new_car(color="c" * COLOR_LEN)
    assert car.validate().color == "c" * COLOR_LEN


@pytest.mark.parametrize(
    "changes, code",
    [
        ({"brand": "b" * (BRAND_LEN + 1)}, ErrorCode.BAD_BRAND),
        ({"brand": ""}, ErrorCode.BAD_BRAND),
        ({"country": "x y"}, ErrorCode.BAD_COUNTRY),
        ({"cost": 0}, ErrorCode.BAD_COST),
        ({"color": "c" * (COLOR_LEN + 1)}, ErrorCode.BAD_COLOR),
        ({"warranty": -1}, ErrorCode.BAD_WARRANTY),
        ({"warranty": None}, ErrorCode.BAD_YES_NO),
    ],
)
def test_new_car_rejections(changes, code):
    with pytest.raises(CarError) as info:
        new_car(**changes).validate()
    assert info.value.code is code


@pytest.mark.parametrize(
    "changes, code",
    [
        ({"prod_year": 0}, ErrorCode.BAD_PROD_YEAR),
        ({"mileage": -1}, ErrorCode.BAD_MILEAGE),
        ({"repair_num": -1}, ErrorCode.BAD_REPAIR_NUM),
        ({"owner_num": 0}, ErrorCode.BAD_OWNER_NUM),
    ],
)
def test_used_car_rejections(changes, code):
    with pytest.raises(CarError) as info:
        used_car(**changes).validate()
    assert info.value.code is code


def test_car_with_both_conditions_is_rejected():
    car = used_car()
    car.warranty = 2
    with pytest.raises(CarError) as info:
        car.validate()
    assert info.value.code is ErrorCode.BAD_YES_NO