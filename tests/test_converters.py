import math

import pytest

from algobox.converters import (
    ATM_NOTES,
    DEFAULT_BALANCE,
    DEFAULT_PIN,
    DENOMINATIONS,
    LENGTH_CONVERSIONS,
    PRESSURE_CONVERSIONS,
    Atm,
    InsufficientBalance,
    analog_time,
    calculate,
    circle_measurements,
    convert_length,
    convert_pressure,
    note_breakdown,
    showroom_offer,
)


@pytest.mark.parametrize("forward,back", [(1, 2), (3, 4), (5, 6), (7, 8), (9, 10)])
@pytest.mark.parametrize("value", [0.5, 3.0, 42.25])
def test_length_round_trips(forward, back, value):
    there = convert_length(forward, value)
    again = convert_length(back, there.value)
    assert again.value == pytest.approx(value)
    assert again.unit == LENGTH_CONVERSIONS[forward].source


def test_length_units_follow_table():
    assert convert_length(1, 2.0).unit == "metre"
    assert convert_length(2, 2.0).unit == "kilometre"
    assert convert_length(12, 2.0).unit == "inch"


def test_length_invalid_option():
    with pytest.raises(ValueError):
        convert_length(13, 1.0)


@pytest.mark.parametrize("forward,back", [(1, 2), (7, 8)])
def test_pressure_round_trips(forward, back):
    there = convert_pressure(forward, 7.5)
    assert convert_pressure(back, there.value).value == pytest.approx(7.5)
    assert there.unit == PRESSURE_CONVERSIONS[back].source


def test_pressure_units():
    assert convert_pressure(9, 1.0).unit == "Pounds/Square Inch"
    assert convert_pressure(12, 1.0).unit == "Standard Pressure(atm)"


@pytest.mark.parametrize("option", [0, 13, -1])
def test_pressure_invalid_option(option):
    with pytest.raises(ValueError, match="Invalid Option"):
        convert_pressure(option, 1.0)


@pytest.mark.parametrize("radius", [0.0, 1.0, 2.5, 10.0])
def test_circle_invariants(radius):
    m = circle_measurements(radius)
    assert m.diameter == pytest.approx(2 * radius)
    assert m.area == pytest.approx(m.circumference * radius / 2)


def test_calculate_subtraction_antisymmetric():
    assert calculate("-", 7, 3) == -calculate("-", 3, 7)


def test_calculate_add_and_multiply_commute():
    assert calculate("+", 1.5, 2.25) == calculate("+", 2.25, 1.5)
    assert calculate("*", 1.5, 4) == calculate("*", 4, 1.5)


def test_calculate_division_inverts_multiplication():
    assert calculate("/", calculate("*", 6, 4), 4) == pytest.approx(6)


def test_calculate_division_by_zero():
    assert calculate("/", 1, 0) == math.inf
    assert calculate("/", -1, 0) == -math.inf
    assert math.isnan(calculate("/", 0, 0))


def test_calculate_bad_operator():
    with pytest.raises(ValueError, match="operator is not correct"):
        calculate("%", 1, 2)


@pytest.mark.parametrize(
    "amount,gift",
    [
        (2000, "Calculator"),
        (2001, "School Bag"),
        (5000, "School Bag"),
        (5001, "Wall Clock"),
        (10000, "Wall Clock"),
        (10001, "Wrist Watch"),
        (0, "Wrist Watch"),
    ],
)
def test_showroom_gift_boundaries(amount, gift):
    assert showroom_offer(amount).gift == gift


def test_showroom_discount():
    assert showroom_offer(1000).total == 950
    for amount in (1, 999, 4321, 9999, 20000):
        assert showroom_offer(amount).total <= amount


@pytest.mark.parametrize("amount", [0, 1, 3888, 12345])
def test_note_breakdown_sums_to_amount(amount):
    breakdown = note_breakdown(amount)
    assert [note for note, _ in breakdown] == list(DENOMINATIONS)
    assert sum(note * count for note, count in breakdown) == amount


def test_note_breakdown_largest_first():
    assert note_breakdown(4000)[0] == (2000, 2)


def test_note_breakdown_negative():
    with pytest.raises(ValueError):
        note_breakdown(-5)


def test_atm_pin():
    atm = Atm()
    assert atm.check_pin(DEFAULT_PIN)
    assert not atm.check_pin(DEFAULT_PIN + 1)


def test_atm_withdraw_reduces_balance():
    atm = Atm()
    notes = atm.withdraw(2850)
    assert atm.balance == DEFAULT_BALANCE - 2850
    assert [note for note, _ in notes] == list(ATM_NOTES)
    paid = sum(note * count for note, count in notes)
    assert paid == 2850 - 2850 % 100


def test_atm_insufficient_balance():
    atm = Atm()
    with pytest.raises(InsufficientBalance):
        atm.withdraw(DEFAULT_BALANCE + 1)
    assert atm.balance == DEFAULT_BALANCE


def test_analog_time():
    assert analog_time(1, 3, 3) == "3:15 AM"
    assert analog_time(2, 3, 3).endswith("PM")


def test_analog_time_errors():
    with pytest.raises(ValueError, match="valid numbers"):
        analog_time(3, 1, 1)
    with pytest.raises(ValueError):
        analog_time(1, 13, 1)
    with pytest.raises(ValueError):
        analog_time(2, 1, 13)