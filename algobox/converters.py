"""Everyday calculators: unit conversions, circles, shop offers, notes and an ATM."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import NamedTuple

__all__ = [
    "PI",
    "DENOMINATIONS",
    "ATM_NOTES",
    "DEFAULT_PIN",
    "DEFAULT_BALANCE",
    "Measurement",
    "Conversion",
    "LENGTH_CONVERSIONS",
    "PRESSURE_CONVERSIONS",
    "CircleMeasurements",
    "ShowroomOffer",
    "InsufficientBalance",
    "Atm",
    "convert_length",
    "convert_pressure",
    "circle_measurements",
    "calculate",
    "showroom_offer",
    "note_breakdown",
    "analog_time",
]

PI = 3.14
"""The value of pi used by circle_measurements."""

DENOMINATIONS = (2000, 500, 200, 100, 50, 20, 10, 5, 2, 1)
"""Notes and coins used by note_breakdown, largest first."""

ATM_NOTES = (2000, 500, 200, 100)
"""Notes an Atm pays out, largest first."""

DEFAULT_PIN = 2584
DEFAULT_BALANCE = 20000


class Measurement(NamedTuple):
    """A value together with its unit."""

    value: float
    unit: str


@dataclass(frozen=True)
class Conversion:
    """One menu entry of a converter: source unit, target unit and how to get there."""

    source: str
    target: str
    operation: Callable[[float, float], float]
    factor: float

    def apply(self, value: float) -> Measurement:
        return Measurement(self.operation(value, self.factor), self.target)


_mul = operator.mul
_div = operator.truediv

LENGTH_CONVERSIONS: dict[int, Conversion] = {
    1: Conversion("kilometre", "metre", _mul, 1000),
    2: Conversion("metre", "kilometre", _div, 1000),
    3: Conversion("metre", "centimetre", _mul, 100),
    4: Conversion("centimetre", "metre", _div, 100),
    5: Conversion("kilometre", "centimetre", _mul, 100000),
    6: Conversion("centimetre", "kilometre", _div, 100000),
    7: Conversion("centimetre", "millimetre", _mul, 10),
    8: Conversion("millimetre", "centimetre", _div, 10),
    9: Conversion("foot", "inch", _mul, 12),
    10: Conversion("inch", "foot", _div, 12),
    11: Conversion("inch", "centimetre", _mul, 2.54),
    12: Conversion("centimetre", "inch", _mul, 0.394),
}

PRESSURE_CONVERSIONS: dict[int, Conversion] = {
    1: Conversion("Hectopascal", "Megapascal", _div, 10000),
    2: Conversion("Megapascal", "Hectopascal", _mul, 10000),
    3: Conversion("Millimetre of Hg", "Millibar", _mul, 1.333),
    4: Conversion("Millibar", "Millimetre of Hg", _mul, 0.75),
    5: Conversion("Inch of Hg", "Bar", _mul, 0.034),
    6: Conversion("Bar", "Inch of Hg", _mul, 29.53),
    7: Conversion("Kilopascal", "Bar", _div, 100),
    8: Conversion("Bar", "Kilopascal", _mul, 100),
    9: Conversion("Standard Pressure(atm)", "Pounds/Square Inch", _mul, 14.695),
    10: Conversion("Pounds/Square Inch", "Standard Pressure(atm)", _mul, 0.068),
    11: Conversion("Standard Pressure(atm)", "Bar", _mul, 1.013),
    12: Conversion("Bar", "Standard Pressure(atm)", _mul, 0.987),
}


def _lookup(table: dict[int, Conversion], option: int) -> Conversion:
    try:
        return table[option]
    except KeyError:
        raise ValueError(f"Invalid Option: {option}") from None


def convert_length(option: int, value: float) -> Measurement:
    """Apply length conversion number option (1 to 12) to value."""
    return _lookup(LENGTH_CONVERSIONS, option).apply(value)


def convert_pressure(option: int, value: float) -> Measurement:
    """Apply pressure conversion number option (1 to 12) to value."""
    return _lookup(PRESSURE_CONVERSIONS, option).apply(value)


@dataclass(frozen=True)
class CircleMeasurements:
    """Diameter, circumference and area of a circle."""

    diameter: float
    circumference: float
    area: float


def circle_measurements(radius: float) -> CircleMeasurements:
    """Measure a circle of the given radius, taking pi as 3.14."""
    return CircleMeasurements(
        diameter=2 * radius,
        circumference=2 * PI * radius,
        area=PI * (radius * radius),
    )


def _float_divide(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _float_divide,
}


def calculate(operator: str, a: float, b: float) -> float:
    """Apply one of + - * / to a and b; dividing by zero gives inf or nan."""
    try:
        function = _OPERATORS[operator]
    except KeyError:
        raise ValueError("Error! operator is not correct") from None
    return function(float(a), float(b))


@dataclass(frozen=True)
class ShowroomOffer:
    """The gift and the discounted total for a purchase."""

    gift: str
    total: int


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def showroom_offer(amount: int) -> ShowroomOffer:
    """Return the gift and the amount due after the showroom discount."""
    if 0 < amount <= 2000:
        gift, percent = "Calculator", 5
    elif 2000 < amount <= 5000:
        gift, percent = "School Bag", 10
    elif 5000 < amount <= 10000:
        gift, percent = "Wall Clock", 15
    else:
        gift, percent = "Wrist Watch", 20
    return ShowroomOffer(gift, amount - _truncating_div(amount * percent, 100))


def note_breakdown(
    amount: int, denominations: Iterable[int] = DENOMINATIONS
) -> list[tuple[int, int]]:
    """Split amount greedily into (note, count) pairs, largest note first.

    Whatever is smaller than the last denomination is left out.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    breakdown: list[tuple[int, int]] = []
    rest = amount
    for note in denominations:
        if note <= 0:
            raise ValueError("denominations must be positive")
        count, rest = divmod(rest, note)
        breakdown.append((note, count))
    return breakdown


class InsufficientBalance(ValueError):
    """Raised when a withdrawal exceeds the balance."""


class Atm:
    """A cash machine holding one account protected by a PIN."""

    def __init__(self, pin: int = DEFAULT_PIN, balance: int = DEFAULT_BALANCE) -> None:
        self._pin = pin
        self.balance = balance

    def check_pin(self, pin: int) -> bool:
        """Tell whether pin is the account's PIN."""
        return pin == self._pin

    def withdraw(self, amount: int) -> list[tuple[int, int]]:
        """Take amount from the balance and return the notes paid out."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        if amount > self.balance:
            raise InsufficientBalance("Insufficiant Balance.")
        self.balance -= amount
        return note_breakdown(amount, ATM_NOTES)


_PHASES = {1: "AM", 2: "PM"}


def analog_time(phase: int, hour_hand: int, minute_hand: int) -> str:
    """Read the time from the numbers the clock hands have passed.

    phase is 1 for morning and 2 for evening.
    """
    try:
        suffix = _PHASES[phase]
    except KeyError:
        raise ValueError("Please enter valid numbers..!") from None
    if not (hour_hand < 13 and minute_hand < 13):
        raise ValueError("clock hands must point below 13")
    return f"{hour_hand}:{5 * minute_hand} {suffix}"