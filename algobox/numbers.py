"""Small number-theory and arithmetic routines."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from enum import Enum
from itertools import islice
from typing import TypeVar

T = TypeVar("T")

__all__ = [
    "NumberKind",
    "MAX_ENTRIES",
    "factorial",
    "fibonacci",
    "fibonacci_series",
    "armstrong_numbers",
    "count_set_bits",
    "is_power_of_two",
    "classify_number",
    "integer_to_roman",
    "binary_to_decimal",
    "decimal_to_binary",
    "fast_inverse_sqrt",
    "is_palindrome_number",
    "digit_sum",
    "series_sum",
    "smallest_and_biggest",
    "count_until_multiple_of_ten",
    "parity",
    "compare_pair",
]

MAX_ENTRIES = 10
"""How many values count_until_multiple_of_ten looks at, at most."""

_ROMAN = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_PARITY_NAMES = ("Even", "Odd")


class NumberKind(str, Enum):
    """Whether an integer is prime, composite or neither."""

    NEITHER = "neither"
    PRIME = "prime"
    COMPOSITE = "composite"


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(count: int) -> list[int]:
    """Return the first count Fibonacci numbers, starting 0, 1."""
    terms: list[int] = []
    first, second = 0, 1
    for _ in range(count):
        terms.append(first)
        first, second = second, first + second
    return terms


def fibonacci_series(count: int) -> list[int]:
    """Return the first count Fibonacci numbers, starting 1, 1."""
    terms: list[int] = []
    x, y = 0, 1
    for _ in range(count):
        terms.append(y)
        x, y = y, x + y
    return terms


def _is_armstrong(n: int) -> bool:
    digits = str(n)
    return sum(int(d) ** len(digits) for d in digits) == n


def armstrong_numbers(count: int) -> list[int]:
    """Return the first count positive Armstrong (narcissistic) numbers."""
    found: list[int] = []
    candidate = 1
    while len(found) < count:
        if _is_armstrong(candidate):
            found.append(candidate)
        candidate += 1
    return found


def count_set_bits(n: int) -> int:
    """Count the one bits of n; negatives are read as 32-bit two's complement."""
    if n < 0:
        n &= 0xFFFFFFFF
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def is_power_of_two(n: int) -> bool:
    """Tell whether n is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def classify_number(n: int) -> NumberKind:
    """Classify n as prime, composite, or neither (for n below 2)."""
    if n < 2:
        return NumberKind.NEITHER
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return NumberKind.COMPOSITE
        divisor += 1
    return NumberKind.PRIME


def integer_to_roman(n: int) -> str:
    """Write n in Roman numerals greedily; thousands repeat without limit."""
    parts: list[str] = []
    for value, numeral in _ROMAN:
        if n >= value:
            times, n = divmod(n, value)
            parts.append(numeral * times)
    return "".join(parts)


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of n as a binary number."""
    if n < 0:
        raise ValueError("binary input must not be negative")
    digits = str(n)
    if set(digits) - {"0", "1"}:
        raise ValueError(f"{n} is not written in binary digits")
    return sum(1 << i for i, d in enumerate(reversed(digits)) if d == "1")


def decimal_to_binary(n: int) -> int:
    """Return the integer whose decimal digits are the binary digits of n."""
    if n < 0:
        raise ValueError("decimal input must not be negative")
    return int(format(n, "b"))


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def fast_inverse_sqrt(number: float) -> float:
    """Approximate 1/sqrt(number) with the bit-level single-precision trick."""
    x = _to_float32(float(number))
    x2 = _to_float32(x * 0.5)
    bits = struct.unpack("<I", struct.pack("<f", x))[0]
    bits = (0x5F3759DF - (bits >> 1)) & 0xFFFFFFFF
    y = struct.unpack("<f", struct.pack("<I", bits))[0]
    return _to_float32(y * (1.5 - x2 * y * y))


def is_palindrome_number(n: int) -> bool:
    """Tell whether n equals its own digit reversal; negatives never do."""
    reversed_value = 0
    rest = n
    while rest > 0:
        rest, digit = divmod(rest, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value == n


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of n, carrying the sign of n."""
    total = sum(int(d) for d in str(abs(n)))
    return -total if n < 0 else total


def series_sum(terms: int = 10) -> float:
    """Return the sum of i / i! for i from 1 to terms."""
    total = 0.0
    fact = 1.0
    for i in range(1, terms + 1):
        fact *= i
        total += i / fact
    return total


def smallest_and_biggest(values: Iterable[T]) -> tuple[T, T]:
    """Return the smallest and the biggest of values."""
    items = list(values)
    if not items:
        raise ValueError("at least one value is needed")
    return min(items), max(items)


def count_until_multiple_of_ten(values: Iterable[int]) -> int:
    """Count the values before the first multiple of ten.

    At most MAX_ENTRIES values are read.
    """
    count = 0
    for value in islice(values, MAX_ENTRIES):
        if value % 10 == 0:
            break
        count += 1
    return count


def parity(n: int) -> str:
    """Return "Odd" or "Even"."""
    _, remainder = divmod(n, 2)
    return _PARITY_NAMES[remainder]


def compare_pair(x: int, y: int) -> str:
    """Return "First" if x is smaller, "Second" if y is smaller, else "Any"."""
    if x < y:
        return "First"
    if x > y:
        return "Second"
    return "Any"