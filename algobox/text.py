"""Small text utilities: reversal, vowels, triangles, brackets, keyword files."""

from __future__ import annotations

import os
from enum import Enum

__all__ = [
    "KEYWORDS",
    "TriangleKind",
    "reverse_string",
    "is_vowel",
    "classify_triangle",
    "parentheses_match",
    "count_keyword_lines",
]

KEYWORDS = (
    "extern", "return", "union", "const", "float", "short",
    "auto", "double", "int", "struct", "break", "else", "long",
    "goto", "sizeof", "volatile", "do", "if", "static", "while",
    "unsigned", "continue", "for", "signed", "void", "default",
    "switch", "case", "enum", "register", "typedef", "char",
)
"""The 32 keywords written by count_keyword_lines, one per line."""

_PAIRS = {")": "(", "]": "[", "}": "{"}


class TriangleKind(str, Enum):
    """Kinds of triangle by how many sides are equal."""

    EQUILATERAL = "equilateral"
    ISOSCELES = "isosceles"
    SCALENE = "scalene"


def reverse_string(text: str) -> str:
    """Return text with its characters in reverse order."""
    return text[::-1]


def is_vowel(letter: str) -> bool:
    """Tell whether the first character of letter is a lower-case vowel."""
    if not letter:
        raise ValueError("a letter is needed")
    return letter[0] in "aeiou"


def classify_triangle(a: int, b: int, c: int) -> TriangleKind:
    """Classify a triangle by its side lengths."""
    if a == b == c:
        return TriangleKind.EQUILATERAL
    if a == b or b == c or c == a:
        return TriangleKind.ISOSCELES
    return TriangleKind.SCALENE


def parentheses_match(expression: str) -> bool:
    """Tell whether the (), [] and {} brackets in expression are balanced."""
    stack: list[str] = []
    for char in expression:
        if char in "([{":
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack


def count_keyword_lines(path: str | os.PathLike[str]) -> int:
    """Write KEYWORDS to path, one per line, and count the lines read back."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{word}\n" for word in KEYWORDS)
    with open(path, encoding="utf-8") as handle:
        return handle.read().count("\n")