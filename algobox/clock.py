"""A terminal clock that draws the current time in large block digits."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from datetime import datetime

__all__ = ["GLYPHS", "GLYPH_ROWS", "render_time", "format_timestamp", "main"]

GLYPHS = (
    " ### #   ##   ##   # ### ",
    "  #   ##    #    #    #  ",
    "#####    #######    #####",
    "#####    #  ###    ######",
    "#    # #  #####  #    #  ",
    "######    #####    ######",
    "######    ######   ######",
    "#####   #    #   #    #  ",
    "######   #######   ######",
    "######   ######    ######",
    "       #         #       ",
)
"""Digits 0 to 9 and, last, the colon; each is five rows of five cells."""

GLYPH_ROWS = 5
_WIDTH = 5
_COLON = 10
_CLEAR = "\033[2J\033[H"


def _row(glyph: int, row: int) -> str:
    return GLYPHS[glyph][row * _WIDTH:(row + 1) * _WIDTH]


def render_time(hour: int, minute: int, second: int) -> str:
    """Draw hh:mm:ss as five lines of block characters."""
    for name, value, limit in (("hour", hour, 24), ("minute", minute, 60), ("second", second, 62)):
        if not 0 <= value < limit:
            raise ValueError(f"{name} {value} is out of range")
    h1, h2 = divmod(hour, 10)
    m1, m2 = divmod(minute, 10)
    s1, s2 = divmod(second, 10)
    lines = []
    for row in range(GLYPH_ROWS):
        lines.append(
            f"{_row(h1, row)} {_row(h2, row)}{_row(_COLON, row)}"
            f"{_row(m1, row)} {_row(m2, row)}{_row(_COLON, row)}"
            f"{_row(s1, row)} {_row(s2, row)}"
        )
    return "\n".join(lines)


def format_timestamp(moment: datetime | None = None) -> str:
    """Format a moment as [day month year hour:minute:second] without padding."""
    moment = moment or datetime.now()
    return (
        f"[{moment.day} {moment.month} {moment.year} "
        f"{moment.hour}:{moment.minute}:{moment.second}]"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Redraw the local time once a second until interrupted."""
    parser = argparse.ArgumentParser(description="Show the time in large digits.")
    parser.add_argument(
        "--count", type=int, default=None, help="stop after this many frames"
    )
    args = parser.parse_args(argv)
    frames = 0
    try:
        while args.count is None or frames < args.count:
            now = datetime.now()
            sys.stdout.write(_CLEAR)
            sys.stdout.write(render_time(now.hour, now.minute, now.second) + "\n")
            sys.stdout.flush()
            frames += 1
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    return 0