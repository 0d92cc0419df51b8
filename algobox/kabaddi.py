"""A kabaddi match against the computer, raid by raid."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "LAST_RAID",
    "PLAYER_RAID_RESULTS",
    "COMPUTER_RAID_RESULTS",
    "Winner",
    "MatchOverError",
    "KabaddiMatch",
    "main",
]

LAST_RAID = 31
"""The match ends after a computer raid once the next raid number passes this."""

_ROARING = " JUST AMAZINGGG..!!, the defence is 'ROARING', 1 point to the defence."
_HELD = " the defender don't let the raider escape and earns one point for his team..!"
_TWO = " the raider get rid of the two defenders and added 2 more points to the total."
_ESCAPE = " the raider escapes easily and got 1 point."
_EMPTY = " a good effort from raider and the defence, 'AN EMPTY RAID' this time."
_EACH = (
    " 'ONE POINT EACH', raider got the 'BONUS' but can not escape the "
    "'SOLID DEFENCE'."
)
_SUPER = (
    " this is a 'SUUUUUPPPEEERRRRRRR RAAAIIIIIID..!!' the RAIDER manages to "
    "escape all the '3 DEFENDERS'; got 3 POINTS."
)
_SUPPORT = (
    " the defence got him, raider was just about to cross the midline but the "
    "support comes at very right time, 1 POINT to the defence."
)

PLAYER_RAID_RESULTS: tuple[tuple[str, int, int], ...] = (
    (_ESCAPE, 1, 0),
    (_HELD, 0, 1),
    (_TWO, 2, 0),
    (_ROARING, 0, 1),
    (_EMPTY, 0, 0),
    (_EACH, 1, 1),
    (_SUPER, 3, 0),
    (_SUPPORT, 0, 1),
)
"""Commentary, player points and computer points for each result of a player raid."""

COMPUTER_RAID_RESULTS: tuple[tuple[str, int, int], ...] = (
    (_ROARING, 1, 0),
    (_TWO, 0, 2),
    (_HELD, 1, 0),
    (_ESCAPE, 0, 1),
    (_SUPER, 0, 3),
    (_SUPPORT, 1, 0),
    (_EACH, 1, 1),
)
"""Commentary, player points and computer points for each result of a computer raid."""

_PLAYER_SKILLS = (
    "and tries for 'TURNING HAND TOUCH', and ",
    "and attempts a 'RUNNING HAND TOUCH', and ",
    "and goes for the 'TOE TOUCH', and ",
    "and here he tries the 'SCORPION KICK', and  ",
    "and surprisingly attempts 'RUNNING KICK' in the middle of the COURT, and ",
)

_COMPUTER_SKILLS = (
    " It's time for computer to raid and computer tries for 'TURNING HAND TOUCH', and ",
    " It's time for computer to raid and computer attempts a 'RUNNING HAND TOUCH', and ",
    " It's time for computer to raid and computer goes for the 'TOE TOUCH', and ",
    " It's time for computer to raid and computer here he tries the 'SCORPION KICK', and  ",
)

_REACTIONS = (
    " the defender goes for 'DOUBLE THIGH HOLD'. ",
    " defender tries 'ANKLE HOLD' here. ",
    " the defenders came in with a 'CHAIN' to block the raider, ",
    " the defence goes for a 'DASH' ",
    " here defender tries the 'BACK HOLD' ",
    " defender tries to trap the raider in 'THIGH HOLD' ",
)

_COURT_LINE = (
    "|           |       |                       |                       |       |           |"
)


class Winner(str, Enum):
    """Who won a match."""

    PLAYER = "player"
    COMPUTER = "computer"
    TIE = "tie"


class MatchOverError(RuntimeError):
    """Raised when a raid is made after the match has ended."""


@dataclass
class KabaddiMatch:
    """Scores and raid count of one match."""

    player_score: int = 0
    computer_score: int = 0
    raid_number: int = 1
    is_over: bool = False

    def _raid(
        self, table: tuple[tuple[str, int, int], ...], result: int
    ) -> str:
        if not 0 <= result < len(table):
            raise ValueError(f"raid result must be between 0 and {len(table) - 1}")
        if self.is_over:
            raise MatchOverError("the match is over")
        text, player_points, computer_points = table[result]
        self.player_score += player_points
        self.computer_score += computer_points
        self.raid_number += 1
        return text

    def player_raid(self, result: int) -> str:
        """Score a raid by the player (result 0 to 7) and return its commentary."""
        return self._raid(PLAYER_RAID_RESULTS, result)

    def computer_raid(self, result: int) -> str:
        """Score a raid by the computer (result 0 to 6) and return its commentary.

        The match ends here once the next raid number passes LAST_RAID.
        """
        text = self._raid(COMPUTER_RAID_RESULTS, result)
        if self.raid_number > LAST_RAID:
            self.is_over = True
        return text

    def winner(self) -> Winner:
        """Return who leads on points."""
        if self.player_score > self.computer_score:
            return Winner.PLAYER
        if self.computer_score > self.player_score:
            return Winner.COMPUTER
        return Winner.TIE

    def scoreline(self) -> str:
        return f"\ncomputer {self.computer_score} - {self.player_score} you"


def _read_int(prompt: str = "") -> int:
    while True:
        text = input(prompt).strip()
        try:
            return int(text.split()[0]) if text else int(text)
        except ValueError:
            continue


def _read_name(prompt: str) -> str:
    words = input(prompt).split()
    return words[0] if words else ""


def _header(match: KabaddiMatch) -> None:
    print(match.scoreline())
    print(f"\nIt is raid number {match.raid_number} ")


def _player_turn(match: KabaddiMatch, names: list[str], rng: random.Random) -> None:
    _header(match)
    raider = _read_int("Select player's number to send him as raider.\n")
    text = ""
    if 1 <= raider <= len(names):
        text = f"\n{names[raider - 1]} is going for the raid..! "
    text += _PLAYER_SKILLS[rng.randrange(5)]
    reaction = rng.randrange(6)
    if reaction < 5:
        text += _REACTIONS[reaction]
    text += match.player_raid(rng.randrange(len(PLAYER_RAID_RESULTS)))
    print(text)


def _computer_turn(match: KabaddiMatch, rng: random.Random) -> None:
    _header(match)
    text = _COMPUTER_SKILLS[rng.randrange(4)] + _REACTIONS[rng.randrange(6)]
    text += match.computer_raid(rng.randrange(len(COMPUTER_RAID_RESULTS)))
    print(text)


def _play(rng: random.Random) -> int:
    print("\n\n\t\t\t\tWELCOME TO THE WORLD OF KABADDI \n")
    print("_" * 89)
    print("\n".join([_COURT_LINE] * 25))
    print("-" * 89)
    played = won = lost = 0
    while True:
        print("\nEnter your Playing-7")
        names = [_read_name(f"Player-{number}: ") for number in range(1, 8)]
        toss = _read_int("TIME FOR TOSS..!!\n\nPRESS 0 FOR 'HEADS' & 1 FOR 'TAILS'\n")
        computer_first = False
        if toss == rng.randrange(2):
            choice = _read_int("PRESS 1 FOR 'COURT' & 0 FOR 'RAID'\n")
            if choice == 1:
                print("COMPUTER will RAID first.!")
                computer_first = True
            else:
                print("You will RAID first.!")
        else:
            print("You will RAID first.!")

        match = KabaddiMatch()
        if computer_first:
            _computer_turn(match, rng)
        while not match.is_over:
            _player_turn(match, names, rng)
            _computer_turn(match, rng)

        print("_" * 90)
        played += 1
        outcome = match.winner()
        if outcome is Winner.PLAYER:
            won += 1
            print("\n\n\t\t\t     'CONGRATULATIONS..!!' YOU WON THE MATCH.")
        elif outcome is Winner.COMPUTER:
            lost += 1
            print("\n\n\t\t\t     'WELL TRIED..!' YOU LOST THE MATCH.")
        else:
            print(
                "\n\n\t\t\t     'THIS MATCH ENDS ON A TIE..! CONGRATULATIONS TO "
                "BOTH THE TEAMS.'"
            )
        print(
            f"\t\t\t\t\tTHE FINAL SCORE\n\t\t\t\t     COMPUTER {match.computer_score}"
            f" - {match.player_score} YOU\n\t\t\t\tPLAYED {played} \tWON {won}"
            f" \tLOST {lost}\n"
        )
        print("_" * 90)
        again = _read_int("\n\t\t\tPress\t\t 0 to QUIT\t\t1 to PLAY AGAIN\n")
        if again != 1:
            print("\n\t\t\tSEE YOU AGAIN.... KABADDI LOVER..!\n\n")
            return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Play kabaddi matches on standard input until the user quits."""
    parser = argparse.ArgumentParser(description="Play kabaddi against the computer.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    args = parser.parse_args(argv)
    try:
        return _play(random.Random(args.seed))
    except EOFError:
        return 0