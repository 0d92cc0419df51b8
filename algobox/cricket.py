"""A five-over, five-wicket cricket match against the computer."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "MAX_BALLS",
    "MAX_WICKETS",
    "OUTCOMES",
    "InningsOverError",
    "CricketInnings",
    "describe_ball",
    "ground_circle",
    "main",
]

MAX_BALLS = 49
"""Balls bowled in an innings at most."""

MAX_WICKETS = 5
"""Wickets that end an innings."""

OUTCOMES = 8
"""Ball outcomes are numbered 0 to OUTCOMES - 1; 6 and above are wickets."""

_RUNS = {0: 0, 1: 1, 2: 2, 3: 3, 4: 4, 5: 6}
_SIX = 5
_SIX_EXTRA = 30

_COMMENTARY = {
    0: " Good defence , 0 Runs.",
    1: " well played for a single, 1 Run.",
    2: " A double here, 2 Runs.",
    3: " Good running between the wickets, 3 Runs.",
    4: "  It races to the BOUNDARY, 4 Runs.",
}
_OUT = "THAT'S OUT..!!!, Bowler strikes."
_RULE = "_" * 90


class InningsOverError(RuntimeError):
    """Raised when a ball is played after the innings has ended."""


def _check_outcome(outcome: int) -> None:
    if not 0 <= outcome < OUTCOMES:
        raise ValueError(f"ball outcome must be between 0 and {OUTCOMES - 1}, got {outcome}")


@dataclass
class CricketInnings:
    """The score of one side's innings."""

    runs: int = 0
    wickets: int = 0
    balls: int = 0

    @property
    def is_over(self) -> bool:
        """True once all wickets have fallen or every ball has been bowled."""
        return self.wickets >= MAX_WICKETS or self.balls >= MAX_BALLS

    def play(self, outcome: int) -> int:
        """Record one ball and return the runs it scored.

        Outcomes 0 to 4 score that many runs, 5 is a six and anything
        higher is a wicket.
        """
        _check_outcome(outcome)
        if self.is_over:
            raise InningsOverError("the innings is over")
        self.balls += 1
        if outcome in _RUNS:
            scored = _RUNS[outcome]
            self.runs += scored
            return scored
        self.wickets += 1
        return 0

    def summary(self) -> str:
        return (
            f"{_RULE}\n\n\t\t\t\tINNINGS OVER..!\n"
            f"\t\t\t\tTOTAL : {self.runs}/{self.wickets} ({self.balls} balls)\n\n{_RULE}"
        )


def describe_ball(
    outcome: int, ground_size: int, rng: random.Random | None = None
) -> str:
    """Return the commentary for a ball; a six travels ground_size plus up to 29 metres."""
    _check_outcome(outcome)
    if outcome == _SIX:
        distance = ground_size + (rng or random).randrange(_SIX_EXTRA)
        return f" It goes for MAXIMUM, a {distance} Meters SIX.. 6 Runs."
    return _COMMENTARY.get(outcome, _OUT)


def ground_circle(radius: int) -> str:
    """Draw a filled circle of asterisks, each line indented by three tabs."""
    lines = []
    for x in range(-radius, radius + 1):
        cells = "".join(
            "*" if x * x + y * y - radius * radius < 1 else " "
            for y in range(-radius, radius + 1)
        )
        lines.append("\t\t\t" + cells)
    return "\n".join(lines)


def _read_int(prompt: str) -> int:
    while True:
        text = input(prompt).strip()
        try:
            return int(text.split()[0]) if text else int(text)
        except ValueError:
            continue


def _read_name(prompt: str) -> str:
    words = input(prompt).split()
    return words[0] if words else ""


def _play_innings(
    innings: CricketInnings, prompt: str, ground: int, rng: random.Random
) -> None:
    while not innings.is_over:
        _read_int(prompt)
        outcome = rng.randrange(OUTCOMES)
        print(describe_ball(outcome, ground, rng))
        innings.play(outcome)
    print(innings.summary())


def _play_match(rng: random.Random) -> int:
    print("\n\t\t\t\tWELCOME TO THE WORLD OF C-CRICKET\n")
    print("Enter your 'PLAYING-5'")
    names = [_read_name(f"Player-{number}: ") for number in range(1, 6)]
    print("\nYour Team \n")
    for name in names:
        print(f"{name} ")
    ground = _read_int("Enter the size of ground :")
    toss = _read_int(
        "  It's time for the 'TOSS'\n Press 0 for 'HEADS' and 1 for 'TAILS'\n"
    )
    if toss == rng.randrange(2):
        option = _read_int("Press 0 to BAT and any other key to Bowl.\n")
        user_bats_first = option == 0
        if user_bats_first:
            print("You won the toss and opted to BAT first.")
        else:
            print("You won the toss and opted to BOWL first.")
    else:
        user_bats_first = False
        print("Computer will BAT first.")
    print(ground_circle(int(ground / 5)))
    print("   LET'S BEGIN ")

    computer, user = CricketInnings(), CricketInnings()

    def user_bats() -> None:
        print(f"\n{names[0]} and {names[1]} will open the innings.")
        print(
            "\nPress 0 for 'DEFENCE'    1 for 'DRIVE'   2 for 'LOFTED SHOT' OR "
            "any other NUMBER for any different SHOT"
        )
        _play_innings(user, "Select your shot.\n", ground, rng)

    def computer_bats() -> None:
        print(f"\n{names[4]} will open the attack.")
        print(
            "\nPress 0 for 'FULL TOSS' Press 1 for 'FULL LENGHT'   Press 2 for "
            "'SHORT BALL'    Press 3 for 'YORKER' OR any other NUMBER for "
            "something different"
        )
        _play_innings(computer, "Select ball type.\n", ground, rng)

    order = (user_bats, computer_bats) if user_bats_first else (computer_bats, user_bats)
    for innings in order:
        innings()

    if computer.runs > user.runs:
        print("\n\t\t\tCOMPUTER won the match. WELL TRIED..!\n")
    else:
        print("\n\t\t\tYOU won the match. CONGRATULATIONS..!!\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Play one match on standard input."""
    parser = argparse.ArgumentParser(description="Play a short cricket match.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    args = parser.parse_args(argv)
    try:
        return _play_match(random.Random(args.seed))
    except EOFError:
        return 0