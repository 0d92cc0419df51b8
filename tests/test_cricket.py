import io
import random

import pytest

from algobox.cricket import (
    MAX_BALLS,
    MAX_WICKETS,
    CricketInnings,
    InningsOverError,
    describe_ball,
    ground_circle,
    main,
)


def test_runs_per_outcome():
    innings = CricketInnings()
    scored = [innings.play(outcome) for outcome in range(6)]
    assert scored == [0, 1, 2, 3, 4, 6]
    assert innings.runs == 16
    assert innings.wickets == 0
    assert innings.balls == 6


@pytest.mark.parametrize("outcome", [6, 7])
def test_wicket_outcomes(outcome):
    innings = CricketInnings()
    assert innings.play(outcome) == 0
    assert innings.wickets == 1
    assert innings.runs == 0


def test_innings_ends_after_all_wickets():
    innings = CricketInnings()
    for _ in range(MAX_WICKETS):
        innings.play(7)
    assert innings.is_over
    with pytest.raises(InningsOverError):
        innings.play(1)


def test_innings_ends_after_all_balls():
    innings = CricketInnings()
    for _ in range(MAX_BALLS):
        assert not innings.is_over
        innings.play(1)
    assert innings.is_over
    assert innings.runs == MAX_BALLS


@pytest.mark.parametrize("outcome", [-1, 8])
def test_invalid_outcome(outcome):
    with pytest.raises(ValueError):
        CricketInnings().play(outcome)
    with pytest.raises(ValueError):
        describe_ball(outcome, 10)


def test_describe_ball_texts():
    assert describe_ball(0, 10) == " Good defence , 0 Runs."
    assert describe_ball(4, 10) == "  It races to the BOUNDARY, 4 Runs."
    assert describe_ball(6, 10) == "THAT'S OUT..!!!, Bowler strikes."


def test_six_distance_within_range():
    rng = random.Random(3)
    for _ in range(50):
        text = describe_ball(5, 70, rng)
        distance = int(text.split("a ")[1].split(" Meters")[0])
        assert 70 <= distance < 100
        assert text.endswith("6 Runs.")


def test_ground_circle_small():
    assert ground_circle(0) == "\t\t\t*"
    assert ground_circle(1) == "\t\t\t * \n\t\t\t***\n\t\t\t * "


def test_ground_circle_symmetric():
    lines = ground_circle(4).split("\n")
    assert len(lines) == 9
    assert lines == lines[::-1]
    assert all(len(line) == 3 + 9 for line in lines)


def test_main_plays_full_match(monkeypatch, capsys):
    lines = ["a", "b", "c", "d", "e", "50", "0", "0"] + ["1"] * 200
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(lines) + "\n"))
    assert main(["--seed", "7"]) == 0
    out = capsys.readouterr().out
    assert out.count("INNINGS OVER..!") == 2
    assert "won the match" in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a\nb\n"))
    assert main([]) == 0
    assert "won the match" not in capsys.readouterr().out