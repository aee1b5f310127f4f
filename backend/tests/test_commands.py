import pytest

from interview_coach.interview.commands import Command, normalize, parse_command


def test_normalize_lowercases_trims_and_unifies_quotes():
    assert normalize("  Let’s GO  ") == "let's go"
    assert normalize(None) == ""
    assert normalize("") == ""


@pytest.mark.parametrize(
    "text,expected",
    [
        ("evaluate", Command.EVALUATE),
        ("  Evaluation ", Command.EVALUATE),
        ("NEXT", Command.NEXT),
        ("give me an example", Command.EXAMPLE),
        ("Example", Command.EXAMPLE),
        ("practice", Command.PRACTICE),
        ("explain more", Command.EXPLAIN),
        ("Explain the STAR method again", Command.EXPLAIN),
        ("start mock", Command.START_MOCK),
        ("start interview", Command.START_MOCK),
        ("start", Command.START_MOCK),
        ("stop", Command.PAUSE),
        ("pause", Command.PAUSE),
        ("continue", Command.CONTINUE),
        ("next question please", Command.FREEFORM),
        ("I would like to evaluate my options", Command.FREEFORM),
        ("", Command.FREEFORM),
    ],
)
def test_parse_command(text, expected):
    assert parse_command(text) is expected
