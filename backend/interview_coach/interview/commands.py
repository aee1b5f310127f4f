from enum import Enum


class Command(str, Enum):
    EVALUATE = "evaluate"
    NEXT = "next"
    EXAMPLE = "example"
    PRACTICE = "practice"
    EXPLAIN = "explain"
    START_MOCK = "start_mock"
    PAUSE = "pause"
    CONTINUE = "continue"
    FREEFORM = "freeform"


def normalize(text: str | None) -> str:
    """
    Lowercase, trim and unify the right single quote for command matching.
    Never applied to what gets stored in history.
    """
    return str(text or "").lower().replace("’", "'").strip()


# Checked top to bottom; first match wins.
_EXACT_COMMANDS: list[tuple[Command, set[str]]] = [
    (Command.EVALUATE, {"evaluate", "evaluation"}),
    (Command.NEXT, {"next"}),
    (Command.EXAMPLE, {"give me an example", "example"}),
    (Command.PRACTICE, {"practice"}),
    (Command.EXPLAIN, {"explain more"}),
    (Command.START_MOCK, {"start mock", "start interview", "start"}),
    (Command.PAUSE, {"stop", "pause"}),
    (Command.CONTINUE, {"continue"}),
]


def parse_command(text: str) -> Command:
    cleaned = normalize(text)

    for command, phrases in _EXACT_COMMANDS:
        if cleaned in phrases:
            return command
        # "explain ..." of any kind asks for the lesson again
        if command is Command.EXPLAIN and cleaned.startswith("explain"):
            return command

    return Command.FREEFORM
