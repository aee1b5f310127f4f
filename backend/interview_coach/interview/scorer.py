import math
import re
from dataclasses import dataclass


TECH_KEYWORDS = (
    "java", "python", "c++", "c#", "javascript", "node", "react", "spring", "sql",
    "database", "algorithm", "complexity", "big o", "docker", "kubernetes", "aws", "gcp", "azure",
)
STAR_WORDS = ("situation", "task", "action", "result", "resulted", "led", "improved", "reduced", "increased")
HEDGE_PHRASES = ("maybe", "i guess", "sort of", "perhaps", "might", "not sure", "little experience")
TEAM_WORDS = ("team", "led", "collaborated", "we", "together", "mentored", "stakeholders")
PROBLEM_WORDS = ("debug", "investigate", "root cause", "diagnose", "reproduce", "analysis", "optimi")

_SENTENCE_END = re.compile(r"[.?!]")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _hits(text: str, vocabulary: tuple[str, ...]) -> int:
    return sum(1 for term in vocabulary if term in text)


@dataclass(frozen=True)
class HeuristicScores:
    communication: int
    technical: int
    structure: int
    confidence: int
    behavioral: int
    problem_solving: int
    length_score: int

    def breakdown(self) -> dict[str, int]:
        return {
            "communication": self.communication,
            "technical": self.technical,
            "problemSolving": self.problem_solving,
            "structure": self.structure,
            "confidence": self.confidence,
            "behavioral": self.behavioral,
        }


def _communication_score(joined: str) -> int:
    if not joined:
        return 60

    sentence_count = len(_SENTENCE_END.findall(joined)) or 1
    avg_sentence_len = len(joined) / sentence_count
    if avg_sentence_len < 40:
        return 80
    if avg_sentence_len < 80:
        return 70
    return 55


def score_answers(answers: list[str]) -> HeuristicScores:
    """
    Rule-based scoring of recent free-text answers.

    Every vocabulary entry counts at most once, by substring presence in the
    joined lowercased text. Pure: the same answers always give the same scores.
    """
    items = [str(item or "") for item in list(answers or [])]
    joined = " ".join(items).lower()

    avg_len = (sum(len(item) for item in items) / len(items)) if items else 0.0
    length_score = _clamp(round_half_up((avg_len / 200) * 100), 20, 90)

    technical = min(100, round_half_up((_hits(joined, TECH_KEYWORDS) / 5) * 60) + 30)
    structure = min(100, round_half_up((_hits(joined, STAR_WORDS) / 4) * 70) + 20)
    confidence = max(40, 80 - 12 * _hits(joined, HEDGE_PHRASES))
    behavioral = min(100, 40 + 15 * _hits(joined, TEAM_WORDS))
    problem_solving = min(100, 50 + 15 * _hits(joined, PROBLEM_WORDS))

    return HeuristicScores(
        communication=_communication_score(joined),
        technical=technical,
        structure=structure,
        confidence=confidence,
        behavioral=behavioral,
        problem_solving=problem_solving,
        length_score=length_score,
    )
