import logging
from dataclasses import dataclass

from interview_coach.core.logger import log_event
from interview_coach.interview.scorer import HeuristicScores, round_half_up, score_answers
from interview_coach.interview.session import Session
from interview_coach.prompts import build_evaluation_messages
from interview_coach.services.llm_client import LLMClient, LLMError
from interview_coach.system_metrics import increment_metric

logger = logging.getLogger("interview_coach.interview.evaluator")

RECENT_ANSWER_LIMIT = 6
MAX_IMPROVEMENTS = 4

WEIGHTS = {
    "communication": 0.20,
    "technical": 0.25,
    "problemSolving": 0.20,
    "structure": 0.15,
    "confidence": 0.10,
    "behavioral": 0.10,
}

# (dimension, threshold, tip) in priority order
IMPROVEMENT_RULES = (
    ("technical", 60, "Add specific technical details: mention languages, frameworks, or projects."),
    ("structure", 60, "Structure answers using STAR (Situation, Task, Action, Result)."),
    ("communication", 65, "Work on concise sentences and clear summaries."),
    ("confidence", 65, "Sound more decisive: avoid 'maybe' or 'I guess'."),
    ("problemSolving", 65, "When answering technical questions, explain your step-by-step reasoning."),
    ("behavioral", 60, "Add teamwork examples and measurable impact."),
)

NARRATIVE_LLM = "llm"
NARRATIVE_TEMPLATE = "template"


@dataclass(frozen=True)
class Narrative:
    text: str
    source: str


@dataclass
class Evaluation:
    overall: int
    breakdown: dict[str, int]
    improvements: list[str]
    narrative: Narrative

    def to_payload(self) -> dict:
        return {
            "overall": self.overall,
            "breakdown": dict(self.breakdown),
            "improvements": list(self.improvements),
            "llmFeedback": self.narrative.text,
        }


def overall_score(breakdown: dict[str, int]) -> int:
    total = (
        breakdown["communication"] * WEIGHTS["communication"]
        + breakdown["technical"] * WEIGHTS["technical"]
        + breakdown["problemSolving"] * WEIGHTS["problemSolving"]
        + breakdown["structure"] * WEIGHTS["structure"]
        + breakdown["confidence"] * WEIGHTS["confidence"]
        + breakdown["behavioral"] * WEIGHTS["behavioral"]
    )
    return round_half_up(total)


def improvement_tips(breakdown: dict[str, int]) -> list[str]:
    tips = [tip for key, threshold, tip in IMPROVEMENT_RULES if breakdown[key] < threshold]
    return tips[:MAX_IMPROVEMENTS]


def template_narrative(overall: int, improvements: list[str]) -> Narrative:
    focus = " ; ".join(improvements[:MAX_IMPROVEMENTS])
    return Narrative(
        text=f"Summary: Your overall score is {overall}/100.\nFocus: {focus}",
        source=NARRATIVE_TEMPLATE,
    )


class EvaluationComposer:
    """
    Turns a session's recent answers into an Evaluation.
    Heuristic scores are authoritative; the LLM only writes the narrative.
    """

    def __init__(self, llm_client: LLMClient):
        self.llm_client = llm_client

    async def llm_narrative(self, scores: HeuristicScores, overall: int, answers: list[str], role: str) -> Narrative:
        messages = build_evaluation_messages(scores.breakdown(), overall, answers, role)
        text = await self.llm_client.complete(messages)
        text = str(text).strip()
        if not text:
            raise LLMError("Empty evaluation narrative")
        return Narrative(text=text, source=NARRATIVE_LLM)

    async def evaluate(self, session: Session) -> Evaluation:
        answers = session.recent_user_answers(RECENT_ANSWER_LIMIT)
        scores = score_answers(answers)
        breakdown = scores.breakdown()
        overall = overall_score(breakdown)
        improvements = improvement_tips(breakdown)

        try:
            narrative = await self.llm_narrative(scores, overall, answers, session.role)
        except LLMError as exc:
            logger.warning("evaluation narrative fallback | session=%s err=%s", session.session_id, exc)
            increment_metric("evaluation_fallbacks_total")
            narrative = template_narrative(overall, improvements)

        increment_metric("evaluations_total")
        log_event(
            "evaluation",
            "evaluation_composed",
            session,
            answers=len(answers),
            overall=overall,
            narrative_source=narrative.source,
            feedback=narrative.text,
        )
        return Evaluation(
            overall=overall,
            breakdown=breakdown,
            improvements=improvements,
            narrative=narrative,
        )
