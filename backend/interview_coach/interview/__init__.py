from interview_coach.interview.engine import ConversationEngine, ConversationReply
from interview_coach.interview.evaluator import Evaluation, EvaluationComposer, Narrative
from interview_coach.interview.session import Session, SessionStore

__all__ = [
    "ConversationEngine",
    "ConversationReply",
    "Evaluation",
    "EvaluationComposer",
    "Narrative",
    "Session",
    "SessionStore",
]
