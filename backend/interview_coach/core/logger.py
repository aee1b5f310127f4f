import json
import logging
from enum import Enum
from typing import Any

logger = logging.getLogger("interview_coach.events")

# Candidate and model text is logged by size only.
TEXT_FIELDS = frozenset({"message", "reply", "answer", "feedback", "prompt"})


def _field(key: str, value: Any) -> Any:
	if key in TEXT_FIELDS:
		return {"chars": len(str(value or ""))}
	if isinstance(value, Enum):
		return value.value
	if isinstance(value, (str, int, float, bool)) or value is None:
		return value
	if isinstance(value, (list, tuple)):
		return [_field(key, item) for item in value]
	return str(value)


def session_fields(session: Any) -> dict:
	"""Position of a conversation: who it is for and where it stands."""
	return {
		"session_id": session.session_id,
		"role": session.role,
		"mode": session.mode,
		"training_step": session.training_step,
		"mock_step": session.mock_step,
		"turns": len(session.history),
	}


def log_event(component: str, event: str, session: Any, **fields) -> None:
	payload = {"component": component, "event": event, **session_fields(session)}
	payload.update({key: _field(key, value) for key, value in fields.items()})
	logger.info(json.dumps(payload, ensure_ascii=False, default=str))
