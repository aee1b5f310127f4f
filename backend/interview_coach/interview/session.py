from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from threading import Lock

from interview_coach.prompts import coach_system_message

MODE_TRAINING = "training"
MODE_MOCK = "mock"


@dataclass
class Session:
    session_id: str
    role: str
    mode: str
    requested_mode: str
    history: list[dict] = field(default_factory=list)
    training_step: int = 0
    mock_step: int = 0
    created_at: float = field(default_factory=time.time)
    updated_at: float = field(default_factory=time.time)

    def append(self, role: str, content: str) -> None:
        self.history.append({"role": role, "content": content})

    def recent(self, limit: int) -> list[dict]:
        return [dict(item) for item in self.history[-limit:]]

    def recent_user_answers(self, limit: int = 6) -> list[str]:
        answers = [str(item.get("content") or "") for item in self.history if item.get("role") == "user"]
        return answers[-limit:]

    def advance_training(self, lesson_count: int) -> None:
        if self.training_step < lesson_count - 1:
            self.training_step += 1

    def advance_mock(self, question_count: int) -> None:
        self.mock_step = min(self.mock_step + 1, question_count)

    def start_mock(self) -> None:
        self.mode = MODE_MOCK
        self.mock_step = 0


class SessionStore:
    """
    Process-wide, memory-resident map of session key -> Session.
    Starts empty; nothing is persisted.
    """

    def __init__(self):
        self._lock = Lock()
        self._sessions: dict[str, Session] = {}

    @staticmethod
    def new_session_id() -> str:
        return f"s_{uuid.uuid4().hex}"

    def get(self, session_id: str | None) -> Session | None:
        if not session_id:
            return None
        with self._lock:
            return self._sessions.get(session_id)

    def get_or_create(self, session_id: str | None, role: str, mode: str) -> tuple[Session, bool]:
        """
        Return the session for a key, creating it when the key is absent or
        unknown. The second element tells whether a session was created.
        """
        key = str(session_id or "").strip() or self.new_session_id()
        with self._lock:
            session = self._sessions.get(key)
            if session is not None:
                session.updated_at = time.time()
                return session, False

            session = Session(session_id=key, role=role, mode=mode, requested_mode=mode)
            session.append(**coach_system_message(role, mode))
            self._sessions[key] = session
            return session, True

    def cleanup_idle(self, ttl_sec: float) -> int:
        if not ttl_sec or ttl_sec <= 0:
            return 0
        cutoff = time.time() - float(ttl_sec)
        removed = 0
        with self._lock:
            for session_id, session in list(self._sessions.items()):
                if session.updated_at <= cutoff:
                    self._sessions.pop(session_id, None)
                    removed += 1
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions
