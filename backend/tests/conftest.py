import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _test_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ENV", "development")
    monkeypatch.setenv("GROQ_API_KEY", "test-key")


class FakeLLM:
    """Stands in for LLMClient: records every message list it receives."""

    def __init__(self, replies: list[str] | None = None, fail: bool = False):
        self.replies = list(replies or [])
        self.fail = fail
        self.calls: list[list[dict]] = []

    @property
    def configured(self) -> bool:
        return True

    async def complete(self, messages: list[dict]) -> str:
        from interview_coach.services.llm_client import LLMError

        self.calls.append([dict(item) for item in messages])
        if self.fail:
            raise LLMError("forced")
        if self.replies:
            return self.replies.pop(0)
        return "LLM reply"


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def failing_llm() -> FakeLLM:
    return FakeLLM(fail=True)
