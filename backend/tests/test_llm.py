import asyncio

import pytest

from interview_coach.services.llm_client import LLMClient, LLMError


class _Msg:
    def __init__(self, content):
        self.content = content


class _Choice:
    def __init__(self, content):
        self.message = _Msg(content)


class _Response:
    def __init__(self, choices):
        self.choices = choices


@pytest.mark.asyncio
async def test_complete_without_api_key_raises():
    client = LLMClient(api_key="")

    assert client.configured is False
    with pytest.raises(LLMError, match="GROQ_API_KEY"):
        await client.complete([{"role": "user", "content": "hi"}])


@pytest.mark.asyncio
async def test_complete_success_with_mock(monkeypatch: pytest.MonkeyPatch):
    client = LLMClient(api_key="test-key", model="test-model")
    seen = {}

    async def _fake_create(*args, **kwargs):
        seen.update(kwargs)
        return _Response([_Choice("Great answer, tell me more.")])

    monkeypatch.setattr(client.client.chat.completions, "create", _fake_create)

    messages = [{"role": "system", "content": "coach"}, {"role": "user", "content": "hello"}]
    result = await client.complete(messages)

    assert result == "Great answer, tell me more."
    assert seen["model"] == "test-model"
    assert seen["messages"] == messages
    assert seen["temperature"] == 0.7
    assert seen["max_tokens"] == 700


@pytest.mark.asyncio
async def test_complete_wraps_provider_failure(monkeypatch: pytest.MonkeyPatch):
    client = LLMClient(api_key="test-key")

    async def _boom(*args, **kwargs):
        raise RuntimeError("forced")

    monkeypatch.setattr(client.client.chat.completions, "create", _boom)

    with pytest.raises(LLMError, match="forced"):
        await client.complete([{"role": "user", "content": "will fail"}])


@pytest.mark.asyncio
async def test_complete_rejects_malformed_response(monkeypatch: pytest.MonkeyPatch):
    client = LLMClient(api_key="test-key")

    async def _empty(*args, **kwargs):
        return _Response([])

    monkeypatch.setattr(client.client.chat.completions, "create", _empty)

    with pytest.raises(LLMError, match="Malformed"):
        await client.complete([{"role": "user", "content": "x"}])


@pytest.mark.asyncio
async def test_complete_rejects_empty_content(monkeypatch: pytest.MonkeyPatch):
    client = LLMClient(api_key="test-key")

    async def _blank(*args, **kwargs):
        return _Response([_Choice("")])

    monkeypatch.setattr(client.client.chat.completions, "create", _blank)

    with pytest.raises(LLMError):
        await client.complete([{"role": "user", "content": "x"}])


@pytest.mark.asyncio
async def test_complete_times_out(monkeypatch: pytest.MonkeyPatch):
    client = LLMClient(api_key="test-key", timeout_sec=0.05)

    async def _slow(*args, **kwargs):
        await asyncio.sleep(1.0)
        return _Response([_Choice("too late")])

    monkeypatch.setattr(client.client.chat.completions, "create", _slow)

    with pytest.raises(LLMError, match="timed out"):
        await client.complete([{"role": "user", "content": "x"}])
