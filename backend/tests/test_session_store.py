import time

from interview_coach.interview.session import MODE_MOCK, MODE_TRAINING, Session, SessionStore


def test_get_or_create_generates_key_and_seeds_history():
    store = SessionStore()

    session, created = store.get_or_create(None, "Software Engineer", MODE_TRAINING)

    assert created is True
    assert session.session_id.startswith("s_")
    assert session.mode == MODE_TRAINING
    assert session.training_step == 0
    assert session.mock_step == 0
    assert session.history[0]["role"] == "system"
    assert "Software Engineer" in session.history[0]["content"]
    assert len(store) == 1


def test_one_session_object_per_key():
    store = SessionStore()

    first, _ = store.get_or_create(None, "Data Analyst", MODE_MOCK)
    again, created = store.get_or_create(first.session_id, "Data Analyst", MODE_MOCK)

    assert created is False
    assert again is first
    assert len(store) == 1


def test_unknown_key_is_created_under_that_key():
    store = SessionStore()

    session, created = store.get_or_create("client-key", "QA", MODE_TRAINING)

    assert created is True
    assert session.session_id == "client-key"
    assert "client-key" in store


def test_step_counters_are_clamped():
    session = Session(session_id="s", role="r", mode=MODE_TRAINING, requested_mode=MODE_TRAINING)

    for _ in range(10):
        session.advance_training(lesson_count=6)
        session.advance_mock(question_count=5)

    assert session.training_step == 5
    assert session.mock_step == 5


def test_recent_user_answers_keeps_order_and_limit():
    session = Session(session_id="s", role="r", mode=MODE_MOCK, requested_mode=MODE_MOCK)
    for index in range(8):
        session.append("user", f"answer {index}")
        session.append("assistant", f"reply {index}")

    assert session.recent_user_answers(6) == [f"answer {index}" for index in range(2, 8)]
    assert len(session.recent(8)) == 8
    assert session.recent(8)[-1] == {"role": "assistant", "content": "reply 7"}


def test_cleanup_idle_sessions():
    store = SessionStore()
    stale, _ = store.get_or_create(None, "r", MODE_TRAINING)
    fresh, _ = store.get_or_create(None, "r", MODE_TRAINING)

    assert store.cleanup_idle(ttl_sec=0) == 0

    stale.updated_at = time.time() - 3600  # test-only direct mutation
    removed = store.cleanup_idle(ttl_sec=600)

    assert removed == 1
    assert store.get(stale.session_id) is None
    assert store.get(fresh.session_id) is fresh
