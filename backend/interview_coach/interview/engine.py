import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from interview_coach.core.config import DEFAULT_ROLE
from interview_coach.core.logger import log_event
from interview_coach.interview.catalog import (
    AFTER_EVALUATION_SUGGESTIONS,
    MOCK_QUESTIONS,
    TRAINING_LESSONS,
    lesson_at,
    mock_suggestions,
    question_at,
    training_suggestions,
)
from interview_coach.interview.commands import Command, parse_command
from interview_coach.interview.evaluator import Evaluation, EvaluationComposer
from interview_coach.interview.session import MODE_MOCK, MODE_TRAINING, Session, SessionStore
from interview_coach.prompts import coach_system_message, mock_instruction, training_instruction
from interview_coach.services.llm_client import LLMClient
from interview_coach.system_metrics import increment_metric, set_metric

logger = logging.getLogger("interview_coach.interview.engine")

TRAINING_CONTEXT_TURNS = 6
MOCK_CONTEXT_TURNS = 8
FALLBACK_CONTEXT_TURNS = 8
SHORT_ANSWER_CHARS = 40

ELABORATION_REQUEST = "Could you elaborate a bit more on that? Give one specific example."
PAUSE_NOTICE = "Interview paused. Type 'continue' to resume or 'evaluate' for feedback."


@dataclass
class ConversationReply:
    session_id: str
    reply: str
    suggestions: list[str]
    mode: str
    evaluation: Evaluation | None = None

    def to_payload(self) -> dict:
        payload = {
            "sessionId": self.session_id,
            "reply": self.reply,
            "suggestions": list(self.suggestions),
            "mode": self.mode,
        }
        if self.evaluation is not None:
            payload["evaluation"] = self.evaluation.to_payload()
        return payload


Handler = Callable[[Session, str], Awaitable[ConversationReply]]


class ConversationEngine:
    """
    Per-session state machine over training and mock modes.

    A message is parsed into a Command, then dispatched through a table keyed
    by (mode, command). EVALUATE preempts every mode; commands a mode does not
    define fall through to that mode's freeform handler; unknown modes use the
    generic LLM fallback.
    """

    def __init__(
        self,
        store: SessionStore,
        llm_client: LLMClient,
        composer: EvaluationComposer | None = None,
    ):
        self.store = store
        self.llm_client = llm_client
        self.composer = composer or EvaluationComposer(llm_client)
        self._routes: dict[str, dict[Command, Handler]] = {
            MODE_TRAINING: {
                Command.NEXT: self._next_lesson,
                Command.EXAMPLE: self._lesson_example,
                Command.PRACTICE: self._lesson_practice,
                Command.EXPLAIN: self._lesson_explain,
                Command.START_MOCK: self._start_mock,
                Command.FREEFORM: self._training_freeform,
            },
            MODE_MOCK: {
                Command.PAUSE: self._pause_mock,
                Command.CONTINUE: self._continue_mock,
                Command.FREEFORM: self._mock_answer,
            },
        }
        self._finished_mock_routes: dict[Command, Handler] = {
            Command.START_MOCK: self._start_mock,
            Command.NEXT: self._resume_training,
        }

    # -------------------------
    # ENTRY
    # -------------------------

    async def handle_message(
        self,
        session_id: str | None,
        message: str,
        role: str | None = None,
        mode: str | None = None,
    ) -> ConversationReply:
        raw_message = str(message or "")
        requested_role = str(role or "").strip() or DEFAULT_ROLE
        requested_mode = str(mode or "").strip().lower() or MODE_TRAINING

        session, created = self.store.get_or_create(session_id, requested_role, requested_mode)
        if created:
            increment_metric("sessions_created_total")
            set_metric("sessions_active", float(len(self.store)))
        self._apply_request(session, requested_role, requested_mode)

        command = parse_command(raw_message)
        handler = self._resolve(session, command)

        log_event(
            "conversation",
            "message_received",
            session,
            command=command,
            handler=handler.__name__,
            created=created,
            message=raw_message,
        )
        increment_metric("messages_total")

        result = await handler(session, raw_message)

        log_event(
            "conversation",
            "reply_sent",
            session,
            suggestions=result.suggestions,
            evaluated=result.evaluation is not None,
            reply=result.reply,
        )
        return result

    def _apply_request(self, session: Session, role: str, mode: str) -> None:
        session.role = role
        # The client's mode wins only when the client changes it, so a
        # "start mock" switch survives a client that keeps sending "training".
        if mode != session.requested_mode:
            logger.info("mode change requested | session=%s %s -> %s", session.session_id, session.mode, mode)
            session.mode = mode
            session.requested_mode = mode

    def _resolve(self, session: Session, command: Command) -> Handler:
        if command is Command.EVALUATE:
            return self._evaluate

        # A finished mock only offers "start mock" and "next"; honor both.
        if session.mode == MODE_MOCK and session.mock_step >= len(MOCK_QUESTIONS):
            finished = self._finished_mock_routes.get(command)
            if finished is not None:
                return finished

        routes = self._routes.get(session.mode)
        if routes is None:
            return self._fallback
        return routes.get(command, routes[Command.FREEFORM])

    def _reply(self, session: Session, reply: str, suggestions: list[str], evaluation: Evaluation | None = None) -> ConversationReply:
        return ConversationReply(
            session_id=session.session_id,
            reply=reply,
            suggestions=list(suggestions),
            mode=session.mode,
            evaluation=evaluation,
        )

    def _exchange(self, session: Session, message: str, reply: str) -> None:
        session.append("user", message)
        session.append("assistant", reply)

    def _suggestions_for(self, mode: str) -> list[str]:
        if mode == MODE_TRAINING:
            return training_suggestions()
        return mock_suggestions()

    # -------------------------
    # ANY MODE
    # -------------------------

    async def _evaluate(self, session: Session, message: str) -> ConversationReply:
        evaluation = await self.composer.evaluate(session)
        reply = f"📊 Evaluation complete — Overall: {evaluation.overall}/100. Tap the card for details."
        self._exchange(session, message, reply)
        return self._reply(session, reply, AFTER_EVALUATION_SUGGESTIONS, evaluation=evaluation)

    async def _fallback(self, session: Session, message: str) -> ConversationReply:
        session.append("user", message)
        messages = [coach_system_message(session.role, session.mode), *session.recent(FALLBACK_CONTEXT_TURNS)]
        reply = await self.llm_client.complete(messages)
        session.append("assistant", reply)
        return self._reply(session, reply, self._suggestions_for(session.mode))

    # -------------------------
    # TRAINING
    # -------------------------

    async def _next_lesson(self, session: Session, message: str) -> ConversationReply:
        step = session.training_step
        lesson = lesson_at(step)
        reply = (
            f"Lesson {step + 1}: {lesson.title}\n\n{lesson.content}\n\n"
            f"Example:\n{lesson.example}\n\nTry this: {lesson.practice_prompt}"
        )
        session.advance_training(len(TRAINING_LESSONS))
        self._exchange(session, message, reply)
        return self._reply(session, reply, training_suggestions())

    # example / practice / explain look one lesson back: "next" has already
    # advanced the step past the lesson the user just read.

    async def _lesson_example(self, session: Session, message: str) -> ConversationReply:
        lesson = lesson_at(max(0, session.training_step - 1))
        reply = (
            f'Example for "{lesson.title}":\n\n{lesson.example}\n\n'
            "Would you like to try the practice prompt? (type 'practice')"
        )
        self._exchange(session, message, reply)
        return self._reply(session, reply, ["practice", "next", "explain more"])

    async def _lesson_practice(self, session: Session, message: str) -> ConversationReply:
        lesson = lesson_at(max(0, session.training_step - 1))
        reply = f"Practice prompt:\n{lesson.practice_prompt}\n\nType your answer and I will give feedback."
        self._exchange(session, message, reply)
        return self._reply(session, reply, ["give me an example", "next"])

    async def _lesson_explain(self, session: Session, message: str) -> ConversationReply:
        lesson = lesson_at(max(0, session.training_step - 1))
        reply = (
            f"Let me expand on that:\n\n{lesson.content}\n\n"
            "If you'd like, I can walk through an example step-by-step. Try 'give me an example'."
        )
        self._exchange(session, message, reply)
        return self._reply(session, reply, ["give me an example", "practice", "next"])

    async def _start_mock(self, session: Session, message: str) -> ConversationReply:
        session.start_mock()
        session.append("system", f"Switch to MOCK mode for {session.role}")
        question = question_at(0)
        self._exchange(session, message, question)
        return self._reply(session, f"Starting mock interview. First question: {question}", mock_suggestions())

    async def _training_freeform(self, session: Session, message: str) -> ConversationReply:
        session.append("user", message)
        messages = [
            coach_system_message(session.role, MODE_TRAINING),
            training_instruction(session.role),
            *session.recent(TRAINING_CONTEXT_TURNS),
        ]
        reply = await self.llm_client.complete(messages)
        session.append("assistant", reply)
        return self._reply(session, reply, training_suggestions())

    # -------------------------
    # MOCK
    # -------------------------

    async def _resume_training(self, session: Session, message: str) -> ConversationReply:
        session.mode = MODE_TRAINING
        return await self._next_lesson(session, message)

    async def _pause_mock(self, session: Session, message: str) -> ConversationReply:
        self._exchange(session, message, PAUSE_NOTICE)
        return self._reply(session, PAUSE_NOTICE, ["continue", "evaluate"])

    async def _continue_mock(self, session: Session, message: str) -> ConversationReply:
        question = question_at(session.mock_step)
        self._exchange(session, message, question)
        return self._reply(session, question, ["stop", "evaluate"])

    async def _mock_answer(self, session: Session, message: str) -> ConversationReply:
        session.append("user", message)

        if len(message.strip()) < SHORT_ANSWER_CHARS:
            session.append("assistant", ELABORATION_REQUEST)
            session.advance_mock(len(MOCK_QUESTIONS))
            return self._reply(session, ELABORATION_REQUEST, ["continue", "stop", "evaluate"])

        messages = [
            coach_system_message(session.role, MODE_MOCK),
            mock_instruction(session.role),
            *session.recent(MOCK_CONTEXT_TURNS),
        ]
        follow_up = await self.llm_client.complete(messages)
        session.append("assistant", follow_up)
        session.advance_mock(len(MOCK_QUESTIONS))

        if session.mock_step >= len(MOCK_QUESTIONS):
            evaluation = await self.composer.evaluate(session)
            reply = f"📊 Mock complete — Overall: {evaluation.overall}/100. Tap the card for details."
            session.append("assistant", reply)
            # hand the session back to the mode the client is asking for
            session.mode = session.requested_mode
            return self._reply(session, reply, AFTER_EVALUATION_SUGGESTIONS, evaluation=evaluation)

        return self._reply(session, follow_up, mock_suggestions())
