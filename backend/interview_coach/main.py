from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import asyncio
import logging
import os

from interview_coach.schemas import ErrorReply, MessageRequest, MessageResponse
from interview_coach.interview.engine import ConversationEngine
from interview_coach.interview.session import SessionStore
from interview_coach.services.llm_client import LLMClient, LLMError
from interview_coach.system_metrics import get_metrics_snapshot, increment_metric, set_metric
from interview_coach.core.config import (
    MODEL_NAME,
    SESSION_CLEANUP_INTERVAL_SEC,
    SESSION_IDLE_TTL_SEC,
)

logging.basicConfig(
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    level=logging.INFO,
)

app = FastAPI(title="Interview Coach")
logger = logging.getLogger("interview_coach.main")

SERVICE_NAME = "interview-coach-backend"


def _get_allowed_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "").strip()
    if not raw:
        return ["*"]
    return [item.strip() for item in raw.split(",") if item.strip()]


_allowed_origins = _get_allowed_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

session_store = SessionStore()
llm_client = LLMClient()
engine = ConversationEngine(store=session_store, llm_client=llm_client)
_session_cleanup_task: asyncio.Task | None = None


def _error_reply(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorReply(reply=f"⚠️ {detail}").model_dump(),
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return _error_reply(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return _error_reply(422, "Invalid request payload")


@app.on_event("startup")
async def startup_banner():
    global _session_cleanup_task
    logger.info("[SYSTEM] CORS allow_origins=%s", _allowed_origins)
    logger.info("[SYSTEM] llm model=%s configured=%s", MODEL_NAME, llm_client.configured)
    if not llm_client.configured:
        logger.warning("[SYSTEM] Missing GROQ_API_KEY in environment; LLM replies will fail")

    if SESSION_IDLE_TTL_SEC <= 0:
        return

    async def _session_cleanup_loop():
        while True:
            await asyncio.sleep(SESSION_CLEANUP_INTERVAL_SEC)
            removed = session_store.cleanup_idle(SESSION_IDLE_TTL_SEC)
            set_metric("sessions_active", float(len(session_store)))
            if removed > 0:
                increment_metric("sessions_evicted_total", float(removed))
                logger.info("[SYSTEM] evicted idle sessions=%s", removed)

    _session_cleanup_task = asyncio.create_task(_session_cleanup_loop())


@app.on_event("shutdown")
async def shutdown_handler():
    global _session_cleanup_task
    if _session_cleanup_task is not None:
        _session_cleanup_task.cancel()
        try:
            await _session_cleanup_task
        except asyncio.CancelledError:
            pass
        finally:
            _session_cleanup_task = None
    logger.info("[SYSTEM] shutdown complete")


@app.get("/")
async def root():
    return {"status": "ok", "service": SERVICE_NAME}


@app.get("/healthz")
async def healthz():
    return {"status": "ok", "service": SERVICE_NAME}


@app.post(
    "/api/message",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    responses={422: {"model": ErrorReply}, 500: {"model": ErrorReply}},
)
async def post_message(req: MessageRequest):
    try:
        result = await engine.handle_message(
            session_id=req.session_id,
            message=req.message,
            role=req.role,
            mode=req.mode,
        )
    except LLMError as exc:
        increment_metric("message_errors_total")
        logger.warning("LLM call failed | session=%s err=%s", req.session_id, exc)
        return _error_reply(500, f"Server error: {exc}")
    except Exception as exc:
        increment_metric("message_errors_total")
        logger.exception("Message handling failed | session=%s", req.session_id)
        return _error_reply(500, f"Server error: {exc}")

    return result.to_payload()


@app.get("/api/system/metrics")
def system_metrics_route():
    return get_metrics_snapshot(extra={
        "session_idle_ttl_sec": SESSION_IDLE_TTL_SEC,
    })
