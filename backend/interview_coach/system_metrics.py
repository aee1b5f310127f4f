import threading
import time
from typing import Any


_lock = threading.Lock()
_metrics: dict[str, float] = {
    "messages_total": 0.0,
    "message_errors_total": 0.0,
    "llm_calls_total": 0.0,
    "llm_failures_total": 0.0,
    "llm_latency_total_ms": 0.0,
    "llm_latency_samples": 0.0,
    "evaluations_total": 0.0,
    "evaluation_fallbacks_total": 0.0,
    "sessions_created_total": 0.0,
    "sessions_evicted_total": 0.0,
    "sessions_active": 0.0,
}


def increment_metric(name: str, amount: float = 1.0) -> None:
    key = str(name or "").strip()
    if not key:
        return
    with _lock:
        _metrics[key] = float(_metrics.get(key, 0.0)) + float(amount)


def set_metric(name: str, value: float) -> None:
    key = str(name or "").strip()
    if not key:
        return
    with _lock:
        _metrics[key] = max(0.0, float(value))


def observe_llm_latency_ms(value_ms: float) -> None:
    latency = max(0.0, float(value_ms or 0.0))
    with _lock:
        _metrics["llm_latency_total_ms"] = float(_metrics.get("llm_latency_total_ms", 0.0)) + latency
        _metrics["llm_latency_samples"] = float(_metrics.get("llm_latency_samples", 0.0)) + 1.0


def get_metrics_snapshot(extra: dict[str, Any] | None = None) -> dict[str, Any]:
    with _lock:
        data = dict(_metrics)

    latency_samples = max(1.0, float(data.get("llm_latency_samples") or 0.0))

    payload: dict[str, Any] = {
        "generated_at": time.time(),
        "messages_total": int(data.get("messages_total") or 0.0),
        "message_errors_total": int(data.get("message_errors_total") or 0.0),
        "llm_calls_total": int(data.get("llm_calls_total") or 0.0),
        "llm_failures_total": int(data.get("llm_failures_total") or 0.0),
        "evaluations_total": int(data.get("evaluations_total") or 0.0),
        "evaluation_fallbacks_total": int(data.get("evaluation_fallbacks_total") or 0.0),
        "sessions_created_total": int(data.get("sessions_created_total") or 0.0),
        "sessions_evicted_total": int(data.get("sessions_evicted_total") or 0.0),
        "sessions_active": int(data.get("sessions_active") or 0.0),
        "avg_llm_latency_ms": round(float(data.get("llm_latency_total_ms") or 0.0) / latency_samples, 2),
    }

    if extra:
        payload.update(extra)
    return payload
