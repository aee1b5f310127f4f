import os
from pathlib import Path
from dotenv import load_dotenv

_BACKEND_ROOT = Path(__file__).resolve().parents[2]
_BACKEND_ENV_PATH = _BACKEND_ROOT / ".env"
load_dotenv(dotenv_path=_BACKEND_ENV_PATH, override=False)

GROQ_API_KEY = str(os.getenv("GROQ_API_KEY") or "").strip()
LLM_BASE_URL = str(os.getenv("LLM_BASE_URL") or "https://api.groq.com/openai/v1").strip()
MODEL_NAME = str(os.getenv("MODEL_NAME") or "llama-3.1-8b-instant").strip()
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.7"))
LLM_MAX_TOKENS = max(1, int(os.getenv("LLM_MAX_TOKENS", "700")))
LLM_TIMEOUT_SEC = max(1.0, float(os.getenv("LLM_TIMEOUT_SEC", "30")))

# 0 disables idle eviction; sessions then live for the process lifetime
SESSION_IDLE_TTL_SEC = max(0, int(os.getenv("SESSION_IDLE_TTL_SEC", "0")))
SESSION_CLEANUP_INTERVAL_SEC = max(30, int(os.getenv("SESSION_CLEANUP_INTERVAL_SEC", "120")))

DEFAULT_ROLE = str(os.getenv("DEFAULT_ROLE") or "Software Engineer").strip()
