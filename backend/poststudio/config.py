"""
Configuration for the Post Studio backend.

Values come from the environment (backend/.env is loaded on import).
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


class Settings:
    """Runtime settings for the LLM client and storage."""

    # OpenRouter chat completions
    OPENROUTER_API_URL = os.getenv(
        "OPENROUTER_API_URL", "https://openrouter.ai/api/v1/chat/completions"
    )
    OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY")
    DEFAULT_MODEL = os.getenv("OPENROUTER_MODEL", "google/gemini-3-pro-preview")
    DEFAULT_TEMPERATURE = _float_env("OPENROUTER_TEMPERATURE", 0.7)
    # AI generation can take a while for long content
    OPENROUTER_TIMEOUT = _float_env("OPENROUTER_TIMEOUT", 120.0)

    APP_URL = os.getenv("APP_URL", "http://localhost:3000")
    APP_TITLE = "LinkedIn Post Generator"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Token ceilings per generation type
    HOOK_MAX_TOKENS = 500
    HASHTAG_MAX_TOKENS = 200
    ADAPTATION_MAX_TOKENS = 2000
    POST_MAX_TOKENS = {
        "short": 400,
        "medium": 1000,
        "long": 2000,
    }

    # Supabase
    SUPABASE_URL = os.getenv("SUPABASE_URL")
    SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")


settings = Settings()
