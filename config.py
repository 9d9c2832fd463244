"""
Runtime configuration for the motive profile engine.

Values come from the environment (a local .env is loaded first), with
defaults that match the calibrated scoring tables.
"""
import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be numeric, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    return int(_env_float(name, default))


# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Question bank (JSON). Falls back to the bundled sample bank when unset.
QUESTION_BANK_PATH = os.getenv("QUESTION_BANK_PATH") or None

# Reliability gate
MIN_RELIABLE_SCORE = _env_float("MIN_RELIABLE_SCORE", 60.0)
MAX_RELIABILITY_WARNINGS = _env_int("MAX_RELIABILITY_WARNINGS", 2)

# Context shifts smaller than this (in points) are not reported
CONTEXT_SHIFT_THRESHOLD = _env_float("CONTEXT_SHIFT_THRESHOLD", 5.0)

# API
API_TITLE = os.getenv("API_TITLE", "Motive Profile Scoring API")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
