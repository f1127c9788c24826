import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}; using {default}")
        return default


DEFAULT_QUESTION_COUNT = _env_int("DEFAULT_QUESTION_COUNT", 5)
MAX_QUESTIONS_PER_QUIZ = _env_int("MAX_QUESTIONS_PER_QUIZ", 50)

QUIZ_MIN_SOURCE_CHARS = _env_int("QUIZ_MIN_SOURCE_CHARS", 50)
QUIZ_MAX_SOURCE_CHARS = _env_int("QUIZ_MAX_SOURCE_CHARS", 10000)
SUMMARY_MIN_SOURCE_CHARS = _env_int("SUMMARY_MIN_SOURCE_CHARS", 100)
SUMMARY_MAX_SOURCE_CHARS = _env_int("SUMMARY_MAX_SOURCE_CHARS", 15000)

# Rendered quizzes always show A-D.
MAX_OPTIONS = 4

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
