"""Runtime settings read from the environment (and an optional ``.env`` file).

  OFFICE_DECK_PATH       card catalog JSON (default: assets/deck.json)
  OFFICE_SEED            integer seed for card selection (default: random)
  OFFICE_DECISION_DELAY  seconds between a swipe and its effect (default: 0.5)
  OFFICE_LOG_LEVEL       logging level name (default: WARNING)
  OFFICE_LOG_FILE        write logs to this file instead of the Textual console
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_DECK_PATH = Path(__file__).parent.parent / "assets" / "deck.json"
DEFAULT_DECISION_DELAY = 0.5


class Settings(BaseModel):
    deck_path: Path = DEFAULT_DECK_PATH
    seed: int | None = None
    decision_delay: float = DEFAULT_DECISION_DELAY
    log_level: str = "WARNING"
    log_file: Path | None = None

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            deck_path=Path(os.getenv("OFFICE_DECK_PATH", str(DEFAULT_DECK_PATH))),
            seed=_int_env("OFFICE_SEED"),
            decision_delay=_float_env("OFFICE_DECISION_DELAY", DEFAULT_DECISION_DELAY),
            log_level=os.getenv("OFFICE_LOG_LEVEL", "WARNING").upper(),
            log_file=Path(os.environ["OFFICE_LOG_FILE"]) if os.getenv("OFFICE_LOG_FILE") else None,
        )


def _int_env(name: str) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer, ignoring it", name, raw)
        return None


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return max(0.0, float(raw))
    except ValueError:
        logger.warning("%s=%r is not a number, using %s", name, raw, default)
        return default
