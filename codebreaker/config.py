"""
Single place to:
- Hold the default palette and the difficulty presets
- Read overrides from the environment (and a local .env, if present)
- Turn a difficulty into a validated EngineConfig

Nothing is read at import time; call load_settings() when you need it.
"""

import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from dotenv import load_dotenv

from .errors import InvalidConfiguration
from .schemas import EngineConfig
from .types import Difficulty

DEFAULT_COLORS: List[str] = ["yellow", "brown", "red", "purple", "blue", "green"]
EXTRA_COLORS: List[str] = ["orange", "white"]

DEFAULT_HOLES = 4
DEFAULT_MAX_GUESSES = 12

# difficulty -> (holes, palette, max_guesses)
PRESETS: Dict[str, Tuple[int, List[str], int]] = {
    "easy": (3, DEFAULT_COLORS, 8),
    "medium": (DEFAULT_HOLES, DEFAULT_COLORS, DEFAULT_MAX_GUESSES),
    "hard": (5, DEFAULT_COLORS + EXTRA_COLORS, 12),
}


def normalize_difficulty(difficulty: Optional[str]) -> Difficulty:
    """Unknown or missing difficulty falls back to medium."""
    if difficulty:
        value = difficulty.strip().lower()
        if value in PRESETS:
            return value  # type: ignore[return-value]
    return "medium"


def preset_config(difficulty: Optional[str] = "medium") -> EngineConfig:
    holes, colors, max_guesses = PRESETS[normalize_difficulty(difficulty)]
    return EngineConfig.build(holes, list(colors), max_guesses)


@dataclass
class Settings:
    difficulty: Difficulty = "medium"
    colors: Optional[List[str]] = None
    holes: Optional[int] = None
    max_guesses: Optional[int] = None
    log_level: str = "WARNING"

    @property
    def is_custom(self) -> bool:
        """True when any preset value was overridden."""
        return self.holes is not None or self.colors is not None or self.max_guesses is not None

    def engine_config(self) -> EngineConfig:
        """Preset for the difficulty, with any explicit override on top."""
        base = preset_config(self.difficulty)
        return EngineConfig.build(
            self.holes if self.holes is not None else base.holes,
            self.colors if self.colors is not None else base.colors,
            self.max_guesses if self.max_guesses is not None else base.max_guesses,
        )


def _int_env(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}.") from None


def parse_colors(raw: Optional[str]) -> Optional[List[str]]:
    """'red, blue,green' -> ['red', 'blue', 'green']"""
    if raw is None:
        return None
    colors = [part.strip().lower() for part in raw.split(",") if part.strip()]
    return colors or None


def load_settings() -> Settings:
    # dev convenience; a real shell environment wins over .env
    load_dotenv()

    return Settings(
        difficulty=normalize_difficulty(os.getenv("CODEBREAKER_DIFFICULTY")),
        colors=parse_colors(os.getenv("CODEBREAKER_COLORS")),
        holes=_int_env("CODEBREAKER_HOLES"),
        max_guesses=_int_env("CODEBREAKER_MAX_GUESSES"),
        log_level=os.getenv("CODEBREAKER_LOG_LEVEL", "WARNING").upper(),
    )
