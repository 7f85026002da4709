"""
Explicit validation & Pydantic models
- GuessResult is what the engine hands back for every guess.
- EngineConfig validates (holes, colors, max_guesses) before an engine exists.
- GuessEntryOut / GameState are read models for whatever front end drives the store.
  None of them carries the secret code.
"""

from typing import Any, List, Literal
from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from .errors import InvalidConfiguration


# 1. Score of a single guess
class GuessResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    exact_matches: int = Field(..., ge=0, description="Right color in the right hole")
    color_only_matches: int = Field(..., ge=0, description="Right color, wrong hole")

    @property
    def total(self) -> int:
        return self.exact_matches + self.color_only_matches

    def is_win(self, holes: int) -> bool:
        return self.exact_matches == holes


# 2. Validates engine settings
class EngineConfig(BaseModel):
    holes: StrictInt = Field(..., gt=0, description="Length of the code")
    colors: List[Any] = Field(..., min_length=1, description="Palette the code is drawn from")
    max_guesses: StrictInt = Field(..., gt=0, description="Guesses allowed per game")

    @field_validator("colors")
    @classmethod
    def distinct_colors(cls, colors: List[Any]) -> List[Any]:
        """
        Collapse repeated colors so sampling stays uniform over the palette.
        Only equality is used, so colors do not need to be hashable.
        """
        unique: List[Any] = []
        for color in colors:
            if color not in unique:
                unique.append(color)
        return unique

    @classmethod
    def build(cls, holes: Any, colors: Any, max_guesses: Any) -> "EngineConfig":
        """Same as the constructor, but reports problems as InvalidConfiguration."""
        if isinstance(colors, (str, bytes)):
            raise InvalidConfiguration("colors must be a collection of colors, not a string.")
        try:
            return cls(holes=holes, colors=list(colors), max_guesses=max_guesses)
        except (TypeError, ValidationError) as exc:
            raise InvalidConfiguration(_describe(exc)) from exc


def _describe(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        parts = []
        for err in exc.errors():
            field = ".".join(str(p) for p in err["loc"]) or "config"
            parts.append(f"{field}: {err['msg']}")
        return "; ".join(parts)
    return f"colors must be a collection of colors ({exc})"


# 3. Describes the feedback for a single guess
class GuessEntryOut(BaseModel):
    guess: List[Any] = Field(..., description="The player's guess")
    exact_matches: int = Field(..., description="Right color in the right hole")
    color_only_matches: int = Field(..., description="Right color, wrong hole")
    message: str = Field(..., description="Feedback message")
    timestamp: float = Field(..., description="When the guess was made")


# 4. Represents the overall state of the game
class GameState(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    holes: int = Field(..., description="Length of the code")
    colors: List[Any] = Field(..., description="Palette the player can use")
    guesses_remaining: int = Field(..., description="How many guesses remain")
    status: Literal["in_progress", "won", "lost"] = Field(..., description="Current state of the game")
    difficulty: Literal["easy", "medium", "hard", "custom"] = Field(..., description="Preset the game was built from")
    history: List[GuessEntryOut] = Field(..., description="All guesses made so far with feedback")

