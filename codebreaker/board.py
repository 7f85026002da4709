"""
Text version of the game board.

A row shows the guess followed by its key pegs: one black peg per exact
match, then one white peg per color-only match.
"""

import re
from typing import List, Sequence

from .schemas import GuessResult
from .types import Color

EXACT_PEG = "●"
COLOR_ONLY_PEG = "○"
EMPTY_PEG = "·"


def render_key(result: GuessResult, holes: int) -> str:
    pegs = EXACT_PEG * result.exact_matches + COLOR_ONLY_PEG * result.color_only_matches
    return pegs + EMPTY_PEG * max(holes - result.total, 0)


def render_row(guess: Sequence[Color], result: GuessResult) -> str:
    code = " ".join(str(color) for color in guess)
    return f"{code}  |  {render_key(result, len(guess))}"


def parse_guess(text: str) -> List[str]:
    """'Red, blue  green,YELLOW' -> ['red', 'blue', 'green', 'yellow']"""
    return [part.lower() for part in re.split(r"[,\s]+", text.strip()) if part]
