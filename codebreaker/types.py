"""
Labels for clarity.
"""

from typing import Any, List, Literal, Sequence

Color = Any  # opaque symbolic value, e.g. "red"; only == is used
Code = List[Color]  # one color per hole
GuessInput = Sequence[Color]
GameStatus = Literal["in_progress", "won", "lost"]
Difficulty = Literal["easy", "medium", "hard", "custom"]  # custom: caller-built engine, no preset
