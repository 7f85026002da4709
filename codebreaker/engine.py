"""
Pure game logic (no I/O, no storage).

For each guess we compute two feedback numbers:
- exact_matches: holes where the guess has the secret's color
- color_only_matches: remaining guess colors that appear somewhere else in the
  secret, each secret peg being used at most once

We allow duplicates in both the secret and the guess.

Deciding who won or lost is left to the caller; the engine only reports facts.
"""

import collections.abc
import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from .codes import random_code
from .errors import InvalidConfiguration, MalformedGuess
from .schemas import EngineConfig, GuessResult
from .types import Code, Color, GuessInput

logger = logging.getLogger(__name__)

CodeMaker = Callable[[int, Sequence[Color]], Sequence[Color]]


def score_guess(secret: Sequence[Color], guess: Sequence[Color]) -> Tuple[int, int]:
    """
    Example:
      secret = [red, red, blue, green]
      guess  = [red, blue, red, green]
      exact_matches      = 2  (holes 0 and 3)
      color_only_matches = 2  (leftover secret [red, blue] vs leftover guess [blue, red])
      Returns a tuple: (exact_matches, color_only_matches)
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    # 1. Exact pass; keep the pegs that did not match, in order
    exact_matches = 0
    unmatched_secret: List[Color] = []
    unmatched_guess: List[Color] = []
    for i in range(n):
        if guess[i] == secret[i]:
            exact_matches += 1
        else:
            unmatched_secret.append(secret[i])
            unmatched_guess.append(guess[i])

    # 2. Color-only pass: a secret peg can satisfy a single guess peg
    color_only_matches = 0
    for color in unmatched_guess:
        j = 0
        while j < len(unmatched_secret):
            if unmatched_secret[j] == color:
                color_only_matches += 1
                del unmatched_secret[j]
                break
            j += 1

    return (exact_matches, color_only_matches)


class CodeBreakerEngine:
    """
    One game session: the hidden code, the guess counter and the scoring.

    The secret is picked at construction and never handed out again; only
    scores derived from it leave the object. Create one engine per session.
    """

    def __init__(
        self,
        holes: int,
        colors: Iterable[Color],
        max_guesses: int,
        code_maker: Optional[CodeMaker] = None,
    ) -> None:
        config = EngineConfig.build(holes, colors, max_guesses)
        self._holes = config.holes
        self._colors = tuple(config.colors)
        self._max_guesses = config.max_guesses

        make = code_maker or random_code
        secret = tuple(make(self._holes, self._colors))
        if len(secret) != self._holes:
            raise InvalidConfiguration(
                f"Code maker returned {len(secret)} colors, expected {self._holes}."
            )
        for color in secret:
            if color not in self._colors:
                raise InvalidConfiguration("Code maker returned a color outside the palette.")
        self.__secret = secret

        self._guesses_remaining = self._max_guesses
        logger.debug(
            "engine created: holes=%d colors=%d max_guesses=%d",
            self._holes, len(self._colors), self._max_guesses,
        )

    @classmethod
    def from_config(cls, config: EngineConfig, code_maker: Optional[CodeMaker] = None) -> "CodeBreakerEngine":
        return cls(config.holes, config.colors, config.max_guesses, code_maker=code_maker)

    @property
    def holes(self) -> int:
        return self._holes

    @property
    def colors(self) -> Tuple[Color, ...]:
        return self._colors

    @property
    def max_guesses(self) -> int:
        return self._max_guesses

    def evaluate_guess(self, guess: GuessInput) -> GuessResult:
        """
        Score a guess against the secret and use up one guess.

        Raises MalformedGuess (without using up a guess) when the guess is the
        wrong length or contains a color that is not in the palette.
        A wrong guess is not an error; it is just a lower score.
        """
        attempt = self._check_guess(guess)

        # Counted even after a win or once the counter is exhausted; stopping
        # play is the caller's decision.
        self._guesses_remaining -= 1

        exact_matches, color_only_matches = score_guess(self.__secret, attempt)
        logger.debug(
            "guess scored: exact=%d color_only=%d remaining=%d",
            exact_matches, color_only_matches, self._guesses_remaining,
        )
        return GuessResult(exact_matches=exact_matches, color_only_matches=color_only_matches)

    def guesses_remaining(self) -> int:
        return self._guesses_remaining

    def _check_guess(self, guess: Any) -> Code:
        if isinstance(guess, (str, bytes)) or not isinstance(guess, collections.abc.Sequence):
            raise MalformedGuess("Guess must be a sequence of colors.")
        attempt = list(guess)
        if len(attempt) != self._holes:
            raise MalformedGuess(f"Guess must have exactly {self._holes} colors.")
        for color in attempt:
            if color not in self._colors:
                raise MalformedGuess(f"Unknown color {color!r}.")
        return attempt

    def __repr__(self) -> str:
        return (
            f"<CodeBreakerEngine(holes={self._holes}, colors={len(self._colors)}, "
            f"guesses_remaining={self._guesses_remaining}, secret_hidden=True)>"
        )
