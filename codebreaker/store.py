"""
In-memory store
Holds one engine per game session and applies the win/loss policy the engine
leaves to its caller:
- won:  a guess scores exact_matches == holes
- lost: guesses_remaining() <= 0 without a win
Once a game is over, further guesses are ignored.
"""

import logging
from dataclasses import dataclass, field
from threading import RLock
from time import time
from typing import Dict, List, Optional
from uuid import uuid4

from .config import normalize_difficulty, preset_config
from .engine import CodeBreakerEngine, CodeMaker
from .schemas import GameState, GuessEntryOut, GuessResult
from .types import Code, Difficulty, GameStatus, GuessInput

logger = logging.getLogger(__name__)


@dataclass
class GuessEntry:
    guess: Code
    exact_matches: int
    color_only_matches: int
    message: str
    timestamp: float


@dataclass
class Game:
    id: str
    engine: CodeBreakerEngine
    status: GameStatus = "in_progress"
    history: List[GuessEntry] = field(default_factory=list)
    created_at: float = field(default_factory=time)
    updated_at: float = field(default_factory=time)
    difficulty: Difficulty = "medium"

    @property
    def guesses_remaining(self) -> int:
        return self.engine.guesses_remaining()

    @property
    def guesses_used(self) -> int:
        return self.engine.max_guesses - self.engine.guesses_remaining()


def feedback_message(result: GuessResult) -> str:
    # Describe the score without saying which pegs are right
    if result.total == 0:
        return "all incorrect"
    return (
        str(result.exact_matches)
        + " exact match(es) and "
        + str(result.color_only_matches)
        + " color-only match(es)"
    )


class GameStore:
    def __init__(self, code_maker: Optional[CodeMaker] = None) -> None:
        self._games: Dict[str, Game] = {}
        self._lock = RLock()
        self._code_maker = code_maker

    def create(
        self,
        difficulty: Optional[str] = None,
        engine: Optional[CodeBreakerEngine] = None,
    ) -> Game:
        """
        Start a session from a difficulty preset, or from a ready-made `engine`.
        A game built from a caller's engine is labelled "custom" unless a
        difficulty is given explicitly.
        """
        if engine is None:
            level = normalize_difficulty(difficulty)
            engine = CodeBreakerEngine.from_config(preset_config(level), code_maker=self._code_maker)
        elif difficulty is None:
            level = "custom"
        else:
            level = normalize_difficulty(difficulty)

        new_id = str(uuid4())
        game = Game(id=new_id, engine=engine, difficulty=level)
        with self._lock:
            self._games[new_id] = game
        logger.info("game %s started (%s, %r)", new_id, level, engine)
        return game

    def get(self, game_id: str) -> Optional[Game]:
        with self._lock:
            return self._games.get(game_id)

    def guess(self, game_id: str, attempt: GuessInput) -> Optional[Game]:
        """
        Score `attempt` and update the session.
        Returns None for an unknown game. MalformedGuess from the engine is
        propagated untouched: nothing is recorded and no guess is used up.
        """
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                return None

            if game.status != "in_progress":
                # If game already ended, just return it (ignore extra guesses)
                return game

            result = game.engine.evaluate_guess(attempt)

            game.history.append(
                GuessEntry(
                    guess=list(attempt),
                    exact_matches=result.exact_matches,
                    color_only_matches=result.color_only_matches,
                    message=feedback_message(result),
                    timestamp=time(),
                )
            )

            if result.is_win(game.engine.holes):
                game.status = "won"
            elif game.engine.guesses_remaining() <= 0:
                game.status = "lost"
            game.updated_at = time()

            if game.status != "in_progress":
                logger.info("game %s %s after %d guess(es)", game.id, game.status, game.guesses_used)

            return game

    def state(self, game_id: str) -> Optional[GameState]:
        game = self.get(game_id)
        if game is None:
            return None
        with self._lock:
            return GameState(
                game_id=game.id,
                holes=game.engine.holes,
                colors=list(game.engine.colors),
                guesses_remaining=game.guesses_remaining,
                status=game.status,
                difficulty=game.difficulty,
                history=[
                    GuessEntryOut(
                        guess=list(h.guess),
                        exact_matches=h.exact_matches,
                        color_only_matches=h.color_only_matches,
                        message=h.message,
                        timestamp=h.timestamp,
                    )
                    for h in game.history
                ],
            )

