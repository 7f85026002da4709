"""
Mastermind code-breaking core: secret code generation, guess scoring and
the remaining-guess counter, plus a small session store and terminal front end.
"""

from .engine import CodeBreakerEngine, score_guess
from .errors import CodeBreakerError, InvalidConfiguration, MalformedGuess
from .schemas import EngineConfig, GuessResult

__all__ = [
    "CodeBreakerEngine",
    "score_guess",
    "CodeBreakerError",
    "InvalidConfiguration",
    "MalformedGuess",
    "EngineConfig",
    "GuessResult",
]
