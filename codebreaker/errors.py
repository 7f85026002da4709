"""
The two ways a caller can misuse the engine.

Both are ValueErrors so callers that already catch bad input keep working.
"""


class CodeBreakerError(ValueError):
    """Base class for everything the engine raises."""


class InvalidConfiguration(CodeBreakerError):
    """holes, colors or max_guesses are out of range. No engine is created."""


class MalformedGuess(CodeBreakerError):
    """
    Guess has the wrong length or uses a color outside the palette.
    Recoverable: the turn is not consumed, so the caller can just re-prompt.
    """
