"""
- Provide a code maker that always returns a known secret, so outcomes are predictable.
- Provide a fresh store per test built on that code maker.
- Keep CODEBREAKER_* variables from the developer's shell out of the tests.
"""
import pytest

from codebreaker.engine import CodeBreakerEngine
from codebreaker.store import GameStore

COLORS = ["red", "blue", "green", "yellow"]


def _fixed(secret):
    """Code maker that ignores randomness and returns `secret`."""
    def make(holes, colors):
        return list(secret)
    return make


def first_colors(holes, colors):
    """Secret = the first `holes` colors of the palette, e.g. [yellow, brown, red, purple]."""
    return list(colors[:holes])


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "CODEBREAKER_DIFFICULTY",
        "CODEBREAKER_COLORS",
        "CODEBREAKER_HOLES",
        "CODEBREAKER_MAX_GUESSES",
        "CODEBREAKER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    # no .env from the working directory
    monkeypatch.setattr("codebreaker.config.load_dotenv", lambda *a, **k: False)


@pytest.fixture
def fixed():
    return _fixed


@pytest.fixture
def make_engine():
    def _make(secret, colors=COLORS, max_guesses=10):
        return CodeBreakerEngine(len(secret), colors, max_guesses, code_maker=_fixed(secret))
    return _make


@pytest.fixture
def store():
    return GameStore(code_maker=first_colors)
