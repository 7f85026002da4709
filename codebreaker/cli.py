"""
Terminal front end.

Reads guesses line by line, shows the board after each one and stops taking
input as soon as the game is won or lost. All game rules come from the store
and engine; this module only talks to the player.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .board import parse_guess, render_row
from .config import PRESETS, load_settings, parse_colors
from .engine import CodeBreakerEngine
from .errors import InvalidConfiguration, MalformedGuess
from .store import Game, GameStore
from .schemas import GuessResult

logger = logging.getLogger(__name__)

WIN_MESSAGE = "Congratulations, you broke the code!"
LOSS_MESSAGE = "Sorry, you ran out of guesses."


def play(
    store: GameStore,
    game_id: str,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> Game:
    game = store.get(game_id)
    if game is None:
        raise KeyError(game_id)

    engine = game.engine
    write(f"Colors: {', '.join(str(c) for c in engine.colors)}")
    write(f"Break the {engine.holes}-color code. Guesses remaining: {engine.guesses_remaining()}")

    while game.status == "in_progress":
        try:
            line = read("guess> ")
        except EOFError:
            write("")
            break

        try:
            store.guess(game_id, parse_guess(line))
        except MalformedGuess as exc:
            # turn not used; ask again
            write(f"Invalid guess: {exc}")
            continue

        last = game.history[-1]
        result = GuessResult(exact_matches=last.exact_matches, color_only_matches=last.color_only_matches)
        write(render_row(last.guess, result))
        write(f"Guesses remaining: {game.guesses_remaining}")

    if game.status == "won":
        write(WIN_MESSAGE)
    elif game.status == "lost":
        write(LOSS_MESSAGE)
    return game


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="codebreaker", description="Play Mastermind in the terminal.")
    parser.add_argument("--difficulty", choices=sorted(PRESETS), help="preset to start from")
    parser.add_argument("--holes", type=int, help="length of the code")
    parser.add_argument("--colors", help="comma separated palette, e.g. red,blue,green")
    parser.add_argument("--guesses", type=int, help="number of guesses allowed")
    return parser


def main(
    argv: Optional[List[str]] = None,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Exit status: 0 won, 1 lost or quit, 2 bad configuration."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except InvalidConfiguration as exc:
        write(f"Configuration error: {exc}")
        return 2

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.difficulty:
        settings.difficulty = args.difficulty
    if args.holes is not None:
        settings.holes = args.holes
    if args.colors is not None:
        settings.colors = parse_colors(args.colors)
    if args.guesses is not None:
        settings.max_guesses = args.guesses

    try:
        engine = CodeBreakerEngine.from_config(settings.engine_config())
    except InvalidConfiguration as exc:
        write(f"Configuration error: {exc}")
        return 2

    store = GameStore()
    game = store.create(None if settings.is_custom else settings.difficulty, engine=engine)
    logger.debug("playing game %s", game.id)
    game = play(store, game.id, read=read, write=write)
    return 0 if game.status == "won" else 1


if __name__ == "__main__":
    sys.exit(main())
