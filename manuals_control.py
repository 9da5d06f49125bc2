# -*- coding: utf-8 -*-
"""
Play the merge puzzle from a terminal.

Commands are read one per line: a/w/d/s or left/up/right/down to move, u to undo,
r to restart, m <value> to change the winning tile and q to quit.
"""
import logging
import sys
from argparse import ArgumentParser
from typing import TextIO

from tilemerge.core.errors import TileMergeError
from tilemerge.core.gamemove import Direction
from tilemerge.session import MODES, GameSession
from tilemerge.utils import render_view

KEYS = {"a": Direction.LEFT, "w": Direction.UP, "d": Direction.RIGHT, "s": Direction.DOWN}


def redraw(session: GameSession, output: TextIO):
    """
    Print the current state of the session.

    Parameters
    ----------
    session: GameSession
        The game to draw

    output: TextIO
        Stream to write to
    """
    print(render_view(session.view()), file=output)


def handle_command(session: GameSession, command: str, output: TextIO) -> bool:
    """
    Apply one command to the session.

    Parameters
    ----------
    session: GameSession
        The game

    command: str
        Line typed by the player

    output: TextIO
        Stream for feedback messages

    Returns
    -------
    bool
        False when the player asked to quit
    """
    words = command.strip().lower().split()
    if not words:
        return True

    key = words[0]
    if key in ("q", "quit"):
        return False

    try:
        if key in ("u", "undo"):
            if not session.undo():
                print("nothing to undo", file=output)
        elif key in ("r", "reset"):
            session.reset()
        elif key in ("m", "mode") and len(words) == 2:
            session.set_mode(int(words[1]))
        elif not session.move(KEYS.get(key, key)):
            print("no effect", file=output)
    except ValueError as error:
        print(f"invalid command: {error}", file=output)
        return True

    redraw(session, output)
    return True


def main(argv: list[str] | None = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    parser = ArgumentParser(description="Play the 4x4 merge puzzle in a terminal")
    parser.add_argument("--mode", type=int, default=MODES[0], help="Tile value that wins the game")
    parser.add_argument("--seed", type=int, default=None, help="Seed for tile spawning")
    parser.add_argument("--verbose", action="store_true", help="Log every engine event")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        session = GameSession(mode=args.mode, seed=args.seed)
    except TileMergeError as error:
        parser.error(str(error))

    redraw(session, stdout)
    for line in stdin:
        if not handle_command(session, line, stdout):
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())
