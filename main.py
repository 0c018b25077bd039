#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--chord-requires-flags]
    python main.py play --rows R --cols C --mines M
"""
import argparse
import logging

from src.sweeper.board import ConfigurationError, GameConfig
from src.sweeper.environment import render_text
from src.sweeper.session import Difficulty, GameState, GameStateMachine

HELP = (
    "Commands: r ROW COL (reveal), f ROW COL (flag), c ROW COL (chord), "
    "n (new game), easy|medium|hard, q (quit)"
)


def show(game: GameStateMachine) -> None:
    """Print the board and status line."""
    session = game.session
    print()
    print(render_text(session.board.get_observation()))
    print(
        f"Mines: {session.mine_count - session.flag_count}/{session.mine_count}"
        f"  Time: {session.elapsed_seconds}s  State: {session.state.name}"
    )
    if session.state == GameState.WON:
        print("You won!")
    elif session.state == GameState.LOST:
        print("Game over!")


def handle(game: GameStateMachine, line: str) -> bool:
    """Apply one command line. Returns False when the player quits."""
    parts = line.split()
    if not parts:
        return True
    command = parts[0].lower()

    if command in ("q", "quit"):
        return False
    if command in ("n", "new"):
        game.new_game()
        return True
    if command in {d.value for d in Difficulty}:
        game.change_difficulty(command)
        return True

    actions = {"r": game.reveal, "f": game.toggle_flag, "c": game.chord_reveal}
    if command not in actions or len(parts) != 3:
        print(HELP)
        return True
    try:
        row, col = int(parts[1]), int(parts[2])
    except ValueError:
        print(HELP)
        return True
    actions[command](row, col)
    return True


def play(args: argparse.Namespace) -> None:
    """Run an interactive terminal game."""
    if args.rows or args.cols or args.mines:
        config = GameConfig(args.rows or 10, args.cols or 10, args.mines or 15)
    else:
        config = Difficulty(args.difficulty).config

    game = GameStateMachine(
        config, chord_requires_flag_match=args.chord_requires_flags
    )
    print(HELP)
    try:
        while True:
            show(game)
            try:
                line = input("> ")
            except EOFError:
                break
            if not handle(game, line):
                break
    finally:
        game.close()


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default="easy",
        help="Preset board size",
    )
    play_parser.add_argument("--rows", type=int, default=0, help="Custom rows")
    play_parser.add_argument("--cols", type=int, default=0, help="Custom columns")
    play_parser.add_argument("--mines", type=int, default=0, help="Custom mines")
    play_parser.add_argument(
        "--chord-requires-flags",
        action="store_true",
        help="Only chord when flagged neighbors match the number",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "play":
        try:
            play(args)
        except ConfigurationError as exc:
            parser.error(str(exc))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
