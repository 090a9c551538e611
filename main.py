#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {beginner,intermediate,expert}] [--seed N]
    python main.py play --height H --width W --mines M
    python main.py simulate [--games N] [--seed N]
"""
import argparse
import logging
import queue
import random
import sys

import numpy as np

from src.minesweeper import (
    DIFFICULTIES,
    Coordinate,
    Difficulty,
    IllegalStateError,
    IntervalTimer,
    InvalidArgumentError,
    MinesweeperEnv,
    RevealCell,
    StartGame,
    TickTimer,
    ToggleFlag,
    UndoLosingMove,
    board_to_string,
    game_reducer,
    is_ended,
)


HELP_TEXT = """Commands:
  r X Y   reveal the cell at column X, row Y
  f X Y   toggle a flag at column X, row Y
  u       undo the losing move
  q       quit"""


def build_difficulty(args: argparse.Namespace) -> Difficulty:
    """Pick a preset or build a custom difficulty from the arguments."""
    preset = DIFFICULTIES[args.difficulty]
    custom = (args.height, args.width, args.mines)
    if all(value is None for value in custom):
        return preset
    return Difficulty(
        height=args.height if args.height is not None else preset.height,
        width=args.width if args.width is not None else preset.width,
        num_mines=args.mines if args.mines is not None else preset.num_mines,
    )


def choose_seed(args: argparse.Namespace) -> int:
    """Use the given seed, or draw one when none was given."""
    if args.seed is not None:
        return args.seed
    return random.randint(1, 2**31 - 1)


def parse_command(line: str):
    """
    Translate a line of user input into an action.

    Returns:
        An action, "quit", or None for blank input.

    Raises:
        InvalidArgumentError: If the line is not a valid command.
    """
    parts = line.split()
    if not parts:
        return None
    command = parts[0].lower()
    if command == "q":
        return "quit"
    if command == "u":
        return UndoLosingMove()
    if command in ("r", "f") and len(parts) == 3:
        try:
            x, y = int(parts[1]), int(parts[2])
        except ValueError:
            raise InvalidArgumentError(f"coordinates must be integers: {line!r}")
        coordinate = Coordinate(x, y)
        return RevealCell(coordinate) if command == "r" else ToggleFlag(coordinate)
    raise InvalidArgumentError(f"unknown command: {line!r}")


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the console."""
    difficulty = build_difficulty(args)
    seed = choose_seed(args)

    ticks: "queue.Queue[int]" = queue.Queue()
    timer = IntervalTimer(lambda: ticks.put(1))
    game = game_reducer(None, StartGame(seed, difficulty, timer))

    print(f"Board: {difficulty.height}x{difficulty.width} with "
          f"{difficulty.num_mines} mines (seed {seed})")
    print(HELP_TEXT)

    try:
        while True:
            while not ticks.empty():
                ticks.get_nowait()
                if not is_ended(game):
                    game = game_reducer(game, TickTimer())

            print()
            print(board_to_string(game.grid))
            print(f"Status: {game.status.value} | Flags left: {game.remaining_flags} | "
                  f"Time: {game.elapsed_time}s")

            try:
                line = input("> ")
            except EOFError:
                break

            try:
                action = parse_command(line)
            except InvalidArgumentError as error:
                print(error)
                continue
            if action is None:
                continue
            if action == "quit":
                break

            try:
                game = game_reducer(game, action)
            except IllegalStateError as error:
                print(error)
    finally:
        timer.stop()


def simulate(args: argparse.Namespace) -> None:
    """Play random games through the environment and report the win rate."""
    difficulty = build_difficulty(args)
    env = MinesweeperEnv(difficulty=difficulty)
    rng = np.random.default_rng(args.seed)

    wins = 0
    total_revealed = 0
    for episode in range(args.games):
        seed = args.seed + episode if args.seed is not None else None
        _, info = env.reset(seed=seed)
        done = False
        while not done:
            valid_indices = np.where(env.get_action_mask())[0]
            action = int(rng.choice(valid_indices))
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
        if info["game_state"] == "WIN":
            wins += 1
        total_revealed += info["revealed"]

    print(f"Played {args.games} random games on "
          f"{difficulty.height}x{difficulty.width} with {difficulty.num_mines} mines")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} cells")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_board_arguments(subparser: argparse.ArgumentParser) -> None:
        subparser.add_argument(
            "--difficulty",
            choices=sorted(DIFFICULTIES),
            default="beginner",
            help="Preset board size",
        )
        subparser.add_argument("--height", type=int, help="Custom number of rows")
        subparser.add_argument("--width", type=int, help="Custom number of columns")
        subparser.add_argument("--mines", type=int, help="Custom number of mines")

    play_parser = subparsers.add_parser("play", help="Play in the console")
    add_board_arguments(play_parser)
    play_parser.add_argument("--seed", type=int, default=None, help="Mine layout seed")

    simulate_parser = subparsers.add_parser(
        "simulate", help="Play random games and report the win rate"
    )
    add_board_arguments(simulate_parser)
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    simulate_parser.add_argument("--seed", type=int, default=None, help="Base seed")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "play":
            play(args)
        elif args.command == "simulate":
            simulate(args)
        else:
            parser.print_help()
    except InvalidArgumentError as error:
        print(f"Invalid argument: {error}")
        sys.exit(2)


if __name__ == "__main__":
    main()
