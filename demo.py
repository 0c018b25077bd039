#!/usr/bin/env python3
"""Watch a random player try Minesweeper."""
import time
import os

import numpy as np

from src.sweeper.environment import MinesweeperEnv
from src.sweeper.session import Difficulty


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, difficulty: str = "easy", seed=None):
    """Run demo games with visualization."""
    config = Difficulty(difficulty).config
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(seed)

    print(f"Board: {config.rows}x{config.cols} with {config.mine_count} mines")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, info = env.reset(seed=None if seed is None else seed + game)

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            valid_indices = np.where(env.get_action_mask())[0]
            if len(valid_indices) == 0:
                break
            action = int(rng.choice(valid_indices))
            kind, row, col = env.decode_action(action)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: {('reveal', 'flag', 'chord')[kind]} ({row}, {col})")
            print(f"Flags: {info['flags']}/{info['mines']}  Time: {info['elapsed']}s\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    env.close()
    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument(
        "--difficulty", choices=[d.value for d in Difficulty], default="easy"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, difficulty=args.difficulty, seed=args.seed)
