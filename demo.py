#!/usr/bin/env python3
"""Watch the random agent play Minesweeper."""
import time
import os

from sweeper import MinesweeperEnv, resolve_config, Difficulty
from agents import RandomAgent


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(
    delay: float = 0.1,
    games: int = 3,
    difficulty: Difficulty = Difficulty.EASY,
    max_steps: int = 500,
    seed: int = None,
):
    """Run demo games with visualization."""
    config = resolve_config(difficulty=difficulty, color_enabled=False)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent(config.height, config.width, seed=seed)

    print(
        f"Board: {config.width}x{config.height} with {config.mine_count} mines"
    )
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, _ = env.reset(seed=None if seed is None else seed + game)
        agent.reset()

        done = False
        step = 0
        info = {}

        while not done and step < max_steps:
            action = agent.select_action(obs, env.get_action_mask())
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}\n")
            print(env.render())
            time.sleep(delay)

        if info.get("game_state") == "WON":
            wins += 1
            print(f"\n*** WIN! ***")
        elif info.get("game_state") == "LOST":
            print(f"\n*** LOST (hit mine) ***")
        else:
            print(f"\n*** Gave up after {step} steps ***")

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.1, help="Delay between moves")
    parser.add_argument("--games", type=int, default=3, help="Number of games")
    parser.add_argument(
        "--difficulty",
        choices=[level.value for level in (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD)],
        default="easy",
        help="Board preset",
    )
    parser.add_argument("--max-steps", type=int, default=500, help="Step limit per game")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(
        delay=args.delay,
        games=args.games,
        difficulty=Difficulty(args.difficulty),
        max_steps=args.max_steps,
        seed=args.seed,
    )
