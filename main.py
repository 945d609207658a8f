# main.py
import argparse
import logging

from config import AppConfig


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Snaditya: a personalized Snake game")
    p.add_argument("mode", choices=["play", "headless"])
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--games", type=int, default=None, help="headless: number of games")
    p.add_argument("--width", type=int, default=None, help="viewport width in px")
    p.add_argument("--height", type=int, default=None, help="viewport height in px")
    p.add_argument("--name", default=None, help="player name")
    p.add_argument("--prefs", default=None, help="preferences JSON path")
    p.add_argument("--results", default=None, help="results CSV path")
    p.add_argument("--log-level", default=None)
    return p.parse_args(argv)


def build_config(args) -> AppConfig:
    overrides = {
        "seed": args.seed,
        "screen_w": args.width,
        "screen_h": args.height,
        "player_name": args.name,
        "prefs_path": args.prefs,
        "results_path": args.results,
        "log_level": args.log_level,
    }
    return AppConfig().with_(**{k: v for k, v in overrides.items() if v is not None}).validate()


def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)
    logging.basicConfig(
        level=cfg.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.mode == "play":
        from runners.run_snake import main as play
        play(cfg)
    elif args.mode == "headless":
        from runners.run_headless import main as headless
        headless(cfg, games=args.games)


if __name__ == "__main__":
    main()
