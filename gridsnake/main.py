# gridsnake/main.py
import argparse
import logging

from gridsnake.config import AppConfig, THEMES

def parse_args(argv=None):
    d = AppConfig()
    p = argparse.ArgumentParser(prog="gridsnake")
    p.add_argument("mode", choices=["play", "headless"])
    p.add_argument("--grid-half", type=int, default=d.grid_half)
    p.add_argument("--step", type=float, default=d.step_sec, help="seconds per grid step")
    p.add_argument("--foods", type=int, default=d.food_count)
    p.add_argument("--obstacles", type=int, default=d.obstacle_count)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--max-frame-dt", type=float, default=None, help="clamp each frame's dt (seconds)")
    p.add_argument("--theme", choices=THEMES, default=d.render_theme)
    p.add_argument("--grid-lines", action="store_true")
    p.add_argument("--episodes", type=int, default=5, help="headless only")
    p.add_argument("--log-every", type=int, default=None, help="headless only: log the board every N frames")
    p.add_argument("--log-level", default="INFO")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    return AppConfig().with_(
        grid_half=args.grid_half,
        step_sec=args.step,
        food_count=args.foods,
        obstacle_count=args.obstacles,
        seed=args.seed,
        max_frame_dt=args.max_frame_dt,
        render_theme=args.theme,
        render_grid_lines=args.grid_lines,
    )

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = build_config(args)
    if args.mode == "play":
        from gridsnake.runners.run_snake import main as play
        play(cfg)
    elif args.mode == "headless":
        from gridsnake.runners.run_headless import main as headless
        headless(cfg, episodes=args.episodes, log_every=args.log_every)

if __name__ == "__main__":
    main()
