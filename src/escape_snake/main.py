# main.py
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

import pygame  # type: ignore

from .autopilot import choose_direction
from .config import Config, FPS
from .draw import draw_game, draw_game_over, window_size
from .game import Game
from .geometry import Direction
from .scores import NameEntry, Score, check_score, format_scores, parse_scores, record_score

logger = logging.getLogger(__name__)

KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}
RESTART_KEYS = (pygame.K_r, pygame.K_RETURN)
CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Snake with food that runs away.")
    p.add_argument("--width", type=int, default=20, help="board width in cells")
    p.add_argument("--height", type=int, default=20, help="board height in cells")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--player", type=str, default="player",
                   help="high-score name for headless runs and empty name entries")
    p.add_argument("--scores-file", type=str, default="scores.json")
    p.add_argument("--no-auto-restart", action="store_true",
                   help="wait for R/Enter after a game over")
    p.add_argument("--headless-ticks", type=int, default=0,
                   help="run N ticks with the autopilot and no window")
    p.add_argument("--log-level", type=str, default="INFO")
    return p.parse_args(argv)


def save_score(scores: List[Score], args: argparse.Namespace, game: Game) -> None:
    try:
        record_score(scores, args.player, game.score, args.scores_file)
    except OSError as e:
        logger.error("Could not write scores to %s: %s", args.scores_file, e)


def start_name_entry(game: Game, scores: List[Score]) -> Optional[NameEntry]:
    """Flag a finished round that makes the table and open name entry for it."""
    rank = check_score(game.score, scores)
    game.high_score = rank is not None
    if rank is None:
        return None
    return NameEntry(game.score, rank)


def handle_name_key(entry: NameEntry, key: int, char: str) -> bool:
    """Feed one key press into the name buffer. Returns True once Enter confirms it."""
    if key in CONFIRM_KEYS:
        return True
    if key == pygame.K_BACKSPACE:
        entry.backspace()
    else:
        entry.type_char(char)
    return False


def commit_name(entry: NameEntry, game: Game, scores: List[Score], args: argparse.Namespace) -> None:
    try:
        entry.commit(scores, args.scores_file, default=args.player)
    except OSError as e:
        logger.error("Could not write scores to %s: %s", args.scores_file, e)
    game.high_score = False


def run_headless(game: Game, ticks: int) -> Game:
    """Drive the game with the autopilot for up to `ticks` moves."""
    for _ in range(ticks):
        direction = choose_direction(game)
        if direction is not None:
            game.key_pressed(direction)
        # Just past one period, so every call fires exactly one tick.
        game.update(game.period * 1.01)
        if game.game_over:
            break
    return game


def run_window(game: Game, scores: List[Score], args: argparse.Namespace) -> None:
    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(window_size(game.config.width, game.config.height))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    entry: Optional[NameEntry] = None
    recorded = False
    running = True
    while running:
        # 1) input; while a name is being typed, keys go to the name buffer
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif entry is not None:
                    if handle_name_key(entry, event.key, event.unicode):
                        commit_name(entry, game, scores, args)
                        entry = None
                elif event.key in KEYS:
                    game.key_pressed(KEYS[event.key])
                elif event.key in RESTART_KEYS:
                    game.confirm_restart()

        # 2) update; movement gated inside Game.update, restart held during name entry
        dt = clock.tick(FPS) / 1000.0
        game.update(dt)
        if game.game_over and not recorded:
            entry = start_name_entry(game, scores)
            recorded = True
        elif not game.game_over:
            recorded = False

        # 3) render
        snap = game.snapshot()
        draw_game(screen, font, snap)
        if snap.game_over:
            prompt = None if entry is None else f"New high score! Name: {entry.name}_"
            draw_game_over(screen, font, snap, format_scores(scores), prompt)
        pygame.display.flip()

    pygame.quit()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(
        width=args.width,
        height=args.height,
        seed=args.seed,
        auto_restart=not args.no_auto_restart,
    )
    game = Game(config)
    scores = parse_scores(args.scores_file)

    if args.headless_ticks > 0:
        run_headless(game, args.headless_ticks)
        print(game.snapshot().render_text())
        print(f"Score: {game.score}")
        if game.game_over:
            save_score(scores, args, game)
        return

    run_window(game, scores, args)


if __name__ == "__main__":
    main()
