"""Command-line entry point that opens the player window."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import pygame

from .audioplayer import AudioPlayer
from .config import Config, load_config
from .resource_dir import search_and_set_resource_dir
from .ui import MouseState, Ui

WINDOW_TITLE = "Sav Craft"


def build_parser() -> argparse.ArgumentParser:
    """Command-line options of the player."""
    parser = argparse.ArgumentParser(prog="savplayer", description="Play the tracks of a directory.")
    parser.add_argument("--config", default="options.conf", help="configuration file")
    parser.add_argument("--resources", default="resources", help="resource directory to search for")
    parser.add_argument("--tracks", default="tracks", help="track directory inside the resources")
    parser.add_argument("--font", default="maple-mono.ttf", help="text font")
    parser.add_argument("--glyphs", default="glyphs.ttf", help="icon font")
    return parser


def _load_font(path: str) -> pygame.font.Font:
    try:
        return pygame.font.Font(path, 128)
    except (OSError, FileNotFoundError):
        return pygame.font.Font(None, 128)


def _frame_mouse(events: list) -> MouseState:
    pressed = any(e.type == pygame.MOUSEBUTTONDOWN and e.button == 1 for e in events)
    released = any(e.type == pygame.MOUSEBUTTONUP and e.button == 1 for e in events)
    x, y = pygame.mouse.get_pos()
    return MouseState(
        position=(float(x), float(y)),
        pressed=pressed,
        down=bool(pygame.mouse.get_pressed()[0]),
        released=released,
    )


def _should_close(events: list) -> bool:
    return any(
        e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE)
        for e in events
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the player until its window is closed."""
    args = build_parser().parse_args(argv)

    try:
        conf = load_config(args.config)
    except OSError:
        print("ERROR: COULD NOT READ CONFIGURATION FILE")
        conf = Config()

    pygame.init()
    try:
        screen = pygame.display.set_mode((conf.width, conf.height), pygame.SCALED if conf.width else 0)
        pygame.display.set_caption(WINDOW_TITLE)
        search_and_set_resource_dir(args.resources)

        try:
            player = AudioPlayer(args.tracks)
        except (OSError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

        ui = Ui(player, conf.colors, _load_font(args.font), _load_font(args.glyphs))
        clock = pygame.time.Clock()
        dt = 0.0
        try:
            while True:
                events = pygame.event.get()
                if _should_close(events):
                    break
                mouse = _frame_mouse(events)

                player.update(dt)
                ui.update(mouse)

                screen.fill((0, 0, 0))
                ui.draw(screen, mouse, dt)
                pygame.display.flip()
                dt = clock.tick(conf.fps) / 1000.0
        finally:
            player.close()
            ui.close()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())