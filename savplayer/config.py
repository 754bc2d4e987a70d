"""Reading the player's ``options.conf`` file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, Tuple

COMMENT_MARKER = "#"
DEFAULT_CONFIG_PATH = "options.conf"

Color = Tuple[int, int, int, int]

_BLANK: Color = (0, 0, 0, 0)
_MAX_NAME = 63
_COLOR_SLOTS = 4

_RES = re.compile(r"res:\s*([+-]?\d+)(?:x\s*([+-]?\d+))?")
_FPS = re.compile(r"fps:\s*([+-]?\d+)")
_HEX = re.compile(r"[0-9a-fA-F]*")


class Block(Enum):
    """Sections of the configuration file."""

    WINDOW = 0
    COLORS = 1


class UiColor(IntEnum):
    """Positions of the interface colours in ``Config.colors``."""

    BG = 0
    FG = 1
    HL = 2
    BGA = 3


def _blank_colors() -> list[Color]:
    return [_BLANK] * _COLOR_SLOTS


@dataclass
class Config:
    """Window settings and interface colours."""

    block: Block = Block.WINDOW
    width: int = 0
    height: int = 0
    fps: int = 0
    colors: list[Color] = field(default_factory=_blank_colors)

    def change_block(self, line: str) -> None:
        """Switch section on a ``[name]`` line; unknown names are ignored."""
        end = line.find("]")
        if end < 0:
            return
        name = line[1:end][:_MAX_NAME]
        if not name:
            return
        if name == "window":
            self.block = Block.WINDOW
        elif name == "colors":
            self.block = Block.COLORS


def hex_to_rgb(value: int) -> Color:
    """Split a 0xRRGGBB value into an opaque RGBA tuple."""
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255)


def parse_color(line: str) -> Color:
    """Parse a quoted colour such as ``"#ffccaa"``.

    Returns a fully transparent black when the quotes are missing or empty.
    """
    end = line.find('"', 1)
    if end <= 1:
        return _BLANK
    text = line[1:end][:_MAX_NAME]
    digits = _HEX.match(text[1:]).group()
    value = int(digits, 16) & 0xFFFFFFFF if digits else 0
    return hex_to_rgb(value)


def parse_config(lines: Iterable[str]) -> Config:
    """Build a Config from the lines of a configuration file."""
    conf = Config()
    colors_added = 0
    for line in lines:
        if line.startswith(COMMENT_MARKER):
            continue
        if line.startswith("["):
            conf.change_block(line)

        if conf.block is Block.WINDOW:
            if line.startswith("r"):
                match = _RES.match(line)
                if match:
                    conf.width = int(match.group(1))
                    if match.group(2) is not None:
                        conf.height = int(match.group(2))
            if line.startswith("f"):
                match = _FPS.match(line)
                if match:
                    conf.fps = int(match.group(1))
        elif conf.block is Block.COLORS:
            if line.startswith('"') and colors_added < _COLOR_SLOTS:
                conf.colors[colors_added] = parse_color(line)
                colors_added += 1
    return conf


def load_config(path: str | os.PathLike = DEFAULT_CONFIG_PATH) -> Config:
    """Read a configuration file; raises OSError if it cannot be read."""
    with open(path, encoding="utf-8") as handle:
        return parse_config(handle)