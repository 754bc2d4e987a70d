"""Player panel, transport buttons and track list."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence, Tuple

import pygame

from .audioplayer import AudioPlayer
from .config import Color, UiColor

Point = Tuple[float, float]
Rect = Tuple[float, float, float, float]

ICON_CODEPOINTS = (0x0001, 0xF04B, 0xF048, 0xF051, 0xF04C, 0xF0DE)

PANEL_ORIGIN: Point = (100.0, 200.0)
PANEL_SIZE: Point = (400.0, 400.0)
TITLE_AREA = (350, 100)
TITLE_SEPARATOR = " ** "
TITLE_CHAR_WIDTH = 7.35
TITLE_SPEED = 70.0
PANEL_ROUNDNESS = 0.1
BUTTON_FONT_SIZE = 40


class Icon(IntEnum):
    """Glyphs available to buttons."""

    NONE = 0
    PLAY = 1
    PREV = 2
    NEXT = 3
    PAUSE = 4
    UPARROW = 5
    DOWNARROW = 6


class ButtonType(IntEnum):
    """What a button does when pressed."""

    PLAY = 0
    PREV = 1
    NEXT = 2


@dataclass(frozen=True)
class MouseState:
    """Pointer position and left-button state for one frame."""

    position: Point = (0.0, 0.0)
    pressed: bool = False
    down: bool = False
    released: bool = False


def _contains(rect: Rect, point: Point) -> bool:
    x, y, w, h = rect
    px, py = point
    return x <= px < x + w and y <= py < y + h


def _pg_rect(rect: Rect) -> pygame.Rect:
    x, y, w, h = rect
    return pygame.Rect(int(x), int(y), max(int(w), 0), max(int(h), 0))


def _radius(rect: Rect, roundness: float) -> int:
    return int(roundness * min(rect[2], rect[3]) / 2)


def _clock(seconds: float) -> str:
    total = int(seconds)
    return f"{total // 60:02d}:{total % 60:02d}"[:5]


def _blit_text(
    surface: pygame.Surface,
    font: Optional[pygame.font.Font],
    text: str,
    pos: Point,
    size: float,
    color: Color,
) -> None:
    if font is None or not text:
        return
    image = font.render(text, True, color[:3])
    height = image.get_height()
    if height and height != int(size):
        scale = size / height
        image = pygame.transform.smoothscale(
            image, (max(1, int(image.get_width() * scale)), max(1, int(size)))
        )
    surface.blit(image, (int(pos[0]), int(pos[1])))


def scrolling_title(name: str) -> str:
    """Title text shown in the marquee: the name twice, each after a separator."""
    return f"{TITLE_SEPARATOR}{name}{TITLE_SEPARATOR}{name}"


@dataclass
class Button:
    """A clickable button placed relative to the panel."""

    kind: ButtonType
    offset: Point
    size: Point
    icon: Icon
    text: str = ""
    position: Point = (0.0, 0.0)
    hover: bool = False
    hidden: bool = False

    def rect(self) -> Rect:
        """Screen rectangle from the last update."""
        return (self.position[0], self.position[1], self.size[0], self.size[1])

    def update(self, ui: Ui, mouse: MouseState) -> None:
        """Track hover, fire on click, follow the panel and sync the play icon."""
        self.hover = _contains(self.rect(), mouse.position)
        if mouse.pressed and self.hover:
            self.on_press(ui)
        self.position = (self.offset[0] + ui.panel_pos[0], self.offset[1] + ui.panel_pos[1])
        if self.icon in (Icon.PLAY, Icon.PAUSE):
            self.icon = Icon.PLAY if ui.player.paused else Icon.PAUSE

    def draw(self, surface: pygame.Surface, ui: Ui) -> None:
        """Draw the button's label and icon."""
        if self.hidden:
            return
        x, y, w, h = self.rect()
        color = ui.colors[UiColor.HL if self.hover else UiColor.FG]
        _blit_text(surface, ui.font, self.text, (x + w * 0.25, y + h * 0.25), BUTTON_FONT_SIZE, color)

        if ui.symbols is None or self.icon >= len(ui.icons):
            return
        glyph = chr(ui.icons[self.icon])
        base = ui.symbols.get_height() or BUTTON_FONT_SIZE
        icon_w = int(ui.symbols.size(glyph)[0] * BUTTON_FONT_SIZE / base)
        icon_pos = (x + (w - icon_w) / 2, y + (h - BUTTON_FONT_SIZE) / 2 + 2)
        _blit_text(surface, ui.symbols, glyph, icon_pos, BUTTON_FONT_SIZE, color)

    def on_press(self, ui: Ui) -> None:
        """Run the player action bound to this button."""
        if self.kind is ButtonType.PLAY:
            ui.player.play_current()
        elif self.kind is ButtonType.PREV:
            ui.player.skip_rewind()
        elif self.kind is ButtonType.NEXT:
            ui.player.skip_next()


@dataclass
class Bar:
    """Progress bar placed relative to the panel."""

    rect: Rect = (10.0, 260.0, 380.0, 30.0)
    anchor: Point = PANEL_ORIGIN


@dataclass
class TrackTab:
    """List of tracks drawn at the top left of the window."""

    entry_count: int = 0
    position: Point = (0.0, 0.0)
    size: Point = (600.0, 40.0)
    offset: Point = (0.0, 0.0)


class Ui:
    """The draggable player panel with its buttons, plus the track list."""

    def __init__(
        self,
        player: AudioPlayer,
        colors: Sequence[Color],
        font: Optional[pygame.font.Font] = None,
        symbols: Optional[pygame.font.Font] = None,
    ) -> None:
        self.player = player
        self.colors: list[Color] = list(colors)
        self.font = font
        self.symbols = symbols
        self.icons: list[int] = list(ICON_CODEPOINTS)

        self.tab_open = True
        self.panel_drag = False
        self.panel_pos: Point = PANEL_ORIGIN
        self._drag_offset: Point = (0.0, 0.0)

        self.title_scroll = 0.0
        self.title_width = 0.0
        self._title_surface: Optional[pygame.Surface] = None

        self.buttons: list[Button] = []
        self.make_buttons()
        self.prog_bar = Bar(anchor=self.panel_pos)
        self.track_tab = TrackTab(entry_count=player.track_count)

    @property
    def panel_rect(self) -> Rect:
        return (self.panel_pos[0], self.panel_pos[1], PANEL_SIZE[0], PANEL_SIZE[1])

    def add_button(self, rect: Rect, icon: Icon, text: str, kind: ButtonType) -> Button:
        """Add a button whose offset and size come from ``rect``."""
        x, y, w, h = rect
        button = Button(kind=kind, offset=(x, y), size=(w, h), icon=icon, text=text)
        self.buttons.append(button)
        return button

    def make_buttons(self) -> None:
        """Create the previous, play and next buttons."""
        self.add_button((80, 300, 70, 60), Icon.PREV, "", ButtonType.PREV)
        self.add_button((160, 300, 70, 60), Icon.PLAY, "", ButtonType.PLAY)
        self.add_button((240, 300, 70, 60), Icon.NEXT, "", ButtonType.NEXT)

    def progress_rect(self) -> Rect:
        """Screen rectangle of the progress bar."""
        bx, by, bw, bh = self.prog_bar.rect
        return (bx + self.panel_pos[0], by + self.panel_pos[1], bw, bh)

    def _row_rect(self, index: int) -> Rect:
        w, h = self.track_tab.size
        return (0.0, h * (index + 1), w, h)

    def track_at(self, point: Point) -> Optional[int]:
        """Index of the track row under ``point``, or None."""
        if not self.tab_open:
            return None
        for index in range(self.track_tab.entry_count):
            if _contains(self._row_rect(index), point):
                return index
        return None

    def update(self, mouse: MouseState) -> None:
        """Handle panel interaction, then the buttons."""
        self.panel_update(mouse)
        for button in self.buttons:
            button.update(self, mouse)

    def panel_update(self, mouse: MouseState) -> None:
        """Seek on the progress bar, or drag the panel."""
        prog = self.progress_rect()
        if _contains(prog, mouse.position) and mouse.down:
            self.player.seek((mouse.position[0] - prog[0]) / prog[2])
            return

        if _contains(self.panel_rect, mouse.position) and mouse.pressed:
            self.panel_drag = True
            self._drag_offset = (
                mouse.position[0] - self.panel_pos[0],
                mouse.position[1] - self.panel_pos[1],
            )
        if mouse.released:
            self.panel_drag = False
        if self.panel_drag:
            self.panel_pos = (
                mouse.position[0] - self._drag_offset[0],
                mouse.position[1] - self._drag_offset[1],
            )

    def draw(self, surface: pygame.Surface, mouse: MouseState, dt: float) -> None:
        """Draw the track list, the panel and the buttons; a clicked row starts its track."""
        fg = self.colors[UiColor.FG]
        tab_w, tab_h = self.track_tab.size
        pygame.draw.rect(surface, fg, _pg_rect((0, 0, tab_w, tab_h)), 2)

        if self.tab_open:
            for index in range(self.track_tab.entry_count):
                playing = self.player.track_playing == index
                text_color = self.colors[UiColor.BGA if playing else UiColor.FG]
                fill_color = self.colors[UiColor.FG if playing else UiColor.BGA]
                row = self._row_rect(index)

                pygame.draw.rect(surface, fill_color, _pg_rect(row))
                pygame.draw.rect(surface, fg, _pg_rect(row), 2)
                _blit_text(surface, self.font, self.player.track_names[index], (10, row[1] + 10), 20, text_color)
                _blit_text(surface, self.font, self.player.length_labels[index], (490, row[1] + 10), 20, text_color)

                if _contains(row, mouse.position) and mouse.pressed:
                    self.player.load_track(index)
                    self.player.play_current()

        self.panel_draw(surface, dt)
        for button in self.buttons:
            button.draw(surface, self)

    def panel_draw(self, surface: pygame.Surface, dt: float) -> None:
        """Draw the panel, the scrolling title, the progress bar and the times."""
        player = self.player
        panel = self.panel_rect
        radius = _radius(panel, PANEL_ROUNDNESS)
        pygame.draw.rect(surface, self.colors[UiColor.BG], _pg_rect(panel), border_radius=radius)
        pygame.draw.rect(surface, self.colors[UiColor.FG], _pg_rect(panel), 2, border_radius=radius)

        self.title_scroll -= dt * TITLE_SPEED
        if self.title_scroll + self.title_width < -self.title_width:
            self.title_scroll = 0.0
        title = scrolling_title(player.track_names[player.track_playing])
        self.title_width = len(title) * TITLE_CHAR_WIDTH

        if self._title_surface is None:
            self._title_surface = pygame.Surface(TITLE_AREA, pygame.SRCALPHA)
        area = self._title_surface
        area.fill((0, 0, 0, 0))
        _blit_text(area, self.font, title, (self.title_scroll, 0), 30, self.colors[UiColor.FG])
        _blit_text(area, self.font, title, (self.title_scroll + self.title_width * 2, 0), 30, self.colors[UiColor.FG])
        surface.blit(area, (int(panel[0] + 10), int(panel[1] + panel[3] * 0.5)))

        prog = self.progress_rect()
        fill = (prog[0], prog[1], self.prog_bar.rect[2] * player.track_prog, prog[3])
        bar_radius = _radius(prog, PANEL_ROUNDNESS)
        pygame.draw.rect(surface, self.colors[UiColor.BGA], _pg_rect(prog), border_radius=bar_radius)
        pygame.draw.rect(surface, self.colors[UiColor.FG], _pg_rect(prog), 2, border_radius=bar_radius)
        if fill[2] >= 1:
            pygame.draw.rect(surface, self.colors[UiColor.FG], _pg_rect(fill), border_radius=bar_radius)

        label = f"{_clock(player.pb_time)}/{_clock(player.current_length)}"
        label_pos = (self.panel_pos[0] + prog[2] / 2 - 50, self.panel_pos[1] + 265)
        _blit_text(surface, self.font, label, label_pos, 22, self.colors[UiColor.HL])

    def close(self) -> None:
        """Drop the buttons and cached drawing surfaces."""
        self.buttons.clear()
        self._title_surface = None