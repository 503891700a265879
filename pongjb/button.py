"""A clickable text button with a filled border."""

from __future__ import annotations

import os
from collections.abc import Callable

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
TRANSPARENT: Color = (0, 0, 0, 0)
HOVER: Color = (255, 255, 255, 150)
PRESSED: Color = (255, 255, 255, 50)

PADDING = 20
DEFAULT_TEXT_SIZE = 20


class Button:
    """Text inside a padded rectangle that reacts to hover and clicks."""

    def __init__(self, text: str, x: float = 0.0, y: float = 0.0, font_path: str | None = None) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self._font_path = font_path
        self._text = text
        self._text_size = DEFAULT_TEXT_SIZE
        self._font = pygame.font.Font(font_path, self._text_size)
        self.x = x
        self.y = y
        self.width = 0.0
        self.height = 0.0
        self.text_x = 0.0
        self.text_y = 0.0
        self.text_color: Color = BLACK
        self.border_color: Color = WHITE
        self.on_click_action: Callable[[], None] | None = None
        self._resize_border()
        self._center_text()

    @property
    def text(self) -> str:
        return self._text

    @property
    def text_size(self) -> int:
        return self._text_size

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """Border rectangle as ``(left, top, width, height)``."""
        return (self.x, self.y, self.width, self.height)

    def _text_extent(self) -> tuple[int, int]:
        return self._font.size(self._text)

    def _center_text(self) -> None:
        text_w, text_h = self._text_extent()
        self.text_x = self.x + ((text_w + PADDING) / 2 - text_w / 2)
        self.text_y = self.y + ((text_h + PADDING - 10) / 2 - text_h / 2)

    def _resize_border(self) -> None:
        text_w, text_h = self._text_extent()
        self.width = text_w + PADDING
        self.height = text_h + PADDING

    def contains(self, point: tuple[float, float]) -> bool:
        """Whether ``point`` lies inside the border (right and bottom edges excluded)."""
        px, py = point
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    def on_hover(self, mouse_pos: tuple[float, float]) -> None:
        """Dim the border while the mouse is over it."""
        self.border_color = HOVER if self.contains(mouse_pos) else WHITE

    def on_click(self, mouse_pos: tuple[float, float], pressed: bool | None) -> None:
        """React to a mouse event: ``True`` for press, ``False`` for release, ``None`` for anything else."""
        if not self.contains(mouse_pos) or pressed is None:
            return
        if pressed:
            self.border_color = PRESSED
            if self.on_click_action is not None:
                self.on_click_action()
        else:
            self.border_color = HOVER

    def set_visibility(self, visible: bool) -> None:
        """Make the button transparent when ``visible`` is true; white with black text otherwise."""
        if visible:
            self.border_color = TRANSPARENT
            self.text_color = TRANSPARENT
        else:
            self.border_color = WHITE
            self.text_color = BLACK

    def set_position(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self._center_text()

    def set_text(self, text: str) -> None:
        self._text = text
        self._resize_border()

    def set_text_size(self, size: int) -> None:
        self._text_size = size
        self._font = pygame.font.Font(self._font_path, size)
        self._resize_border()

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the border and then the text onto ``surface``."""
        border = pygame.Surface((max(int(self.width), 0), max(int(self.height), 0)), pygame.SRCALPHA)
        border.fill(self.border_color)
        surface.blit(border, (round(self.x), round(self.y)))
        rendered = self._font.render(self._text, True, self.text_color[:3])
        rendered.set_alpha(self.text_color[3])
        surface.blit(rendered, (round(self.text_x), round(self.text_y)))