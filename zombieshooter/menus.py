"""Menu layouts, keyboard selection, mouse hit-testing and tutorial slides."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .defs import SCREEN_HEIGHT, SCREEN_WIDTH

Measure = Callable[[str], tuple[int, int]]
Rect = tuple[int, int, int, int]

HIGHLIGHT_COLOR = (0, 255, 0, 255)
NORMAL_COLOR = (255, 255, 255, 255)


@dataclass
class Menu:
    """A vertical list of text items and the item chosen with the keyboard.

    Items are laid out from (start_x, start_y), one every ``spacing`` pixels;
    a centred menu places each item around the middle of the screen instead.
    """

    labels: tuple[str, ...]
    start_x: int = 0
    start_y: int = 0
    spacing: int = 0
    centered: bool = False
    index: int = 0

    @property
    def selected_label(self) -> str:
        return self.labels[self.index]

    def move(self, step: int) -> None:
        """Move the keyboard selection, wrapping around at either end."""
        self.index = (self.index + step) % len(self.labels)

    @staticmethod
    def _size(label: str, text_size: Optional[Measure]) -> tuple[int, int]:
        if text_size is None:
            return 0, 0
        width, height = text_size(label)
        return int(width), int(height)

    def item_rect(self, index: int, text_size: Optional[Measure]) -> Rect:
        """Screen rectangle (x, y, w, h) of one item.

        ``text_size`` measures a label; without it items have no size.
        """
        if not 0 <= index < len(self.labels):
            raise IndexError(f"no menu item at index {index}")
        width, height = self._size(self.labels[index], text_size)
        if self.centered:
            x = SCREEN_WIDTH // 2 - width // 2
            y = SCREEN_HEIGHT // 2 + index * self.spacing - height // 2
        else:
            x = self.start_x
            y = self.start_y + index * self.spacing
        return x, y, width, height

    def item_at(
        self, pos: tuple[int, int], text_size: Optional[Measure], inclusive: bool = False
    ) -> Optional[int]:
        """Index of the first item under ``pos``, or None.

        With ``inclusive`` the right and bottom edges belong to the item.
        """
        px, py = pos
        for index in range(len(self.labels)):
            x, y, width, height = self.item_rect(index, text_size)
            if inclusive:
                inside = x <= px <= x + width and y <= py <= y + height
            else:
                inside = x <= px < x + width and y <= py < y + height
            if inside:
                return index
        return None

    def highlighted(self, hovered: Optional[int]) -> int:
        """The item drawn highlighted: the hovered one, else the selected one."""
        return self.index if hovered is None else hovered

    def colors(self, hovered: Optional[int]) -> list[tuple[int, int, int, int]]:
        """Draw colour of every item."""
        lit = self.highlighted(hovered)
        return [HIGHLIGHT_COLOR if i == lit else NORMAL_COLOR for i in range(len(self.labels))]


def main_menu() -> Menu:
    return Menu(("Play", "Tutorial", "Settings", "Quit"), 700, 200, 100)


def pause_menu() -> Menu:
    return Menu(
        ("Resume", "Settings", "Restart", "Exit to Main Menu", "Quit Game"),
        SCREEN_WIDTH // 2 - 100,
        200,
        60,
    )


def mode_selection_menu() -> Menu:
    return Menu(("Survivor Mode", "Dungeon Mode"), spacing=40, centered=True)


TUTORIAL_SLIDE_PATHS = (
    "img/slide1.png",
    "img/slide2.png",
    "img/slide3.png",
    "img/slide4.png",
)


@dataclass
class TutorialSlides:
    """Which tutorial slide is showing; later slides switch on more of the game."""

    count: int = len(TUTORIAL_SLIDE_PATHS)
    current: int = 0

    @property
    def shows_fighters(self) -> bool:
        return self.current >= 1

    @property
    def spawns_enemies(self) -> bool:
        return self.current >= 2

    def next(self) -> bool:
        """Go one slide forward; False when already on the last slide."""
        if self.current < self.count - 1:
            self.current += 1
            return True
        return False

    def previous(self) -> bool:
        """Go one slide back; False when already on the first slide."""
        if self.current > 0:
            self.current -= 1
            return True
        return False

    def reset(self) -> None:
        self.current = 0