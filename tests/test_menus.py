import pytest

from zombieshooter.defs import SCREEN_WIDTH
from zombieshooter.menus import (
    HIGHLIGHT_COLOR,
    NORMAL_COLOR,
    TutorialSlides,
    main_menu,
    mode_selection_menu,
    pause_menu,
)


def measure(label):
    return (len(label) * 10, 20)


def test_main_menu_labels():
    assert main_menu().labels == ("Play", "Tutorial", "Settings", "Quit")


def test_pause_menu_labels():
    assert pause_menu().labels[-1] == "Quit Game"
    assert len(pause_menu().labels) == 5


def test_move_wraps_both_ways():
    menu = main_menu()
    menu.move(-1)
    assert menu.index == len(menu.labels) - 1
    menu.move(1)
    assert menu.index == 0
    assert menu.selected_label == "Play"


def test_item_rect_layout():
    menu = main_menu()
    assert menu.item_rect(0, measure) == (700, 200, 40, 20)
    first = menu.item_rect(1, measure)
    second = menu.item_rect(2, measure)
    assert second[1] - first[1] == menu.spacing
    assert second[0] == first[0]


def test_item_rect_out_of_range():
    with pytest.raises(IndexError):
        main_menu().item_rect(4, measure)


def test_item_at_edges():
    menu = main_menu()
    x, y, w, h = menu.item_rect(1, measure)
    assert menu.item_at((x, y), measure) == 1
    assert menu.item_at((x + w, y), measure) is None
    assert menu.item_at((x + w, y), measure, inclusive=True) == 1
    assert menu.item_at((0, 0), measure, inclusive=True) is None


def test_item_at_without_font():
    menu = main_menu()
    assert menu.item_at((700, 200), None) is None
    assert menu.item_at((700, 200), None, inclusive=True) == 0


def test_mode_selection_is_centred():
    menu = mode_selection_menu()
    x, _, w, _ = menu.item_rect(0, lambda label: (120, 30))
    assert x + w // 2 == SCREEN_WIDTH // 2
    assert menu.labels == ("Survivor Mode", "Dungeon Mode")


def test_highlight_prefers_hover():
    menu = pause_menu()
    menu.move(2)
    assert menu.highlighted(None) == 2
    assert menu.highlighted(4) == 4
    colors = menu.colors(4)
    assert colors[4] == HIGHLIGHT_COLOR
    assert colors[2] == NORMAL_COLOR


def test_tutorial_slides_forward_and_back():
    slides = TutorialSlides()
    assert slides.previous() is False
    moves = [slides.next() for _ in range(4)]
    assert moves == [True, True, True, False]
    assert slides.current == slides.count - 1
    assert slides.spawns_enemies
    slides.reset()
    assert slides.current == 0
    assert not slides.shows_fighters


def test_tutorial_stages_unlock():
    slides = TutorialSlides()
    slides.next()
    assert slides.shows_fighters and not slides.spawns_enemies