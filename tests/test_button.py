import pygame
import pytest

from pongjb.button import Button


@pytest.fixture
def button():
    return Button("Play Again!", 10.0, 20.0)


def _inside(b):
    return (b.x + b.width / 2, b.y + b.height / 2)


def test_initial_state(button):
    assert button.text == "Play Again!"
    assert button.border_color == (255, 255, 255, 255)
    assert button.text_color == (0, 0, 0, 255)
    assert button.rect[:2] == (10.0, 20.0)


def test_border_is_padded_text(button):
    assert button.width > 20
    assert button.height > 20


def test_text_sits_inside_border(button):
    assert button.x < button.text_x < button.x + button.width
    assert button.y < button.text_y < button.y + button.height


def test_contains_edges(button):
    assert button.contains((button.x, button.y))
    assert not button.contains((button.x + button.width, button.y))
    assert not button.contains((button.x, button.y + button.height))
    assert not button.contains((button.x - 1, button.y))


def test_hover(button):
    button.on_hover(_inside(button))
    assert button.border_color == (255, 255, 255, 150)
    button.on_hover((0.0, 0.0))
    assert button.border_color == (255, 255, 255, 255)


def test_click_inside_calls_action(button):
    calls = []
    button.on_click_action = lambda: calls.append(True)
    button.on_click(_inside(button), True)
    assert calls == [True]
    assert button.border_color == (255, 255, 255, 50)
    button.on_click(_inside(button), False)
    assert button.border_color == (255, 255, 255, 150)
    assert calls == [True]


def test_click_outside_ignored(button):
    calls = []
    button.on_click_action = lambda: calls.append(True)
    button.on_click((0.0, 0.0), True)
    assert calls == []
    assert button.border_color == (255, 255, 255, 255)


def test_other_event_ignored(button):
    calls = []
    button.on_click_action = lambda: calls.append(True)
    button.on_click(_inside(button), None)
    assert calls == []
    assert button.border_color == (255, 255, 255, 255)


def test_click_without_action(button):
    button.on_click(_inside(button), True)
    assert button.border_color == (255, 255, 255, 50)


def test_visibility(button):
    button.set_visibility(True)
    assert button.border_color == (0, 0, 0, 0)
    assert button.text_color == (0, 0, 0, 0)
    button.set_visibility(False)
    assert button.border_color == (255, 255, 255, 255)
    assert button.text_color == (0, 0, 0, 255)


def test_set_position_keeps_text_offset(button):
    offset = (button.text_x - button.x, button.text_y - button.y)
    size = (button.width, button.height)
    button.set_position(300.0, 400.0)
    assert button.rect[:2] == (300.0, 400.0)
    assert (button.text_x - 300.0, button.text_y - 400.0) == pytest.approx(offset)
    assert (button.width, button.height) == size


def test_set_text_resizes(button):
    width = button.width
    button.set_text("Play Again! Play Again!")
    assert button.text == "Play Again! Play Again!"
    assert button.width > width


def test_set_text_size_resizes(button):
    width, height = button.width, button.height
    button.set_text_size(30)
    assert button.text_size == 30
    assert button.width > width
    assert button.height > height


def test_draw_fills_border():
    b = Button("Hi", 5.0, 5.0)
    surface = pygame.Surface((200, 100))
    surface.fill((0, 0, 0))
    b.draw(surface)
    assert surface.get_at((5, 5))[:3] == (255, 255, 255)
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)


def test_draw_transparent_leaves_surface():
    b = Button("Hi", 5.0, 5.0)
    b.set_visibility(True)
    surface = pygame.Surface((200, 100))
    surface.fill((0, 0, 0))
    b.draw(surface)
    assert surface.get_at((5, 5))[:3] == (0, 0, 0)