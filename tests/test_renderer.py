"""Tests del renderizador: distribución del teclado, hit testing y dibujo.

El dibujo se hace sobre frames de numpy, sin ventana.
"""

import numpy as np
import pytest

from core.calculator import Accumulator, format_result
from core.clock import DigitalClock
from core.menu import SlideMenu
from ui.renderer import (COLOR_CLEAR, COLOR_DIGIT, COLOR_OPERATOR, KEYPAD_ROWS,
                         UIRenderer, button_color, fit_display_text, to_ascii)


@pytest.fixture
def ui():
    return UIRenderer(480, 760)


# --- Teclado ---

def test_keypad_has_sixteen_buttons_in_row_order(ui):
    labels = [label for label, _ in ui.keypad_rects]
    assert labels == [label for row in KEYPAD_ROWS for label in row]


def test_button_at_finds_every_button(ui):
    for label, (x1, y1, x2, y2) in ui.keypad_rects:
        assert ui.button_at((x1 + x2) // 2, (y1 + y2) // 2) == label


def test_button_at_misses_gaps_and_display(ui):
    x1, y1, x2, y2 = dict(ui.keypad_rects)["7"]
    assert ui.button_at(x2 + 1, y1 + 5) is None
    assert ui.button_at(100, 100) is None


def test_keypad_fits_in_window(ui):
    for _, (x1, y1, x2, y2) in ui.keypad_rects:
        assert 0 <= x1 < x2 <= ui.width
        assert ui.display_rect[3] < y1 < y2 <= ui.height


@pytest.mark.parametrize("label, color", [
    ("7", COLOR_DIGIT),
    ("+", COLOR_OPERATOR),
    ("÷", COLOR_OPERATOR),
    ("=", COLOR_OPERATOR),
    ("C", COLOR_CLEAR),
])
def test_button_color(label, color):
    assert button_color(label) == color


def test_to_ascii():
    assert to_ascii("12 ×") == "12 x"
    assert to_ascii("3 ÷") == "3 /"


def test_menu_button_hit(ui):
    assert ui.menu_button_hit(30, 30)
    assert not ui.menu_button_hit(200, 30)


# --- Dibujo ---

def test_new_frame_shape(ui):
    frame = ui.new_frame()
    assert frame.shape == (760, 480, 3)
    assert frame.dtype == np.uint8


def test_draw_display_and_keypad_paint_pixels(ui):
    frame = ui.new_frame()
    blank = frame.copy()
    acc = Accumulator()
    for d in "123456789012":
        acc.input_digit(d)
    ui.draw_display(frame, acc)
    ui.draw_keypad(frame)
    assert not np.array_equal(frame, blank)


def test_draw_clock(ui):
    frame = ui.new_frame()
    blank = frame.copy()
    ui.draw_clock(frame, DigitalClock())
    assert not np.array_equal(frame, blank)


def test_hidden_menu_draws_nothing(ui):
    frame = ui.new_frame()
    blank = frame.copy()
    ui.draw_menu(frame, SlideMenu(), "calculadora")
    assert np.array_equal(frame, blank)


def test_feedback_expires(ui):
    ui.show_feedback("OK 5", duration=2)
    frame = ui.new_frame()
    ui.draw_feedback(frame)
    ui.draw_feedback(frame)
    assert ui.feedback_timer == 0
    blank = ui.new_frame()
    ui.draw_feedback(blank)
    assert np.array_equal(blank, ui.new_frame())


def test_flash_button_fades(ui):
    ui.flash_button("5", frames=1)
    frame = ui.new_frame()
    ui.draw_keypad(frame)
    assert ui.pressed_timer == 0


# --- Ajuste del número al display ---

def test_short_number_keeps_full_size():
    text, scale, _ = fit_display_text("12", 400)
    assert text == "12"
    assert scale == 2.6


def test_long_number_shrinks_before_truncating():
    text, scale, tw = fit_display_text("1234567890123", 400)
    assert text == "1234567890123"
    assert scale < 2.6
    assert tw <= 400


def test_huge_result_is_truncated_on_the_left(ui):
    huge = format_result(1e300)
    text, scale, tw = fit_display_text(huge, 400)
    assert scale == pytest.approx(0.6)
    assert text.startswith("...")
    assert huge.endswith(text[3:])
    assert tw <= 400


def test_huge_result_drawn_inside_display(ui):
    acc = Accumulator()
    acc.display_buffer = format_result(1e300)
    x1, _, x2, _ = ui.display_rect
    text, _, tw = fit_display_text(acc.get_display(), (x2 - x1) - 32)
    assert x2 - 16 - tw >= x1
    frame = ui.new_frame()
    ui.draw_display(frame, acc)
