"""Tests del menú lateral: toggle, animación, hit test y selección."""

import pytest

from core.menu import SlideMenu


@pytest.fixture
def menu():
    return SlideMenu(speed=4.0)


def test_starts_closed_and_hidden(menu):
    assert menu.is_open is False
    assert menu.is_visible is False
    assert [screen for screen, _ in menu.items] == ["calculadora", "reloj"]


def test_toggle_flips_target_state(menu):
    menu.toggle()
    assert menu.is_open is True
    menu.toggle()
    assert menu.is_open is False


# --- Animación ---

def test_update_slides_in_and_clamps(menu):
    menu.open()
    assert menu.update(0.125) == pytest.approx(0.5)
    assert menu.is_visible
    assert menu.update(10.0) == 1.0


def test_update_slides_out_and_clamps(menu):
    menu.open()
    menu.update(1.0)
    menu.close()
    assert menu.update(0.125) == pytest.approx(0.5)
    assert menu.update(10.0) == 0.0
    assert menu.is_visible is False


def test_negative_dt_does_not_move(menu):
    menu.open()
    assert menu.update(-1.0) == 0.0


# --- Hit test y selección ---

def test_item_at_when_hidden(menu):
    assert menu.item_at(10, 100, 280, 64, 88) is None


def test_item_at_when_open(menu):
    menu.open()
    menu.update(1.0)
    assert menu.item_at(10, 88, 280, 64, 88) == 0
    assert menu.item_at(10, 88 + 64, 280, 64, 88) == 1
    assert menu.item_at(10, 88 + 64 * 2, 280, 64, 88) is None
    assert menu.item_at(300, 100, 280, 64, 88) is None
    assert menu.item_at(10, 40, 280, 64, 88) is None


def test_item_at_respects_partial_slide(menu):
    menu.open()
    menu.update(0.125)
    assert menu.item_at(100, 100, 280, 64, 88) == 0
    assert menu.item_at(200, 100, 280, 64, 88) is None


def test_select_returns_screen_and_closes(menu):
    menu.open()
    assert menu.select(1) == "reloj"
    assert menu.is_open is False


@pytest.mark.parametrize("index", [-1, 2])
def test_select_out_of_range(menu, index):
    with pytest.raises(IndexError):
        menu.select(index)
