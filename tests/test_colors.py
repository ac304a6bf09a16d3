from dataclasses import replace

from notedeck.colors import (
    BLACK,
    DARKER_BG,
    PURPLE,
    WHITE,
    Color,
    desktop_dark_color_theme,
    light_color_theme,
    mobile_dark_color_theme,
)


def test_purple_value():
    assert PURPLE == Color(0xCC, 0x43, 0xC5)
    assert PURPLE.a == 255


def test_desktop_dark():
    theme = desktop_dark_color_theme()
    assert theme.panel_fill == DARKER_BG
    assert theme.text_color == WHITE
    assert theme.hyperlink_color == PURPLE


def test_mobile_differs_only_in_panel_fill():
    mobile = mobile_dark_color_theme()
    assert mobile.panel_fill == BLACK
    assert replace(mobile, panel_fill=DARKER_BG) == desktop_dark_color_theme()


def test_light_theme():
    theme = light_color_theme()
    assert theme.panel_fill == WHITE
    assert theme.text_color == BLACK
    assert theme.err_fg_color == desktop_dark_color_theme().err_fg_color


def test_black_and_white_are_opaque():
    assert BLACK == Color(0, 0, 0, 255)
    assert WHITE == Color(0xFF, 0xFF, 0xFF, 0xFF)