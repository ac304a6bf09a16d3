"""Colour palette and themes."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255


WHITE = Color(0xFF, 0xFF, 0xFF)
BLACK = Color(0x00, 0x00, 0x00)

PURPLE = Color(0xCC, 0x43, 0xC5)
GRAY_SECONDARY = Color(0x8A, 0x8A, 0x8A)
RED_700 = Color(0xC7, 0x37, 0x5A)
GREEN_700 = Color(0x24, 0xEC, 0xC9)
ORANGE_700 = Color(0xF6, 0xB1, 0x4A)

SEMI_DARKER_BG = Color(0x39, 0x39, 0x39)
DARKER_BG = Color(0x1F, 0x1F, 0x1F)
DARK_BG = Color(0x2C, 0x2C, 0x2C)
DARK_ISH_BG = Color(0x22, 0x22, 0x22)
SEMI_DARK_BG = Color(0x44, 0x44, 0x44)

LIGHTER_GRAY = Color(0xE8, 0xE8, 0xE8)
LIGHT_GRAY = Color(0xC8, 0xC8, 0xC8)
MID_GRAY = Color(0xBD, 0xBD, 0xBD)
DARKER_GRAY = Color(0xA5, 0xA5, 0xA5)
EVEN_DARKER_GRAY = Color(0x89, 0x89, 0x89)


@dataclass(frozen=True)
class ColorTheme:
    """Colours that the user interface is themed with."""

    panel_fill: Color
    extreme_bg_color: Color
    text_color: Color
    err_fg_color: Color
    warn_fg_color: Color
    hyperlink_color: Color
    selection_color: Color
    window_fill: Color
    window_stroke_color: Color
    noninteractive_bg_fill: Color
    noninteractive_weak_bg_fill: Color
    noninteractive_bg_stroke_color: Color
    noninteractive_fg_stroke_color: Color
    inactive_bg_stroke_color: Color
    inactive_bg_fill: Color
    inactive_weak_bg_fill: Color


def desktop_dark_color_theme() -> ColorTheme:
    return ColorTheme(
        panel_fill=DARKER_BG,
        extreme_bg_color=SEMI_DARKER_BG,
        text_color=WHITE,
        err_fg_color=RED_700,
        warn_fg_color=ORANGE_700,
        hyperlink_color=PURPLE,
        selection_color=GREEN_700,
        window_fill=DARK_ISH_BG,
        window_stroke_color=DARK_BG,
        noninteractive_bg_fill=DARK_ISH_BG,
        noninteractive_weak_bg_fill=SEMI_DARKER_BG,
        noninteractive_bg_stroke_color=DARK_BG,
        noninteractive_fg_stroke_color=GRAY_SECONDARY,
        inactive_bg_stroke_color=SEMI_DARKER_BG,
        inactive_bg_fill=Color(0x25, 0x25, 0x25),
        inactive_weak_bg_fill=SEMI_DARK_BG,
    )


def mobile_dark_color_theme() -> ColorTheme:
    return replace(desktop_dark_color_theme(), panel_fill=BLACK)


def light_color_theme() -> ColorTheme:
    return ColorTheme(
        panel_fill=WHITE,
        extreme_bg_color=EVEN_DARKER_GRAY,
        text_color=BLACK,
        err_fg_color=RED_700,
        warn_fg_color=ORANGE_700,
        hyperlink_color=PURPLE,
        selection_color=GREEN_700,
        window_fill=WHITE,
        window_stroke_color=DARKER_GRAY,
        noninteractive_bg_fill=WHITE,
        noninteractive_weak_bg_fill=EVEN_DARKER_GRAY,
        noninteractive_bg_stroke_color=LIGHTER_GRAY,
        noninteractive_fg_stroke_color=GRAY_SECONDARY,
        inactive_bg_stroke_color=EVEN_DARKER_GRAY,
        inactive_bg_fill=LIGHT_GRAY,
        inactive_weak_bg_fill=EVEN_DARKER_GRAY,
    )