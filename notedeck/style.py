"""Text styles and the font sizes used on desktop and mobile."""

from __future__ import annotations

from enum import Enum
from typing import Callable


class FontFamily(Enum):
    PROPORTIONAL = "proportional"
    MONOSPACE = "monospace"


class NotedeckTextStyle(Enum):
    HEADING = "Heading"
    HEADING2 = "Heading2"
    HEADING3 = "Heading3"
    BODY = "Body"
    MONOSPACE = "Monospace"
    BUTTON = "Button"
    SMALL = "Small"

    def text_style(self) -> str:
        """Name of the text style this entry configures."""
        return self.value

    def font_family(self) -> FontFamily:
        if self is NotedeckTextStyle.MONOSPACE:
            return FontFamily.MONOSPACE
        return FontFamily.PROPORTIONAL


_DESKTOP_SIZES = {
    NotedeckTextStyle.HEADING: 48.0,
    NotedeckTextStyle.HEADING2: 24.0,
    NotedeckTextStyle.HEADING3: 20.0,
    NotedeckTextStyle.BODY: 16.0,
    NotedeckTextStyle.MONOSPACE: 13.0,
    NotedeckTextStyle.BUTTON: 13.0,
    NotedeckTextStyle.SMALL: 12.0,
}

_MOBILE_SIZES = {**_DESKTOP_SIZES, NotedeckTextStyle.BODY: 13.0}


def desktop_font_size(text_style: NotedeckTextStyle) -> float:
    return _DESKTOP_SIZES[text_style]


def mobile_font_size(text_style: NotedeckTextStyle) -> float:
    return _MOBILE_SIZES[text_style]


def text_style_sizes(
    font_size: Callable[[NotedeckTextStyle], float],
) -> dict[str, tuple[float, FontFamily]]:
    """Map every text style name to its font size and family."""
    return {
        style.text_style(): (font_size(style), style.font_family())
        for style in NotedeckTextStyle
    }