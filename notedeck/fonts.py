"""Font families and the fallback order of their fonts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .style import FontFamily


class NamedFontFamily(Enum):
    MEDIUM = "medium"

    def as_str(self) -> str:
        return self.value


@dataclass(frozen=True)
class FontTweak:
    """Adjustments applied to a font so it lines up with the others."""

    scale: float = 1.0
    y_offset_factor: float = 0.0
    y_offset: float = 0.0
    baseline_offset_factor: float = 0.0


_BASE_FONTS = ("DejaVuSans", "NotoEmoji", "NotoSansCJK")


def font_tweaks() -> dict[str, FontTweak]:
    """Tweaks for the fonts that need them, by font name."""
    return {
        # Smaller than DejaVuSans and sits too low.
        "Inconsolata": FontTweak(scale=1.22, y_offset_factor=-0.18),
        "NotoEmoji": FontTweak(scale=1.1),
    }


def font_families() -> dict[str, list[str]]:
    """Font names of each family, in order of preference."""
    return {
        FontFamily.PROPORTIONAL.value: ["Onest", *_BASE_FONTS],
        FontFamily.MONOSPACE.value: ["Inconsolata", *_BASE_FONTS],
        NamedFontFamily.MEDIUM.as_str(): ["OnestMedium", *_BASE_FONTS],
    }