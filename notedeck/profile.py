"""Read access to profile metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Profile:
    """Profile metadata as decoded JSON; accessors yield strings or None."""

    value: Any

    def _text(self, key: str) -> str | None:
        if not isinstance(self.value, dict):
            return None
        found = self.value.get(key)
        return found if isinstance(found, str) else None

    def name(self) -> str | None:
        return self._text("name")

    def display_name(self) -> str | None:
        return self._text("display_name")

    def lud06(self) -> str | None:
        return self._text("lud06")

    def lud16(self) -> str | None:
        return self._text("lud16")

    def about(self) -> str | None:
        return self._text("about")

    def picture(self) -> str | None:
        return self._text("picture")

    def website(self) -> str | None:
        return self._text("website")