"""On-disk cache of profile pictures, keyed by URL."""

from __future__ import annotations

import base64
from concurrent.futures import Future
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

_RFC_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
_CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_TO_CROCKFORD = str.maketrans(_RFC_ALPHABET, _CROCKFORD_ALPHABET)


def crockford_encode(data: bytes) -> str:
    """Base32 with Crockford's alphabet and no padding."""
    return base64.b32encode(data).decode("ascii").rstrip("=").translate(_TO_CROCKFORD)


@dataclass
class ImageCache:
    """A cache directory plus the images being loaded, by URL."""

    cache_dir: Path
    url_imgs: dict[str, Future] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.cache_dir = Path(self.cache_dir)

    @staticmethod
    def rel_datadir() -> str:
        return "cache/img"

    @staticmethod
    def key(url: str) -> str:
        return crockford_encode(url.encode("utf-8"))

    @staticmethod
    def write(cache_dir: Path | str, url: str, image: Image.Image) -> None:
        """Store the image as lossless WebP under the URL's key."""
        path = Path(cache_dir) / ImageCache.key(url)
        image.convert("RGBA").save(path, format="WEBP", lossless=True)