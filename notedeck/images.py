"""Loading profile pictures: decoding, cropping, rounding and caching."""

from __future__ import annotations

import io
import logging
import math
from concurrent.futures import Future, ThreadPoolExecutor

import requests
from PIL import Image

from .errors import AppError
from .imgcache import ImageCache

log = logging.getLogger(__name__)

_EXECUTOR = ThreadPoolExecutor(max_workers=4, thread_name_prefix="img")
_TIMEOUT = 30.0


def round_image(image: Image.Image) -> None:
    """Cut the RGBA image to a circle in place, fading its one-pixel edge."""
    if image.mode != "RGBA":
        raise ValueError("round_image needs an RGBA image")
    width, height = image.size
    edge_radius = width / 2.0
    edge_radius_squared = edge_radius * edge_radius
    pixels = image.load()

    for y in range(height):
        y_offset = edge_radius - y
        for x in range(width):
            x_offset = edge_radius - x
            radius_squared = x_offset * x_offset + y_offset * y_offset
            if radius_squared <= edge_radius_squared:
                distance = edge_radius - math.sqrt(radius_squared)
                if distance <= 1.0:
                    pixels[x, y] = tuple(int(c * distance) for c in pixels[x, y])
            else:
                pixels[x, y] = (0, 0, 0, 0)


def process_pfp_bitmap(size: int, image: Image.Image) -> Image.Image:
    """Crop to a centred square, scale to ``size`` and round."""
    width, height = image.size
    smaller = min(width, height)
    if width > smaller:
        left = (width - smaller) // 2
        image = image.crop((left, 0, left + smaller, height))
    elif height > smaller:
        top = (height - smaller) // 2
        image = image.crop((0, top, width, top + smaller))
    image = image.resize((size, size), Image.Resampling.BICUBIC).convert("RGBA")
    round_image(image)
    return image


def parse_img_response(content_type: str, body: bytes, size: int) -> Image.Image:
    """Decode a fetched profile picture."""
    content_type = content_type or ""
    if content_type.startswith("image/svg"):
        raise AppError("SVG images are not supported")
    if content_type.startswith("image/"):
        try:
            with Image.open(io.BytesIO(body)) as decoded:
                decoded.load()
                image = decoded.copy()
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise AppError(str(exc)) from None
        return process_pfp_bitmap(size, image)
    raise AppError(f'Expected image, found content-type "{content_type}"')


def _load_from_disk(path) -> Image.Image:
    try:
        with Image.open(path) as stored:
            return stored.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise AppError(str(exc)) from None


def _load_from_net(cache_dir, url: str, size: int) -> Image.Image:
    try:
        response = requests.get(url, timeout=_TIMEOUT)
    except requests.RequestException as exc:
        raise AppError(str(exc)) from None
    image = parse_img_response(response.headers.get("Content-Type", ""), response.content, size)
    try:
        ImageCache.write(cache_dir, url, image)
    except (OSError, ValueError) as exc:
        log.warning("could not cache image %s: %s", url, exc)
    return image


def fetch_img(img_cache: ImageCache, url: str, size: int) -> Future:
    """Load a picture from the cache directory, or fetch it and cache it."""
    path = img_cache.cache_dir / ImageCache.key(url)
    if path.exists():
        return _EXECUTOR.submit(_load_from_disk, path)
    return _EXECUTOR.submit(_load_from_net, img_cache.cache_dir, url, size)