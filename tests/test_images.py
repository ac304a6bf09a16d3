import io
from unittest import mock

import pytest
from PIL import Image

from notedeck.errors import AppError
from notedeck.images import fetch_img, parse_img_response, process_pfp_bitmap, round_image
from notedeck.imgcache import ImageCache


def _png(width, height, color=(200, 100, 50, 255)):
    buf = io.BytesIO()
    Image.new("RGBA", (width, height), color).save(buf, format="PNG")
    return buf.getvalue()


def test_round_image_corners_and_centre():
    image = Image.new("RGBA", (10, 10), (255, 255, 255, 255))
    round_image(image)
    assert image.getpixel((0, 0)) == (0, 0, 0, 0)
    assert image.getpixel((9, 0)) == (0, 0, 0, 0)
    assert image.getpixel((5, 5)) == (255, 255, 255, 255)


def test_round_image_never_brightens():
    image = Image.new("RGBA", (16, 16), (120, 80, 40, 255))
    round_image(image)
    for r, g, b, a in image.getdata():
        assert r <= 120 and g <= 80 and b <= 40 and a <= 255


def test_round_image_needs_rgba():
    with pytest.raises(ValueError):
        round_image(Image.new("RGB", (4, 4)))


@pytest.mark.parametrize("dims", [(20, 10), (10, 20), (12, 12)])
def test_process_pfp_bitmap_square(dims):
    result = process_pfp_bitmap(8, Image.new("RGB", dims, (10, 20, 30)))
    assert result.size == (8, 8)
    assert result.mode == "RGBA"
    assert result.getpixel((0, 0)) == (0, 0, 0, 0)


def test_parse_png():
    result = parse_img_response("image/png", _png(30, 20), 16)
    assert result.size == (16, 16)


def test_parse_wrong_content_type():
    with pytest.raises(AppError, match="text/html"):
        parse_img_response("text/html", b"<html></html>", 16)


def test_parse_svg_rejected():
    with pytest.raises(AppError):
        parse_img_response("image/svg+xml", b"<svg/>", 16)


def test_parse_broken_image():
    with pytest.raises(AppError):
        parse_img_response("image/png", b"not an image", 16)


def test_fetch_from_disk(tmp_path):
    cache = ImageCache(tmp_path)
    url = "https://example.com/cached.png"
    ImageCache.write(tmp_path, url, Image.new("RGBA", (5, 7), (1, 2, 3, 255)))
    result = fetch_img(cache, url, 64).result(timeout=10)
    assert result.size == (5, 7)
    assert result.getpixel((0, 0)) == (1, 2, 3, 255)


def test_fetch_from_net_writes_cache(tmp_path):
    cache = ImageCache(tmp_path)
    url = "https://example.com/remote.png"
    response = mock.Mock(headers={"Content-Type": "image/png"}, content=_png(40, 40))
    with mock.patch("requests.get", return_value=response) as get:
        result = fetch_img(cache, url, 12).result(timeout=10)
    get.assert_called_once()
    assert result.size == (12, 12)
    assert (tmp_path / ImageCache.key(url)).exists()


def test_fetch_from_net_bad_content(tmp_path):
    cache = ImageCache(tmp_path)
    response = mock.Mock(headers={"Content-Type": "text/plain"}, content=b"hello")
    with mock.patch("requests.get", return_value=response):
        future = fetch_img(cache, "https://example.com/x", 12)
        with pytest.raises(AppError):
            future.result(timeout=10)