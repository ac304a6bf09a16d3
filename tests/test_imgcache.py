import pytest
from PIL import Image

from notedeck.imgcache import ImageCache, crockford_encode

_ALPHABET = set("0123456789ABCDEFGHJKMNPQRSTVWXYZ")


def test_crockford_known_value():
    assert crockford_encode(b"foobar") == "CSQPYRK1E8"


def test_crockford_empty():
    assert crockford_encode(b"") == ""


@pytest.mark.parametrize("data", [b"a", b"ab", b"abcde", bytes(range(37))])
def test_crockford_alphabet_and_length(data):
    encoded = crockford_encode(data)
    assert set(encoded) <= _ALPHABET
    assert len(encoded) == -(-len(data) * 8 // 5)


def test_key_encodes_url():
    url = "https://example.com/pic.png"
    assert ImageCache.key(url) == crockford_encode(url.encode())
    assert ImageCache.key(url) != ImageCache.key(url + "?x")


def test_rel_datadir():
    assert ImageCache.rel_datadir() == "cache/img"


def test_write_roundtrip(tmp_path):
    url = "https://example.com/avatar.png"
    image = Image.new("RGBA", (6, 4), (10, 200, 30, 255))
    image.putpixel((1, 2), (255, 0, 0, 255))
    ImageCache.write(tmp_path, url, image)
    path = tmp_path / ImageCache.key(url)
    with Image.open(path) as loaded:
        assert loaded.format == "WEBP"
        assert loaded.size == (6, 4)
        assert list(loaded.convert("RGBA").getdata()) == list(image.getdata())


def test_write_overwrites(tmp_path):
    url = "https://example.com/a.png"
    ImageCache.write(tmp_path, url, Image.new("RGBA", (8, 8), (0, 0, 0, 255)))
    ImageCache.write(tmp_path, url, Image.new("RGBA", (3, 3), (0, 0, 0, 255)))
    with Image.open(tmp_path / ImageCache.key(url)) as loaded:
        assert loaded.size == (3, 3)


def test_cache_starts_empty(tmp_path):
    cache = ImageCache(str(tmp_path))
    assert cache.url_imgs == {}
    assert cache.cache_dir == tmp_path