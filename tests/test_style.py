import pytest

from notedeck.style import (
    FontFamily,
    NotedeckTextStyle,
    desktop_font_size,
    mobile_font_size,
    text_style_sizes,
)


def test_desktop_sizes_from_source():
    assert desktop_font_size(NotedeckTextStyle.HEADING) == 48.0
    assert desktop_font_size(NotedeckTextStyle.BODY) == 16.0
    assert desktop_font_size(NotedeckTextStyle.SMALL) == 12.0


def test_mobile_body_is_smaller():
    assert mobile_font_size(NotedeckTextStyle.BODY) == 13.0
    assert mobile_font_size(NotedeckTextStyle.BODY) < desktop_font_size(NotedeckTextStyle.BODY)


@pytest.mark.parametrize(
    "style", [s for s in NotedeckTextStyle if s is not NotedeckTextStyle.BODY]
)
def test_mobile_matches_desktop_except_body(style):
    assert mobile_font_size(style) == desktop_font_size(style)


def test_monospace_uses_monospace_family():
    assert NotedeckTextStyle.MONOSPACE.font_family() is FontFamily.MONOSPACE


@pytest.mark.parametrize(
    "name", [s.name for s in NotedeckTextStyle if s is not NotedeckTextStyle.MONOSPACE]
)
def test_other_styles_use_proportional_family(name):
    style = NotedeckTextStyle[name]
    assert style.font_family() is FontFamily.PROPORTIONAL
    sizes = text_style_sizes(desktop_font_size)
    assert sizes[style.text_style()][1] is FontFamily.PROPORTIONAL


def test_text_style_names():
    assert NotedeckTextStyle.HEADING2.text_style() == "Heading2"
    assert NotedeckTextStyle.BODY.text_style() == "Body"


def test_text_style_sizes_covers_every_style():
    sizes = text_style_sizes(desktop_font_size)
    assert set(sizes) == {s.text_style() for s in NotedeckTextStyle}
    assert sizes["Heading"] == (48.0, FontFamily.PROPORTIONAL)
    assert sizes["Monospace"] == (13.0, FontFamily.MONOSPACE)


def test_text_style_sizes_uses_given_function():
    sizes = text_style_sizes(mobile_font_size)
    assert sizes["Body"][0] == mobile_font_size(NotedeckTextStyle.BODY)