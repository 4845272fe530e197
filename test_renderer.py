import pytest

import glyphs
import renderer
from errors import UnsupportedCharacter
from glyphs import Glyph

@pytest.fixture
def tiny_glyphs(monkeypatch):
    table = {c: Glyph(char=c, rows=(c,)) for c in "0123456789:"}
    monkeypatch.setattr(glyphs, "GLYPHS", table)
    return table

def test_format_time_pads_fields():
    assert renderer.format_time(0, 0) == "00:00"
    assert renderer.format_time(5, 7) == "05:07"
    assert renderer.format_time(59, 59) == "59:59"

def test_format_time_does_not_truncate_long_durations():
    assert renderer.format_time(125, 0) == "125:00"

@pytest.mark.parametrize("minutes, seconds", [(-1, 0), (0, 60), (0, -1)])
def test_format_time_rejects_out_of_range(minutes, seconds):
    with pytest.raises(ValueError):
        renderer.format_time(minutes, seconds)

def test_single_row_glyphs(tiny_glyphs):
    block = renderer.render_time(0, 0)
    assert block == ["0 0 : 0 0 "]
    assert block[0].rstrip() == "0 0 : 0 0"

def test_three_row_glyphs(monkeypatch):
    monkeypatch.setattr(glyphs, "GLYPHS", {
        "0": Glyph(char="0", rows=("#", "#", "#")),
        ":": Glyph(char=":", rows=("", ".", "")),
    })
    block = renderer.render_time(0, 0)
    assert block == [
        "# #   # # ",
        "# # . # # ",
        "# #   # # ",
    ]

def test_merge_glyph_pads_uneven_rows():
    block = renderer.merge_glyph(["ab"], Glyph(char="x", rows=("x", "xyz")))
    assert block == ["abx   ", "  xyz "]

def test_trailing_blank_rows_are_trimmed(monkeypatch):
    monkeypatch.setattr(glyphs, "GLYPHS", {"1": Glyph(char="1", rows=("|", "", ""))})
    assert renderer.render_text("11") == ["| | "]

@pytest.mark.parametrize("minutes, seconds", [(0, 0), (1, 11), (25, 0), (59, 59), (125, 8)])
def test_rendered_block_is_rectangular(minutes, seconds):
    text = renderer.format_time(minutes, seconds)
    block = renderer.render_time(minutes, seconds)

    assert len(block) == max(glyphs.lookup(c).height for c in text)
    widths = {len(row) for row in block}
    assert widths == {sum(glyphs.lookup(c).width + 1 for c in text)}

def test_render_is_pure():
    assert renderer.render_time(12, 34) == renderer.render_time(12, 34)

def test_unsupported_character_propagates():
    with pytest.raises(UnsupportedCharacter):
        renderer.render_text("12-34")
