from typing import List

import glyphs
from glyphs import Glyph

GLYPH_PADDING = 1

def format_time(minutes: int, seconds: int) -> str:
    """
    Formats a time as MM:SS. Minutes are not clamped, 125 minutes is "125:00".
    """
    if minutes < 0:
        raise ValueError(f"minutes must be non-negative, got {minutes}")
    if not 0 <= seconds <= 59:
        raise ValueError(f"seconds must be in 0..59, got {seconds}")
    return f"{minutes:02d}:{seconds:02d}"

def block_width(block: List[str]) -> int:
    return max((len(row) for row in block), default=0)

def merge_glyph(block: List[str], glyph: Glyph, padding: int = GLYPH_PADDING) -> List[str]:
    """
    Appends a glyph to the right of a block.
    Missing rows on either side count as empty and everything is left-justified,
    so the result is rectangular.
    """
    current_width = block_width(block)
    glyph_width = glyph.width + padding
    merged = []
    for i in range(max(len(block), glyph.height)):
        left = block[i] if i < len(block) else ""
        right = glyph.rows[i] if i < glyph.height else ""
        merged.append(left.ljust(current_width) + right.ljust(glyph_width))
    return merged

def render_text(text: str) -> List[str]:
    block: List[str] = []
    for char in text:
        block = merge_glyph(block, glyphs.lookup(char))

    # Only whole blank rows at the bottom go, row width is kept
    while block and not block[-1].strip():
        block.pop()
    return block

def render_time(minutes: int, seconds: int) -> List[str]:
    """
    Renders minutes and seconds as one ASCII-art block.
    """
    return render_text(format_time(minutes, seconds))
