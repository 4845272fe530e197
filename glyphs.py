from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

from errors import UnsupportedCharacter

@dataclass(frozen=True)
class Glyph:
    char: str
    rows: Tuple[str, ...]

    @property
    def width(self) -> int:
        return max((len(r) for r in self.rows), default=0)

    @property
    def height(self) -> int:
        return len(self.rows)

def _glyph(char: str, art: str) -> Glyph:
    # Leading newline of the triple-quoted art is dropped, trailing spaces are not significant
    lines = art.split("\n")[1:-1]
    return Glyph(char=char, rows=tuple(line.rstrip() for line in lines))

_ZERO = """
  ___
 / _ \\
| | | |
| |_| |
 \\___/
"""

_ONE = """
 _
/ |
| |
| |
|_|
"""

_TWO = """
 ____
|___ \\
  __) |
 / __/
|_____|
"""

_THREE = """
 _____
|___ /
  |_ \\
 ___) |
|____/
"""

_FOUR = """
 _  _
| || |
| || |_
|__   _|
   |_|
"""

_FIVE = """
 ____
| ___|
|___ \\
 ___) |
|____/
"""

_SIX = """
  __
 / /_
| '_ \\
| (_) |
 \\___/
"""

_SEVEN = """
 _____
|___  |
   / /
  / /
 /_/
"""

_EIGHT = """
  ___
 ( _ )
 / _ \\
| (_) |
 \\___/
"""

_NINE = """
  ___
 / _ \\
| (_) |
 \\__, |
   /_/
"""

_COLON = """

 _
(_)
 _
(_)
"""

GLYPHS = MappingProxyType({
    g.char: g for g in (
        _glyph("0", _ZERO),
        _glyph("1", _ONE),
        _glyph("2", _TWO),
        _glyph("3", _THREE),
        _glyph("4", _FOUR),
        _glyph("5", _FIVE),
        _glyph("6", _SIX),
        _glyph("7", _SEVEN),
        _glyph("8", _EIGHT),
        _glyph("9", _NINE),
        _glyph(":", _COLON),
    )
})

def lookup(char: str) -> Glyph:
    """
    Returns the ASCII-art glyph for a single character.
    Raises UnsupportedCharacter for anything outside 0-9 and ':'.
    """
    try:
        return GLYPHS[char]
    except KeyError:
        raise UnsupportedCharacter(char) from None
