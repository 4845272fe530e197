import shutil
from contextlib import contextmanager
from typing import Iterator, List, Tuple

from rich.console import Console
from rich.style import Style
from rich.text import Text

from layout import LayoutStyle

FALLBACK_SIZE = (80, 24)

def query_terminal_size() -> Tuple[int, int]:
    """
    Current (width, height) in character cells, (80, 24) when unknown.
    Never cached; the terminal may be resized between frames.
    """
    size = shutil.get_terminal_size(fallback=FALLBACK_SIZE)
    return size.columns, size.lines

def clear_screen(console: Console):
    console.clear()

@contextmanager
def hidden_cursor(console: Console) -> Iterator[None]:
    console.show_cursor(False)
    try:
        yield
    finally:
        console.show_cursor(True)

def styled(text: str, style: LayoutStyle) -> Text:
    return Text(text, style=Style(color=style.foreground, bgcolor=style.background))

def paint(console: Console, rows: List[str], style: LayoutStyle, width: int = 0):
    """
    Prints rows one per line in the style's colours.
    Every row, blank ones included, is padded to `width` so the background
    covers the whole frame.
    Rows are never wrapped by rich; an oversized frame is left to the terminal.
    """
    for row in rows:
        console.print(styled(row.ljust(width), style), soft_wrap=True, highlight=False)
