from dataclasses import dataclass
from typing import Dict, List, Optional

from renderer import block_width

# Empirical constants for the vertical position of the title
TITLE_HEIGHT_OFFSET = 4
TITLE_HEIGHT_DIVISOR = 3

CATPPUCCIN_FOREGROUND = "#CBA6F7"
CATPPUCCIN_BACKGROUND = "#1e1e2e"

@dataclass(frozen=True)
class LayoutStyle:
    """
    How a frame is laid out and painted.
    """
    name: str
    center: bool = True
    boxed: bool = False
    show_title: bool = True
    clear_screen: bool = True
    foreground: Optional[str] = None
    background: Optional[str] = None

STYLES: Dict[str, LayoutStyle] = {
    "plain": LayoutStyle(name="plain", center=False),
    "centered": LayoutStyle(
        name="centered",
        foreground=CATPPUCCIN_FOREGROUND,
        background=CATPPUCCIN_BACKGROUND,
    ),
    "boxed": LayoutStyle(
        name="boxed",
        boxed=True,
        foreground=CATPPUCCIN_FOREGROUND,
        background=CATPPUCCIN_BACKGROUND,
    ),
    "digits": LayoutStyle(
        name="digits",
        show_title=False,
        foreground=CATPPUCCIN_FOREGROUND,
        background=CATPPUCCIN_BACKGROUND,
    ),
}

DEFAULT_STYLE = "centered"

def get_style(name: str) -> LayoutStyle:
    return STYLES[name.strip().lower()]

def center_block(block: List[str], terminal_width: int) -> List[str]:
    """
    Shifts every row of a block right by the same amount so the block is
    horizontally centered, then appends one blank row.
    Padding never goes negative; a block wider than the terminal is left as is.
    """
    padding = max(0, (terminal_width - block_width(block)) // 2)
    centered = [" " * padding + row for row in block]
    centered.append("")
    return centered

def center_title(title: str, terminal_width: int, terminal_height: int) -> List[str]:
    """
    Blank rows for vertical placement followed by the horizontally centered title.
    """
    horizontal_padding = max(0, (terminal_width - len(title)) // 2)
    vertical_padding = max(0, (terminal_height - TITLE_HEIGHT_OFFSET) // TITLE_HEIGHT_DIVISOR)
    return [""] * vertical_padding + [" " * horizontal_padding + title]

def frame_block(block: List[str]) -> List[str]:
    width = block_width(block)
    border = "+" + "-" * (width + 2) + "+"
    return [border] + [f"| {row.ljust(width)} |" for row in block] + [border]

def compose_frame(title: str, block: List[str], terminal_width: int, terminal_height: int,
                  style: LayoutStyle) -> List[str]:
    """
    All rows of one countdown frame: the title (if shown) and the time block.
    """
    if style.boxed:
        block = frame_block(block)

    if not style.center:
        rows = [title, ""] if style.show_title else []
        return rows + list(block)

    rows = center_title(title, terminal_width, terminal_height) if style.show_title else []
    return rows + center_block(block, terminal_width)

def compose_message(text: str, terminal_width: int, terminal_height: int,
                    style: LayoutStyle) -> List[str]:
    if not style.center:
        return [text]
    return center_title(text, terminal_width, terminal_height)
