import os
from dataclasses import replace

from dotenv import load_dotenv
from rich.color import Color, ColorParseError
from rich.console import Console

from layout import DEFAULT_STYLE, LayoutStyle, get_style

load_dotenv()

console = Console()

DEFAULT_POMODORO_DURATION_MIN = 25
DEFAULT_BREAK_DURATION_MIN = 5

def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        parsed = -1
    if parsed < 0:
        console.print(f"[yellow]Warning: {name}={value!r} is not a number of minutes, using {default}.[/yellow]")
        return default
    return parsed

def _color_env(name: str, default):
    value = os.getenv(name)
    if value is None:
        return default
    try:
        Color.parse(value)
    except ColorParseError:
        console.print(f"[yellow]Warning: {name}={value!r} is not a colour, using {default}.[/yellow]")
        return default
    return value

def work_minutes() -> int:
    return _int_env("POMODORO_WORK_MINUTES", DEFAULT_POMODORO_DURATION_MIN)

def break_minutes() -> int:
    return _int_env("POMODORO_BREAK_MINUTES", DEFAULT_BREAK_DURATION_MIN)

def get_layout_style() -> LayoutStyle:
    """
    Presentation style from POMODORO_STYLE, with POMODORO_FOREGROUND /
    POMODORO_BACKGROUND overriding the preset colours.
    The plain style stays uncoloured unless a colour is set explicitly.
    """
    name = os.getenv("POMODORO_STYLE", DEFAULT_STYLE)
    try:
        style = get_style(name)
    except KeyError:
        console.print(f"[yellow]Warning: unknown style '{name}', using '{DEFAULT_STYLE}'.[/yellow]")
        style = get_style(DEFAULT_STYLE)

    return replace(
        style,
        foreground=_color_env("POMODORO_FOREGROUND", style.foreground),
        background=_color_env("POMODORO_BACKGROUND", style.background),
    )
