import signal
import threading
import time
from typing import Callable, List, Optional, Sequence, Tuple

from rich.console import Console

import renderer
from layout import DEFAULT_STYLE, STYLES, LayoutStyle, compose_frame, compose_message
from models import Phase, PhaseResult
from terminal import clear_screen, paint, query_terminal_size

console = Console()

FAREWELL_MESSAGE = "Good job! See you soon!"
FAREWELL_PAUSE_SECONDS = 1

class CancellationSignal:
    """
    Process-wide stop request. Set once from the SIGINT handler, polled once per tick.
    """
    def __init__(self):
        self._event = threading.Event()

    def set(self):
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

    def install(self):
        """
        Routes Ctrl+C to this signal instead of KeyboardInterrupt.
        Returns the previous SIGINT handler.
        """
        return signal.signal(signal.SIGINT, self._handle)

    def _handle(self, signum, frame):
        self.set()

def _say_goodbye(out: Console, style: LayoutStyle, sleep: Callable[[float], None],
                 terminal_size: Callable[[], Tuple[int, int]]):
    width, height = terminal_size()
    clear_screen(out)
    paint(out, compose_message(FAREWELL_MESSAGE, width, height, style), style, width=width)
    sleep(FAREWELL_PAUSE_SECONDS)
    clear_screen(out)
    out.show_cursor(True)

def run_phase(
    phase: Phase,
    cancel: CancellationSignal,
    out: Optional[Console] = None,
    style: Optional[LayoutStyle] = None,
    sleep: Callable[[float], None] = time.sleep,
    terminal_size: Callable[[], Tuple[int, int]] = query_terminal_size,
) -> PhaseResult:
    """
    Runs a visual timer for one phase, one frame per second.
    Returns CANCELLED as soon as a tick sees the cancellation signal,
    COMPLETED once every second of the phase has been shown.
    """
    if out is None:
        out = console
    if style is None:
        style = STYLES[DEFAULT_STYLE]

    for elapsed in range(phase.total_seconds):
        if cancel.is_set():
            _say_goodbye(out, style, sleep, terminal_size)
            return PhaseResult.CANCELLED

        minutes = (elapsed % 3600) // 60
        seconds = elapsed % 60
        block = renderer.render_time(minutes, seconds)

        width, height = terminal_size()
        frame = compose_frame(phase.title, block, width, height, style)
        if style.clear_screen:
            clear_screen(out)
        paint(out, frame, style, width=width)
        sleep(1)

    return PhaseResult.COMPLETED

def run_session(phases: Sequence[Phase], cancel: CancellationSignal, **kwargs) -> List[PhaseResult]:
    """
    Runs phases in order and stops after the first cancelled one.
    """
    results = []
    for phase in phases:
        result = run_phase(phase, cancel, **kwargs)
        results.append(result)
        if result == PhaseResult.CANCELLED:
            break
    return results
