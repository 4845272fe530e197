import signal
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

import config
import timer
from errors import PromptAborted, UnsupportedCharacter
from layout import LayoutStyle
from models import Phase, PhaseResult
from terminal import clear_screen, hidden_cursor, styled

app = typer.Typer()
console = Console()
err_console = Console(stderr=True)

def prompt_duration(prompt: str, default: int, style: Optional[LayoutStyle] = None) -> int:
    """
    Asks for a duration in minutes.
    Anything that is not a whole non-negative number falls back to the default.
    Raises PromptAborted if the user leaves the prompt.
    """
    label = styled(prompt, style) if style else prompt
    try:
        answer = Prompt.ask(label, default=str(default), console=console)
    except (KeyboardInterrupt, EOFError):
        raise PromptAborted() from None

    try:
        minutes = int(answer.strip())
    except ValueError:
        return default
    return minutes if minutes >= 0 else default

@app.command()
def start():
    """
    Ask for the pomodoro and break durations, then count both down.
    """
    style = config.get_layout_style()
    clear_screen(console)

    try:
        work = prompt_duration("Pomodoro duration (minutes)?", config.work_minutes(), style)
        rest = prompt_duration("Break duration (minutes)?", config.break_minutes(), style)
    except PromptAborted:
        console.print("\n[bold blue]Goodbye![/bold blue]")
        raise typer.Exit(code=0)

    cancel = timer.CancellationSignal()
    previous_handler = cancel.install()
    try:
        with hidden_cursor(console):
            results = timer.run_session(
                [Phase.work(work), Phase.rest(rest)], cancel, out=console, style=style
            )
    except UnsupportedCharacter as e:
        err_console.print(f"[bold red]{escape(str(e))}[/bold red]")
        raise typer.Exit(code=1)
    finally:
        if previous_handler is not None:
            signal.signal(signal.SIGINT, previous_handler)

    if results and results[-1] == PhaseResult.COMPLETED:
        console.print("[bold green]Time's up! Pomodoro and break completed.[/bold green]")

if __name__ == "__main__":
    app()
