"""Terminal host."""

import itertools

import typer

from counter_app.host import RenderHost
from counter_app.models import Color

COLORS = {
    Color.BOUNDARY_LOW: typer.colors.YELLOW,
    Color.BOUNDARY_HIGH: typer.colors.RED,
    Color.MILESTONE_A: typer.colors.GREEN,
    Color.MILESTONE_B: typer.colors.BLUE,
    Color.DEFAULT: typer.colors.MAGENTA,
}

ACTIONS = {
    "+": "increment",
    "i": "increment",
    "increase": "increment",
    "-": "decrement",
    "d": "decrement",
    "decrease": "decrement",
}

QUIT = ("q", "quit", "exit")


def _control(symbol, label, disabled):
    text = f"[{symbol}] {label}"
    if disabled:
        return typer.style(text, dim=True)
    return text


def render_frame(view, strings):
    lines = []
    if view.title:
        lines.append(typer.style(view.title, bold=True))

    lines.append(typer.style(f"  {view.count}", fg=COLORS[view.color], bold=True))
    lines.append(
        "  ".join(
            [
                _control("-", strings["decrease"], view.at_min),
                _control("+", strings["increase"], view.at_max),
            ]
        )
    )

    return "\n".join(lines)


class TerminalConfetti:
    """Prints a confetti line below the rendered frame."""

    def __init__(self, width=24, symbols="*+o~.", echo=None):
        self.width = width
        self.symbols = symbols
        self.echo = echo or typer.echo

    def __call__(self, target):
        colors = itertools.cycle(
            [typer.colors.RED, typer.colors.YELLOW, typer.colors.GREEN, typer.colors.BLUE]
        )
        symbols = itertools.cycle(self.symbols)
        self.echo(
            "".join(
                typer.style(symbol, fg=color)
                for symbol, color, _ in zip(symbols, colors, range(self.width))
            )
        )


def play(counter, strings, celebration=None, prompt=None, echo=None):
    """Interactive loop.

    Reads ``+``/``-`` (or ``increase``/``decrease``) until ``q`` or end of
    input.
    """
    prompt = prompt or typer.prompt
    echo = echo or typer.echo

    def render(view):
        frame = render_frame(view, strings)
        echo(frame)
        return frame

    host = RenderHost(counter, render, celebration=celebration)
    host.refresh()

    try:
        while True:
            answer = prompt("+/-/q", default="q", show_default=False).strip().lower()
            if answer in QUIT:
                break

            action = ACTIONS.get(answer)
            if action is None:
                echo(f"Unknown action `{answer}`. Use `+`, `-` or `q`.")
                continue

            # NB: controls are disabled at the bounds
            if (action == "increment" and counter.at_max) or (
                action == "decrement" and counter.at_min
            ):
                echo(typer.style("(disabled)", dim=True))
                continue

            getattr(counter, action)()
    except typer.Abort:
        pass
    finally:
        host.close()

    return counter.count
