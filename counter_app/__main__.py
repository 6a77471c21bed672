import logging
from pathlib import Path
from typing import List, Optional

import typer

app = typer.Typer()


@app.command()
def serve(
    config: Optional[Path] = None,
    override: Optional[List[str]] = typer.Option(None, "--override", "-o"),
    locale: Optional[str] = None,
    host: str = "0.0.0.0",
    port: int = 8050,
    debug: bool = False,
    logging_level: int = 20,
):
    """Launch counters web app."""
    from counter_app.dash.app.counters import my_app
    from counter_app.hydra import load_config

    logging.basicConfig(level=logging_level)

    overrides = list(override or [])
    if locale is not None:
        overrides.append(f"locale={locale}")

    cfg = load_config(config, overrides=overrides)

    my_app(cfg, host=host, port=port, debug=debug)


@app.command()
def play(
    title: str = "",
    min_value: int = 0,
    max_value: int = 10,
    count: int = 0,
    locale: str = "en",
    effect: str = "counter_app.terminal.TerminalConfetti",
    logging_level: int = 30,
):
    """Play with a counter in the terminal."""
    from counter_app.celebration import Celebration
    from counter_app.i18n import Localizer
    from counter_app.models import BoundedCounter
    from counter_app.terminal import play as play_

    logging.basicConfig(level=logging_level)

    try:
        counter = BoundedCounter(
            title=title, min_value=min_value, max_value=max_value, count=count
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    play_(counter, Localizer().strings(locale), celebration=Celebration(effect))


if __name__ == "__main__":
    app()
