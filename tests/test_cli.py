from typer.testing import CliRunner

import counter_app.dash.app.counters as counters_app
from counter_app.__main__ import app

runner = CliRunner()

CONFETTI = ("*+o~." * 5)[:24]


def test_play():
    result = runner.invoke(
        app, ["play", "--max-value", "3"], input="+\n+\n+\n+\n-\n+\nq\n"
    )

    assert result.exit_code == 0
    assert result.output.count(CONFETTI) == 2


def test_play_end_of_input():
    result = runner.invoke(app, ["play", "--max-value", "2"], input="+\n")

    assert result.exit_code == 0


def test_play_invalid_range():
    result = runner.invoke(app, ["play", "--min-value", "5", "--max-value", "1"])

    assert result.exit_code != 0


def test_serve(monkeypatch):
    calls = {}

    def fake_app(cfg, host, port, debug):
        calls.update(cfg=cfg, host=host, port=port, debug=debug)

    monkeypatch.setattr(counters_app, "my_app", fake_app)

    result = runner.invoke(
        app,
        [
            "serve",
            "-o",
            "counters.default.max_value=3",
            "--locale",
            "es",
            "--port",
            "9000",
        ],
    )

    assert result.exit_code == 0
    assert calls["cfg"].counters.default.max_value == 3
    assert calls["cfg"].locale == "es"
    assert calls["port"] == 9000


def test_play_with_confetti_effect():
    result = runner.invoke(
        app,
        ["play", "--max-value", "1", "--effect", "counter_app.celebration.ConfettiEffect"],
        input="+\nq\n",
    )

    assert result.exit_code == 0
