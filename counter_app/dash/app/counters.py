from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash
from omegaconf import OmegaConf

from counter_app.celebration import Celebration
from counter_app.dash.callbacks import create_widget_callbacks
from counter_app.dash.components import CounterWidget
from counter_app.dash.layout import GridLayout
from counter_app.dash.style import update_style
from counter_app.hydra import load_counters
from counter_app.i18n import Localizer
from counter_app.logging import logger

ASSETS_FOLDER = Path(__file__).parents[1] / "assets"


def _create_widgets(cfg):
    strings = Localizer().strings(cfg.get("locale"))
    counters = load_counters(cfg.counters)

    widgets = []
    for id_, counter in counters.items():
        celebration = Celebration(effect=cfg.celebration.effect)
        widgets.append(
            CounterWidget(
                counter,
                strings=strings,
                celebration=celebration,
                id_prefix=f"{id_}-",
            )
        )
        logger.debug(f"Created widget `{id_}`: {counter}")

    return widgets


def create_app(cfg):
    update_style(OmegaConf.to_container(cfg.style, resolve=True))

    widgets = _create_widgets(cfg)
    for widget in widgets:
        create_widget_callbacks(widget)

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.BOOTSTRAP],
        assets_folder=str(ASSETS_FOLDER),
        suppress_callback_exceptions=True,
    )

    layout = GridLayout(n_cols=min(len(widgets), 3) or 1, title=cfg.get("title"))
    app.layout = dbc.Container(layout.to_dash(widgets), fluid=True)

    return app


def my_app(cfg, host="0.0.0.0", port=8050, debug=False):
    app = create_app(cfg)

    app.run(
        debug=debug,
        use_reloader=False,
        host=host,
        port=port,
    )
