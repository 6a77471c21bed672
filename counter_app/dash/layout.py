import abc

import dash_bootstrap_components as dbc
from dash import html

from .style import STYLE as S


class Layout(abc.ABC):
    @abc.abstractmethod
    def to_dash(self, comps):
        pass


class GridLayout(Layout):
    """Widgets side by side, wrapping on small screens."""

    def __init__(self, n_cols=3, title=None):
        self.n_cols = n_cols
        self.title = title

    def to_dash(self, comps):
        width = max(12 // self.n_cols, 1)

        title = (
            [
                html.H1(
                    self.title,
                    style={
                        "fontFamily": S.text_fontfamily,
                        "marginLeft": S.margin_side,
                        "marginTop": "30px",
                    },
                )
            ]
            if self.title
            else []
        )

        return title + [
            dbc.Row(
                [
                    dbc.Col(
                        html.Div(comp.to_dash(), style={"padding": "10px"}),
                        xs=12,
                        md=width,
                    )
                    for comp in comps
                ],
                align="start",
                style={
                    "marginLeft": S.margin_side,
                    "marginRight": S.margin_side,
                    "marginTop": "30px",
                    "flexWrap": "wrap",
                },
            )
        ]
