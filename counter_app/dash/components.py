"""Components."""

import abc

import dash_bootstrap_components as dbc
from dash import Input, Output, State, dcc, html
from dash.exceptions import PreventUpdate

from counter_app.celebration import Celebration
from counter_app.i18n import Localizer
from counter_app.models import BoundedCounter
from counter_app.utils import class_tokens, join_class_tokens

from .style import STYLE as S
from .style import css_color

INCREASE = "increase"
DECREASE = "decrease"


class Component(abc.ABC):
    def __init__(self, id_prefix=""):
        self.id_prefix = id_prefix

    @abc.abstractmethod
    def to_dash(self):
        # NB: returns list[dash.Component]
        pass

    def as_output(self, component_property, allow_duplicate=False):
        return [Output(self.id, component_property, allow_duplicate=allow_duplicate)]

    def prefix(self, name):
        return f"{self.id_prefix}{name}"


class CounterWidget(Component):
    """Bounded counter widget.

    The counter state lives in a ``dcc.Store``, so each page keeps its own
    count and the server side only rebuilds counters from it.

    Parameters
    ----------
    counter : BoundedCounter
        Initial state.
    strings : dict
        Localized strings. Defaults to the default locale.
    celebration : Celebration
        Runs on the confetti container class list.
    id_prefix : str
        Prefix for all the ids, to have several widgets in a page.
    """

    def __init__(self, counter=None, strings=None, celebration=None, id_prefix=""):
        super().__init__(id_prefix)
        self.counter = counter if counter is not None else BoundedCounter()
        self.strings = strings if strings is not None else Localizer().strings()
        self.celebration = celebration if celebration is not None else Celebration()

    def __repr__(self):
        return f"CounterWidget({self.id})"

    @property
    def id(self):
        return self.store_id

    @property
    def store_id(self):
        return self.prefix("state")

    @property
    def value_id(self):
        return self.prefix("value")

    @property
    def increase_id(self):
        return self.prefix("increase")

    @property
    def decrease_id(self):
        return self.prefix("decrease")

    @property
    def confetti_id(self):
        return self.prefix("confetti")

    def _value_style(self, color):
        return {
            "margin": 0,
            "fontSize": S.value_fontsize,
            "fontWeight": 800,
            "lineHeight": 1,
            "color": css_color(color),
        }

    def _button(self, id_, label, action, disabled):
        return html.Button(
            label,
            id=id_,
            n_clicks=0,
            disabled=disabled,
            title=self.strings[action],
            className="counter-button",
            **{"aria-label": self.strings[action]},
        )

    def to_dash(self):
        view = self.counter.snapshot()

        title = (
            [
                dbc.Label(
                    view.title,
                    style={
                        "fontSize": S.text_fontsize,
                        "fontFamily": S.text_fontfamily,
                    },
                )
            ]
            if view.title
            else []
        )

        value = html.P(
            view.count,
            id=self.value_id,
            className="counter-value",
            style=self._value_style(view.color),
            **{"aria-live": "polite", "aria-atomic": "true"},
        )

        controls = html.Div(
            [
                self._button(self.decrease_id, "−", DECREASE, view.at_min),
                self._button(self.increase_id, "+", INCREASE, view.at_max),
            ],
            className="counter-controls",
            role="group",
            **{"aria-label": self.strings["controls"]},
        )

        return [
            dcc.Store(id=self.store_id, data=self.counter.to_state()),
            html.Div(
                dbc.Card(
                    dbc.CardBody(dbc.Stack(title + [value, controls], gap=2)),
                    className="counter-card",
                ),
                id=self.confetti_id,
                className="confetti",
            ),
        ]

    def as_input(self):
        return [Input(self.increase_id, "n_clicks"), Input(self.decrease_id, "n_clicks")]

    def as_state(self):
        return [State(self.store_id, "data")]

    def as_output(self, component_property="data", allow_duplicate=False):
        return [
            Output(self.store_id, component_property, allow_duplicate=allow_duplicate)
        ]

    def as_view_output(self):
        return [
            Output(self.value_id, "children"),
            Output(self.value_id, "style"),
            Output(self.decrease_id, "disabled"),
            Output(self.increase_id, "disabled"),
        ]

    def as_celebration_output(self):
        return [Output(self.confetti_id, "className")]

    def action_for(self, triggered_id):
        actions = {self.increase_id: INCREASE, self.decrease_id: DECREASE}
        if triggered_id not in actions:
            raise PreventUpdate

        return actions[triggered_id]

    def step(self, state, action):
        """Apply an action to a stored state.

        Returns
        -------
        state : dict
            New state. ``celebrate`` flags an arrival at max.
        """
        counter = BoundedCounter.from_state(state)

        changes = []
        counter.subscribe(changes.append)

        if action == INCREASE:
            counter.increment()
        elif action == DECREASE:
            counter.decrement()
        else:
            raise ValueError(f"Unknown action: {action}")

        new_state = counter.to_state()
        new_state["celebrate"] = any(change.arrived_at_max for change in changes)

        return new_state

    def render(self, state):
        view = BoundedCounter.from_state(state).snapshot()
        return [view.count, self._value_style(view.color), view.at_min, view.at_max]

    def celebrate(self, state, class_name):
        """Update the confetti container after a render.

        Pops it on arrival at max; once the count leaves max, it is reset so
        the next arrival pops again.
        """
        tokens = class_tokens(class_name)

        if state.get("celebrate"):
            self.celebration.trigger(tokens)
        elif state["count"] != state["max_value"]:
            self.celebration.reset(tokens)
        else:
            raise PreventUpdate

        return join_class_tokens(tokens)
