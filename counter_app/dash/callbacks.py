from dash import Input, State, callback, ctx


def create_counter_update(widget):
    """Button clicks -> stored counter state."""

    def counter_update(increase_clicks, decrease_clicks, state):
        action = widget.action_for(ctx.triggered_id)
        return [widget.step(state, action)]

    callback(
        widget.as_output(),
        *widget.as_input(),
        *widget.as_state(),
        prevent_initial_call=True,
    )(counter_update)

    return counter_update


def create_view_update(widget):
    """Stored counter state -> rendered value and controls."""

    def view_update(state):
        return widget.render(state)

    callback(
        widget.as_view_output(),
        Input(widget.store_id, "data"),
    )(view_update)

    return view_update


def create_celebration_trigger(widget):
    # NB: chained off the rendered value, so it only runs once the new
    # count is on the page
    def celebration_trigger(value, state, class_name):
        return [widget.celebrate(state, class_name)]

    callback(
        widget.as_celebration_output(),
        Input(widget.value_id, "children"),
        State(widget.store_id, "data"),
        State(widget.confetti_id, "className"),
        prevent_initial_call=True,
    )(celebration_trigger)

    return celebration_trigger


def create_widget_callbacks(widget):
    return [
        create_counter_update(widget),
        create_view_update(widget),
        create_celebration_trigger(widget),
    ]
