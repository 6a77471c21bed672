"""Generic presentation host."""

from collections import deque


class RenderHost:
    """Re-renders a counter on every change.

    Work queued with ``after_render`` runs once the current render has
    completed, e.g. the celebration, which needs the rendered frame.

    Parameters
    ----------
    counter : BoundedCounter
    render : callable
        Pure function of a ``CounterView``; its return value is kept in
        ``frame``.
    celebration : Celebration
        Triggered after the render that follows an arrival at max. Its
        target defaults to the last rendered frame.
    """

    def __init__(self, counter, render, celebration=None):
        self.counter = counter
        self.render = render
        self.celebration = celebration
        self.frame = None

        if celebration is not None and celebration.target is None:
            celebration.target = lambda: self.frame

        self._post_render = deque()
        self._unsubscribe = counter.subscribe(self._on_change)

    def _on_change(self, change):
        if change.arrived_at_max and self.celebration is not None:
            self.after_render(self.celebration.trigger)

        self.refresh()

    def after_render(self, func):
        self._post_render.append(func)

    def refresh(self):
        self.frame = self.render(self.counter.snapshot())

        while self._post_render:
            self._post_render.popleft()()

        return self.frame

    def close(self):
        self._unsubscribe()
        self._post_render.clear()
