"""Bounded counter state machine."""

from collections import namedtuple
from dataclasses import dataclass
from enum import Enum

from counter_app.logging import logger

MILESTONE_A = 21
MILESTONE_B = 18


class Color(str, Enum):
    """Display colors.

    Values are the theme token names used by the presentation layer.
    """

    BOUNDARY_LOW = "warningOrange"
    BOUNDARY_HIGH = "dangerRed"
    MILESTONE_A = "electricGreen"
    MILESTONE_B = "futureBlue"
    DEFAULT = "wonderPurple"


def color_for(count, min_value, max_value):
    """Get display color for a count.

    Rules are checked in order and the first match wins, i.e. the
    boundaries take precedence over the milestones.

    Parameters
    ----------
    count : int
    min_value : int
    max_value : int

    Returns
    -------
    color : Color
    """
    if count == min_value:
        return Color.BOUNDARY_LOW
    if count == max_value:
        return Color.BOUNDARY_HIGH
    if count == MILESTONE_A:
        return Color.MILESTONE_A
    if count == MILESTONE_B:
        return Color.MILESTONE_B
    return Color.DEFAULT


Change = namedtuple("Change", ["previous", "current", "arrived_at_max"])


@dataclass(frozen=True)
class CounterView:
    """Read-only projection consumed by renderers."""

    title: str
    count: int
    min_value: int
    max_value: int
    at_min: bool
    at_max: bool
    color: Color


class BoundedCounter:
    """Integer counter clamped to ``[min_value, max_value]``.

    Parameters
    ----------
    title : str
        Display label.
    min_value : int
        Lower bound.
    max_value : int
        Upper bound.
    count : int
        Initial value.
    """

    def __init__(self, title="", min_value=0, max_value=10, count=0):
        if min_value > max_value:
            raise ValueError(
                f"Invalid range: min ({min_value}) is greater than max ({max_value})."
            )

        self.title = title
        self._min_value = min_value
        self._max_value = max_value
        self._observers = []

        self._validate(count)
        self._count = count

    def __repr__(self):
        return (
            f"BoundedCounter(count={self._count}, "
            f"min_value={self._min_value}, max_value={self._max_value})"
        )

    @property
    def min_value(self):
        return self._min_value

    @property
    def max_value(self):
        return self._max_value

    @property
    def count(self):
        return self._count

    @count.setter
    def count(self, value):
        self._validate(value)
        self._set(value)

    @property
    def at_min(self):
        return self._count == self._min_value

    @property
    def at_max(self):
        return self._count == self._max_value

    @property
    def color(self):
        return color_for(self._count, self._min_value, self._max_value)

    def _validate(self, value):
        if not self._min_value <= value <= self._max_value:
            raise ValueError(
                f"Count {value} is out of range "
                f"[{self._min_value}, {self._max_value}]."
            )

    def _set(self, value):
        previous = self._count
        if value == previous:
            return

        self._count = value

        arrived_at_max = value == self._max_value and previous != self._max_value
        if arrived_at_max:
            logger.info(f"Counter reached its maximum ({self._max_value}).")

        change = Change(previous, value, arrived_at_max)
        for observer in list(self._observers):
            # NB: the count already changed, every observer must hear about it
            try:
                observer(change)
            except Exception:
                logger.warning(f"Observer {observer!r} failed.", exc_info=True)

    def increment(self):
        if self._count < self._max_value:
            self._set(self._count + 1)
        return self._count

    def decrement(self):
        if self._count > self._min_value:
            self._set(self._count - 1)
        return self._count

    def subscribe(self, observer):
        """Register a change observer.

        Observers are called with a ``Change`` after every mutation that
        actually changes the count. No-op calls at a boundary notify nobody.

        Returns
        -------
        unsubscribe : callable
        """
        self._observers.append(observer)

        def unsubscribe():
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def snapshot(self):
        return CounterView(
            title=self.title,
            count=self._count,
            min_value=self._min_value,
            max_value=self._max_value,
            at_min=self.at_min,
            at_max=self.at_max,
            color=self.color,
        )

    def to_state(self):
        # NB: json-serializable, used as transport by stateless hosts
        return {
            "title": self.title,
            "min_value": self._min_value,
            "max_value": self._max_value,
            "count": self._count,
        }

    @classmethod
    def from_state(cls, state):
        return cls(
            title=state.get("title", ""),
            min_value=state["min_value"],
            max_value=state["max_value"],
            count=state["count"],
        )
