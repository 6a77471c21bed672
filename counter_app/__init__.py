"""Bounded counter widget with Dash and terminal hosts."""

from .celebration import Celebration, ConfettiEffect
from .host import RenderHost
from .models import BoundedCounter, Change, Color, CounterView, color_for

__version__ = "0.1.0"

__all__ = [
    "BoundedCounter",
    "Celebration",
    "Change",
    "Color",
    "ConfettiEffect",
    "CounterView",
    "RenderHost",
    "color_for",
]
