"""Celebration effect fired when a counter reaches its maximum."""

from collections.abc import MutableSet

from hydra.errors import InstantiationException
from hydra.utils import instantiate

from counter_app.logging import logger


class ConfettiEffect:
    """Pops a confetti container.

    The target is the container's set of flags (e.g. its class list);
    popping adds ``attribute`` to it.
    """

    def __init__(self, attribute="popped"):
        self.attribute = attribute

    def __repr__(self):
        return f"ConfettiEffect({self.attribute!r})"

    def __call__(self, target):
        if not isinstance(target, MutableSet):
            logger.debug(f"Cannot pop confetti on {type(target).__name__}, skipping.")
            return False

        target.add(self.attribute)
        return True

    def reset(self, target):
        if isinstance(target, MutableSet):
            target.discard(self.attribute)


class Celebration:
    """Fire-and-forget celebration.

    Parameters
    ----------
    effect : callable or str or dict
        Effect called with the target. If an import path or a config with a
        ``_target_`` key, it is instantiated on the first trigger and cached.
    target : callable
        Returns the effect's target, or None if it is not available yet.

    Notes
    -----
    The target type is a contract between the effect and its host, e.g.
    `ConfettiEffect` expects a mutable set of class tokens while
    `RenderHost` passes its rendered frame. An effect returning False on a
    target it cannot handle is treated as not fired. Exceptions raised by
    the effect are logged and never propagate to the counter.
    """

    def __init__(self, effect="counter_app.celebration.ConfettiEffect", target=None):
        self._effect_spec = effect
        self._effect = effect if callable(effect) else None
        self.target = target

    @property
    def resolved(self):
        return self._effect is not None

    def _resolve_effect(self):
        if self._effect is not None:
            return self._effect

        spec = self._effect_spec
        if isinstance(spec, str):
            spec = {"_target_": spec}

        try:
            self._effect = instantiate(spec)
        except (InstantiationException, ImportError) as e:
            logger.warning(f"Cannot load celebration effect: {e}")

        return self._effect

    def _get_target(self, target):
        if target is None and self.target is not None:
            target = self.target()
        return target

    def trigger(self, target=None):
        """Run the effect on its target.

        Parameters
        ----------
        target : object
            Overrides `self.target`.

        Returns
        -------
        fired : bool
            False if the target or the effect are not available.
        """
        target = self._get_target(target)
        if target is None:
            logger.debug("Celebration target not available, skipping.")
            return False

        effect = self._resolve_effect()
        if effect is None:
            return False

        try:
            fired = effect(target) is not False
        except Exception:
            logger.warning("Celebration effect failed.", exc_info=True)
            return False

        if fired:
            logger.info("Celebration fired.")

        return fired

    def reset(self, target=None):
        """Undo the effect on its target, if the effect supports it."""
        target = self._get_target(target)
        effect = self._resolve_effect() if target is not None else None

        reset = getattr(effect, "reset", None)
        if reset is None:
            return False

        try:
            reset(target)
        except Exception:
            logger.warning("Celebration reset failed.", exc_info=True)
            return False

        return True
