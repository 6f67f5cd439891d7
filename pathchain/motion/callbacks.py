"""
Path callbacks: non-blocking actions fired at points along a chain.

A callback is bound to one path of a chain by index. The follower asks each
callback whether it should fire given the current traversal state, runs it
once, and rearms it via reset() when the chain restarts.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum, auto

from pathchain.config import TRACE

logger = logging.getLogger(__name__)


class CallbackType(Enum):
    """Trigger condition families."""

    PARAMETRIC = auto()  # fire at a parametric position on a path
    TEMPORAL = auto()  # fire after time spent on a path


class PathCallback(ABC):
    """
    Base class for resettable, fire-once path callbacks.

    Subclasses decide *when* to fire; running and rearming are shared.
    """

    callback_type: CallbackType

    def __init__(self, index: int, action: Callable[[], object]):
        self.index = int(index)
        self.action = action
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    @abstractmethod
    def _condition(self, t_value: float, elapsed_s: float) -> bool:
        """Trigger test for the callback's own path."""
        ...

    def should_fire(self, index: int, t_value: float, elapsed_s: float) -> bool:
        """
        Check whether the callback is due.

        Args:
            index: Path index the follower is currently on
            t_value: Parametric progress on that path
            elapsed_s: Seconds spent on that path so far

        Returns:
            True if unfired, on its path, and its condition holds
        """
        if self._fired or index != self.index:
            return False
        return self._condition(t_value, elapsed_s)

    def run(self) -> None:
        """Run the action once. Further calls are no-ops until reset()."""
        if self._fired:
            return
        self._fired = True
        logger.log(TRACE, "Firing %r", self)
        self.action()

    def reset(self) -> None:
        self._fired = False


class ParametricCallback(PathCallback):
    """Fires once the follower reaches t_value on path ``index``."""

    callback_type = CallbackType.PARAMETRIC

    def __init__(self, index: int, t_value: float, action: Callable[[], object]):
        super().__init__(index, action)
        self.t_value = min(max(float(t_value), 0.0), 1.0)

    def _condition(self, t_value: float, elapsed_s: float) -> bool:
        return t_value >= self.t_value

    def __repr__(self) -> str:
        return f"ParametricCallback(index={self.index}, t_value={self.t_value:.3f})"


class TemporalCallback(PathCallback):
    """Fires once the follower has spent delay_s seconds on path ``index``."""

    callback_type = CallbackType.TEMPORAL

    def __init__(self, index: int, delay_s: float, action: Callable[[], object]):
        if delay_s < 0:
            raise ValueError(f"delay_s must be non-negative, got {delay_s}")
        super().__init__(index, action)
        self.delay_s = float(delay_s)

    def _condition(self, t_value: float, elapsed_s: float) -> bool:
        return elapsed_s >= self.delay_s

    def __repr__(self) -> str:
        return f"TemporalCallback(index={self.index}, delay_s={self.delay_s:.3f})"
