"""
Traversal tracking for a PathChain.

ChainFollower is the polling side of the chain contract. Each control tick
the owner reports parametric progress on the current path; the follower
fires due callbacks, advances between paths, and answers deceleration
queries according to the chain's policy. Commanding motors is left to the
owner.
"""

import logging
import time
from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray

from pathchain import config as cfg
from pathchain.config import TRACE
from pathchain.motion.callbacks import PathCallback
from pathchain.motion.chain import DecelerationType, PathChain
from pathchain.protocol.wire import ChainStatus
from pathchain.utils.errors import PathChainError

logger = logging.getLogger(__name__)


class ChainFollower:
    """
    Tracks progress along a chain and evaluates its callbacks.

    Not thread-safe; drive it from a single control loop.
    """

    def __init__(
        self,
        chain: PathChain,
        end_t_value: float = cfg.PATH_END_T_VALUE,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.chain = chain
        self.end_t_value = end_t_value
        self._clock = clock
        self.index = 0
        self.t_value = 0.0
        self._segment_start = 0.0
        self._fired_count = 0
        self._started = False
        self._starts: NDArray[np.float64] = np.zeros(0, dtype=np.float64)

    def start(self) -> None:
        """
        (Re)start traversal at the first path and rearm all callbacks.

        Raises:
            PathChainError: If the chain has no paths
        """
        if self.chain.size() == 0:
            raise PathChainError("Cannot follow an empty path chain")

        # Offsets of each path's start along the chain
        lengths = np.fromiter(
            (p.length() for p in self.chain), dtype=np.float64, count=self.chain.size()
        )
        self._starts = np.concatenate(([0.0], np.cumsum(lengths)[:-1]))

        self.chain.reset_callbacks()
        self.index = 0
        self.t_value = 0.0
        self._fired_count = 0
        self._segment_start = self._clock()
        self._started = True
        logger.info(
            "Following %r, deceleration %s at %.3f",
            self.chain,
            self.chain.get_deceleration_type().name,
            self.chain.get_deceleration_start_multiplier(),
        )

    def _require_started(self) -> None:
        if not self._started:
            raise PathChainError("ChainFollower.start() has not been called")

    @property
    def elapsed_on_path(self) -> float:
        """Seconds spent on the current path."""
        return self._clock() - self._segment_start

    def update(self, t_value: float) -> list[PathCallback]:
        """
        Record progress on the current path.

        Due callbacks fire in insertion order. A path whose progress reaches
        end_t_value counts as fully traversed for parametric callbacks, then
        the follower moves to the next path if there is one.

        Args:
            t_value: Parametric progress on the current path, clamped to [0, 1]

        Returns:
            Callbacks fired during this update
        """
        self._require_started()
        self.t_value = min(max(float(t_value), 0.0), 1.0)
        path_done = self.t_value >= self.end_t_value
        effective_t = 1.0 if path_done else self.t_value
        elapsed = self.elapsed_on_path

        fired: list[PathCallback] = []
        for callback in self.chain.get_callbacks():
            if callback.should_fire(self.index, effective_t, elapsed):
                # Counted before the action runs; run() marks it fired even if it raises
                self._fired_count += 1
                fired.append(callback)
                callback.run()

        if path_done and self.index < self.chain.size() - 1:
            self.index += 1
            self.t_value = 0.0
            self._segment_start = self._clock()
            logger.debug("Advanced to path %d/%d", self.index, self.chain.size())
        elif cfg.TRACE_ENABLED:
            logger.log(TRACE, "Path %d at t=%.4f", self.index, self.t_value)
        return fired

    def is_finished(self) -> bool:
        return (
            self._started
            and self.index == self.chain.size() - 1
            and self.t_value >= self.end_t_value
        )

    def distance_traveled(self) -> float:
        self._require_started()
        current = self.chain.get_path(self.index)
        return float(self._starts[self.index]) + self.t_value * current.length()

    def distance_remaining(self) -> float:
        return max(0.0, self.chain.length() - self.distance_traveled())

    def is_decelerating(self) -> bool:
        """Whether the chain's deceleration policy applies at this point."""
        self._require_started()
        decel = self.chain.get_deceleration_type()
        multiplier = self.chain.get_deceleration_start_multiplier()
        if decel is DecelerationType.GLOBAL:
            return self.distance_traveled() >= multiplier * self.chain.length()
        if decel is DecelerationType.LAST_PATH:
            return (
                self.index == self.chain.size() - 1 and self.t_value >= multiplier
            )
        return False

    def deceleration_remaining(self) -> float | None:
        """
        Distance left in the active deceleration window.

        Returns:
            Whole-chain remaining distance for GLOBAL, remaining distance on
            the last path for LAST_PATH, None when not decelerating
        """
        if not self.is_decelerating():
            return None
        if self.chain.get_deceleration_type() is DecelerationType.GLOBAL:
            return self.distance_remaining()
        last = self.chain.get_path(self.index)
        return max(0.0, (1.0 - self.t_value) * last.length())

    def status(self) -> ChainStatus:
        self._require_started()
        return ChainStatus(
            index=self.index,
            size=self.chain.size(),
            t_value=self.t_value,
            traveled=self.distance_traveled(),
            remaining=self.distance_remaining(),
            length=self.chain.length(),
            deceleration_type=self.chain.get_deceleration_type().name,
            decelerating=self.is_decelerating(),
            callbacks_fired=self._fired_count,
        )
