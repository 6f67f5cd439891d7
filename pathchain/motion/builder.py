"""
Fluent assembly of PathChains.

PathChainBuilder collects paths, callbacks and deceleration settings, then
produces a fully configured PathChain in one build() call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pathchain.config import ChainConfig
from pathchain.motion.callbacks import (
    ParametricCallback,
    PathCallback,
    TemporalCallback,
)
from pathchain.motion.chain import DecelerationType, PathChain
from pathchain.motion.path import Path
from pathchain.utils.errors import PathChainError, PathIndexError

logger = logging.getLogger(__name__)


class PathChainBuilder:
    """
    Builds a PathChain step by step.

    Unlike PathChain itself, the builder validates its inputs: the start
    multiplier must lie in (0, 1] and callbacks must target an added path.
    """

    def __init__(self, config: ChainConfig | None = None):
        self.config = config
        self._paths: list[Path] = []
        self._callbacks: list[PathCallback] = []
        self._deceleration_type = DecelerationType.LAST_PATH
        self._deceleration_start_multiplier: float | None = None

    def add_path(self, path: Path) -> PathChainBuilder:
        self._paths.append(path)
        return self

    def add_paths(self, *paths: Path) -> PathChainBuilder:
        self._paths.extend(paths)
        return self

    def set_deceleration_type(
        self, deceleration_type: DecelerationType | str
    ) -> PathChainBuilder:
        self._deceleration_type = (
            DecelerationType.from_string(deceleration_type)
            if isinstance(deceleration_type, str)
            else deceleration_type
        )
        return self

    def set_deceleration_start_multiplier(self, multiplier: float) -> PathChainBuilder:
        if not 0.0 < multiplier <= 1.0:
            raise ValueError(
                f"Deceleration start multiplier must be in (0, 1], got {multiplier}"
            )
        self._deceleration_start_multiplier = float(multiplier)
        return self

    def _resolve_index(self, index: int | None) -> int:
        if not self._paths:
            raise PathChainError("Add a path before attaching callbacks")
        if index is None:
            return len(self._paths) - 1
        if not 0 <= index < len(self._paths):
            raise PathIndexError(index, len(self._paths))
        return index

    def add_callback(self, callback: PathCallback) -> PathChainBuilder:
        self._resolve_index(callback.index)
        self._callbacks.append(callback)
        return self

    def add_parametric_callback(
        self,
        t_value: float,
        action: Callable[[], object],
        index: int | None = None,
    ) -> PathChainBuilder:
        """
        Fire ``action`` when the follower reaches t_value on a path.

        Args:
            t_value: Parametric position in [0, 1]
            action: Zero-argument callable
            index: Target path, defaults to the most recently added one
        """
        self._callbacks.append(
            ParametricCallback(self._resolve_index(index), t_value, action)
        )
        return self

    def add_temporal_callback(
        self,
        delay_s: float,
        action: Callable[[], object],
        index: int | None = None,
    ) -> PathChainBuilder:
        """
        Fire ``action`` after delay_s seconds spent on a path.

        Args:
            delay_s: Seconds after the follower starts the path
            action: Zero-argument callable
            index: Target path, defaults to the most recently added one
        """
        self._callbacks.append(
            TemporalCallback(self._resolve_index(index), delay_s, action)
        )
        return self

    def build(self) -> PathChain:
        """Produce a new, independent PathChain from the collected state."""
        chain = PathChain.from_paths(list(self._paths), config=self.config)
        chain.set_deceleration_type(self._deceleration_type)
        if self._deceleration_start_multiplier is not None:
            chain.set_deceleration_start_multiplier(self._deceleration_start_multiplier)
        chain.replace_callbacks(list(self._callbacks))
        logger.debug(
            "Built %r with %d callbacks", chain, len(chain.get_callbacks())
        )
        return chain
