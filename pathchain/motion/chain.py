"""
PathChain: an ordered collection of paths run as one continuous unit.

The chain is passive. It holds the segments, their aggregate length, the
callbacks attached to them and the deceleration policy. Traversal position
and callback firing are tracked by the follower that polls it.

IMPORTANT: order matters. Paths run in the order they are given.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum

from pathchain.config import ChainConfig, get_default_config
from pathchain.motion.callbacks import PathCallback
from pathchain.motion.path import Path
from pathchain.utils.errors import PathIndexError

logger = logging.getLogger(__name__)


class DecelerationType(Enum):
    """How the follower shapes velocity near the end of a chain."""

    NONE = "none"  # no shaping from the chain
    GLOBAL = "global"  # relative to the whole chain's length
    LAST_PATH = "last_path"  # relative to the final path only (default)

    @classmethod
    def from_string(cls, name: str) -> DecelerationType:
        """Convert string to DecelerationType, case-insensitive."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown deceleration type '{name}'") from None


class PathChain:
    """
    Ordered paths plus callbacks and deceleration settings.

    Build from paths directly (``PathChain(a, b, c)``) or from an existing
    sequence (``PathChain.from_paths([a, b, c])``). Both compute the length
    by summing segment lengths once, in order.
    """

    def __init__(self, *paths: Path, config: ChainConfig | None = None):
        cfg = config if config is not None else get_default_config()
        self._callbacks: list[PathCallback] = []
        self._deceleration_type = DecelerationType.LAST_PATH
        self._deceleration_start_multiplier = cfg.deceleration_start_multiplier
        self._set_paths(list(paths))

    @classmethod
    def from_paths(
        cls, paths: Iterable[Path], config: ChainConfig | None = None
    ) -> PathChain:
        """
        Create a chain that adopts ``paths`` as its segment list.

        A ``list`` is adopted as-is; any other iterable is copied.
        """
        chain = cls(config=config)
        chain._set_paths(paths if isinstance(paths, list) else list(paths))
        return chain

    def _set_paths(self, paths: list[Path]) -> None:
        self._paths = paths
        self._length = 0.0
        for path in paths:
            self._length += path.length()
        if paths:
            logger.debug(
                "PathChain built: %d paths, length %.3f", len(paths), self._length
            )

    # ----- Segments -----

    def get_path(self, index: int) -> Path:
        """
        Return the path at a zero-based index.

        Raises:
            PathIndexError: If index is outside [0, size). Negative indices
                do not wrap.
        """
        if not 0 <= index < len(self._paths):
            raise PathIndexError(index, len(self._paths))
        return self._paths[index]

    def size(self) -> int:
        return len(self._paths)

    def length(self) -> float:
        return self._length

    @property
    def paths(self) -> tuple[Path, ...]:
        return tuple(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __getitem__(self, index: int) -> Path:
        return self.get_path(index)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._paths)

    # ----- Callbacks -----

    def append_callbacks(self, *callbacks: PathCallback) -> None:
        """Add callbacks after the existing ones, in argument order."""
        self._callbacks.extend(callbacks)

    def replace_callbacks(self, callbacks: Iterable[PathCallback]) -> None:
        """Discard the current callbacks and use ``callbacks`` instead."""
        self._callbacks = callbacks if isinstance(callbacks, list) else list(callbacks)

    def get_callbacks(self) -> list[PathCallback]:
        """Return the live callback list, in insertion order."""
        return self._callbacks

    def reset_callbacks(self) -> None:
        """
        Rearm every callback, in order.

        A failing reset() propagates; later callbacks are left as they were.
        """
        for callback in self._callbacks:
            callback.reset()

    # ----- Deceleration -----

    def set_deceleration_type(self, deceleration_type: DecelerationType) -> None:
        self._deceleration_type = deceleration_type

    def get_deceleration_type(self) -> DecelerationType:
        return self._deceleration_type

    def set_deceleration_start_multiplier(self, multiplier: float) -> None:
        """Set the start fraction. Range is not checked; (0, 1] is meaningful."""
        self._deceleration_start_multiplier = multiplier

    def get_deceleration_start_multiplier(self) -> float:
        return self._deceleration_start_multiplier

    deceleration_type = property(get_deceleration_type, set_deceleration_type)
    deceleration_start_multiplier = property(
        get_deceleration_start_multiplier, set_deceleration_start_multiplier
    )

    def __repr__(self) -> str:
        return (
            f"PathChain(size={len(self._paths)}, length={self._length:.3f}, "
            f"deceleration={self._deceleration_type.name})"
        )
