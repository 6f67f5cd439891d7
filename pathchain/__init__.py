"""
pathchain Python Package

Sequences robot motion along a series of precomputed paths run as one
continuous chain, with non-blocking callbacks and end-of-chain deceleration
policy.

Key components:
- PathChain: ordered paths plus callbacks and deceleration settings
- PathChainBuilder: fluent chain assembly with validation
- ChainFollower: polls a chain, fires callbacks, answers deceleration queries
- ChainConfig: per-chain defaults, with a process-wide fallback
"""

from ._version import __version__
from .config import ChainConfig, get_default_config, set_default_config
from .motion import (
    CallbackType,
    ChainFollower,
    DecelerationType,
    ParametricCallback,
    Path,
    PathCallback,
    PathChain,
    PathChainBuilder,
    TemporalCallback,
)
from .utils.errors import PathChainError, PathIndexError

__all__ = [
    "__version__",
    "ChainConfig",
    "get_default_config",
    "set_default_config",
    "Path",
    "PathChain",
    "DecelerationType",
    "PathCallback",
    "CallbackType",
    "ParametricCallback",
    "TemporalCallback",
    "PathChainBuilder",
    "ChainFollower",
    "PathChainError",
    "PathIndexError",
]
