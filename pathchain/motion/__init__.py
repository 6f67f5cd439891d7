"""
Path chain sequencing.

This module provides the pieces a follower needs to run several paths as
one continuous motion:
- Path: structural interface for externally defined path segments
- PathChain: ordered paths, callbacks and deceleration settings
- PathCallback variants: parametric and temporal triggers
- PathChainBuilder: fluent chain assembly
- ChainFollower: traversal tracking, callback firing, deceleration queries
"""

from pathchain.motion.builder import PathChainBuilder
from pathchain.motion.callbacks import (
    CallbackType,
    ParametricCallback,
    PathCallback,
    TemporalCallback,
)
from pathchain.motion.chain import DecelerationType, PathChain
from pathchain.motion.follower import ChainFollower
from pathchain.motion.path import Path

__all__ = [
    # Chain core
    "Path",
    "PathChain",
    "DecelerationType",
    # Callbacks
    "PathCallback",
    "CallbackType",
    "ParametricCallback",
    "TemporalCallback",
    # Assembly and traversal
    "PathChainBuilder",
    "ChainFollower",
]
