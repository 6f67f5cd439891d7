"""
Structural interface for the path segments a chain sequences.

Path geometry (arc-length parameterization, curvature, projection) lives
outside this package. Anything exposing these queries can be chained.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Path(Protocol):
    """An immutable motion segment parameterized by progress t in [0, 1]."""

    def length(self) -> float:
        """Arc length of the segment (non-negative)."""
        ...

    def get_point(self, t: float) -> Any:
        """Position at parametric progress t."""
        ...

    def get_heading(self, t: float) -> float:
        """Heading at parametric progress t, in radians."""
        ...
