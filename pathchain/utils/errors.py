"""Exception types raised by pathchain."""


class PathChainError(RuntimeError):
    """Base class for path chain failures."""


class PathIndexError(PathChainError, IndexError):
    """Raised when a path index falls outside ``[0, size)``."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Path index {index} out of range for chain of size {size}")
