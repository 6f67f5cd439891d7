"""
Central configuration for pathchain tunables and shared defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("PATHCHAIN_TRACE", "0")).lower() in (
    "1",
    "true",
    "yes",
    "on",
)

logger = logging.getLogger(__name__)

LOG_LEVEL_DEFAULT: str = "INFO"

# Fraction of the relevant distance (whole chain or last path) after which
# deceleration begins.
DECELERATION_START_MULTIPLIER: float = float(
    os.getenv("PATHCHAIN_DECEL_START_MULT", "0.5")
)

# Parametric progress at which a path counts as complete.
PATH_END_T_VALUE: float = float(os.getenv("PATHCHAIN_PATH_END_T", "0.995"))


@dataclass(frozen=True, slots=True)
class ChainConfig:
    """Per-chain defaults applied at construction time."""

    deceleration_start_multiplier: float = DECELERATION_START_MULTIPLIER

    @classmethod
    def from_env(cls) -> ChainConfig:
        """Build a config from the current environment."""
        raw = os.getenv("PATHCHAIN_DECEL_START_MULT")
        if raw is None or not raw.strip():
            return cls()
        return cls(deceleration_start_multiplier=float(raw))


_default_config: ChainConfig = ChainConfig()


def get_default_config() -> ChainConfig:
    """Return the process-wide config used when a chain gets none."""
    return _default_config


def set_default_config(config: ChainConfig) -> ChainConfig:
    """
    Replace the process-wide default config.

    Chains constructed before the call keep the values they copied.

    Returns:
        The previous default, so callers can restore it.
    """
    global _default_config
    previous = _default_config
    _default_config = config
    logger.debug(
        "Default deceleration start multiplier %.3f -> %.3f",
        previous.deceleration_start_multiplier,
        config.deceleration_start_multiplier,
    )
    return previous


def configure_logging(level: int | str | None = None) -> None:
    """
    Install a basic stream handler for applications using pathchain.

    Precedence:
      1) Explicit level
      2) TRACE when PATHCHAIN_TRACE=1
      3) LOG_LEVEL_DEFAULT
    """
    if level is None:
        level = TRACE if TRACE_ENABLED else LOG_LEVEL_DEFAULT
    if isinstance(level, str):
        level = TRACE if level.upper() == "TRACE" else getattr(logging, level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
