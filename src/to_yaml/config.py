"""Indentation configuration and its set-once process-wide instance."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

SPACER_ENV = "TO_YAML_SPACER"
SPACERWIDTH_ENV = "TO_YAML_SPACERWIDTH"

DEFAULT_UNIT = " "
DEFAULT_WIDTH = 2


# ---------------------------------------------------------------------------
# IndentConfig
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class IndentConfig:
    """How much whitespace one depth level produces.

    One level is *unit* repeated *width* times; the defaults give two
    spaces per level.
    """

    unit: str = DEFAULT_UNIT
    width: int = DEFAULT_WIDTH

    def __post_init__(self) -> None:
        if not isinstance(self.unit, str) or not self.unit:
            raise ConfigurationError(f"indent unit must be a non-empty str, got {self.unit!r}")
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width < 1:
            raise ConfigurationError(f"indent width must be a positive int, got {self.width!r}")

    @property
    def unit_block(self) -> str:
        return self.unit * self.width

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> IndentConfig:
        """Build a config from ``TO_YAML_SPACER`` / ``TO_YAML_SPACERWIDTH``.

        Unset variables fall back to the defaults.
        """
        env = os.environ if environ is None else environ
        unit = env.get(SPACER_ENV, DEFAULT_UNIT)
        raw_width = env.get(SPACERWIDTH_ENV)
        if raw_width is None:
            return cls(unit=unit)
        try:
            width = int(raw_width)
        except ValueError:
            raise ConfigurationError(
                f"{SPACERWIDTH_ENV} must be an integer, got {raw_width!r}"
            ) from None
        return cls(unit=unit, width=width)


# ---------------------------------------------------------------------------
# Process-wide configuration
# ---------------------------------------------------------------------------

_lock = threading.Lock()
_active: IndentConfig = IndentConfig()
_locked = False


def configure(config: IndentConfig) -> None:
    """Install *config* for the module-level encode/indent functions.

    Must happen before the first encode or indent call; afterwards the
    configuration is fixed and this raises ConfigurationError.
    """
    global _active
    if not isinstance(config, IndentConfig):
        raise ConfigurationError(f"expected IndentConfig, got {type(config).__name__}")
    with _lock:
        if _locked:
            raise ConfigurationError("indentation is already in use and cannot be reconfigured")
        _active = config
    logger.debug("indentation configured: unit=%r width=%d", config.unit, config.width)


def get_config() -> IndentConfig:
    """Return the active configuration and fix it for the rest of the process."""
    global _locked
    with _lock:
        if not _locked:
            _locked = True
            logger.debug("indentation locked: unit=%r width=%d", _active.unit, _active.width)
        return _active
