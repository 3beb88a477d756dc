"""Indentation provider: depth → leading whitespace."""

from __future__ import annotations

import functools

from .config import IndentConfig, get_config
from .errors import InvalidDepth


def check_depth(depth: int) -> int:
    """Return *depth* if it is a non-negative int, else raise InvalidDepth."""
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
        raise InvalidDepth(depth)
    return depth


class Indenter:
    """Produces the whitespace for a depth under a fixed IndentConfig.

    Usage::

        ind = Indenter(IndentConfig(unit="\\t", width=1))
        ind(2)   # → "\\t\\t"
    """

    __slots__ = ("config", "_block")

    def __init__(self, config: IndentConfig | None = None) -> None:
        self.config = config if config is not None else IndentConfig()
        self._block = self.config.unit_block

    def indent(self, depth: int) -> str:
        return self._block * check_depth(depth)

    __call__ = indent

    def __repr__(self) -> str:
        return f"Indenter(unit={self.config.unit!r}, width={self.config.width})"


@functools.lru_cache(maxsize=1)
def default_indenter() -> Indenter:
    """The process-wide Indenter, built once from the active configuration."""
    return Indenter(get_config())


def indent(depth: int) -> str:
    """Leading whitespace for *depth* under the process-wide configuration."""
    return default_indenter().indent(depth)
