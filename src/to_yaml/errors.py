"""Exception hierarchy for to_yaml."""

from __future__ import annotations

from typing import Any


class ToYamlError(Exception):
    """Base class for every error raised by to_yaml."""


class InvalidInputKind(ToYamlError, TypeError):
    """A value handed to the mapping encoder is not a Mapping."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"expected a mapping, got {type(value).__name__}")


class UnsupportedKeyType(ToYamlError, TypeError):
    """A mapping key is neither a str nor a Symbol."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(
            f"unsupported key {key!r} of type {type(key).__name__}; "
            "keys must be str or Symbol"
        )


class EmptyMappingInSequence(ToYamlError, ValueError):
    """A sequence item is a mapping without any pairs."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"sequence item {index} is an empty mapping")


class InvalidDepth(ToYamlError, ValueError):
    def __init__(self, depth: Any) -> None:
        self.depth = depth
        super().__init__(f"depth must be a non-negative integer, got {depth!r}")


class ConfigurationError(ToYamlError, ValueError):
    """Indentation configuration is invalid or was changed after first use."""
