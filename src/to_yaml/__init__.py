"""to_yaml: block-style YAML encoder for ordered mapping trees."""

import logging

from .config import IndentConfig, configure, get_config
from .encoder import (
    Encoder,
    decimal_text,
    encode,
    encode_at,
    encode_chunks,
    key_text,
    quote_if_needed,
    render_sequence,
    render_value,
)
from .errors import (
    ConfigurationError,
    EmptyMappingInSequence,
    InvalidDepth,
    InvalidInputKind,
    ToYamlError,
    UnsupportedKeyType,
)
from .indentation import Indenter, indent
from .model import Symbol, ValueKind, classify

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "encode",
    "encode_at",
    "encode_chunks",
    "render_value",
    "render_sequence",
    "key_text",
    "quote_if_needed",
    "decimal_text",
    "indent",
    "Encoder",
    "Indenter",
    "IndentConfig",
    "configure",
    "get_config",
    "Symbol",
    "ValueKind",
    "classify",
    "ToYamlError",
    "InvalidInputKind",
    "UnsupportedKeyType",
    "EmptyMappingInSequence",
    "InvalidDepth",
    "ConfigurationError",
]
