"""Option schema registry.

Exports the static option descriptors, lookup helpers, and the
registry serializer.
"""
from __future__ import annotations

from backup_options.schema.registry import (
    OptionDescriptor,
    OptionType,
    UnknownOptionError,
    get_descriptor,
    is_known,
    list_options,
    option_names,
)
from backup_options.schema.serializer import RegistrySerializer

__all__ = [
    "OptionDescriptor",
    "OptionType",
    "UnknownOptionError",
    "get_descriptor",
    "is_known",
    "list_options",
    "option_names",
    "RegistrySerializer",
]
