"""Docs: config loading, schema validation, and glob resolution."""

from .loader import load_command_config, parse_config
from .models import (
    Answer,
    CommandConfig,
    CommandEntry,
    DocsResult,
    ResolvedCommand,
    ResolvedDocPattern,
    SubCommand,
)
from .resolver import (
    expand_pattern,
    extend_command,
    get_command_docs,
    read_command_files,
    resolve_command,
    resolve_patterns,
)
from .schema import CONFIG_SCHEMA, validate_config

__all__ = [
    "CONFIG_SCHEMA",
    "Answer",
    "CommandConfig",
    "CommandEntry",
    "DocsResult",
    "ResolvedCommand",
    "ResolvedDocPattern",
    "SubCommand",
    "expand_pattern",
    "extend_command",
    "get_command_docs",
    "load_command_config",
    "parse_config",
    "read_command_files",
    "resolve_command",
    "resolve_patterns",
    "validate_config",
]
