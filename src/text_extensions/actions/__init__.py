"""Command surface mapping command names onto line-set operations."""

from .commands import (
    CommandSpec,
    UnknownCommandError,
    available_commands,
    bind,
    execute,
    get_command,
    query_status,
)

__all__ = [
    "CommandSpec",
    "UnknownCommandError",
    "available_commands",
    "bind",
    "execute",
    "get_command",
    "query_status",
]
