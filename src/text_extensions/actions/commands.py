"""Named commands, as an IDE menu or key binding would address them."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Optional

from text_extensions.lineset import feasibility, operations
from text_extensions.lineset.host import TextHost
from text_extensions.runtime import telemetry

CommandHandler = Callable[[Optional[TextHost]], bool]
CommandPredicate = Callable[[Optional[TextHost]], bool]


class UnknownCommandError(KeyError):
    """Raised when a command name is not in the table."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown command '{self.name}'"


@dataclass(frozen=True, slots=True)
class CommandSpec:
    name: str
    handler: CommandHandler
    predicate: CommandPredicate
    description: str = ""


def _spec(
    name: str, handler: CommandHandler, predicate: CommandPredicate, description: str
) -> CommandSpec:
    return CommandSpec(
        name=name, handler=handler, predicate=predicate, description=description
    )


_COMMANDS: Dict[str, CommandSpec] = {
    spec.name: spec
    for spec in (
        _spec(
            operations.PASTE_APPEND,
            operations.paste_append,
            feasibility.can_paste,
            "Append clipboard lines to the end of each selected line",
        ),
        _spec(
            operations.PASTE_PREPEND,
            operations.paste_prepend,
            feasibility.can_paste,
            "Prepend clipboard lines to the start of each selected line",
        ),
        _spec(
            operations.PASTE_REPLACE,
            operations.paste_replace,
            feasibility.can_paste,
            "Replace each selected span with a clipboard line",
        ),
        _spec(
            operations.SORT_LINES,
            operations.sort_lines,
            feasibility.can_sort,
            "Sort selected lines, keeping the first line's indentation",
        ),
        _spec(
            operations.SORT_SELECTION,
            operations.sort_selection,
            feasibility.can_sort,
            "Sort the selected column spans",
        ),
        _spec(
            operations.SELECTION_CAPITALIZE,
            operations.selection_capitalize,
            feasibility.has_selection,
            "Capitalize every word in the selection",
        ),
        _spec(
            operations.SELECTION_TO_LOWER,
            operations.selection_to_lower,
            feasibility.has_selection,
            "Lower-case the selection",
        ),
        _spec(
            operations.SELECTION_TO_UPPER,
            operations.selection_to_upper,
            feasibility.has_selection,
            "Upper-case the selection",
        ),
    )
}


def available_commands() -> tuple[str, ...]:
    return tuple(_COMMANDS)


def get_command(name: str) -> CommandSpec:
    try:
        return _COMMANDS[name]
    except KeyError:
        telemetry.record_event(
            "command.unknown", level="warning", data={"command": name}
        )
        raise UnknownCommandError(name) from None


def query_status(name: str, host: Optional[TextHost]) -> bool:
    """Whether ``name`` would do anything right now (menu item enablement)."""

    return get_command(name).predicate(host)


def execute(name: str, host: Optional[TextHost]) -> bool:
    """Run ``name`` against ``host``; ``False`` when it was a no-op."""

    command = get_command(name)
    ran = command.handler(host)
    telemetry.record_event(
        "command.execute",
        level="debug",
        data={"command": name, "ran": ran},
    )
    return ran


def bind(name: str) -> Callable[[Optional[TextHost]], bool]:
    """Return a zero-lookup callable for ``name``, validated up front."""

    get_command(name)
    return partial(execute, name)


__all__ = [
    "CommandSpec",
    "UnknownCommandError",
    "available_commands",
    "bind",
    "execute",
    "get_command",
    "query_status",
]
