"""Host-independent line-set editing: paste, sort and case commands."""

from .casing import capitalize, to_lower, to_upper
from .feasibility import (
    can_paste,
    can_sort,
    has_active_target,
    has_selection,
    replacement_source,
)
from .host import TextHost
from .operations import (
    paste_append,
    paste_prepend,
    paste_replace,
    selection_capitalize,
    selection_to_lower,
    selection_to_upper,
    sort_lines,
    sort_selection,
)
from .regions import Edit, TextRegion, remap_all
from .source import ReplacementSource, split_lines

__all__ = [
    "Edit",
    "ReplacementSource",
    "TextHost",
    "TextRegion",
    "can_paste",
    "can_sort",
    "capitalize",
    "has_active_target",
    "has_selection",
    "paste_append",
    "paste_prepend",
    "paste_replace",
    "remap_all",
    "replacement_source",
    "selection_capitalize",
    "selection_to_lower",
    "selection_to_upper",
    "sort_lines",
    "sort_selection",
    "split_lines",
    "to_lower",
    "to_upper",
]
