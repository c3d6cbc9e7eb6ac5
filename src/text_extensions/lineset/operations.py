"""Line-set operations: paste, sort and case conversion over a selection.

Each operation checks its feasibility predicate, opens exactly one undo scope
on the host, walks the selection regions in selection order, and leaves the
scope on every exit path. Regions are plain offset pairs, so after each edit
the still-pending regions are re-mapped through it instead of relying on
host-side live cursors.
"""

from __future__ import annotations

from typing import Callable, ContextManager, Iterable, List, Optional, Tuple

from text_extensions.runtime import telemetry

from .casing import capitalize, to_lower, to_upper
from .feasibility import (
    can_sort,
    has_active_target,
    has_selection,
    replacement_source,
)
from .host import TextHost
from .regions import Edit, TextRegion, remap_all
from .source import ReplacementSource

LOGGER_NAME = "text_extensions.lineset"

PASTE_APPEND = "PasteAppend"
PASTE_PREPEND = "PastePrepend"
PASTE_REPLACE = "PasteReplace"
SORT_LINES = "SortLines"
SORT_SELECTION = "SortSelection"
SELECTION_CAPITALIZE = "SelectionCapitalize"
SELECTION_TO_LOWER = "SelectionToLower"
SELECTION_TO_UPPER = "SelectionToUpper"

InsertionPoint = Callable[[TextHost, TextRegion], int]


class _RegionPass:
    """The selection regions of one operation, kept valid across edits."""

    def __init__(self, host: TextHost, regions: Iterable[TextRegion]) -> None:
        self.host = host
        self._regions: List[TextRegion] = list(regions)

    def __len__(self) -> int:
        return len(self._regions)

    def __getitem__(self, index: int) -> TextRegion:
        return self._regions[index]

    def __setitem__(self, index: int, region: TextRegion) -> None:
        self._regions[index] = region

    def replace(self, start: int, end: int, text: str) -> None:
        if start == end:
            if not text:
                return
            self.host.insert_text(start, text)
        elif not text:
            self.host.delete_text(start, end)
        else:
            self.host.replace_text(start, end, text)
        self._regions = remap_all(self._regions, Edit(start, end, text))

    def delete(self, start: int, end: int) -> None:
        self.replace(start, end, "")


def _skipped(label: str) -> bool:
    telemetry.record_event(
        "lineset.skipped",
        level="debug",
        data={"operation": label},
        logger_name=LOGGER_NAME,
    )
    return False


def _operation_span(
    label: str, **metadata: object
) -> ContextManager[telemetry.SpanHandle]:
    return telemetry.span(
        f"lineset::{label}",
        logger_name=LOGGER_NAME,
        component="lineset",
        metadata=metadata,
    )


def _full_line(host: TextHost, region: TextRegion) -> TextRegion:
    start, _ = host.line_bounds(region.start)
    _, end = host.line_bounds(region.end)
    return TextRegion(start, end)


def _line_removal_span(host: TextHost, region: TextRegion) -> Tuple[int, int]:
    """Span deleted for a blank entry: up to the start of the next line.

    On the last line there is no next line; the remainder of the line goes
    and, when the whole line is covered, so does the preceding line break.
    """

    following = host.next_line_start(region.end)
    if following is not None:
        return region.start, following
    line_start, line_end = host.line_bounds(region.end)
    if region.start == line_start and line_start > 0:
        _, previous_end = host.line_bounds(line_start - 1)
        return previous_end, line_end
    return region.start, line_end


def _leading_whitespace(text: str) -> str:
    return text[: len(text) - len(text.lstrip())]


# -- paste -----------------------------------------------------------------


def _paste_lines(
    host: Optional[TextHost], source: Optional[ReplacementSource]
) -> Optional[ReplacementSource]:
    if not has_active_target(host):
        return None
    return replacement_source(host, source)


def _append_point(host: TextHost, region: TextRegion) -> int:
    line = _full_line(host, region)
    text = host.get_text(line.start, line.end)
    if not text.strip():
        return line.end
    return line.start + len(text.rstrip())


def _prepend_point(host: TextHost, region: TextRegion) -> int:
    line = _full_line(host, region)
    text = host.get_text(line.start, line.end)
    if not text.strip():
        return line.start
    return line.start + len(_leading_whitespace(text))


def _paste_at(
    host: Optional[TextHost],
    source: Optional[ReplacementSource],
    label: str,
    locate: InsertionPoint,
) -> bool:
    lines = _paste_lines(host, source)
    if host is None or lines is None:
        return _skipped(label)

    with host.undo_scope(label):
        regions = _RegionPass(host, host.selection_regions())
        with _operation_span(label, regions=len(regions), lines=len(lines)):
            for index in range(len(regions)):
                point = locate(host, regions[index])
                regions.replace(point, point, lines[index])
    return True


def paste_append(
    host: Optional[TextHost], source: Optional[ReplacementSource] = None
) -> bool:
    """Append replacement line ``i mod N`` after the content of selected line ``i``.

    Trailing whitespace of a non-blank line stays after the inserted text.
    Without an explicit ``source`` the host clipboard is used.
    """

    return _paste_at(host, source, PASTE_APPEND, _append_point)


def paste_prepend(
    host: Optional[TextHost], source: Optional[ReplacementSource] = None
) -> bool:
    """Insert replacement line ``i mod N`` before the content of selected line ``i``.

    Indentation of a non-blank line stays in front of the inserted text.
    """

    return _paste_at(host, source, PASTE_PREPEND, _prepend_point)


def paste_replace(
    host: Optional[TextHost], source: Optional[ReplacementSource] = None
) -> bool:
    """Replace each selected span, exactly, with replacement line ``i mod N``.

    Meant for rectangular selections. Several spans on one line give
    unspecified results.
    """

    lines = _paste_lines(host, source)
    if host is None or lines is None:
        return _skipped(PASTE_REPLACE)

    with host.undo_scope(PASTE_REPLACE):
        regions = _RegionPass(host, host.selection_regions())
        with _operation_span(PASTE_REPLACE, regions=len(regions), lines=len(lines)):
            for index in range(len(regions)):
                region = regions[index]
                regions.replace(region.start, region.end, lines[index])
    return True


# -- sort ------------------------------------------------------------------


def _sort(host: Optional[TextHost], label: str, *, whole_lines: bool) -> bool:
    if host is None or not can_sort(host):
        return _skipped(label)

    with host.undo_scope(label):
        regions = _RegionPass(host, host.selection_regions())
        with _operation_span(label, regions=len(regions)) as handle:
            kept: List[int] = []
            entries: List[str] = []
            indentation: Optional[str] = None

            for index in range(len(regions)):
                region = regions[index]
                if whole_lines:
                    region = regions[index] = _full_line(host, region)
                raw = host.get_text(region.start, region.end)
                entry = raw.strip()
                if not entry:
                    regions.delete(*_line_removal_span(host, region))
                    continue
                if whole_lines and indentation is None:
                    indentation = _leading_whitespace(raw)
                kept.append(index)
                entries.append(entry)

            handle.add_metadata("removed", len(regions) - len(kept))
            prefix = indentation or ""
            for index, entry in zip(kept, sorted(entries)):
                region = regions[index]
                regions.replace(region.start, region.end, prefix + entry)
    return True


def sort_lines(host: Optional[TextHost]) -> bool:
    """Sort the selected lines ordinally, dropping blank ones.

    Every line is stripped and re-indented with the leading whitespace of
    the first non-blank selected line.
    """

    return _sort(host, SORT_LINES, whole_lines=True)


def sort_selection(host: Optional[TextHost]) -> bool:
    """Sort the selected spans themselves, as in a column selection.

    A blank span deletes the rest of its line up to the next line start.
    """

    return _sort(host, SORT_SELECTION, whole_lines=False)


# -- case ------------------------------------------------------------------


def _recase(
    host: Optional[TextHost], label: str, transform: Callable[[str], str]
) -> bool:
    if host is None or not has_selection(host):
        return _skipped(label)

    with host.undo_scope(label):
        regions = _RegionPass(host, host.selection_regions())
        with _operation_span(label, regions=len(regions)):
            for index in range(len(regions)):
                region = regions[index]
                if region.is_empty:
                    continue
                text = host.get_text(region.start, region.end)
                changed = transform(text)
                if changed != text:
                    regions.replace(region.start, region.end, changed)
    return True


def selection_capitalize(host: Optional[TextHost]) -> bool:
    return _recase(host, SELECTION_CAPITALIZE, capitalize)


def selection_to_lower(host: Optional[TextHost]) -> bool:
    return _recase(host, SELECTION_TO_LOWER, to_lower)


def selection_to_upper(host: Optional[TextHost]) -> bool:
    return _recase(host, SELECTION_TO_UPPER, to_upper)


__all__ = [
    "PASTE_APPEND",
    "PASTE_PREPEND",
    "PASTE_REPLACE",
    "SELECTION_CAPITALIZE",
    "SELECTION_TO_LOWER",
    "SELECTION_TO_UPPER",
    "SORT_LINES",
    "SORT_SELECTION",
    "paste_append",
    "paste_prepend",
    "paste_replace",
    "selection_capitalize",
    "selection_to_lower",
    "selection_to_upper",
    "sort_lines",
    "sort_selection",
]
