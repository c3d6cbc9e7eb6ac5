"""Preconditions that turn an impossible command into a silent no-op."""

from __future__ import annotations

from typing import Optional

from .host import TextHost
from .source import ReplacementSource


def has_active_target(host: Optional[TextHost]) -> bool:
    return host is not None and not host.read_only


def replacement_source(
    host: Optional[TextHost], source: Optional[ReplacementSource] = None
) -> Optional[ReplacementSource]:
    """Return ``source`` or, failing that, the host clipboard parsed into lines."""

    if source is not None:
        return source
    if host is None:
        return None
    return ReplacementSource.from_text(host.clipboard_text())


def can_paste(
    host: Optional[TextHost], source: Optional[ReplacementSource] = None
) -> bool:
    if not has_active_target(host):
        return False
    return replacement_source(host, source) is not None


def _region_count(host: Optional[TextHost]) -> int:
    if host is None or host.read_only:
        return 0
    return len(host.selection_regions())


def can_sort(host: Optional[TextHost]) -> bool:
    return _region_count(host) > 1


def has_selection(host: Optional[TextHost]) -> bool:
    return _region_count(host) >= 1


__all__ = [
    "can_paste",
    "can_sort",
    "has_active_target",
    "has_selection",
    "replacement_source",
]
