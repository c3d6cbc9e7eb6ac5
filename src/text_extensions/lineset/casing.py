"""Locale-invariant case transforms applied to selected spans."""

from __future__ import annotations

import re

# Letters and digits, optionally joined by apostrophes ("don't" is one word).
_WORD = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")


def capitalize(text: str) -> str:
    """Upper-case the first character of every word and lower-case the rest."""

    return _WORD.sub(lambda match: match[0][:1].upper() + match[0][1:].lower(), text)


def to_lower(text: str) -> str:
    return text.lower()


def to_upper(text: str) -> str:
    return text.upper()


__all__ = ["capitalize", "to_lower", "to_upper"]
