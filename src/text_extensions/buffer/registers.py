"""Register storage, including the register standing in for the clipboard."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

UNNAMED_REGISTER = '"'
CLIPBOARD_REGISTER = "+"


@dataclass(slots=True)
class RegisterValue:
    text: str


class RegisterBank:
    """Tracks the unnamed register, named registers and the clipboard."""

    def __init__(self) -> None:
        self._registers: Dict[str, RegisterValue] = {
            UNNAMED_REGISTER: RegisterValue(text="")
        }

    def get(self, name: str) -> RegisterValue:
        return self._registers.get(name, RegisterValue(text=""))

    def set(self, name: str, value: RegisterValue) -> None:
        self._registers[name] = value
        if name != UNNAMED_REGISTER:
            self._registers[UNNAMED_REGISTER] = value

    def clipboard_get(self) -> Optional[str]:
        value = self._registers.get(CLIPBOARD_REGISTER)
        if value is None or not value.text:
            return None
        return value.text

    def clipboard_set(self, text: str) -> None:
        self.set(CLIPBOARD_REGISTER, RegisterValue(text=text))


__all__ = [
    "CLIPBOARD_REGISTER",
    "UNNAMED_REGISTER",
    "RegisterBank",
    "RegisterValue",
]
