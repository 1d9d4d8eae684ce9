"""Variant value passed between a story and host code."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

_log = logging.getLogger(__name__)


class InkVarType(enum.Enum):
    """Kind of value an :class:`InkVar` holds."""

    FLOAT = 0
    INT = 1
    STRING = 2
    NONE = 3


@dataclass
class InkVar:
    """A float, int or string value, or nothing."""

    type: InkVarType = InkVarType.NONE
    float_var: float = 0.0
    int_var: int = 0
    string_var: str = ""

    @staticmethod
    def of(value: int | float | str | bool | None) -> "InkVar":
        """Wrap a Python value; booleans become the ints 1 and 0."""
        if value is None:
            return InkVar()
        if isinstance(value, bool):
            return InkVar(InkVarType.INT, int_var=1 if value else 0)
        if isinstance(value, int):
            return InkVar(InkVarType.INT, int_var=value)
        if isinstance(value, float):
            return InkVar(InkVarType.FLOAT, float_var=value)
        if isinstance(value, str):
            return InkVar(InkVarType.STRING, string_var=value)
        raise TypeError(f"unsupported value type: {type(value).__name__}")

    def _expect(self, kind: InkVarType, label: str) -> bool:
        if self.type is kind:
            return True
        _log.warning("InkVar is not %s Type!", label)
        return False

    def as_string(self) -> str:
        """Return the string value, or "" if this is not a string."""
        if self._expect(InkVarType.STRING, "a String"):
            return self.string_var
        return ""

    def as_int(self) -> int:
        """Return the int value, or 0 if this is not an int."""
        if self._expect(InkVarType.INT, "an Int"):
            return self.int_var
        return 0

    def as_float(self) -> float:
        """Return the float value, or 0.0 if this is not a float."""
        if self._expect(InkVarType.FLOAT, "a Float"):
            return self.float_var
        return 0.0

    def as_bool(self) -> bool:
        """Return True for a positive int; False otherwise."""
        if self._expect(InkVarType.INT, "an Int"):
            return self.int_var > 0
        return False