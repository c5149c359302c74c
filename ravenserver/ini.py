"""A small INI reader with typed accessors."""

from __future__ import annotations

import math
import os
import re

_WHITESPACE = " \t\n\r\f\v"
_INT_PREFIX = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\r\f\v]*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})


class IniParser:
    """Holds key/value pairs grouped by section, as read from INI text."""

    def __init__(self) -> None:
        self.sections: dict[str, dict[str, str]] = {}

    def load(self, filename: str | os.PathLike[str]) -> None:
        """Read and parse an INI file; raises OSError if it cannot be opened."""
        with open(filename, encoding="utf-8", newline="") as handle:
            self.loads(handle.read())

    def loads(self, text: str) -> None:
        """Parse INI text, merging it into what is already held."""
        section = ""
        for raw in text.split("\n"):
            line = raw.strip(_WHITESPACE)
            if not line or line[0] in ";#":
                continue
            if line.startswith("[") and line.endswith("]") and len(line) >= 2:
                section = line[1:-1].strip(_WHITESPACE)
                continue
            key, sep, value = line.partition("=")
            if sep:
                self.sections.setdefault(section, {})[key.strip(_WHITESPACE)] = value.strip(
                    _WHITESPACE
                )

    def get_string(self, section: str, key: str, default: str = "") -> str:
        return self.sections.get(section, {}).get(key, default)

    def get_int(self, section: str, key: str, default: int = 0) -> int:
        """Leading integer of the value, or the default if there is none or it overflows."""
        match = _INT_PREFIX.match(self.get_string(section, key))
        if match is None:
            return default
        value = int(match.group(1))
        return value if _INT_MIN <= value <= _INT_MAX else default

    def get_float(self, section: str, key: str, default: float = 0.0) -> float:
        """Leading floating-point number of the value, or the default."""
        match = _FLOAT_PREFIX.match(self.get_string(section, key))
        if match is None:
            return default
        literal = match.group(1)
        value = float(literal)
        if math.isinf(value) and "inf" not in literal.lower():
            return default
        return value

    def get_bool(self, section: str, key: str, default: bool = False) -> bool:
        """true/yes/on/1 and false/no/off/0, case-insensitively; else the default."""
        word = self.get_string(section, key).lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        return default