from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from .errors import ConfigError


class Color(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"


class Palette(Enum):
    RED = Color(255, 0, 0)
    GREEN = Color(0, 255, 0)
    BLUE = Color(0, 0, 255)
    WHITE = Color(255, 255, 255)
    BLACK = Color(0, 0, 0)


def parse_color(text: str) -> Color:
    """Accept a palette name (any case) or #rgb / #rrggbb / #rrggbbaa."""
    name = text.strip().upper()
    if name in Palette.__members__:
        return Palette[name].value

    s = text.strip()
    if not s.startswith("#"):
        raise ConfigError(f"unknown color {text!r}")
    digits = s[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits += "ff"
    if len(digits) != 8:
        raise ConfigError(f"color {text!r} must be #rgb, #rrggbb or #rrggbbaa")
    try:
        r, g, b, a = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
    except ValueError as e:
        raise ConfigError(f"color {text!r} is not valid hex") from e
    return Color(r, g, b, a)
