"""Parsing of LS_COLORS-style strings into keys and styles."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, Iterator, Optional

from lstheme.style import RGB, Colour, Fixed, Named, Style

_BYTE = re.compile(r"\+?[0-9]+")

_ATTRIBUTES: Dict[str, Callable[[Style], Style]] = {
    "1": Style.bold,
    "2": Style.dimmed,
    "3": Style.italic,
    "4": Style.underline,
    "5": Style.blink,
    "7": Style.reverse,
    "8": Style.hidden,
    "9": Style.strikethrough,
}

_BASIC = [
    Named.BLACK,
    Named.RED,
    Named.GREEN,
    Named.YELLOW,
    Named.BLUE,
    Named.PURPLE,
    Named.CYAN,
    Named.WHITE,
]
_FOREGROUND = {str(30 + offset): colour for offset, colour in enumerate(_BASIC)}
_BACKGROUND = {str(40 + offset): colour for offset, colour in enumerate(_BASIC)}


def _parse_byte(text: Optional[str]) -> Optional[int]:
    if text is None or not _BYTE.fullmatch(text):
        return None
    number = int(text)
    return number if number <= 255 else None


def _take(parts: Deque[str]) -> Optional[str]:
    return parts.popleft() if parts else None


def _high_colour(parts: Deque[str]) -> Optional[Colour]:
    """Read a 256-colour or true-colour specification after a 38 or 48 code."""
    if not parts:
        return None
    kind = parts[0]
    if kind == "5":
        parts.popleft()
        number = _parse_byte(_take(parts))
        return Fixed(number) if number is not None else None
    if kind == "2":
        parts.popleft()
        first = _take(parts)
        if first is None:
            return None
        red = _parse_byte(first)
        green = _parse_byte(_take(parts))
        blue = _parse_byte(_take(parts))
        if red is not None and green is not None and blue is not None:
            return RGB(red, green, blue)
    return None


@dataclass(frozen=True)
class Pair:
    """One ``key=value`` entry of a colour definition string."""

    key: str
    value: str

    def to_style(self) -> Style:
        """Interpret the value as semicolon-separated ANSI codes.

        Codes that are not understood are ignored.
        """
        style = Style()
        parts: Deque[str] = deque(self.value.split(";"))
        while parts:
            code = parts.popleft().lstrip("0")
            if code in _ATTRIBUTES:
                style = _ATTRIBUTES[code](style)
            elif code in _FOREGROUND:
                style = style.fg(_FOREGROUND[code])
            elif code in _BACKGROUND:
                style = style.on(_BACKGROUND[code])
            elif code in ("38", "48"):
                colour = _high_colour(parts)
                if colour is not None:
                    style = style.fg(colour) if code == "38" else style.on(colour)
        return style


def pairs(text: str) -> Iterator[Pair]:
    """Yield the well-formed ``key=value`` entries of a colon-separated string."""
    for entry in text.split(":"):
        bits = entry.split("=")
        if len(bits) == 2 and bits[0] and bits[1]:
            yield Pair(bits[0], bits[1])