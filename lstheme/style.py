"""Terminal colours and text styles."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


def _plain(colour: Colour) -> Style:
    return Style(foreground=colour)


def _on(colour: Colour, background: Colour) -> Style:
    return Style(foreground=colour, background=background)


class Named(Enum):
    """The eight basic terminal colours."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    PURPLE = "purple"
    CYAN = "cyan"
    WHITE = "white"

    def normal(self) -> Style:
        """A style with this foreground colour and nothing else."""
        return _plain(self)

    def bold(self) -> Style:
        """A bold style with this foreground colour."""
        return _plain(self).bold()

    def underline(self) -> Style:
        """An underlined style with this foreground colour."""
        return _plain(self).underline()

    def on(self, background: Colour) -> Style:
        """A style with this foreground colour on the given background."""
        return _on(self, background)


def _check_byte(value: int, what: str) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{what} must be between 0 and 255, not {value}")


@dataclass(frozen=True)
class Fixed:
    """A colour from the 256-colour palette."""

    number: int

    def __post_init__(self) -> None:
        _check_byte(self.number, "palette number")

    def normal(self) -> Style:
        """A style with this foreground colour and nothing else."""
        return _plain(self)

    def bold(self) -> Style:
        """A bold style with this foreground colour."""
        return _plain(self).bold()

    def underline(self) -> Style:
        """An underlined style with this foreground colour."""
        return _plain(self).underline()

    def on(self, background: Colour) -> Style:
        """A style with this foreground colour on the given background."""
        return _on(self, background)


@dataclass(frozen=True)
class RGB:
    """A 24-bit true colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_byte(self.red, "red")
        _check_byte(self.green, "green")
        _check_byte(self.blue, "blue")

    def normal(self) -> Style:
        """A style with this foreground colour and nothing else."""
        return _plain(self)

    def bold(self) -> Style:
        """A bold style with this foreground colour."""
        return _plain(self).bold()

    def underline(self) -> Style:
        """An underlined style with this foreground colour."""
        return _plain(self).underline()

    def on(self, background: Colour) -> Style:
        """A style with this foreground colour on the given background."""
        return _on(self, background)


Colour = Union[Named, Fixed, RGB]


@dataclass(frozen=True)
class Style:
    """An immutable set of colours and text attributes."""

    foreground: Optional[Colour] = None
    background: Optional[Colour] = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False
    is_reverse: bool = False
    is_hidden: bool = False
    is_strikethrough: bool = False

    def bold(self) -> Style:
        return dataclasses.replace(self, is_bold=True)

    def dimmed(self) -> Style:
        return dataclasses.replace(self, is_dimmed=True)

    def italic(self) -> Style:
        return dataclasses.replace(self, is_italic=True)

    def underline(self) -> Style:
        return dataclasses.replace(self, is_underline=True)

    def blink(self) -> Style:
        return dataclasses.replace(self, is_blink=True)

    def reverse(self) -> Style:
        return dataclasses.replace(self, is_reverse=True)

    def hidden(self) -> Style:
        return dataclasses.replace(self, is_hidden=True)

    def strikethrough(self) -> Style:
        return dataclasses.replace(self, is_strikethrough=True)

    def fg(self, colour: Colour) -> Style:
        """This style with the given foreground colour."""
        return dataclasses.replace(self, foreground=colour)

    def on(self, colour: Colour) -> Style:
        """This style with the given background colour."""
        return dataclasses.replace(self, background=colour)