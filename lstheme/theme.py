"""Themes: UI styles plus rules for colouring file names."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from fnmatch import fnmatchcase
from typing import List, Optional, Protocol, Tuple

from lstheme.style import Style
from lstheme.ui_styles import UiStyles


class Prefix(Enum):
    """Decimal and binary magnitude prefixes that a file size can carry."""

    KILO = "k"
    MEGA = "M"
    GIGA = "G"
    TERA = "T"
    PETA = "P"
    EXA = "E"
    ZETTA = "Z"
    YOTTA = "Y"
    KIBI = "Ki"
    MEBI = "Mi"
    GIBI = "Gi"
    TEBI = "Ti"
    PEBI = "Pi"
    EXBI = "Ei"
    ZEBI = "Zi"
    YOBI = "Yi"


class FileColours(Protocol):
    """Something that may pick a style for a file name."""

    def colour_file(self, name: str) -> Optional[Style]:
        ...


class NoFileColours:
    """Colours no file names at all."""

    def colour_file(self, name: str) -> Optional[Style]:
        return None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoFileColours)

    def __hash__(self) -> int:
        return hash(NoFileColours)

    def __repr__(self) -> str:
        return "NoFileColours()"


@dataclass
class FallbackColours:
    """Asks the first colouriser, then the second if the first has no style."""

    first: FileColours
    second: FileColours

    def colour_file(self, name: str) -> Optional[Style]:
        style = self.first.colour_file(name)
        if style is not None:
            return style
        return self.second.colour_file(name)


def _validate_glob(pattern: str) -> None:
    """Reject glob patterns that are malformed; raise ValueError if so."""
    length = len(pattern)
    i = 0
    while i < length:
        char = pattern[i]
        if char == "*":
            start = i
            while i < length and pattern[i] == "*":
                i += 1
            if i - start > 1:
                before_ok = start == 0 or pattern[start - 1] == "/"
                after_ok = i == length or pattern[i] == "/"
                if not (before_ok and after_ok):
                    raise ValueError(
                        f"invalid glob pattern {pattern!r}: "
                        "recursive wildcards must form a single path component"
                    )
            continue
        if char == "[":
            if i + 1 < length and pattern[i + 1] == "!":
                search_from = i + 3
            else:
                search_from = i + 2
            close = pattern.find("]", search_from) if search_from <= length else -1
            if close < 0:
                raise ValueError(
                    f"invalid glob pattern {pattern!r}: unclosed character class"
                )
            i = close + 1
            continue
        i += 1


@dataclass
class ExtensionMappings:
    """Glob patterns mapped to styles; later patterns override earlier ones."""

    mappings: List[Tuple[str, Style]] = field(default_factory=list)

    def add(self, pattern: str, style: Style) -> None:
        """Append a mapping, raising ValueError if the pattern is malformed."""
        _validate_glob(pattern)
        self.mappings.append((pattern, style))

    def colour_file(self, name: str) -> Optional[Style]:
        for pattern, style in reversed(self.mappings):
            if fnmatchcase(name, pattern):
                return style
        return None

    def __len__(self) -> int:
        return len(self.mappings)


_MAGNITUDES = {
    Prefix.KILO: "kilo",
    Prefix.KIBI: "kilo",
    Prefix.MEGA: "mega",
    Prefix.MEBI: "mega",
    Prefix.GIGA: "giga",
    Prefix.GIBI: "giga",
}


def _magnitude(prefix: Optional[Prefix]) -> str:
    if prefix is None:
        return "byte"
    return _MAGNITUDES.get(prefix, "huge")


def apply_overlay(base: Style, overlay: Style) -> Style:
    """Amend a style with the colours and attributes an overlay sets."""
    changes = {}
    if overlay.foreground is not None:
        changes["foreground"] = overlay.foreground
    if overlay.background is not None:
        changes["background"] = overlay.background
    for flag in (
        "is_bold",
        "is_dimmed",
        "is_italic",
        "is_underline",
        "is_blink",
        "is_reverse",
        "is_hidden",
        "is_strikethrough",
    ):
        if getattr(overlay, flag):
            changes[flag] = True
    return dataclasses.replace(base, **changes)


@dataclass
class Theme:
    """The UI styles together with a file name colouriser."""

    ui: UiStyles
    exts: FileColours = field(default_factory=NoFileColours)

    def size_style(self, prefix: Optional[Prefix]) -> Style:
        """The style for the number part of a size with this prefix."""
        return getattr(self.ui.size, f"number_{_magnitude(prefix)}")

    def unit_style(self, prefix: Optional[Prefix]) -> Style:
        """The style for the unit part of a size with this prefix."""
        return getattr(self.ui.size, f"unit_{_magnitude(prefix)}")

    def broken_filename(self) -> Style:
        return apply_overlay(self.ui.broken_symlink, self.ui.broken_path_overlay)

    def broken_control_char(self) -> Style:
        return apply_overlay(self.ui.control_char, self.ui.broken_path_overlay)

    def colour_file(self, name: str) -> Style:
        """The style for a file name, falling back to the normal file style."""
        style = self.exts.colour_file(name)
        return style if style is not None else self.ui.filekinds.normal