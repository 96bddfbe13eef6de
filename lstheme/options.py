"""Choosing a theme from colour options and colour definition strings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from lstheme.lsc import Pair, pairs
from lstheme.theme import (
    ExtensionMappings,
    FallbackColours,
    FileColours,
    NoFileColours,
    Theme,
)
from lstheme.ui_styles import ColourScale, UiStyles

logger = logging.getLogger(__name__)


class UseColours(Enum):
    """When coloured output should be produced."""

    ALWAYS = "always"
    """Even when output is not going to a terminal."""

    AUTOMATIC = "automatic"
    """Only when output is going to a terminal."""

    NEVER = "never"
    """Not even when output is going to a terminal."""


@dataclass
class Definitions:
    """The raw LS_COLORS and EXA_COLORS strings, if they were set."""

    ls: Optional[str] = None
    exa: Optional[str] = None

    def parse_color_vars(self, colours: UiStyles) -> Tuple[ExtensionMappings, bool]:
        """Apply both definition strings to ``colours``.

        UI codes modify ``colours`` in place; any other key is treated as a
        file name glob and collected into the returned mappings. The flag
        returned is False when the extended string starts with ``reset``,
        meaning the built-in file type colours should not be used.
        """
        exts = ExtensionMappings()

        if self.ls is not None:
            for pair in pairs(self.ls):
                if not colours.set_ls(pair):
                    _add_glob(exts, pair)

        use_default_filetypes = True

        if self.exa is not None:
            if self.exa == "reset" or self.exa.startswith("reset:"):
                use_default_filetypes = False

            for pair in pairs(self.exa):
                if not colours.set_ls(pair) and not colours.set_exa(pair):
                    _add_glob(exts, pair)

        return exts, use_default_filetypes


def _add_glob(exts: ExtensionMappings, pair: Pair) -> None:
    try:
        exts.add(pair.key, pair.to_style())
    except ValueError as error:
        logger.warning("Couldn't parse glob pattern %r: %s", pair.key, error)


@dataclass
class Options:
    """Everything that decides which theme is used."""

    use_colours: UseColours = UseColours.AUTOMATIC
    colour_scale: ColourScale = ColourScale.FIXED
    definitions: Definitions = field(default_factory=Definitions)

    def to_theme(
        self, isatty: bool, default_filetypes: Optional[FileColours] = None
    ) -> Theme:
        """Build the theme to use.

        ``default_filetypes`` is the built-in file name colouriser, used as a
        fallback unless the definitions reset it.
        """
        if self.use_colours is UseColours.NEVER or (
            self.use_colours is UseColours.AUTOMATIC and not isatty
        ):
            return Theme(UiStyles.plain(), NoFileColours())

        ui = UiStyles.default_theme(self.colour_scale)
        exts, use_default_filetypes = self.definitions.parse_color_vars(ui)
        defaults: FileColours = (
            default_filetypes if default_filetypes is not None else NoFileColours()
        )

        colouriser: FileColours
        if len(exts) and use_default_filetypes:
            colouriser = FallbackColours(exts, defaults)
        elif len(exts):
            colouriser = exts
        elif use_default_filetypes:
            colouriser = defaults
        else:
            colouriser = NoFileColours()

        return Theme(ui, colouriser)