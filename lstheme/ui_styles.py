"""The set of styles used for every colourable part of a listing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from lstheme.lsc import Pair
from lstheme.style import Fixed, Named, Style

_SIZE_UNITS = ("byte", "kilo", "mega", "giga", "huge")


class ColourScale(Enum):
    """How file sizes are coloured."""

    FIXED = "fixed"
    GRADIENT = "gradient"


@dataclass
class FileKinds:
    normal: Style = field(default_factory=Style)
    directory: Style = field(default_factory=Style)
    symlink: Style = field(default_factory=Style)
    pipe: Style = field(default_factory=Style)
    block_device: Style = field(default_factory=Style)
    char_device: Style = field(default_factory=Style)
    socket: Style = field(default_factory=Style)
    special: Style = field(default_factory=Style)
    executable: Style = field(default_factory=Style)


@dataclass
class Permissions:
    user_read: Style = field(default_factory=Style)
    user_write: Style = field(default_factory=Style)
    user_execute_file: Style = field(default_factory=Style)
    user_execute_other: Style = field(default_factory=Style)

    group_read: Style = field(default_factory=Style)
    group_write: Style = field(default_factory=Style)
    group_execute: Style = field(default_factory=Style)

    other_read: Style = field(default_factory=Style)
    other_write: Style = field(default_factory=Style)
    other_execute: Style = field(default_factory=Style)

    special_user_file: Style = field(default_factory=Style)
    special_other: Style = field(default_factory=Style)

    attribute: Style = field(default_factory=Style)


@dataclass
class Size:
    major: Style = field(default_factory=Style)
    minor: Style = field(default_factory=Style)

    number_byte: Style = field(default_factory=Style)
    number_kilo: Style = field(default_factory=Style)
    number_mega: Style = field(default_factory=Style)
    number_giga: Style = field(default_factory=Style)
    number_huge: Style = field(default_factory=Style)

    unit_byte: Style = field(default_factory=Style)
    unit_kilo: Style = field(default_factory=Style)
    unit_mega: Style = field(default_factory=Style)
    unit_giga: Style = field(default_factory=Style)
    unit_huge: Style = field(default_factory=Style)

    @classmethod
    def colourful(cls, scale: ColourScale) -> Size:
        """The size styles of the default theme for the given scale."""
        if scale is ColourScale.GRADIENT:
            numbers = [Fixed(n).normal() for n in (118, 190, 226, 220, 214)]
        else:
            numbers = [Named.GREEN.bold()] * len(_SIZE_UNITS)
        size = cls(major=Named.GREEN.bold(), minor=Named.GREEN.normal())
        for unit, number_style in zip(_SIZE_UNITS, numbers):
            setattr(size, f"number_{unit}", number_style)
            setattr(size, f"unit_{unit}", Named.GREEN.normal())
        return size


@dataclass
class Users:
    user_you: Style = field(default_factory=Style)
    user_someone_else: Style = field(default_factory=Style)
    group_yours: Style = field(default_factory=Style)
    group_not_yours: Style = field(default_factory=Style)


@dataclass
class Links:
    normal: Style = field(default_factory=Style)
    multi_link_file: Style = field(default_factory=Style)


@dataclass
class Git:
    new: Style = field(default_factory=Style)
    modified: Style = field(default_factory=Style)
    deleted: Style = field(default_factory=Style)
    renamed: Style = field(default_factory=Style)
    typechange: Style = field(default_factory=Style)
    ignored: Style = field(default_factory=Style)
    conflicted: Style = field(default_factory=Style)


_Path = Tuple[str, ...]

_LS_KEYS: Dict[str, _Path] = {
    "di": ("filekinds", "directory"),
    "ex": ("filekinds", "executable"),
    "fi": ("filekinds", "normal"),
    "pi": ("filekinds", "pipe"),
    "so": ("filekinds", "socket"),
    "bd": ("filekinds", "block_device"),
    "cd": ("filekinds", "char_device"),
    "ln": ("filekinds", "symlink"),
    "or": ("broken_symlink",),
}

_EXA_KEYS: Dict[str, _Path] = {
    "ur": ("perms", "user_read"),
    "uw": ("perms", "user_write"),
    "ux": ("perms", "user_execute_file"),
    "ue": ("perms", "user_execute_other"),
    "gr": ("perms", "group_read"),
    "gw": ("perms", "group_write"),
    "gx": ("perms", "group_execute"),
    "tr": ("perms", "other_read"),
    "tw": ("perms", "other_write"),
    "tx": ("perms", "other_execute"),
    "su": ("perms", "special_user_file"),
    "sf": ("perms", "special_other"),
    "xa": ("perms", "attribute"),
    "nb": ("size", "number_byte"),
    "nk": ("size", "number_kilo"),
    "nm": ("size", "number_mega"),
    "ng": ("size", "number_giga"),
    "nh": ("size", "number_huge"),
    "ub": ("size", "unit_byte"),
    "uk": ("size", "unit_kilo"),
    "um": ("size", "unit_mega"),
    "ug": ("size", "unit_giga"),
    "uh": ("size", "unit_huge"),
    "df": ("size", "major"),
    "ds": ("size", "minor"),
    "uu": ("users", "user_you"),
    "un": ("users", "user_someone_else"),
    "gu": ("users", "group_yours"),
    "gn": ("users", "group_not_yours"),
    "lc": ("links", "normal"),
    "lm": ("links", "multi_link_file"),
    "ga": ("git", "new"),
    "gm": ("git", "modified"),
    "gd": ("git", "deleted"),
    "gv": ("git", "renamed"),
    "gt": ("git", "typechange"),
    "xx": ("punctuation",),
    "da": ("date",),
    "in": ("inode",),
    "bl": ("blocks",),
    "hd": ("header",),
    "lp": ("symlink_path",),
    "cc": ("control_char",),
    "bO": ("broken_path_overlay",),
}


@dataclass
class UiStyles:
    """One style for each part of the interface that can be coloured."""

    colourful: bool = False

    filekinds: FileKinds = field(default_factory=FileKinds)
    perms: Permissions = field(default_factory=Permissions)
    size: Size = field(default_factory=Size)
    users: Users = field(default_factory=Users)
    links: Links = field(default_factory=Links)
    git: Git = field(default_factory=Git)

    punctuation: Style = field(default_factory=Style)
    date: Style = field(default_factory=Style)
    inode: Style = field(default_factory=Style)
    blocks: Style = field(default_factory=Style)
    header: Style = field(default_factory=Style)
    octal: Style = field(default_factory=Style)

    symlink_path: Style = field(default_factory=Style)
    control_char: Style = field(default_factory=Style)
    broken_symlink: Style = field(default_factory=Style)
    broken_path_overlay: Style = field(default_factory=Style)

    @classmethod
    def plain(cls) -> UiStyles:
        """Styles that add no colour or attributes at all."""
        return cls()

    @classmethod
    def default_theme(cls, scale: ColourScale) -> UiStyles:
        """The built-in colourful theme."""
        return cls(
            colourful=True,
            filekinds=FileKinds(
                normal=Style(),
                directory=Named.BLUE.bold(),
                symlink=Named.CYAN.normal(),
                pipe=Named.YELLOW.normal(),
                block_device=Named.YELLOW.bold(),
                char_device=Named.YELLOW.bold(),
                socket=Named.RED.bold(),
                special=Named.YELLOW.normal(),
                executable=Named.GREEN.bold(),
            ),
            perms=Permissions(
                user_read=Named.YELLOW.bold(),
                user_write=Named.RED.bold(),
                user_execute_file=Named.GREEN.bold().underline(),
                user_execute_other=Named.GREEN.bold(),
                group_read=Named.YELLOW.normal(),
                group_write=Named.RED.normal(),
                group_execute=Named.GREEN.normal(),
                other_read=Named.YELLOW.normal(),
                other_write=Named.RED.normal(),
                other_execute=Named.GREEN.normal(),
                special_user_file=Named.PURPLE.normal(),
                special_other=Named.PURPLE.normal(),
                attribute=Style(),
            ),
            size=Size.colourful(scale),
            users=Users(
                user_you=Named.YELLOW.bold(),
                user_someone_else=Style(),
                group_yours=Named.YELLOW.bold(),
                group_not_yours=Style(),
            ),
            links=Links(
                normal=Named.RED.bold(),
                multi_link_file=Named.RED.on(Named.YELLOW),
            ),
            git=Git(
                new=Named.GREEN.normal(),
                modified=Named.BLUE.normal(),
                deleted=Named.RED.normal(),
                renamed=Named.YELLOW.normal(),
                typechange=Named.PURPLE.normal(),
                ignored=Style().dimmed(),
                conflicted=Named.RED.normal(),
            ),
            punctuation=Fixed(244).normal(),
            date=Named.BLUE.normal(),
            inode=Named.PURPLE.normal(),
            blocks=Named.CYAN.normal(),
            octal=Named.PURPLE.normal(),
            header=Style().underline(),
            symlink_path=Named.CYAN.normal(),
            control_char=Named.RED.normal(),
            broken_symlink=Named.RED.normal(),
            broken_path_overlay=Style().underline(),
        )

    def _assign(self, path: _Path, style: Style) -> None:
        *parents, last = path
        target: object = self
        for name in parents:
            target = getattr(target, name)
        setattr(target, last, style)

    def set_ls(self, pair: Pair) -> bool:
        """Apply a pair whose key is an LS_COLORS code.

        Returns False, changing nothing, if the key is not one.
        """
        path = _LS_KEYS.get(pair.key)
        if path is None:
            return False
        self._assign(path, pair.to_style())
        return True

    def set_exa(self, pair: Pair) -> bool:
        """Apply a pair whose key is one of the extended codes.

        LS_COLORS codes are not recognised here; returns False, changing
        nothing, if the key is unknown.
        """
        if pair.key == "sn":
            self.set_number_style(pair.to_style())
            return True
        if pair.key == "sb":
            self.set_unit_style(pair.to_style())
            return True
        path = _EXA_KEYS.get(pair.key)
        if path is None:
            return False
        self._assign(path, pair.to_style())
        return True

    def set_number_style(self, style: Style) -> None:
        """Use one style for the numbers of every size magnitude."""
        for unit in _SIZE_UNITS:
            setattr(self.size, f"number_{unit}", style)

    def set_unit_style(self, style: Style) -> None:
        """Use one style for the units of every size magnitude."""
        for unit in _SIZE_UNITS:
            setattr(self.size, f"unit_{unit}", style)