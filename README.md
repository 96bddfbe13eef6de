# lstheme

Turn the `LS_COLORS` and `EXA_COLORS` strings into a colour theme for a
file listing.

The package reads the colon-separated `key=value` definitions that these
strings hold. It parses the ANSI SGR codes in each value back into a
`Style`, which holds foreground and background colours plus attributes such
as bold and underline. It then applies the definitions to a full set of
interface styles.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `lstheme.style`: the colours `Named`, `Fixed` (256-colour palette) and
  `RGB`, and the immutable `Style`.
- `lstheme.lsc`: `pairs()` splits a definition string, and `Pair.to_style()`
  parses one value.
- `lstheme.ui_styles`: `UiStyles`, which holds one style for every part of the
  interface, with its groups `FileKinds`, `Permissions`, `Size`, `Users`,
  `Links` and `Git`, and the `ColourScale` enum.
- `lstheme.theme`: `Theme`, the file name colourisers `ExtensionMappings`,
  `FallbackColours` and `NoFileColours`, the size `Prefix` enum and
  `apply_overlay()`.
- `lstheme.options`: `Options`, `UseColours` and `Definitions`, which build a
  `Theme`.

## Parsing definitions

```python
from lstheme.lsc import pairs

for pair in pairs("di=01;34:*.txt=38;5;149"):
    print(pair.key, pair.to_style())
```

`pairs()` skips entries that are not exactly `key=value`, and entries whose
key or value is empty. `to_style()` understands attributes `1`–`5` and
`7`–`9`, foreground colours `30`–`37`, background colours `40`–`47`, and
`38;5;N`, `48;5;N`, `38;2;R;G;B` and `48;2;R;G;B`. Leading zeros are
ignored. It also ignores codes it does not understand and palette or RGB
numbers above 255.

## Styles and colours

```python
from lstheme.style import Named, Fixed, RGB, Style

Named.RED.on(Named.YELLOW)
Fixed(244).normal()
Style().fg(RGB(255, 100, 0)).italic()
```

`Fixed` and `RGB` raise `ValueError` for values outside 0–255.

## Building a theme

```python
from lstheme.options import Options, UseColours, Definitions
from lstheme.ui_styles import ColourScale

options = Options(
    use_colours=UseColours.AUTOMATIC,
    colour_scale=ColourScale.GRADIENT,
    definitions=Definitions(ls="di=31:*.log=37", exa="da=36"),
)
theme = options.to_theme(isatty=True, default_filetypes=None)

theme.ui.filekinds.directory
theme.colour_file("server.log")
```

Colour is turned off when `use_colours` is `NEVER`. It is also turned off
when it is `AUTOMATIC` and `isatty` is false. In both cases the theme uses
`UiStyles.plain()` and colours no file names.

Otherwise the theme starts from `UiStyles.default_theme(scale)`. The
`LS_COLORS` keys (`di`, `ex`, `fi`, `pi`, `so`, `bd`, `cd`, `ln`, `or`) set
file kind styles. `EXA_COLORS` accepts those keys too, plus its own keys for
permissions, sizes, users, links, git status, dates, inodes, blocks, headers
and more. Its values override those from `LS_COLORS`. Any other key is taken
as a file name glob. A glob that cannot be parsed is logged as a warning and
skipped.

File name globs are matched case-sensitively with `fnmatch`. A glob defined
later takes priority over one defined earlier. When no glob matches, the
theme falls back to `default_filetypes`, if one is given, and then to the
normal file style. An `EXA_COLORS` value that starts with `reset` turns off
the `default_filetypes` fallback.

`Theme.size_style(prefix)` and `Theme.unit_style(prefix)` pick the size
styles for a `Prefix`, or for `None` when the size is in bytes.
`Theme.broken_filename()` and `Theme.broken_control_char()` apply the broken
path overlay with `apply_overlay()`.

## What this package does not do

- It does not turn a `Style` into escape sequences or print coloured text.
  It only describes the styles.
- It has no built-in table of file type colours. Pass your own colouriser,
  any object with a `colour_file(name)` method, as `default_filetypes`.
- It does not read environment variables itself. Pass the strings to
  `Definitions`.
- It provides no command-line program.