# lstheme

Theme definitions for a colourful directory listing: colours for every
column, icons by file name, extension and file type, and one-letter git
status symbols. Themes are read from YAML, and any field you leave out
keeps its default value.

## Installing

```
pip install .
```

Add the `test` extra (`pip install .[test]`) to run the test suite with
`pytest`.

## Colour themes

```python
from lstheme.color_theme import ColorTheme

theme = ColorTheme.from_yaml("""
user: 130
permission:
  read: dark_green
size:
  large: "#ff007f"
""")

theme.user             # AnsiColor(value=130)
theme.permission.read  # NamedColor.DARK_GREEN
theme.size.large       # RgbColor(r=255, g=0, b=127)
theme == ColorTheme.default_dark()  # False: three fields were changed
```

The theme has the sections `permission`, `attributes`, `date`, `size`,
`inode`, `links` and `git-status`, plus the single colours `user`,
`group` and `tree-edge`. Keys are written in kebab-case (`exec-sticky`,
`tree-edge`, `git-status`). The `file_type` colours are always the
defaults; they cannot be set from a theme document.

A colour, read by `lstheme.color.parse_color(value)`, may be given as:

* a name: `reset`, `black`, `blue`, `dark_blue`, `cyan`, `dark_cyan`,
  `green`, `dark_green`, `grey`, `dark_grey`, `magenta`, `dark_magenta`,
  `red`, `dark_red`, `white`, `yellow`, `dark_yellow`
  (giving a `NamedColor`);
* an integer from 0 to 255, or a string such as `"ansi_(130)"`, an index
  into the 256-colour palette (giving an `AnsiColor`);
* a list of three integers from 0 to 255, a string such as
  `"rgb_(255, 0, 127)"`, or a hexadecimal string such as `"#ff007f"`,
  read as red, green and blue (giving an `RgbColor`).

Names and strings are matched without regard to case or surrounding
spaces. `parse_color` raises `ValueError` for anything else.

Use `ColorTheme.from_path(path)` to read a theme file and
`ColorTheme.from_mapping(data)` for data that is already parsed. An
unknown key, a value that is not a colour, or a document that is not
valid YAML or not a mapping raises `lstheme.loader.ThemeError` (a
subclass of `ValueError`). An empty document gives the default theme.

## Icon themes

```python
from lstheme.icon_theme import IconTheme

icons = IconTheme.from_yaml("""
name:
  cargo.toml: "📦"
extension:
  rs: "🦀"
""")

icons.name["cargo.toml"]   # "📦"
icons.name["cargo.lock"]   # the default icon is kept
icons.extension["rs"]      # "🦀"
icons.filetype.dir         # the default directory icon
```

Entries in `name` and `extension` are added to the built-in tables and
override them key by key. The built-in tables are returned by
`lstheme.icon_names.default_icons_by_name()` and
`lstheme.icon_extensions.default_icons_by_extension()`, each call giving
a fresh dictionary. The `filetype` section (`lstheme.icon_filetypes.ByType`)
has the keys `dir`, `file`, `pipe`, `socket`, `executable`, `device-char`,
`device-block`, `special`, `symlink-dir` and `symlink-file`; its defaults
are Nerd Font glyphs. An empty value gives an empty icon.

`IconTheme.unicode()` (and `ByType.unicode()`) gives icons drawn from
plain Unicode emoji for file types, with empty name and extension
tables, for terminals without a patched font.

## Git status symbols

```python
from lstheme.git_theme import GitThemeSymbols

symbols = GitThemeSymbols.from_yaml("modified: '~'")
symbols.modified   # "~"
symbols.deleted    # "D"
```

`GitThemeSymbols` also has `from_mapping` and `from_path`.

## What this package does not do

It only defines and loads themes. It has no command and does not list
directories, look up the icon or colour for a given file, read git
status, or detect whether the terminal has a light or dark background;
`ColorTheme()` is always the dark theme.