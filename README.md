# dirtheme

Themes for directory listings: the colours used for each column, the icons
shown next to file names, and the symbols used for git status. Every theme
has built-in defaults. A YAML document can override any part of it, and
whatever the document leaves out keeps its default value.

## Installation

```
pip install dirtheme
```

## Loading themes

Every theme class (`ColorTheme`, `IconTheme`, `ByType`, `GitThemeSymbols`
and the colour sections such as `Permission` or `Size`) is built on
`dirtheme.loader.Section` and has three constructors:

- `from_yaml(text)` reads a YAML string; an empty document gives the defaults;
- `from_path(path)` reads a YAML file;
- `from_mapping(data)` takes an already parsed mapping (`None` gives the defaults).

Keys are written in kebab-case, for example `tree-edge`, `exec-sticky` or
`symlink-dir`. An unknown key, a value of the wrong kind, malformed YAML or a
file that cannot be read raises `dirtheme.loader.ThemeError`, a subclass of
`ValueError`. `dirtheme.loader.load_yaml(text)` parses YAML with the same
error handling.

## Colour themes

```python
from dirtheme.color import ColorTheme, parse_color

theme = ColorTheme.default_dark()
theme.user              # AnsiValue(value=230)
theme.permission.read   # NamedColor.DARK_GREEN

custom = ColorTheme.from_yaml("""
user: 130
permission:
  read: red
size:
  large: [255, 128, 0]
""")
custom.size.large       # Rgb(r=255, g=128, b=0)
```

A colour is one of:

- a name, matched without regard to case: `reset`, `black`, `blue`,
  `dark_blue`, `cyan`, `dark_cyan`, `green`, `dark_green`, `grey`,
  `dark_grey`, `magenta`, `dark_magenta`, `red`, `dark_red`, `white`,
  `yellow`, `dark_yellow` (a `NamedColor`);
- a 256-colour palette index from 0 to 255 (an `AnsiValue`);
- a list of three values from 0 to 255 for red, green and blue (an `Rgb`).

`parse_color(value)` reads a single colour in any of these forms.

`ColorTheme` has the sections `permission`, `date`, `size`, `inode`, `links`
and `git-status`, and the colours `user`, `group` and `tree-edge`. Its
`file_type` colours keep their defaults and cannot be set from a document.

## Icon themes

```python
from dirtheme.icon import IconTheme

icons = IconTheme.from_yaml("""
name:
  cargo.toml: "📦"
extension:
  rs: "🦀"
filetype:
  dir: "D"
""")
icons.name["cargo.toml"]   # "📦"
icons.name["cargo.lock"]   # the built-in default is kept
icons.extension["go"]      # the built-in default is kept
```

Entries under `name` and `extension` are laid over the built-in tables,
replacing a built-in entry with the same key. The tables are available from
`dirtheme.icon_names.default_icons_by_name()` and
`dirtheme.icon_extensions.default_icons_by_extension()`; each call returns a
fresh dictionary. Keys in these tables are lower case. An icon left empty in
a document becomes the empty string.

The default `filetype` icons (`ByType`) need a Nerd Font.
`IconTheme.unicode()` returns a theme whose file-type icons are plain Unicode
emoji (`ByType.unicode()`) and whose name and extension tables are empty.

## Git status symbols

```python
from dirtheme.git import GitThemeSymbols

symbols = GitThemeSymbols.from_yaml("modified: '~'")
symbols.modified   # "~"
symbols.deleted    # "D"
```

## What this package does not do

It only describes themes. It does not list directories, read git status,
pick icons for files or write colours to a terminal; there is no command to
run. Those jobs are left to the program that uses the themes.