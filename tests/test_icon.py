import pytest

from dirtheme.icon import ByType, IconTheme
from dirtheme.loader import ThemeError

PARTIAL_DEFAULT_YAML = """---
name:
  .trash: "\\uf1f8"
  .cargo: "\\ue7a8"
  .emacs.d: "\\ue779"
  a.out: "\\uf489"
extension:
  go: "\\ue627"
  hs: "\\ue777"
  rs: "\\ue7a8"
filetype:
  dir: "\\uf115"
  file: "\\uf016"
  pipe: "\\U000f0232"
  socket: "\\U000f01a8"
  executable: "\\uf489"
  symlink-dir: "\\uf482"
  symlink-file: "\\uf481"
  device-char: "\\ue601"
  device-block: "\\U000f072b"
  special: "\\uf2dc"
"""


def test_default_theme():
    default = IconTheme()
    loaded = IconTheme.from_yaml(PARTIAL_DEFAULT_YAML)
    assert loaded.filetype.dir == default.filetype.dir
    assert loaded == default


def test_tmp_partial_default_theme_file(tmp_path):
    theme = tmp_path / "icon.yaml"
    theme.write_text(PARTIAL_DEFAULT_YAML + "\n", encoding="utf-8")
    decoded = IconTheme.from_path(theme)
    assert decoded.filetype.dir == IconTheme().filetype.dir
    assert decoded == IconTheme()


def test_empty_theme_return_default():
    empty = IconTheme.from_yaml("  ")
    assert empty.filetype.dir == IconTheme().filetype.dir
    assert empty == IconTheme()


def test_partial_theme_return_default():
    theme = IconTheme.from_yaml("filetype:\n  dir: \uf115")
    assert theme.filetype.dir == IconTheme().filetype.dir
    assert theme == IconTheme()


def test_serde_dir_from_yaml():
    theme = IconTheme.from_yaml("filetype:\n  dir: \uf115")
    assert theme.filetype.dir == "\uf115"


def test_empty_dir_value_gives_empty_string():
    theme = IconTheme.from_yaml("filetype:\n  dir: ")
    assert theme.filetype.dir == ""
    assert theme.filetype.file == "\uf016"


def test_custom_icon_by_name():
    theme = IconTheme.from_yaml("name:\n  cargo.toml: \U0001f4e6")
    assert theme.name["cargo.toml"] == "\U0001f4e6"


def test_default_icon_by_name_with_custom_entry():
    theme = IconTheme.from_yaml("name:\n  cargo.toml: \U0001f4e6")
    assert theme.name["cargo.lock"] == "\ue7a8"


def test_custom_icon_by_extension():
    theme = IconTheme.from_yaml("extension:\n  rs: \U0001f980")
    assert theme.extension["rs"] == "\U0001f980"


def test_default_icon_by_extension_with_custom_entry():
    theme = IconTheme.from_yaml("extension:\n  rs: \U0001f980")
    assert theme.extension["go"] == "\ue627"


def test_new_extension_is_added_to_defaults():
    theme = IconTheme.from_yaml("extension:\n  xyz: X")
    assert theme.extension["xyz"] == "X"
    assert len(theme.extension) == len(IconTheme().extension) + 1


def test_numeric_extension_key_is_read_as_text():
    theme = IconTheme.from_yaml("extension:\n  9: N")
    assert theme.extension["9"] == "N"


def test_kebab_case_filetype_keys():
    theme = IconTheme.from_yaml("filetype:\n  symlink-dir: L\n  device-block: B")
    assert theme.filetype.symlink_dir == "L"
    assert theme.filetype.device_block == "B"
    assert theme.filetype.symlink_file == "\uf481"


def test_default_theme_is_not_shared_between_instances():
    first = IconTheme()
    first.name["cargo.toml"] = "changed"
    assert IconTheme().name["cargo.toml"] == "\ue7a8"


def test_unknown_top_level_field_is_rejected():
    with pytest.raises(ThemeError):
        IconTheme.from_yaml("colour: red")


def test_unknown_filetype_field_is_rejected():
    with pytest.raises(ThemeError):
        IconTheme.from_yaml("filetype:\n  folder: x")


def test_snake_case_filetype_field_is_rejected():
    with pytest.raises(ThemeError):
        IconTheme.from_yaml("filetype:\n  symlink_dir: x")


def test_name_must_be_a_mapping():
    with pytest.raises(ThemeError):
        IconTheme.from_yaml("name:\n  - a\n  - b")


def test_icon_value_must_be_a_string():
    with pytest.raises(ThemeError):
        IconTheme.from_yaml("extension:\n  rs:\n    - 1")


def test_missing_file_raises(tmp_path):
    with pytest.raises(ThemeError):
        IconTheme.from_path(tmp_path / "missing.yaml")


def test_by_type_default_values():
    by_type = ByType()
    assert by_type.dir == "\uf115"
    assert by_type.pipe == "\U000f0232"
    assert by_type.special == "\uf2dc"


def test_by_type_unicode():
    by_type = ByType.unicode()
    assert by_type.dir == "\U0001f4c2"
    assert by_type.file == "\U0001f4c4"
    assert by_type.executable == "\U0001f3d7"
    assert by_type.device_block == "\U0001f4bd"


def test_icon_theme_unicode_has_no_name_or_extension_icons():
    theme = IconTheme.unicode()
    assert theme.name == {}
    assert theme.extension == {}
    assert theme.filetype == ByType.unicode()


def test_default_theme_contains_lower_case_entries():
    theme = IconTheme()
    assert theme.name[".trash"] == "\uf1f8"
    assert theme.extension["7z"] == "\uf410"