"""Colour, icon and git-symbol themes for directory listings, loaded from YAML."""

__version__ = "0.1.0"
__all__ = ["color", "git", "icon", "icon_extensions", "icon_names", "loader"]