"""Colour, icon and git-symbol themes for a directory listing, loaded from YAML."""

__version__ = "0.1.0"

__all__ = [
    "color",
    "color_theme",
    "git_theme",
    "icon_extensions",
    "icon_filetypes",
    "icon_names",
    "icon_theme",
    "loader",
]