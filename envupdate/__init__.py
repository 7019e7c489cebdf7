"""envupdate - refresh editor plugins, packages, shell plugins and dotfiles."""

__version__ = "0.3.0"
