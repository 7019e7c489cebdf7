"""Config - typed configuration for envupdate."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .errors import ConfigError
from .models import PluginEntry, PluginManifest


def config_home() -> Path:
    """Return the envupdate config directory."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "envupdate"


def default_config_path() -> Path:
    override = os.environ.get("ENVUPDATE_CONFIG")
    if override:
        return Path(override).expanduser()
    return config_home() / "config.env"


def _expand(value: str) -> Path:
    return Path(os.path.expandvars(value)).expanduser()


def read_env_file(path: Path) -> dict[str, str]:
    """Parse a KEY=VALUE file. Returns {} if missing."""
    if not path.exists():
        return {}

    try:
        text = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    values = {}
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#") and "=" in line:
            key, value = line.split("=", 1)
            values[key.strip()] = value.strip().strip('"').strip("'")
    return values


@dataclass
class Config:
    """Typed configuration for an update run."""

    dotfiles: Optional[Path] = None
    dotfiles_branch: str = "main"
    dotfiles_remote: str = "origin"
    brew: str = "brew"
    nvim: str = "nvim"
    nvim_sync: str = "+Lazy! sync"
    plugins_file: Path = field(default_factory=lambda: config_home() / "plugins.yaml")
    zsh_registry_var: str = "ZSH_PLUGINS"
    verbose: bool = False

    @classmethod
    def load(cls, path: Optional[Path] = None, verbose: bool = False) -> "Config":
        """Load from config.env, with environment variables taking precedence."""
        values = read_env_file(path or default_config_path())
        for key in (
            "DOTFILES", "DOTFILES_BRANCH", "DOTFILES_REMOTE", "BREW",
            "NVIM", "NVIM_SYNC", "ZSH_PLUGINS_FILE", "ZSH_REGISTRY_VAR",
        ):
            if os.environ.get(key):
                values[key] = os.environ[key]

        config = cls(verbose=verbose)
        if values.get("DOTFILES"):
            config.dotfiles = _expand(values["DOTFILES"])
        if values.get("ZSH_PLUGINS_FILE"):
            config.plugins_file = _expand(values["ZSH_PLUGINS_FILE"])
        config.dotfiles_branch = values.get("DOTFILES_BRANCH", config.dotfiles_branch)
        config.dotfiles_remote = values.get("DOTFILES_REMOTE", config.dotfiles_remote)
        config.brew = values.get("BREW", config.brew)
        config.nvim = values.get("NVIM", config.nvim)
        config.nvim_sync = values.get("NVIM_SYNC", config.nvim_sync)
        config.zsh_registry_var = values.get("ZSH_REGISTRY_VAR", config.zsh_registry_var)
        return config

    def require_dotfiles(self) -> Path:
        """Return the dotfiles repo path. Raises ConfigError if unusable."""
        if self.dotfiles is None:
            raise ConfigError("DOTFILES is not set")
        if not self.dotfiles.is_dir():
            raise ConfigError(f"Dotfiles repository not found at {self.dotfiles}")
        return self.dotfiles


def load_plugin_manifest(path: Path) -> Optional[list[PluginEntry]]:
    """Load plugins.yaml. Returns None if the file does not exist."""
    if not path.exists():
        return None

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        manifest = PluginManifest.model_validate(data)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
        raise ConfigError(f"Invalid plugin manifest {path}: {e}") from e

    return [
        PluginEntry(name=p.name, path=_expand(str(p.path)))
        for p in manifest.plugins
    ]
