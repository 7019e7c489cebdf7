"""Result and registry models."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel


class CommandResult(BaseModel):
    """Result of an external command."""
    exit_code: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class PluginEntry(BaseModel):
    """A shell plugin checked out as a git repository."""
    name: str
    path: Path


class PluginManifest(BaseModel):
    """Static plugin registry loaded from plugins.yaml."""
    plugins: list[PluginEntry] = []


class PluginUpdate(BaseModel):
    """Outcome of pulling one plugin."""
    name: str
    before: Optional[str] = None
    after: Optional[str] = None
    new_commits: int = 0
    subject: Optional[str] = None
    error: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.error is None and self.before != self.after
