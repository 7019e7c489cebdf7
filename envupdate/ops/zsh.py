"""Zsh plugin updates.

Plugins are git checkouts. The registry comes from plugins.yaml when present,
otherwise from the shell framework's plugin array in an interactive zsh.
"""

import logging
import subprocess
from pathlib import Path

from .. import git
from ..config import Config, load_plugin_manifest
from ..errors import CommandNotFound
from ..models import PluginEntry, PluginUpdate
from ..output import fmt_key, fmt_title_underline, fmt_value, log_error, log_info, log_success, log_warning
from ..runner import run_with_spinner

logger = logging.getLogger(__name__)


def registry_query(var: str) -> str:
    """Zsh snippet printing name<TAB>path for each entry of an associative array."""
    return f"for k v in ${{(kv){var}}}; do printf '%s\\t%s\\n' \"$k\" \"$v\"; done"


def parse_registry(output: str) -> list[PluginEntry]:
    """Parse name<TAB>path lines, ignoring shell noise."""
    plugins = []
    for line in output.splitlines():
        if "\t" not in line:
            continue
        name, path = line.split("\t", 1)
        name, path = name.strip(), path.strip()
        if name and path:
            plugins.append(PluginEntry(name=name, path=Path(path)))
    return sorted(plugins, key=lambda p: p.name)


def query_shell_registry(var: str) -> list[PluginEntry]:
    """Ask an interactive zsh for its plugin registry."""
    logger.debug("Querying zsh for ${%s}", var)
    try:
        result = subprocess.run(
            ["zsh", "-ic", registry_query(var)],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise CommandNotFound("zsh") from e
    if result.returncode != 0:
        logger.warning("zsh registry query failed: %s", result.stderr.strip())
    return parse_registry(result.stdout)


def discover_plugins(config: Config) -> list[PluginEntry]:
    plugins = load_plugin_manifest(config.plugins_file)
    if plugins is not None:
        logger.debug("Using plugin manifest %s", config.plugins_file)
        return plugins
    return query_shell_registry(config.zsh_registry_var)


def update_plugin(plugin: PluginEntry) -> PluginUpdate:
    """Pull one plugin and report what changed."""
    if not plugin.path.is_dir():
        return PluginUpdate(name=plugin.name, error=f"not found at {plugin.path}")

    before = git.rev_parse("HEAD", plugin.path)
    if before is None:
        return PluginUpdate(name=plugin.name, error="not a git repository")

    status = run_with_spinner(
        ["git", "pull", "--recurse-submodules"],
        f"Updating {plugin.name}...",
        cwd=plugin.path,
        env=git.git_env(),
    )
    if status != 0:
        return PluginUpdate(name=plugin.name, before=before, error=f"git pull exited {status}")

    after = git.rev_parse("HEAD", plugin.path)
    if after is None:
        return PluginUpdate(name=plugin.name, before=before, error="cannot read HEAD after pull")

    update = PluginUpdate(name=plugin.name, before=before, after=after)
    if update.changed:
        update.new_commits = git.count_commits(before, after, plugin.path)
        update.subject = git.last_subject(plugin.path)
    return update


def update_zsh(config: Config) -> bool:
    """Update every registered zsh plugin. Returns True if none failed."""
    print(fmt_title_underline("Zsh plugins"))

    plugins = discover_plugins(config)
    if not plugins:
        log_success("No zsh plugins found")
        return True

    failed = 0
    for plugin in plugins:
        update = update_plugin(plugin)
        if update.error:
            failed += 1
            log_error(f"{plugin.name}: {update.error}")
        elif update.changed:
            log_info(
                f"{fmt_key(plugin.name)}: {fmt_value(update.new_commits)} new commit(s)"
                f" - {update.subject or ''}"
            )
        else:
            log_info(f"{fmt_key(plugin.name)}: already up to date")

    if failed:
        log_warning(f"{failed} of {len(plugins)} plugin(s) failed to update")
        return False
    log_success("Zsh plugins updated")
    return True
