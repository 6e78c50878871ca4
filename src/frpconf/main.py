#!/usr/bin/env python3
"""frpconf command line.

Commands:
    frpconf list                 - List every config entry
    frpconf show TYPE NAME       - Check whether one entry exists
    frpconf cat TYPE NAME        - Print an entry's contents
    frpconf write TYPE NAME      - Replace (or --append to) an entry from stdin
    frpconf type URI             - Print the media type for a provider URI
    frpconf allow read|write on|off
    frpconf status               - Show storage root, authority and toggles
"""

from __future__ import annotations

import logging
import shutil
import sys
from enum import Enum
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from .adapters.config_env import load_app_config
from .adapters.preferences import JsonPreferences, PreferencesKey
from .core.errors import ProviderError
from .core.provider import ConfigProvider

__all__ = ["main", "app"]

app = typer.Typer(
    name="frpconf",
    help="Permission-gated access to frp config files",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


class Toggle(str, Enum):
    read = "read"
    write = "write"


class Switch(str, Enum):
    on = "on"
    off = "off"


_TOGGLE_KEYS = {
    Toggle.read: PreferencesKey.ALLOW_CONFIG_READ,
    Toggle.write: PreferencesKey.ALLOW_CONFIG_WRITE,
}


def _provider() -> ConfigProvider:
    return ConfigProvider.for_config(load_app_config())


def _fail(error: Exception) -> NoReturn:
    err_console.print(f"[red]Error:[/] {error}")
    raise typer.Exit(code=1)


@app.callback()
def _setup() -> None:
    app_config = load_app_config()
    logging.basicConfig(
        level=logging.DEBUG if app_config.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("list")
def list_configs() -> None:
    """List every config entry."""
    provider = _provider()
    try:
        result = provider.query(provider.uri_for())
    except ProviderError as e:
        _fail(e)

    table = Table(title="Configs")
    for column in result.columns:
        table.add_column(column)
    for row in result:
        table.add_row(str(row.id), row.type, row.name)
    console.print(table)


@app.command()
def show(
    config_type: str = typer.Argument(..., metavar="TYPE", help="Config type (frpc, frps)"),
    name: str = typer.Argument(..., help="File name"),
) -> None:
    """Check whether one entry exists."""
    provider = _provider()
    try:
        result = provider.query(provider.uri_for(config_type, name))
    except ProviderError as e:
        _fail(e)

    if not len(result):
        console.print(f"[yellow]{config_type}/{name} not found[/]")
        raise typer.Exit(code=1)
    console.print(f"[green]{config_type}/{name}[/]")


@app.command()
def cat(
    config_type: str = typer.Argument(..., metavar="TYPE", help="Config type (frpc, frps)"),
    name: str = typer.Argument(..., help="File name"),
) -> None:
    """Print an entry's contents."""
    provider = _provider()
    try:
        handle = provider.open_file(provider.uri_for(config_type, name), "r")
    except ProviderError as e:
        _fail(e)

    with handle:
        shutil.copyfileobj(handle, sys.stdout.buffer)
    sys.stdout.flush()


@app.command()
def write(
    config_type: str = typer.Argument(..., metavar="TYPE", help="Config type (frpc, frps)"),
    name: str = typer.Argument(..., help="File name"),
    append: bool = typer.Option(False, "--append", "-a", help="Append instead of replacing"),
) -> None:
    """Replace (or append to) an entry with stdin."""
    provider = _provider()
    try:
        handle = provider.open_file(provider.uri_for(config_type, name), "wa" if append else "w")
    except ProviderError as e:
        _fail(e)

    with handle:
        shutil.copyfileobj(sys.stdin.buffer, handle)


@app.command("type")
def media_type(uri: str = typer.Argument(..., help="Provider URI")) -> None:
    """Print the media type for a provider URI."""
    mime = _provider().get_type(uri)
    if mime is None:
        err_console.print(f"[yellow]Unrecognized URI: {uri}[/]")
        raise typer.Exit(code=1)
    console.print(mime)


@app.command()
def allow(
    toggle: Toggle = typer.Argument(..., help="Which toggle to change"),
    state: Switch = typer.Argument(..., help="on or off"),
) -> None:
    """Turn external read or write access on or off."""
    prefs = JsonPreferences(load_app_config().prefs_file)
    prefs.put_bool(_TOGGLE_KEYS[toggle], state is Switch.on)
    console.print(f"External {toggle.value}: [bold]{state.value}[/]")


@app.command()
def status() -> None:
    """Show storage root, authority and toggles."""
    app_config = load_app_config()
    prefs = JsonPreferences(app_config.prefs_file)

    def _flag(key: str) -> str:
        return "[green]on[/]" if prefs.get_bool(key) else "[red]off[/]"

    console.print(f"Storage root: {app_config.storage_root}")
    console.print(f"Authority:    content://{app_config.authority}")
    console.print(f"Read:         {_flag(PreferencesKey.ALLOW_CONFIG_READ)}")
    console.print(f"Write:        {_flag(PreferencesKey.ALLOW_CONFIG_WRITE)}")


def main():
    app()


if __name__ == "__main__":
    main()
