"""
Changelogs CLI entry point.

Commands:
  changelogs                — interactive changelog menu (default)
  changelogs config show    — print the effective configuration
  changelogs config init    — write a default changelogs.toml
"""

from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.markup import escape

from changelogs import __version__
from changelogs.core.constants import ExitCode

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, "--version", "-V", message="changelogs %(version)s")
@click.option("--data-dir", default="", help="Directory holding projects.txt and project files")
@click.option("--no-clear", is_flag=True, default=False, help="Do not clear the screen")
@click.pass_context
def cli(ctx: click.Context, data_dir: str, no_clear: bool) -> None:
    """Changelogs — document notable changes for a list of projects."""
    if ctx.invoked_subcommand is not None:
        return
    sys.exit(run_menu(data_dir=data_dir, no_clear=no_clear))


def run_menu(data_dir: str = "", no_clear: bool = False) -> int:
    """Load config, set up logging, and run the menu. Returns the exit code."""
    from changelogs.cli._menu import ChangelogApp
    from changelogs.cli._terminal import Terminal
    from changelogs.core.config import load_config
    from changelogs.core.exceptions import ConfigError, StoreError
    from changelogs.core.log import configure_logging
    from changelogs.core.store import ProjectStore

    try:
        config = load_config()
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {escape(str(exc))}", soft_wrap=True)
        return ExitCode.CONFIG_ERROR

    if data_dir:
        config.storage.data_dir = data_dir
    if no_clear:
        config.display.clear_screen = False

    configure_logging(config)

    store = ProjectStore(config.data_dir)
    terminal = Terminal(console, clear_screen=config.display.clear_screen)
    app = ChangelogApp(store, terminal)

    try:
        return app.run()
    except StoreError as exc:
        err_console.print(str(exc), markup=False, soft_wrap=True)
        err_console.print("Program terminated.")
        return ExitCode.ERROR


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------


@cli.group("config")
def config_group() -> None:
    """View and initialise Changelogs configuration."""


@config_group.command("show")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON")
def config_show(as_json: bool) -> None:
    """Display the effective configuration."""
    from changelogs.core.config import config_file_path, config_to_dict, load_config
    from changelogs.core.exceptions import ConfigError

    cfg_path = config_file_path()
    try:
        cfg = load_config(cfg_path)
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {escape(str(exc))}", soft_wrap=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    data = config_to_dict(cfg)

    if as_json:
        import json

        data["_config_path"] = str(cfg_path)
        data["_data_dir"] = str(cfg.data_dir)
        click.echo(json.dumps(data, indent=2))
        return

    source = str(cfg_path) if cfg_path.exists() else f"{cfg_path} (not found, using defaults)"
    console.print(f"[bold]Changelogs Configuration[/bold]  ({escape(source)})\n", soft_wrap=True)
    for section, values in data.items():
        console.print(f"  [cyan]\\[{section}][/cyan]")
        for key, value in values.items():
            console.print(f"    {key} = {value!r}")
    console.print(f"\n  data directory: {escape(str(cfg.data_dir))}", soft_wrap=True)


@config_group.command("init")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing file")
def config_init(force: bool) -> None:
    """Write a default configuration file."""
    from changelogs.core.config import (
        ChangelogsConfig,
        config_file_path,
        config_to_dict,
        save_config,
    )
    from changelogs.core.exceptions import ConfigError

    cfg_path = config_file_path()
    if cfg_path.exists() and not force:
        err_console.print(f"[yellow]Config already exists:[/yellow] {cfg_path}")
        err_console.print("Use --force to overwrite it.")
        sys.exit(ExitCode.ERROR)

    try:
        saved = save_config(config_to_dict(ChangelogsConfig()), cfg_path)
    except ConfigError as exc:
        err_console.print(f"[red]Failed to save config: {exc}[/red]")
        sys.exit(ExitCode.ERROR)

    console.print(f"[green]Config saved:[/green] {saved}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
