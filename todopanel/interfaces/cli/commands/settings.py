"""Settings CLI commands."""

import json

import typer

from todopanel.config import get_settings_path, load_settings, save_settings
from todopanel.domain.settings import TodoSettings
from todopanel.interfaces.cli.common import print_info, print_success, print_warning

app = typer.Typer(help="Settings commands")


@app.command("init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a settings file with the default values."""
    settings_path = get_settings_path()
    if settings_path.exists() and not force:
        print_warning(f"Settings already exist at {settings_path} (use --force to overwrite)")
        raise typer.Exit(1)

    written = save_settings(TodoSettings())
    print_success(f"Wrote default settings to {written}")


@app.command("show")
def show() -> None:
    """Print the settings in effect."""
    settings = load_settings()
    if settings is None:
        print_info(f"No settings file at {get_settings_path()}; built-in fallbacks apply.")
        return
    typer.echo(json.dumps(settings.model_dump(mode="json"), indent=2))
