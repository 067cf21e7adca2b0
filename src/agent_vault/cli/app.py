"""Typer CLI root application."""

import typer
from pydantic import ValidationError

from agent_vault.core.config import get_settings
from agent_vault.core.logging import setup_logging

app = typer.Typer(name="agent-vault", help="Agent PII field protection CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    try:
        settings = get_settings()
    except ValidationError as e:
        typer.echo(f"Error: invalid configuration: {e}", err=True)
        raise typer.Exit(code=1) from e
    setup_logging(settings.log_level, log_dir=settings.log_dir, json_logs=settings.log_json)


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from agent_vault.cli.field_cmd import fingerprint, protect, unprotect, verify
    from agent_vault.cli.keys_cmd import keys_app

    app.add_typer(keys_app, name="keys", help="Key material commands")
    app.command("protect")(protect)
    app.command("unprotect")(unprotect)
    app.command("verify")(verify)
    app.command("fingerprint")(fingerprint)


_register_subcommands()
