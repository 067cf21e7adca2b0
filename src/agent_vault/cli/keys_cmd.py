"""Key material CLI commands."""

import typer

from agent_vault.lib.protection import ConfigurationError, generate_master_key_hex, generate_pepper

keys_app = typer.Typer()


@keys_app.command("generate")
def generate_keys(
    env: bool = typer.Option(False, "--env", help="Print as .env lines"),
) -> None:
    """Generate a fresh encryption key and fingerprint pepper."""
    key = generate_master_key_hex()
    pepper = generate_pepper()
    if env:
        typer.echo(f"ENCRYPTION_KEY={key}")
        typer.echo(f"HASH_PEPPER={pepper}")
        return
    typer.echo(f"Encryption key: {key}")
    typer.echo(f"Hash pepper:    {pepper}")
    typer.echo("Store both in the secret store; rotating either invalidates existing data or fingerprints.")


@keys_app.command("check")
def check_keys() -> None:
    """Verify that the configured key material can build the engine."""
    from agent_vault.core.config import build_engine, get_settings

    try:
        engine = build_engine(get_settings())
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    typer.echo(f"Key material OK (key id {engine.key_id}, bcrypt rounds {engine.system_code_rounds})")
