"""Operator commands for protecting and inspecting single field values."""

import typer

from agent_vault.core.sensitivity import FieldKind, ProtectionTier
from agent_vault.lib.protection import FieldProtectionEngine, ProtectionError


def _engine() -> FieldProtectionEngine:
    from agent_vault.core.config import build_engine, get_settings

    try:
        return build_engine(get_settings())
    except ProtectionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


def protect(
    value: str = typer.Argument(..., help="Plaintext value"),
    tier: ProtectionTier = typer.Option(..., "--tier", help="Protection tier"),
) -> None:
    """Protect a value under a tier and print the stored form."""
    try:
        typer.echo(_engine().protect(value, tier))
    except ProtectionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


def unprotect(
    value: str = typer.Argument(..., help="Stored protected value"),
    tier: ProtectionTier = typer.Option(..., "--tier", help="Protection tier"),
) -> None:
    """Decrypt a value stored under a reversible tier."""
    try:
        typer.echo(_engine().unprotect(value, tier))
    except ProtectionError as e:
        typer.echo(f"Error: {type(e).__name__}: {e}", err=True)
        raise typer.Exit(code=1) from e


def verify(
    plaintext: str = typer.Argument(..., help="Submitted plaintext"),
    stored: str = typer.Argument(..., help="Stored protected value"),
    tier: ProtectionTier = typer.Option(..., "--tier", help="Protection tier"),
) -> None:
    """Check a plaintext against a stored value; exits 1 on mismatch."""
    if _engine().verify(plaintext, stored, tier):
        typer.echo("match")
        return
    typer.echo("no match", err=True)
    raise typer.Exit(code=1)


def fingerprint(
    value: str = typer.Argument(..., help="Plaintext value"),
    kind: FieldKind | None = typer.Option(None, "--kind", help="Field kind (email values are case-folded)"),
) -> None:
    """Print the search fingerprint of a value."""
    try:
        typer.echo(_engine().fingerprint(value, kind))
    except ProtectionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
