"""OMI CLI application using Typer.

This module provides command-line utilities for the OMI backend:
secret generation for deployment configuration, schema management and
a development server.
"""

import asyncio
import secrets

import typer
from rich.console import Console

app = typer.Typer(
    name="omi",
    help="OMI - video demo backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for OMI configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]OMI Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes for a strong HS256 key
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


@db_app.command("init")
def init_db() -> None:
    """Create missing tables. Existing tables and rows are left alone."""
    from omi.infrastructure.persistence.sqlalchemy.init_db import create_tables

    asyncio.run(create_tables())
    console.print("[green]Database schema is up to date[/green]")


@db_app.command("drop")
def drop_db(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip the confirmation prompt",
    ),
) -> None:
    """Drop all tables, deleting every user, favorite, rating and comment."""
    from omi.infrastructure.persistence.sqlalchemy.init_db import drop_tables

    if not yes and not typer.confirm("This deletes ALL data. Continue?"):
        console.print("[dim]Aborted[/dim]")
        raise typer.Exit(code=1)

    asyncio.run(drop_tables())
    console.print("[yellow]All tables dropped[/yellow]")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Bind port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    from omi_config.settings import get_settings

    settings = get_settings()
    uvicorn.run(
        "omi.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
