"""
Atlas Gateway - CLI Entry Point.

Usage:
    atlas serve              Run the gateway
    atlas health             Check configuration
    atlas db                 Check the configured resources against Supabase
    atlas --help             Show help
"""

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="atlas",
    help="Atlas - Generic resource CRUD gateway.",
    add_completion=False,
)
console = Console()


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", "--host", "-h", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", "-p", envvar="PORT", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes (development)"),
) -> None:
    """Run the gateway with uvicorn."""
    import uvicorn

    from atlas.config import get_settings

    settings = get_settings()
    console.print(
        f"[bold green]Atlas gateway[/bold green] on http://{host}:{port}"
        f" [dim](backend={settings.atlas_backend}, prefix={settings.api_prefix or '/'})[/dim]"
    )
    uvicorn.run(
        "atlas.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command()
def health() -> None:
    """Check configuration."""
    from atlas.config import get_settings

    console.print("\n[bold]Atlas Gateway Health Check[/bold]\n")

    try:
        settings = get_settings()
        console.print("✅ Configuration loaded")
        console.print(f"   Environment: {settings.atlas_env}")
        console.print(f"   Log level: {settings.log_level}")
        console.print(f"   Backend: {settings.atlas_backend}")
        console.print(f"   API prefix: {settings.api_prefix or '/'}")

        if settings.atlas_backend == "supabase":
            if settings.supabase_url.startswith("https://"):
                console.print("✅ Supabase URL configured")
            else:
                console.print("⚠️  Supabase URL is not https")

        if settings.atlas_resources is None:
            console.print("ℹ️  No capability map: every resource is passed through")
        else:
            table = Table(title="Capability map")
            table.add_column("Resource")
            table.add_column("Operations")
            for resource, operations in sorted(settings.atlas_resources.items()):
                table.add_row(resource, ", ".join(operations) or "-")
            console.print(table)

        console.print("\n[green]All checks passed![/green]")

    except Exception as e:
        console.print(f"\n[red]❌ Configuration error: {e}[/red]")
        console.print("[dim]Make sure you have a .env file with required variables.[/dim]")
        raise typer.Exit(1)


@app.command()
def db(
    resources: list[str] = typer.Argument(None, help="Tables to check (default: capability map)"),
) -> None:
    """Check Supabase connectivity for each resource."""
    from atlas.config import get_settings
    from atlas.db.client import get_client

    settings = get_settings()
    tables = resources or sorted(settings.atlas_resources or {})
    if not tables:
        console.print("[yellow]No resources given and no capability map configured.[/yellow]")
        raise typer.Exit(1)

    console.print("\n[bold]Database Connection Check[/bold]\n")

    try:
        client = get_client()
    except Exception as e:
        console.print(f"\n[red]❌ Database connection failed: {e}[/red]")
        raise typer.Exit(1)

    failed = 0
    for table in tables:
        try:
            result = client.table(table).select("*", count="exact").limit(0).execute()
            console.print(f"  ✅ {table}: {result.count if result.count is not None else '?'} rows")
        except Exception as e:
            failed += 1
            console.print(f"  ❌ {table}: {e}")

    if failed:
        raise typer.Exit(1)
    console.print("\n[green]Database check complete![/green]")


@app.command()
def version() -> None:
    """Show version information."""
    from atlas import __version__

    console.print(f"Atlas gateway version {__version__}")


if __name__ == "__main__":
    app()
