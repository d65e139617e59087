"""Attendance CLI application using Typer.

This module provides command-line utilities for the attendance backend
(secret generation, serving the API) and a small device client for
teacher registration, login and profile lookup.
"""

import asyncio
import secrets
from typing import Any, Awaitable, Callable, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from attendance_client import (
    ApiConnectionError,
    ApiError,
    SessionCache,
    SessionCacheError,
    TeacherApiClient,
    TeacherSession,
)
from attendance_config.settings import get_client_settings

T = TypeVar("T")

app = typer.Typer(
    name="attendance",
    help="Attendance - teacher identity service CLI",
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

teacher_app = typer.Typer(
    name="teacher",
    help="Register, log in and look up teachers against a running API",
    no_args_is_help=True,
)
app.add_typer(teacher_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for the attendance configuration.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Attendance Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256 token signing
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]⚠  Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from attendance_config.settings import get_settings

    settings = get_settings()
    uvicorn.run(
        "attendance.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


# -----------------------------------------------------------------------------
# Teacher commands
# -----------------------------------------------------------------------------


def _build_session() -> tuple[TeacherApiClient, TeacherSession]:
    settings = get_client_settings()
    client = TeacherApiClient(
        base_url=settings.api_base_url,
        timeout=settings.timeout_seconds,
    )
    return client, TeacherSession(client, SessionCache(settings.session_file))


def _run(action: Callable[[TeacherApiClient, TeacherSession], Awaitable[T]]) -> T:
    """Run *action* with a fresh client and report failures to the console."""

    async def _main() -> T:
        client, session = _build_session()
        try:
            return await action(client, session)
        finally:
            await client.close()

    try:
        return asyncio.run(_main())
    except ApiError as e:
        console.print(f"[red]✗ {e.message}[/red] [dim]({e.status_code})[/dim]")
        raise typer.Exit(1) from e
    except ApiConnectionError as e:
        console.print(f"[red]✗ {e.message}[/red]")
        raise typer.Exit(2) from e
    except SessionCacheError as e:
        console.print(f"[red]✗ {e.message}[/red]")
        raise typer.Exit(1) from e


def _print_teacher(teacher: dict[str, Any], title: str = "Teacher") -> None:
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key in ("id", "name", "email", "employeeId", "department", "createdAt"):
        table.add_row(key, str(teacher.get(key, "")))
    console.print(table)


@teacher_app.command("register")
def register(
    name: str = typer.Option(..., prompt=True),
    email: str = typer.Option(..., prompt=True),
    employee_id: str = typer.Option(..., "--employee-id", prompt="Employee ID"),
    department: str = typer.Option(..., prompt=True),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
    ),
) -> None:
    """Create a teacher account."""

    async def action(client: TeacherApiClient, _: TeacherSession) -> dict:
        return await client.register(
            name=name,
            email=email,
            password=password,
            employee_id=employee_id,
            department=department,
        )

    teacher = _run(action)
    console.print("[green]✓ Registration successful[/green]")
    _print_teacher(teacher)


@teacher_app.command("login")
def login(
    email: str = typer.Option(..., prompt=True),
    password: str = typer.Option(..., prompt=True, hide_input=True),
) -> None:
    """Log in and remember the session on this device."""

    async def action(_: TeacherApiClient, session: TeacherSession):
        return await session.login(email, password)

    cached = _run(action)
    console.print(f"[green]✓ Logged in as {cached.teacher.get('name')}[/green]")


@teacher_app.command("logout")
def logout() -> None:
    """Forget the session stored on this device."""
    _, session = _build_session()
    session.logout()
    console.print("[green]✓ Logged out[/green]")


@teacher_app.command("whoami")
def whoami(
    verify: bool = typer.Option(
        True,
        help="Check the stored token against the server",
    ),
) -> None:
    """Show the teacher of the stored session."""

    async def action(_: TeacherApiClient, session: TeacherSession):
        return await session.restore(verify=verify)

    cached = _run(action)
    if cached is None:
        console.print("[yellow]Not logged in.[/yellow]")
        raise typer.Exit(1)
    _print_teacher(cached.teacher, title="Current session")


@teacher_app.command("profile")
def profile(
    teacher_id: int = typer.Argument(..., help="Numeric teacher id"),
) -> None:
    """Look up a teacher profile by id."""

    async def action(client: TeacherApiClient, session: TeacherSession) -> dict:
        cached = await session.restore()
        token = cached.token if cached else None
        return await client.get_profile(teacher_id, token=token)

    _print_teacher(_run(action), title="Profile")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
