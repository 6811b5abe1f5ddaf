"""
SkillMatch Command Line Interface

Provides CLI commands for managing the user directory and querying
peer matches.
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from skillmatch.core.exceptions import SkillMatchError
from skillmatch.utils.constants import DirectoryBackend, MatchStrength

app = typer.Typer(
    name="skillmatch",
    help="SkillMatch peer learning matchmaking CLI",
    add_completion=False,
)
console = Console()

STRENGTH_COLORS = {
    MatchStrength.STRONG: "green",
    MatchStrength.GOOD: "blue",
    MatchStrength.WEAK: "yellow",
    MatchStrength.NONE: "red",
}


@app.callback()
def main() -> None:
    """Initialize logging before any command runs."""
    from skillmatch.utils.logger import setup_logging

    setup_logging()


def _require_mongodb() -> None:
    """Exit unless the MongoDB backend is configured and reachable."""
    from skillmatch.data.database import get_database_manager
    from skillmatch.utils.config import get_settings

    if get_settings().directory.backend != DirectoryBackend.MONGODB.value:
        console.print("[red]Error: This command needs DIRECTORY_BACKEND=mongodb.[/red]")
        raise typer.Exit(1)

    if not get_database_manager().check_sync_connection():
        console.print("[red]Error: Could not connect to MongoDB.[/red]")
        raise typer.Exit(1)


def _join(items: list[str], limit: int = 4) -> str:
    shown = ", ".join(items[:limit])
    if len(items) > limit:
        shown += f" +{len(items) - limit}"
    return shown or "-"


@app.command()
def version():
    """Show application version."""
    from skillmatch import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show system information and configuration."""
    from skillmatch.utils.config import get_settings
    from skillmatch.utils.constants import APP_DISPLAY_NAME

    settings = get_settings()

    table = Table(title=f"{APP_DISPLAY_NAME} Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Directory Backend", settings.directory.backend)
    table.add_row("Database Host", settings.database.host)
    table.add_row("Database Name", settings.database.name)
    table.add_row("Max Score", str(settings.matching.max_score))
    table.add_row("Interest Bonus", str(settings.matching.interest_bonus))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def init_db():
    """Create MongoDB indexes for the user directory."""
    from skillmatch.data.database import get_database_manager

    _require_mongodb()
    console.print("[yellow]Initializing database...[/yellow]")
    get_database_manager().ensure_indexes()
    console.print("[green]Database initialized successfully![/green]")


@app.command()
def health_check():
    """Check that the user directory answers queries."""
    from skillmatch.data.repositories import get_user_repository
    from skillmatch.utils.config import get_settings

    backend = get_settings().directory.backend
    try:
        total = get_user_repository().count()
    except SkillMatchError as e:
        console.print(f"[red]✗ Directory ({backend}) unavailable: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ Directory ({backend}) healthy - {total} users[/green]")


@app.command()
def seed(
    overwrite: bool = typer.Option(False, "--overwrite", help="Replace demo users that already exist"),
):
    """Load the demo student roster into the directory."""
    from skillmatch.data.repositories import get_user_repository
    from skillmatch.data.seed import seed_directory

    try:
        written = seed_directory(get_user_repository(), overwrite=overwrite)
    except SkillMatchError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Seeded {written} demo user(s).[/green]")


@app.command()
def list_users(
    limit: int = typer.Option(20, "--limit", "-l", min=1, help="Maximum number of users to show"),
):
    """List users in the directory."""
    from skillmatch.data.repositories import get_user_repository

    users = get_user_repository().get_all(limit=limit, sort_by="createdAt", sort_order=1)

    if not users:
        console.print("[yellow]No users found.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Users ({len(users)} shown)")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Department")
    table.add_column("Can Teach")
    table.add_column("Wants to Learn")

    for user in users:
        table.add_row(
            user.id,
            user.full_name,
            user.department or "-",
            _join(user.skills_to_share, 3),
            _join(user.skills_to_learn, 3),
        )

    console.print(table)


@app.command()
def show_user(
    user_id: str = typer.Argument(..., help="User ID to display"),
):
    """Show a user's public profile."""
    from skillmatch.data.repositories import get_user_repository

    user = get_user_repository().get_by_id(user_id)
    if user is None:
        console.print(f"[red]Error: User not found: {user_id}[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold cyan]{user.full_name}[/bold cyan] (@{user.username})")
    console.print(f"  {user.academic_year} | {user.department}")
    if user.bio:
        console.print(f"  [dim]{user.bio}[/dim]")
    console.print(f"  [green]Can teach:[/green] {_join(user.skills_to_share, 10)}")
    console.print(f"  [yellow]Wants to learn:[/yellow] {_join(user.skills_to_learn, 10)}")
    console.print(f"  [blue]Interests:[/blue] {_join(user.interests, 10)}")


@app.command()
def search(
    query: str = typer.Argument(..., help="Name, department or skill to look for"),
    exclude: Optional[str] = typer.Option(None, "--exclude", "-x", help="User ID to leave out"),
    limit: int = typer.Option(20, "--limit", "-l", min=1, help="Maximum number of users to show"),
):
    """Search students by name, department or skill."""
    from skillmatch.data.repositories import get_user_repository

    users = get_user_repository().search_users(query, exclude_id=exclude, limit=limit)
    if not users:
        console.print(f"[yellow]No students match '{query}'.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Students matching '{query}'")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Department")
    table.add_column("Skills")

    for user in users:
        table.add_row(user.id, user.full_name, user.department or "-", _join(user.skills_to_share, 3))

    console.print(table)


@app.command()
def matches(
    user_id: str = typer.Argument("user-1", help="User to find learning partners for"),
    top_n: Optional[int] = typer.Option(None, "--top", "-n", min=1, help="Number of top matches to show"),
    min_score: int = typer.Option(0, "--min-score", "-m", help="Minimum compatibility score"),
    search_query: str = typer.Option("", "--search", "-s", help="Filter by name or teachable skill"),
    skill: Optional[str] = typer.Option(None, "--skill", help="Only partners who can teach this skill"),
    as_json: bool = typer.Option(False, "--json", help="Print matches as JSON"),
):
    """Rank the students who can learn from and teach a user."""
    from skillmatch.core.matching import get_match_service
    from skillmatch.utils.config import get_settings

    service = get_match_service()
    limit = top_n if top_n is not None else get_settings().matching.default_top_n

    try:
        service.get_requester(user_id)
        results = service.get_matches(user_id)
    except SkillMatchError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    results = service.filter_matches(results, search_query=search_query, skill_filter=skill)
    results = [r for r in results if r.compatibility_score >= min_score][:limit]

    if as_json:
        typer.echo(json.dumps([r.to_public_dict() for r in results], indent=2))
        return

    if not results:
        console.print("[yellow]No matches found. Add more skills to find better matches.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Top {len(results)} Matches for {user_id}")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Student", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("They Can Teach")
    table.add_column("You Can Teach")

    for i, result in enumerate(results, 1):
        color = STRENGTH_COLORS[result.strength]
        table.add_row(
            str(i),
            result.user.full_name,
            f"[{color}]{result.compatibility_score}%[/{color}]",
            _join(result.skills_they_can_teach),
            _join(result.skills_you_can_teach),
        )

    console.print(table)

    offered = service.teachable_skills(results, limit=10)
    if offered:
        console.print(f"\n[bold]Skills on offer:[/bold] {', '.join(offered)}")


if __name__ == "__main__":
    app()
