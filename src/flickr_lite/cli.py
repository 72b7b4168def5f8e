"""Command-line interface for the Flickr client."""

import logging
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from flickr_lite.person import get_person_by_username
from flickr_lite.session import Session

app = typer.Typer(
    name="flickr-lite",
    help="Look up Flickr users and their public photos",
    add_completion=False,
)
console = Console()


def setup_logging(verbose: bool) -> None:
    """Configure logging with Rich handler.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, console=console)],
    )


def require_api_key(api_key: str | None) -> str:
    """Return the API key, exiting with an error if none was given.

    Args:
        api_key: API key from the command line or environment

    Returns:
        The API key

    Raises:
        typer.Exit: If no API key was provided
    """
    if not api_key:
        console.print(
            "[red]Error: Flickr API key is required. "
            "Provide via --api-key or FLICKR_API_KEY environment variable.[/red]"
        )
        raise typer.Exit(1)
    return api_key


def report_failure(session: Session, context: str) -> NoReturn:
    """Print the session's last error and exit with code 1.

    Args:
        session: Session whose last call failed
        context: Description of what was being attempted

    Raises:
        typer.Exit: Always
    """
    console.print(f"[red]Error while {context}: {session.last_error}[/red]")
    raise typer.Exit(1)


API_KEY_OPTION = typer.Option(
    None,
    "--api-key",
    "-k",
    envvar="FLICKR_API_KEY",
    help="Flickr API key (or set FLICKR_API_KEY env var)",
)
VERBOSE_OPTION = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Enable verbose logging",
)


@app.command()
def photos(
    username: str = typer.Argument(..., help="Flickr username"),
    count: int = typer.Option(
        10,
        "--count",
        "-n",
        min=1,
        max=500,
        help="Number of photos to list",
    ),
    api_key: str = API_KEY_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List the most recent public photos of USERNAME."""
    setup_logging(verbose)
    api_key = require_api_key(api_key)

    with Session(api_key) as session:
        person = get_person_by_username(session, username)
        if person is None:
            report_failure(session, f"looking up '{username}'")

        results = person.get_public_photos(per_page=count)
        if results is None:
            report_failure(session, f"listing photos of '{username}'")

    if not results:
        console.print(f"No public photos found for {username}")
        return

    table = Table(title=f"Public photos of {username}")
    table.add_column("Title")
    table.add_column("Page")
    table.add_column("Image")
    for photo in results:
        table.add_row(photo.title, photo.url, photo.medium_url)
    console.print(table)


@app.command()
def info(
    username: str = typer.Argument(..., help="Flickr username"),
    api_key: str = API_KEY_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show the profile of USERNAME."""
    setup_logging(verbose)
    api_key = require_api_key(api_key)

    with Session(api_key) as session:
        person = get_person_by_username(session, username)
        if person is None:
            report_failure(session, f"looking up '{username}'")

        real_name = person.real_name
        if not person.is_loaded:
            report_failure(session, f"fetching the profile of '{username}'")

        console.print(f"[bold]{person.username}[/bold] ({person.id})")
        console.print(f"  Real name: {real_name or '-'}")
        console.print(f"  Location: {person.location or '-'}")
        console.print(f"  Photos: {person.photos_url or '-'}")
        console.print(f"  Profile: {person.profile_url or '-'}")


if __name__ == "__main__":
    app()
