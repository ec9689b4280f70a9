"""CLI entry point for cVerse."""

import logging
import time
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv

# Load environment variables from .env.local
# Path: main.py -> cverse/ -> src/ -> project root
load_dotenv(Path(__file__).parent.parent.parent / ".env.local")

import typer  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.logging import RichHandler  # noqa: E402
from rich.panel import Panel  # noqa: E402

from cverse.config import get_settings  # noqa: E402
from cverse.loader import CVDataError, load_cv_data  # noqa: E402
from cverse.pdf.composer import render_cv  # noqa: E402
from cverse.pdf.locale import Locale  # noqa: E402

app = typer.Typer(
    name="cverse",
    help="cVerse - render your CV as a PDF",
    add_completion=False,
)
console = Console()


def configure_logging(level: str) -> None:
    """Route log records through rich at the given level."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def render(
    cv: Annotated[Path, typer.Argument(help="Path to the CV JSON export")],
    locale: Annotated[
        Locale | None,
        typer.Option("--locale", "-l", help="Locale for section titles (default: en)"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Directory for the generated PDF"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show detailed progress")
    ] = False,
) -> None:
    """Render a CV JSON export to a PDF file."""
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    console.print(
        Panel.fit(
            "[bold blue]cVerse[/bold blue] - Rendering your CV",
            border_style="blue",
        )
    )

    if not cv.exists():
        console.print(f"[red]Error:[/red] File not found: {cv}")
        raise typer.Exit(1)

    selected_locale = locale or Locale(settings.locale)
    if verbose:
        console.print(f"[dim]CV:[/dim] {cv}")
        console.print(f"[dim]Locale:[/dim] {selected_locale.value}")
        console.print(f"[dim]Output:[/dim] {output_dir or settings.output_dir}")
        console.print()

    start_time = time.time()
    try:
        cv_data = load_cv_data(cv)
        path = render_cv(cv_data, selected_locale, output_dir=output_dir, settings=settings)
    except CVDataError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except Exception as e:
        console.print(f"\n[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    console.print(f"\n[green]CV saved to:[/green] {path}")
    console.print(f"[dim]Rendered in {time.time() - start_time:.2f}s[/dim]")


@app.command()
def version() -> None:
    """Show version information."""
    from cverse import __version__

    console.print(f"cVerse v{__version__}")


if __name__ == "__main__":
    app()
