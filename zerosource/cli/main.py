# zerosource/cli/main.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from zerosource.config.settings import Settings, get_settings
from zerosource.generation_client import (
    GenerationClient,
    GenerationClientConfig,
    GenerationClientError,
    GenerationService,
)
from zerosource.markdown_parser import iter_sections, project_name, project_slug
from zerosource.stats import collect_stats
from zerosource.validation import validate_structure

app = typer.Typer(help="Validate and inspect Zero Source README files.")
console = Console()
logger = logging.getLogger("zerosource.cli")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _read_readme(readme: Path) -> str:
    path = readme.expanduser().resolve()
    if not path.is_file():
        console.print(f"[red]Error: File not found:[/red] {escape(str(path))}")
        raise typer.Exit(code=1)

    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        console.print(
            f"[red]Error: cannot decode {escape(str(path))} as UTF-8:[/red] {escape(str(exc))}"
        )
        raise typer.Exit(code=1)
    except OSError as exc:
        console.print(f"[red]Error: cannot read {escape(str(path))}:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)


def build_service(settings: Settings, model: Optional[str] = None) -> GenerationService:
    """
    Construct the generation service used for deep validation.

    Tests swap this out to inject a fake service.
    """
    config = GenerationClientConfig.from_settings(settings)
    return GenerationClient(config, model=model)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging.",
    ),
) -> None:
    """
    Zero Source bootstrapper tools.
    """
    level = "DEBUG" if verbose else get_settings().LOG_LEVEL
    _configure_logging(level)


@app.command("validate")
def validate(
    readme: Path = typer.Argument(..., help="Path to the Zero Source README.md file."),
    deep: bool = typer.Option(
        True,
        "--deep/--no-deep",
        help="Also ask the generation service for a deep review, when one is configured.",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name for the generation service. Defaults to ZEROSOURCE_MODEL_NAME.",
    ),
) -> None:
    """
    Check a README for the required sections, then optionally deep-validate it.
    """
    content = _read_readme(readme)
    settings = get_settings()

    result = validate_structure(content)
    if not result.valid:
        console.print(
            "[red]Validation failed: Missing required sections: "
            f"{', '.join(result.missing_sections)}[/red]"
        )
        raise typer.Exit(code=1)

    if not (deep and settings.deep_validation_available):
        console.print(
            "[green]Basic README validation successful![/green] "
            "[dim](Configure a generation service for detailed validation)[/dim]"
        )
        return

    try:
        service = build_service(settings, model=model)
        with console.status("Validating README..."):
            analysis = service.analyze(content)
    except GenerationClientError as exc:
        logger.debug("Deep validation failed", exc_info=True)
        console.print(f"[red]Validation error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    if analysis.valid:
        console.print("[green]README validation successful![/green]")
        if analysis.details:
            console.print("\n[bright_black]Details:[/bright_black]")
            console.print(analysis.details, markup=False)
        return

    console.print("[red]README validation failed![/red]")
    console.print("\n[bright_black]Issues:[/bright_black]")
    for issue in analysis.issues:
        console.print(f"- {issue}", markup=False)
    raise typer.Exit(code=1)


@app.command("sections")
def sections(
    readme: Path = typer.Argument(..., help="Path to the README.md file."),
) -> None:
    """
    List the level-2 sections of a README.
    """
    content = _read_readme(readme)
    found = list(iter_sections(content))

    if not found:
        console.print("[yellow]No level-2 sections found.[/yellow]")
        raise typer.Exit(code=0)

    seen = {}
    for sec in found:
        seen[sec.name] = seen.get(sec.name, 0) + 1

    table = Table(title=project_name(content, get_settings().DEFAULT_PROJECT_NAME))
    table.add_column("Line", justify="right")
    table.add_column("Section")
    table.add_column("Chars", justify="right")
    table.add_column("Note")

    for sec in found:
        note = "duplicate" if seen[sec.name] > 1 else ""
        table.add_row(str(sec.line), sec.name or "(empty)", str(len(sec.body)), note)

    console.print(table)


@app.command("title")
def title(
    readme: Path = typer.Argument(..., help="Path to the README.md file."),
    slug: bool = typer.Option(
        False,
        "--slug",
        help="Print the package-style slug instead of the title.",
    ),
) -> None:
    """
    Print the project name taken from the README's level-1 heading.
    """
    content = _read_readme(readme)
    name = project_name(content, get_settings().DEFAULT_PROJECT_NAME)
    console.print(project_slug(name) if slug else name, markup=False)


@app.command("stats")
def stats(
    directory: Path = typer.Argument(..., help="Directory of source code to scan."),
    ext: str = typer.Option(".py", "--ext", "-e", help="File extension to count."),
) -> None:
    """
    Show file, test-file and line counts for a source tree.
    """
    try:
        result = collect_stats(directory, ext)
    except OSError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    console.print("[blue]Code Statistics:[/blue]")
    console.print(f"Total {result.extension} files: {result.files}")
    console.print(f"Test files: {result.test_files}")
    console.print(f"Total lines of code: {result.total_lines}")


if __name__ == "__main__":
    app()
