"""
text2lesson CLI.

Compile lesson files and try out the Markdown renderer from the terminal.

Usage:
    t2l compile lesson.txt
    t2l compile lesson.txt --json --output lesson.json
    t2l render "Some **bold** text"
    t2l metadata lesson.txt
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from config import Settings, get_settings
from src.lessons import LessonExport, LessonSource, LessonSourceError
from src.text import parse_markdown, parse_markdown_spans

app = typer.Typer(
    help="text2lesson CLI: compile plain text lessons into interactive problems",
    no_args_is_help=True,
)

console = Console()


def configure_logging(settings: Settings) -> None:
    """Route loguru output to stderr and, if configured, a rotated log file."""
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level, format="<level>{message}</level>")
    if settings.log_file:
        logger.add(
            settings.log_file,
            level="DEBUG",
            rotation=settings.log_rotation,
            encoding="utf-8",
        )


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages"),
):
    """Plain text lesson compiler."""
    settings = get_settings()
    if verbose:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    configure_logging(settings)


def _read_source(path: Path) -> str:
    if not path.is_file():
        console.print(f"[red]Error: Lesson file not found: {escape(str(path))}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding=get_settings().source_encoding)


@app.command("compile")
def compile_command(
    path: Path = typer.Argument(..., help="Lesson source file"),
    as_json: bool = typer.Option(False, "--json", help="Print the compiled lesson as JSON"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the JSON export to a file"),
):
    """
    Compile a lesson file and summarise its problems.

    With --json or --output the full lesson is exported as JSON.
    """
    source = _read_source(path)
    try:
        lesson = LessonSource.create_from_source(source).convert_to_lesson()
    except LessonSourceError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    logger.info(f"Compiled {path.name}: {len(lesson)} problems")

    if as_json or output:
        export = LessonExport.from_lesson(lesson).model_dump_json(indent=get_settings().json_indent)
        if output:
            output.write_text(export, encoding="utf-8")
            console.print(f"[green]Wrote {len(lesson)} problems to {escape(str(output))}[/green]")
        else:
            typer.echo(export)
        return

    table = Table(title=f"{path.name}: {len(lesson)} problems")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Question")
    table.add_column("Right", justify="right", style="green")
    table.add_column("Wrong", justify="right", style="red")

    for index, problem in enumerate(lesson.problems, start=1):
        question = problem.question.plain_text or problem.intro.plain_text
        table.add_row(
            str(index),
            problem.question_type.value,
            escape(question[:60]),
            str(len(problem.right_answers)),
            str(len(problem.wrong_answers)),
        )

    console.print(table)


@app.command("render")
def render_command(
    text: str = typer.Argument(..., help="Markdown text to render"),
    spans: bool = typer.Option(False, "--spans", help="Only apply inline (span) rules"),
):
    """Render Markdown text to HTML."""
    html = parse_markdown_spans(text) if spans else parse_markdown(text)
    typer.echo(html)


@app.command("metadata")
def metadata_command(
    path: Path = typer.Argument(..., help="Lesson source file"),
):
    """Show the metadata header of a lesson file."""
    lesson = LessonSource.create_from_source(_read_source(path)).convert_to_lesson()

    if not len(lesson.metadata):
        console.print("[yellow]No metadata found.[/yellow]")
        return

    table = Table(title="Metadata")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in lesson.metadata.as_dict().items():
        table.add_row(key, escape(value))
    console.print(table)


def main():
    """Entry point for the t2l command."""
    app()


if __name__ == "__main__":
    main()
