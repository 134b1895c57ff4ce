"""Command-line interface for slack-blocks-render."""

import json
import logging
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from slack_blocks_render import __version__
from slack_blocks_render.config import get_settings, load_settings
from slack_blocks_render.core.references import ReferenceStore, collect_references
from slack_blocks_render.model.loader import BlockParseError, parse_message
from slack_blocks_render.renderers import SUPPORTED_FORMATS, get_renderer

app = typer.Typer(
    name="slack-blocks-render",
    help="Render Slack Block Kit messages as Markdown or plain text.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"slack-blocks-render v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        help="Read settings from this .env file instead of ./.env",
    ),
) -> None:
    """Render Slack Block Kit messages as Markdown or plain text."""
    if env_file is not None:
        load_settings(env_file)


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through rich."""
    level = "DEBUG" if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def load_json(path: Path) -> Any:
    """Read and decode a JSON file."""
    return json.loads(path.read_text(encoding="utf-8"))


def write_output(content: str, output: Optional[Path]) -> None:
    if output is None:
        console.print(content, markup=False, highlight=False, emoji=False, soft_wrap=True)
    else:
        output.write_text(content, encoding="utf-8")
        err_console.print(f"[green]Written:[/green] {output}")


def fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(1)


@app.command("render")
def render_command(
    path: Path = typer.Argument(
        ...,
        help="JSON file holding a block list or a message with 'blocks'",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help=f"Output format: {', '.join(SUPPORTED_FORMATS)} (default: markdown)",
    ),
    references_path: Optional[Path] = typer.Option(
        None,
        "--references",
        "-r",
        help="JSON file with resolved names for channels, users and usergroups",
    ),
    delimiter: Optional[str] = typer.Option(
        None,
        "--delimiter",
        "-d",
        help="String placed around user and user group mentions (Markdown only)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the result to a file instead of stdout",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Render a message as Markdown or plain text.

    Examples:

        slack-blocks-render render message.json

        slack-blocks-render render message.json --format text

        slack-blocks-render render message.json -r names.json -d "@"
    """
    configure_logging(verbose)
    settings = get_settings()
    use_format = output_format or settings.output_format
    use_delimiter = delimiter if delimiter is not None else settings.handle_delimiter

    try:
        renderer_class = get_renderer(use_format)
        blocks = parse_message(load_json(path))
        references = (
            ReferenceStore.from_dict(load_json(references_path))
            if references_path is not None
            else ReferenceStore()
        )
    except (OSError, ValueError, BlockParseError) as e:
        fail(str(e))

    renderer = renderer_class(references, use_delimiter)
    logger.debug("Rendering %d block(s) as %s", len(blocks), renderer.output_format)
    write_output(renderer.render(blocks), output)


@app.command("references")
def references_command(
    path: Path = typer.Argument(
        ...,
        help="JSON file holding a block list or a message with 'blocks'",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the references to a file instead of stdout",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    List the channel, user and user group IDs mentioned in a message.

    The output can be filled in with names and passed back to
    'render --references'.
    """
    configure_logging(verbose)

    try:
        blocks = parse_message(load_json(path))
    except (OSError, ValueError, BlockParseError) as e:
        fail(str(e))

    references = collect_references(blocks)
    write_output(json.dumps(references.to_dict(), indent=2, sort_keys=True), output)


if __name__ == "__main__":
    app()
