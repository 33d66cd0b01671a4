"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from netral.config import Settings, load_config
from netral.core.extensions import extension_info
from netral.core.models import Flavor, ParseStatus
from netral.core.pipeline import parse_file, run_parse
from netral.core.render import render_markdown
from netral.core.templates import default_content
from netral.core.themes import DEFAULT_THEME, theme_names


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def parse_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to parse")],
    flavor: Annotated[Optional[Flavor], typer.Option("--flavor", help="Force a flavor instead of using the file suffix")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    indent: Annotated[Optional[int], typer.Option("--indent", help="JSON indentation")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
    ):
    """Parse Netral files and write one document-tree JSON file per source."""
    settings = _settings(overrides={"output_dir": out, "json_indent": indent, "log_level": log_level})
    output_dir = Path(settings.output_dir)
    try:
        results = run_parse(path, output_dir, flavor, settings.json_indent)
    except RuntimeError as e:
        _fail(str(e))
    partial = 0
    for src, out_file, result in results:
        typer.echo(f"  {src} -> {out_file} ({result.status.value})")
        if result.status == ParseStatus.partial:
            partial += 1
    typer.echo(f"Parsed {len(results)} document(s) to {output_dir}/ ({partial} partial)")


def show_cmd(
    path: Annotated[Path, typer.Argument(help="File to parse")],
    flavor: Annotated[Optional[Flavor], typer.Option("--flavor", help="Force a flavor instead of using the file suffix")] = None,
    ):
    """Print the parsed document tree as JSON."""
    settings = _settings()
    try:
        result = parse_file(path, flavor)
    except (OSError, ValueError) as e:
        _fail(f"Cannot parse {path}", e)
    typer.echo(result.document.model_dump_json(indent=settings.json_indent))


def render_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file with inline extensions")],
    ):
    """Render markdown through the extension preprocessor and markdown engine."""
    settings = _settings()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"Cannot read {path}", e)
    typer.echo(render_markdown(text, settings.markdown_preset, settings.markdown_breaks))


def new_cmd(
    flavor: Annotated[Flavor, typer.Argument(help="Document flavor")],
    path: Annotated[Optional[Path], typer.Argument(help="Destination file")] = None,
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing file")] = False,
    ):
    """Write a starter document for the given flavor."""
    dest = path or Path(f"untitled{flavor.extension}")
    if dest.exists() and not force:
        _fail(f"{dest} already exists (use --force to overwrite)")
    dest.write_text(default_content(flavor), encoding="utf-8")
    typer.echo(f"Created {dest}")


def themes_cmd():
    """List available theme names; the default is marked with '*'."""
    for name in theme_names():
        marker = "*" if name == DEFAULT_THEME.value else " "
        typer.echo(f"{marker} {name}")


def extensions_cmd():
    """List the inline markdown extensions."""
    for ext in extension_info():
        typer.echo(f"{ext['name']}: {ext['syntax']}")
        typer.echo(f"    {ext['description']}")
