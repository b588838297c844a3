"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from codderlly.config import Settings, load_config
from codderlly.core.parse import load_articles
from codderlly.core.pipeline import run_check, run_export
from codderlly.core.scaffold import new_post
from codderlly.site import load_site_config


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def check_cmd(
    path: Annotated[Optional[str], typer.Argument(help="File or directory to check (default: content_dir)")] = None,
    public: Annotated[Optional[str], typer.Option("--public-dir", help="Static asset root")] = None,
    no_assets: Annotated[bool, typer.Option("--no-assets", help="Skip image path resolution")] = False,
    ):
    """Check the site record and every article's front-matter."""
    settings = _settings(overrides={"public_dir": public, "check_assets": False if no_assets else None})
    try:
        site_defects, content_defects = run_check(settings, path)
    except ValueError as e:
        _fail(str(e))

    defects = site_defects + content_defects
    for d in defects:
        typer.echo(str(d))
    if defects:
        typer.echo(f"Found {len(defects)} defect(s).", err=True)
        raise typer.Exit(1)
    typer.echo("All content is valid.")


def list_cmd(
    path: Annotated[Optional[str], typer.Argument(help="File or directory to list (default: content_dir)")] = None,
    ):
    """List articles as slug, pubDate, and title."""
    settings = _settings()
    root = Path(path or settings.content_dir)
    try:
        articles = load_articles(root, settings.parser_config, settings.words_per_minute)
    except ValueError as e:
        _fail("Could not load content", e)
    if not articles:
        typer.echo(f"No articles found in {root}.")
        raise typer.Exit(1)
    for a in articles:
        typer.echo(f"{a.slug}\t{a.frontmatter.pub_date.isoformat()}\t{a.frontmatter.title}")


def site_cmd():
    """Print the site configuration record as JSON."""
    settings = _settings()
    try:
        site = load_site_config(settings.site_file)
    except ValueError as e:
        _fail(str(e))
    typer.echo(json.dumps(site.to_dict(), indent=2, ensure_ascii=False))


def export_cmd(
    path: Annotated[Optional[str], typer.Argument(help="File or directory to export (default: content_dir)")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    ):
    """Write normalized Markdown, sidecar JSON, and manifest.json to the output dir."""
    settings = _settings(overrides={"output_dir": out})
    try:
        results = run_export(settings, path)
    except (OSError, RuntimeError, ValueError) as e:
        _fail("Export failed", e)
    for slug, md_path in results:
        typer.echo(f"  {slug} -> {md_path}")
    typer.echo(f"Exported {len(results)} article(s) to {settings.output_dir}/")


def new_cmd(
    title: Annotated[str, typer.Argument(help="Article title")],
    author: Annotated[str, typer.Option("--author", help="Author name")],
    description: Annotated[str, typer.Option("--description", help="One-line summary")],
    image: Annotated[str, typer.Option("--image", help="Cover image path")],
    tags: Annotated[Optional[list[str]], typer.Option("--tag", "-t", help="Tag; repeat for more")] = None,
    content: Annotated[Optional[str], typer.Option("--content-dir", help="Content directory")] = None,
    ):
    """Create a new article with a complete front-matter header."""
    settings = _settings(overrides={"content_dir": content})
    try:
        path = new_post(Path(settings.content_dir), title, author, description, tags or [], image)
    except (FileExistsError, ValueError) as e:
        _fail(str(e))
    typer.echo(f"Created {path}")
