"""Pipeline step functions: check and export orchestration"""

from pathlib import Path

from codderlly.config import Settings
from codderlly.core.export import write_article, write_manifest
from codderlly.core.parse import discover_files, load_article, parse_file
from codderlly.core.validate import ContentDefect, check_collection, check_site
from codderlly.logging import get_logger
from codderlly.site import load_site_config


logger = get_logger("pipeline")


def run_check(settings: Settings, path: str | None = None) -> tuple[list[ContentDefect], list[ContentDefect]]:
    """Check the site record and the collection. Returns (site_defects, content_defects).

    Raises ValueError when the site file itself cannot be loaded.
    """
    public_dir = Path(settings.public_dir) if settings.check_assets else None
    site = load_site_config(settings.site_file)
    site_defects = check_site(site, public_dir, source=settings.site_file)
    content_defects = check_collection(
        Path(path or settings.content_dir), public_dir, settings.parser_config,
    )
    return site_defects, content_defects


def run_export(settings: Settings, path: str | None = None) -> list[tuple[str, Path]]:
    """Load every article, write its files and the manifest. Returns (slug, md_path) pairs."""
    root = Path(path or settings.content_dir)
    output_dir = Path(settings.output_dir)
    site = load_site_config(settings.site_file)

    articles = []
    for p in discover_files(root):
        try:
            parsed = parse_file(p, settings.parser_config)
            articles.append(load_article(parsed, settings.words_per_minute))
        except ValueError as e:
            raise RuntimeError(f"Failed to load {p}: {e}") from e

    results = []
    for article in articles:
        md_path, _ = write_article(article, output_dir, root)
        results.append((article.slug, md_path))
    write_manifest(site, articles, output_dir)
    logger.debug("Exported %d article(s) to %s", len(results), output_dir)
    return results
