"""Export: front-matter serialization, sidecar JSON, and output files for the renderer"""

import json
from pathlib import Path
from typing import Optional

import yaml

from codderlly.core.models import Article, FrontMatter
from codderlly.logging import get_logger
from codderlly.site import SiteConfig


MANIFEST_FILE = "manifest.json"

logger = get_logger("export")


def dump_frontmatter(fm: FrontMatter) -> str:
    """Serialize front-matter to YAML: camelCase keys in schema order, ISO pubDate, sorted tags."""
    data = fm.model_dump(by_alias=True)
    data["pubDate"] = fm.pub_date.isoformat()
    data["tags"] = sorted(fm.tags)
    return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)


def build_markdown(fm: FrontMatter, body: str) -> str:
    """Return body with a YAML frontmatter block prepended. The body is kept byte for byte."""
    return f"---\n{dump_frontmatter(fm)}---\n{body}"


def build_sidecar(article: Article) -> dict:
    """Build the sidecar JSON dict: slug, path, hash, frontmatter, and body stats."""
    return {
        "slug": article.slug,
        "path": article.path,
        "hash": article.hash,
        "frontmatter": article.frontmatter.to_dict(),
        "stats": article.stats.model_dump(mode="json"),
    }


def _dest_dir(article: Article, output_dir: Path, root: Optional[Path]) -> Path:
    """Mirror the article's source directory (relative to root) under output_dir."""
    parent = Path(article.path).parent
    if root is not None:
        root = Path(root)
        if root.is_file():
            root = root.parent
        try:
            parent = parent.relative_to(root)
        except ValueError:
            parent = Path()
    else:
        parent = Path()
    return Path(output_dir) / parent


def write_article(article: Article, output_dir: Path, root: Optional[Path] = None) -> tuple[Path, Path]:
    """Write normalized Markdown + sidecar JSON for a single article.

    Output path mirrors the source directory structure below root:
      output_dir / <relative parent> / article.slug.{md|json}

    Returns (md_path, json_path).
    """
    dest_dir = _dest_dir(article, output_dir, root)
    dest_dir.mkdir(parents=True, exist_ok=True)

    md_path = dest_dir / f"{article.slug}.md"
    json_path = dest_dir / f"{article.slug}.json"
    md_path.write_text(build_markdown(article.frontmatter, article.body), encoding='utf-8')
    json_path.write_text(
        json.dumps(build_sidecar(article), indent=2, ensure_ascii=False),
        encoding='utf-8',
    )
    logger.debug("Wrote %s and %s", md_path, json_path)
    return md_path, json_path


def write_manifest(site: SiteConfig, articles: list[Article], output_dir: Path) -> Path:
    """Write the site record and every article sidecar, in discovery order, to manifest.json."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / MANIFEST_FILE
    manifest = {
        "site": site.to_dict(),
        "articles": [build_sidecar(a) for a in articles],
    }
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False), encoding='utf-8')
    logger.debug("Wrote manifest with %d article(s) to %s", len(articles), path)
    return path
