"""Build-time schema check for the site record and the content collection.

The check reports authoring defects; it never rewrites content. Asset
references are resolved only when a public directory is given:

  /og.jpg        -> public_dir / "og.jpg"
  ./cover.png    -> the document's directory / "cover.png"
  https://...    -> accepted without a file check
"""

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from codderlly.core.models import ContentError, ParsedDoc
from codderlly.core.parse import discover_files, parse_file, validate_frontmatter
from codderlly.logging import get_logger
from codderlly.site import SiteConfig


REMOTE_PREFIXES = ("http://", "https://", "//")

logger = get_logger("validate")


@dataclass(frozen=True)
class ContentDefect:
    """One authoring mistake found in a file."""
    path: str
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.field}: {self.message}"


def resolve_asset(ref: str, public_dir: Path, base_dir: Path) -> Optional[Path]:
    """Return the local file an asset reference points at, or None for remote URLs."""
    if ref.startswith(REMOTE_PREFIXES):
        return None
    if ref.startswith("/"):
        return Path(public_dir) / ref.lstrip("/")
    return Path(base_dir) / ref


def _asset_defect(path: str, field: str, ref: str, public_dir: Path, base_dir: Path) -> Optional[ContentDefect]:
    target = resolve_asset(ref, public_dir, base_dir)
    if target is None or target.is_file():
        return None
    return ContentDefect(path, field, f"asset '{ref}' not found at {target}")


def check_site(site: SiteConfig, public_dir: Optional[Path] = None, source: str = "site") -> list[ContentDefect]:
    """Check the asset references of a site record. Schema errors surface when it is loaded."""
    if public_dir is None:
        return []
    defects = [
        _asset_defect(source, "ogImage", site.og_image, public_dir, public_dir),
        _asset_defect(source, "logo.src", site.logo.src, public_dir, public_dir),
    ]
    return [d for d in defects if d is not None]


def check_article(parsed: ParsedDoc, public_dir: Optional[Path] = None) -> list[ContentDefect]:
    """Return the front-matter defects of one parsed document."""
    path = str(parsed.path)
    try:
        fm = validate_frontmatter(parsed)
    except ContentError as e:
        return [ContentDefect(path, field, msg) for field, msg in e.errors]

    if public_dir is None:
        return []
    defect = _asset_defect(path, "image", fm.image, public_dir, Path(parsed.path).parent)
    return [defect] if defect else []


def check_collection(
    path: Path,
    public_dir: Optional[Path] = None,
    parser_config: str = 'gfm-like',
    ) -> list[ContentDefect]:
    """Check every document under path, including slug collisions between files."""
    defects: list[ContentDefect] = []
    slugs: dict[str, list[str]] = defaultdict(list)

    if not Path(path).exists():
        defect = ContentDefect(str(path), "path", "does not exist")
        logger.warning("%s", defect)
        return [defect]

    for p in discover_files(Path(path)):
        try:
            parsed = parse_file(p, parser_config)
        except ValueError as e:
            defects.append(ContentDefect(str(p), "frontmatter", str(e)))
            continue
        if parsed.slug:
            slugs[parsed.slug].append(str(p))
        defects.extend(check_article(parsed, public_dir))

    for slug, paths in slugs.items():
        if len(paths) > 1:
            for p in paths[1:]:
                defects.append(ContentDefect(p, "slug", f"'{slug}' is already used by {paths[0]}"))

    for d in defects:
        logger.warning("%s", d)
    return defects
