"""Scaffold new articles with a complete front-matter header"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from codderlly.core.export import build_markdown
from codderlly.core.models import ContentError, FrontMatter, describe_errors
from codderlly.core.utils.slug import slugify
from codderlly.logging import get_logger


logger = get_logger("scaffold")


def new_post(
    content_dir: Path,
    title: str,
    author: str,
    description: str,
    tags: Iterable[str],
    image: str,
    pub_date: Optional[datetime] = None,
    body: str = "",
    ) -> Path:
    """Write content_dir/<slug>.md and return its path. Never overwrites an existing file."""
    slug = slugify(title)
    if not slug:
        raise ContentError(title, [("title", "does not produce a usable file name")])

    try:
        fm = FrontMatter.model_validate({
            "title": title,
            "pubDate": pub_date or datetime.now(timezone.utc).replace(microsecond=0),
            "description": description,
            "author": author,
            "image": image,
            "tags": list(tags),
        })
    except ValidationError as e:
        raise ContentError(slug, describe_errors(e)) from e

    content_dir = Path(content_dir)
    path = content_dir / f"{slug}.md"
    if path.exists():
        raise FileExistsError(f"{path} already exists")

    content_dir.mkdir(parents=True, exist_ok=True)
    text = body if body.startswith("\n") else f"\n{body}"
    path.write_text(build_markdown(fm, text), encoding='utf-8')
    logger.debug("Created %s", path)
    return path
