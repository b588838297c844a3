"""Content store: file discovery, frontmatter split, tokenization, and article loading"""

import re
from pathlib import Path
from typing import Any, Iterator

import yaml
from markdown_it import MarkdownIt
from pydantic import ValidationError

from codderlly.core.extract import body_stats
from codderlly.core.models import Article, ContentError, FrontMatter, ParsedDoc, describe_errors
from codderlly.core.utils.hashing import sha256
from codderlly.core.utils.slug import slugify
from codderlly.logging import get_logger


FRONTMATTER_RE = re.compile(r'^---[ \t]*\r?\n(.*?)\r?\n?^---[ \t]*(?:\r?\n|\Z)', re.DOTALL | re.MULTILINE)
MD_EXTENSIONS = {'.md', '.mdx'}

logger = get_logger("parse")


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with the YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS and p.is_file())


def parse_file(path: Path, parser_config: str = 'gfm-like') -> ParsedDoc:
    """Parse a single markdown file into a ParsedDoc with token stream."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = _strip_frontmatter(raw)
    tokens = _make_parser(parser_config).parse(body)
    # Slugs become output file names, so header values are cleaned like file stems.
    slug = slugify(str(frontmatter.get('slug') or path.stem))
    return ParsedDoc(
        path=path,
        slug=slug,
        raw_markdown=raw,
        markdown=body,
        hash=sha256(raw),
        frontmatter=frontmatter,
        tokens=tokens,
    )


def iter_documents(path: Path, parser_config: str = 'gfm-like') -> Iterator[ParsedDoc]:
    """Yield a ParsedDoc per file under path, re-reading from disk on every call."""
    for p in discover_files(Path(path)):
        logger.debug("Parsing %s", p)
        yield parse_file(p, parser_config)


def validate_frontmatter(parsed: ParsedDoc) -> FrontMatter:
    """Validate a ParsedDoc's raw header and slug. Raises ContentError listing every problem."""
    errors = []
    if not parsed.slug:
        errors.append(("slug", "is empty; set a slug or rename the file with latin letters or digits"))
    try:
        fm = FrontMatter.model_validate(parsed.frontmatter)
    except ValidationError as e:
        raise ContentError(parsed.path, errors + describe_errors(e)) from e
    if errors:
        raise ContentError(parsed.path, errors)
    return fm


def load_article(parsed: ParsedDoc, words_per_minute: int = 200) -> Article:
    """Validate a ParsedDoc and attach body statistics. Raises ContentError on schema defects."""
    return Article(
        slug=parsed.slug,
        path=str(parsed.path),
        frontmatter=validate_frontmatter(parsed),
        body=parsed.markdown,
        hash=parsed.hash,
        stats=body_stats(parsed.tokens, words_per_minute),
    )


def load_articles(path: Path, parser_config: str = 'gfm-like', words_per_minute: int = 200) -> list[Article]:
    """Load every article under path in discovery order."""
    return [load_article(p, words_per_minute) for p in iter_documents(path, parser_config)]


def parse_frontmatter(text: str) -> FrontMatter:
    """Parse the header of a complete document string into a FrontMatter."""
    fm, _ = _strip_frontmatter(text)
    try:
        return FrontMatter.model_validate(fm)
    except ValidationError as e:
        raise ContentError("<string>", describe_errors(e)) from e
