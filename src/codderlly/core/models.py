"""Content models: front-matter schema, loaded articles, and parse results"""

from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Annotated, Any

from pydantic import (
    AfterValidator, AwareDatetime, BaseModel, ConfigDict, Field, ValidationError, field_validator,
)
from pydantic.alias_generators import to_camel


REQUIRED_FIELDS = ("title", "pubDate", "description", "author", "image", "tags")


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


NonEmptyStr = Annotated[str, AfterValidator(_not_blank)]


def _check_iso(value: str) -> None:
    # pydantic alone would read a digit-only string as a Unix timestamp.
    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        datetime.fromisoformat(text)
    except ValueError:
        raise ValueError("must be an ISO 8601 timestamp with a timezone") from None


class ContentError(ValueError):
    """A document whose front-matter does not match the FrontMatter schema."""

    def __init__(self, path: str | Path, errors: list[tuple[str, str]]):
        self.path = str(path)
        self.errors = errors        # (field, message) pairs
        super().__init__(f"{self.path}: " + "; ".join(f"{field}: {msg}" for field, msg in errors))


class FrontMatter(BaseModel):
    """Article metadata. Keys are camelCase on disk (pubDate); unknown keys are kept."""
    model_config = ConfigDict(
        frozen=True, extra="allow", alias_generator=to_camel,
    )

    title:       NonEmptyStr
    pub_date:    AwareDatetime
    description: NonEmptyStr
    author:      NonEmptyStr
    image:       NonEmptyStr
    tags:        frozenset[NonEmptyStr] = Field(min_length=1)

    @field_validator("pub_date", mode="before")
    @classmethod
    def _iso_timestamp(cls, value: Any) -> Any:
        # YAML turns unquoted dates into date objects and bare numbers into ints.
        if isinstance(value, datetime):
            return value
        if isinstance(value, str):
            _check_iso(value)
            return value
        if isinstance(value, date):
            raise ValueError("must include a time and timezone, got a bare date")
        raise ValueError("must be an ISO 8601 timestamp with a timezone")

    def to_dict(self) -> dict[str, Any]:
        """Return camelCase keys with JSON-compatible values; tags sorted."""
        data = self.model_dump(mode="json", by_alias=True)
        data["tags"] = sorted(self.tags)
        return data


class BodyStats(BaseModel):
    """Figures derived from the Markdown body; the body itself is never altered."""
    model_config = ConfigDict(frozen=True)

    headings:       list[tuple[int, str]] = []
    code_languages: list[str] = []
    word_count:     int = 0
    reading_time:   int = 1     # minutes, never below 1


class Article(BaseModel):
    """A validated content document as handed to the renderer."""
    model_config = ConfigDict(frozen=True)

    slug:        str
    path:        str
    frontmatter: FrontMatter
    body:        str            # markdown exactly as authored below the header
    hash:        str            # sha256 of the full file
    stats:       BodyStats = BodyStats()


@dataclass
class ParsedDoc:
    """Internal parse result carrying markdown-it tokens; not exported."""
    path:         Path
    slug:         str
    raw_markdown: str          # full file content (includes frontmatter)
    markdown:     str          # body only (frontmatter stripped)
    hash:         str
    frontmatter:  dict[str, Any]
    tokens:       list         # markdown-it Token objects


def describe_errors(exc: ValidationError) -> list[tuple[str, str]]:
    """Flatten a pydantic ValidationError into (field, message) pairs."""
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "frontmatter"
        if err["type"] == "missing":
            messages.append((loc, "required field is missing"))
        else:
            messages.append((loc, err["msg"]))
    return messages
