"""Site configuration record: schema, built-in value, and the read accessor"""

from enum import Enum
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from codderlly.core.models import NonEmptyStr
from codderlly.logging import get_logger


logger = get_logger("site")


class Mode(str, Enum):
    """Colour scheme the renderer starts in"""
    auto = "auto"
    light = "light"
    dark = "dark"


class Logo(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    src: NonEmptyStr
    alt: NonEmptyStr


class SiteConfig(BaseModel):
    """Global site settings. Keys are camelCase on disk and in exports."""
    model_config = ConfigDict(
        frozen=True, extra="forbid", alias_generator=to_camel, populate_by_name=True,
    )

    site_title:        NonEmptyStr
    site_description:  NonEmptyStr
    og_image:          NonEmptyStr
    logo:              Logo
    canonical:         bool
    noindex:           bool
    mode:              Mode
    scroll_animations: bool

    def to_dict(self) -> dict[str, Any]:
        """Return the record with camelCase keys and JSON-compatible values."""
        return self.model_dump(mode="json", by_alias=True)


CONFIG_DATA = SiteConfig(
    site_title="Codderlly. Learn to code",
    site_description="Codderlly, posting about learning how to develop with Swift, Android, Flutter...",
    og_image="/og.jpg",
    logo=Logo(src="/logo.svg", alt="Codderlly. logo"),
    canonical=True,
    noindex=False,
    mode=Mode.auto,
    scroll_animations=True,
)


def load_site_config(path: Optional[Path | str] = None) -> SiteConfig:
    """Return the site record from a YAML file, or CONFIG_DATA when there is none."""
    if path is None or not Path(path).exists():
        logger.debug("No site file at %s; using built-in configuration", path)
        return CONFIG_DATA

    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")

    try:
        return SiteConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
