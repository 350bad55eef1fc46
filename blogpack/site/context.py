"""Site configuration and the shared, read-only context of a build run."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config import (
    BASE_URL,
    DEFAULT_LAYOUT,
    LAYOUTS_DIR,
    MARKDOWN_EXTENSIONS,
    PAGE_SIZE,
    POSTS_DIR,
    RELATED_COUNT,
    SITE_CONFIG_FILE,
)
from ..errors import ConfigError
from .collection import PostCollection

if TYPE_CHECKING:
    from .layouts import LayoutRegistry


class SiteConfig(BaseModel):
    """Settings read from `site.json`; every field has a default."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str = "Blog"
    description: str = ""
    author: str = ""
    portrait: str = ""
    # Extra side menu entries, label -> href
    menu: dict[str, str] = Field(default_factory=dict)
    base_url: str = BASE_URL
    page_size: int = Field(default=PAGE_SIZE, ge=1)
    related_count: int = Field(default=RELATED_COUNT, ge=0)
    default_layout: str = DEFAULT_LAYOUT
    posts_dir: str = POSTS_DIR
    layouts_dir: str = LAYOUTS_DIR
    markdown_extensions: list[str] = Field(default_factory=lambda: list(MARKDOWN_EXTENSIONS))

    def url(self, path: str = "") -> str:
        """Join a site-relative path onto base_url."""
        return self.base_url.rstrip("/") + "/" + path.lstrip("/")


def load_site_config(src_dir: Path) -> SiteConfig:
    """Load `site.json` from the source root, or defaults when absent.

    Raises:
        ConfigError: unreadable JSON or values that fail validation
    """
    path = src_dir / SITE_CONFIG_FILE
    if not path.exists():
        return SiteConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return SiteConfig.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise ConfigError(f"{path}: {e}") from e


@dataclass(frozen=True)
class SiteContext:
    """Everything a template may see about the whole site.

    Built once per run after every post is parsed; never mutated.
    """

    config: SiteConfig
    collection: PostCollection
    layouts: LayoutRegistry
