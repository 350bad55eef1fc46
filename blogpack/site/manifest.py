"""Build manifest: what was written, with content hashes."""

import hashlib
import json
from datetime import UTC, date, datetime
from pathlib import Path

from pydantic import BaseModel

from .. import __version__
from ..config import MANIFEST_NAME, SCHEMA_VERSION
from ..content.post import Post


class PostInfo(BaseModel):
    """Post entry in the manifest."""

    identifier: str
    title: str
    date: str
    path: str
    sha256: str


class SiteManifest(BaseModel):
    """Manifest of one build."""

    schema_version: int = SCHEMA_VERSION
    generator_version: str = __version__
    generated_at: datetime
    posts: list[PostInfo]
    files: dict[str, str]  # path -> sha256
    warnings: list[str]
    errors: list[str]


def compute_sha256(content: bytes | str) -> str:
    """Compute SHA256 hash of content.

    Args:
        content: Bytes or string to hash

    Returns:
        Hex-encoded SHA256 hash
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    return hashlib.sha256(content).hexdigest()


def create_manifest(
    posts: list[Post],
    files: dict[str, str],
    warnings: list[str],
    errors: list[str],
) -> SiteManifest:
    """Create the manifest for a build.

    Args:
        posts: Posts in site order (newest first)
        files: Map of written paths (relative to the output dir) to content
        warnings: Warning messages from the build
        errors: Per-file error messages from the build

    Returns:
        Populated SiteManifest
    """
    # Determinism: timestamp comes from the newest post, not the clock.
    newest = posts[0].publication_date if posts else date(1970, 1, 1)
    stable_at = datetime(newest.year, newest.month, newest.day, tzinfo=UTC)

    hashes = {path: compute_sha256(content) for path, content in files.items()}
    return SiteManifest(
        generated_at=stable_at,
        posts=[
            PostInfo(
                identifier=p.identifier,
                title=p.title,
                date=p.publication_date.isoformat(),
                path=p.url,
                sha256=hashes.get(p.url, ""),
            )
            for p in posts
        ],
        files=hashes,
        warnings=warnings,
        errors=errors,
    )


def write_manifest(manifest: SiteManifest, output_dir: Path) -> Path:
    """Write manifest to JSON file.

    Args:
        manifest: SiteManifest object
        output_dir: Directory to write to

    Returns:
        Path to written manifest file
    """
    manifest_path = output_dir / MANIFEST_NAME
    payload = manifest.model_dump(mode="json")
    manifest_path.write_text(
        json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    return manifest_path
