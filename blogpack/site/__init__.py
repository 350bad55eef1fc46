"""Site assembly: post collection, layouts, stylesheet and build."""

from .build import BuildReport, FileIssue, build_site, check_site, load_posts
from .collection import Neighbors, Page, Pagination, PostCollection
from .context import SiteConfig, SiteContext, load_site_config
from .layouts import Layout, LayoutRegistry, compose
from .manifest import SiteManifest, create_manifest, write_manifest

__all__ = [
    "build_site",
    "check_site",
    "load_posts",
    "BuildReport",
    "FileIssue",
    "PostCollection",
    "Neighbors",
    "Page",
    "Pagination",
    "SiteConfig",
    "SiteContext",
    "load_site_config",
    "Layout",
    "LayoutRegistry",
    "compose",
    "SiteManifest",
    "create_manifest",
    "write_manifest",
]
