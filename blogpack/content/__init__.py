"""Content parsing and rendering modules."""

from .frontmatter import dump_front_matter, has_front_matter, parse_front_matter
from .post import Post, load_post, parse_identifier, parse_post, slugify
from .render import RenderResult, render_content, render_image

__all__ = [
    "parse_front_matter",
    "dump_front_matter",
    "has_front_matter",
    "Post",
    "load_post",
    "parse_post",
    "parse_identifier",
    "slugify",
    "render_content",
    "render_image",
    "RenderResult",
]
