"""Configuration constants and defaults for blogpack."""

import os

# Logging level for the CLI. Override via BLOGPACK_LOG_LEVEL.
LOG_LEVEL = os.getenv("BLOGPACK_LOG_LEVEL", "INFO")

# Posts per index page
PAGE_SIZE = int(os.getenv("BLOGPACK_PAGE_SIZE", "5"))

# Entries in the "related posts" block of each post page
RELATED_COUNT = int(os.getenv("BLOGPACK_RELATED_COUNT", "3"))

# Prefix for every generated URL
BASE_URL = os.getenv("BLOGPACK_BASE_URL", "/")

# Source tree conventions (Jekyll-compatible)
SITE_CONFIG_FILE = "site.json"
POSTS_DIR = "_posts"
LAYOUTS_DIR = "_layouts"
POST_EXTENSIONS = (".md", ".markdown")
DEFAULT_LAYOUT = "post"

# Front matter
FRONT_MATTER_DELIMITER = "---"

# Python-Markdown extensions used for post bodies
MARKDOWN_EXTENSIONS = ("fenced_code", "tables")

# Output artifacts
STYLESHEET_NAME = "style.css"
MANIFEST_NAME = "manifest.json"
SCHEMA_VERSION = 1
