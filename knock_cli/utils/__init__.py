"""Utility modules for the knock CLI."""

from knock_cli.utils.git import is_file_ignored_by_git
from knock_cli.utils.slug import is_slug, parse_slug_argument, slugify

__all__ = [
    "is_file_ignored_by_git",
    "is_slug",
    "parse_slug_argument",
    "slugify",
]
