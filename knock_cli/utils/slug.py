"""Slug formatting helpers for CLI arguments."""

import re

import typer

_SLUG_RE = re.compile(r"^[\w-]+$")
_SLUG_LOWERCASE_RE = re.compile(r"^[\d_a-z-]+$")


def slugify(text: str) -> str:
    """Convert free text to a slug, e.g. "One Two Three" -> "one-two-three"."""
    return re.sub(r"\s+", "-", text.lower().strip())


def is_slug(text: str, only_lowercase: bool = True) -> bool:
    """Check if text is already in slug format."""
    pattern = _SLUG_LOWERCASE_RE if only_lowercase else _SLUG_RE
    return bool(pattern.match(text))


def parse_slug_argument(text: str) -> str:
    """Typer callback that slugifies an argument and rejects empty input.

    Raises:
        typer.BadParameter: If nothing is left after slugifying
    """
    slug = slugify(text)
    if not slug:
        raise typer.BadParameter("Invalid slug provided")
    return slug
