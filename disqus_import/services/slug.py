"""Thread URL to comment directory name.

The comment intake service that later adds new comments to the site
derives the same directory name from the page URL with the same pattern.
Both must stay identical or new comments land in a different directory.
"""

import re

_INVALID_SLUG_CHARS_RE = re.compile(r"[^a-zA-Z0-9-]")


class EmptySlugError(ValueError):
    """Raised when a URL yields an empty slug (e.g. a bare host URL)."""

    pass


def derive_slug(url: str) -> str:
    """Derive the slug from the last path segment of url.

    One trailing "/" is dropped, then every character outside
    [a-zA-Z0-9-] becomes "-" and the result is lowercased.

    Raises:
        EmptySlugError: when nothing is left after the last "/".
    """
    trimmed = url[:-1] if url.endswith("/") else url
    segment = trimmed[trimmed.rfind("/") + 1 :]
    slug = _INVALID_SLUG_CHARS_RE.sub("-", segment).lower()
    if not slug:
        raise EmptySlugError(f"Empty slug derived from URL {url!r}")
    return slug
