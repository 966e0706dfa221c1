"""Jekyll include templates for rendering the imported comments.

Fetched once per import and written verbatim to <site>/_includes/; sites
usually adapt them to their design afterwards.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

import requests

from disqus_import.config import DEFAULT_INCLUDE_FILES, DEFAULT_INCLUDES_URL

INCLUDES_DIR = "_includes"

LOG = logging.getLogger("disqus_import.services.includes")


class IncludesError(Exception):
    """Raised when an include template cannot be fetched."""

    pass


class IncludesClient:
    """Fetches include templates over HTTP."""

    def __init__(self, base_url: str = DEFAULT_INCLUDES_URL, timeout: int = 30) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()

    def fetch(self, name: str) -> str:
        """Return the text of one template."""
        url = f"{self._base_url}/{name}"
        try:
            resp = self._session.request("GET", url, timeout=self._timeout)
        except requests.RequestException as e:
            raise IncludesError(f"Cannot fetch {url}: {e}") from e
        if resp.status_code >= 400:
            raise IncludesError(f"{resp.status_code}: {resp.reason or resp.text} ({url})")
        return resp.text


def write_includes(
    jekyll_dir: Path,
    client: IncludesClient,
    files: Iterable[str] = DEFAULT_INCLUDE_FILES,
    includes_dir: str = INCLUDES_DIR,
) -> list[Path]:
    """Fetch each template and write it to <jekyll_dir>/<includes_dir>/.

    Templates are fetched one after another; the first failure aborts.
    """
    target = Path(jekyll_dir) / includes_dir
    target.mkdir(parents=True, exist_ok=True)
    LOG.info("Writing Jekyll includes to %s. You may want to adapt them to your site's design.", target)
    written = []
    for name in files:
        path = target / name
        path.write_text(client.fetch(name), encoding="utf-8")
        written.append(path)
    return written
