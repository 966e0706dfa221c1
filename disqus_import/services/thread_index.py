"""Thread id to slug lookup, limited to one site."""

import logging
from collections.abc import Iterable
from urllib.parse import urlsplit

from disqus_import.models import ThreadRecord
from disqus_import.services.slug import derive_slug

LOG = logging.getLogger("disqus_import.services.thread_index")


def url_host(link: str) -> str | None:
    """Host of an absolute URL, lowercased; None when link is not one."""
    try:
        parts = urlsplit(link)
        host = parts.hostname
    except ValueError:
        return None
    if not parts.scheme or not host:
        return None
    return host.lower()


def build_index(threads: Iterable[ThreadRecord], target_host: str) -> dict[str, str]:
    """Map thread id -> slug for threads published on target_host.

    Threads on other hosts or with unparseable links are left out; their
    posts are dropped later. A repeated id keeps the last slug.
    """
    host = target_host.strip().lower()
    index: dict[str, str] = {}
    seen = 0
    for thread in threads:
        seen += 1
        if url_host(thread.link) != host:
            continue
        index[thread.id] = derive_slug(thread.link)
    LOG.debug("Indexed %s of %s threads for host %s", len(index), seen, host)
    return index
