"""Disqus export to Jekyll comment data files.

Two passes over the export: threads first (to build the id -> slug index
for the target host), then posts, each written as one YAML file.
"""

import logging
import sys
import time
from pathlib import Path
from typing import TextIO

from pydantic import BaseModel

from disqus_import.config import AppConfig
from disqus_import.export import ExportReader
from disqus_import.services.comment_mapper import map_comments
from disqus_import.services.includes import IncludesClient, write_includes
from disqus_import.services.store import save_comment
from disqus_import.services.thread_index import build_index

LOG = logging.getLogger("disqus_import.importer")


class ImportResult(BaseModel):
    """Counters of a finished import."""

    comments_written: int
    threads_indexed: int
    elapsed_seconds: float


class ProgressLine:
    """Single console line, rewritten in place for every file."""

    def __init__(self, stream: TextIO | None = None, enabled: bool = True) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._enabled = enabled
        self._width = 0

    def show(self, message: str) -> None:
        if not self._enabled:
            return
        self._stream.write("\r" + message.ljust(self._width))
        self._stream.flush()
        self._width = len(message)

    def clear(self) -> None:
        if not self._enabled or not self._width:
            return
        self._stream.write("\r" + " " * self._width + "\r")
        self._stream.flush()
        self._width = 0


def run_import(
    export_path: Path,
    jekyll_dir: Path,
    target_host: str,
    config: AppConfig | None = None,
    includes_client: IncludesClient | None = None,
    progress_stream: TextIO | None = None,
) -> ImportResult:
    """Import all comments of target_host from export_path into jekyll_dir.

    Any error (malformed export, empty slug, failed include fetch) aborts
    the run; files written before it are kept.
    """
    config = config or AppConfig()
    started = time.monotonic()

    if config.includes.enabled:
        client = includes_client or IncludesClient(config.includes.base_url, config.includes.timeout)
        write_includes(jekyll_dir, client, config.includes.files, config.output.includes_dir)

    LOG.info("Importing from file %s", export_path)
    reader = ExportReader(export_path)
    index = build_index(reader.threads(), target_host)

    progress = ProgressLine(progress_stream, enabled=config.output.progress)
    written = 0
    try:
        for slug, comment in map_comments(reader.posts(), index):
            path = save_comment(jekyll_dir, slug, comment, config.output.comments_dir)
            progress.show(f"Writing {path}.")
            written += 1
    finally:
        progress.clear()

    elapsed = time.monotonic() - started
    LOG.info("Wrote %s comments for %s threads in %.2f seconds", f"{written:,}", f"{len(index):,}", elapsed)
    return ImportResult(comments_written=written, threads_indexed=len(index), elapsed_seconds=elapsed)
