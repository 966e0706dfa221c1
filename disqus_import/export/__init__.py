"""Streaming access to Disqus XML exports."""

from disqus_import.export.reader import (
    ExportReader,
    MalformedExportError,
    iter_elements,
    post_from_element,
    thread_from_element,
)

__all__ = [
    "ExportReader",
    "MalformedExportError",
    "iter_elements",
    "post_from_element",
    "thread_from_element",
]
