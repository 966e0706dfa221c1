"""Records read from a Disqus export (Pydantic)."""

from disqus_import.models.post import PostAuthor, PostRecord
from disqus_import.models.thread import ThreadRecord

__all__ = ["PostAuthor", "PostRecord", "ThreadRecord"]
