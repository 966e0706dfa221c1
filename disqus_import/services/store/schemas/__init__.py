"""Schemas for comment data files."""

from disqus_import.services.store.schemas.comment_file import CommentFile

__all__ = ["CommentFile"]
