"""Comment data files in _data/comments/."""

from disqus_import.services.store.comment_store import (
    COMMENTS_DIR,
    comment_path,
    list_comments,
    load_comment,
    save_comment,
)
from disqus_import.services.store.schemas import CommentFile

__all__ = [
    "COMMENTS_DIR",
    "CommentFile",
    "comment_path",
    "list_comments",
    "load_comment",
    "save_comment",
]
