"""Export posts to comment records.

Posts flagged as spam and posts of threads missing from the index are
skipped. Reply links are copied as ids only; the parent post is not
checked, so a reply may point at a comment that was never written.
"""

from collections.abc import Iterable, Iterator, Mapping
from datetime import datetime, timezone

from disqus_import.export.reader import MalformedExportError
from disqus_import.models import PostAuthor, PostRecord
from disqus_import.services.store.schemas import CommentFile

ID_PREFIX = "dsq-"
AVATAR_URL = "https://disqus.com/api/users/avatars/{handle}.jpg"


def comment_id(post_id: str) -> str:
    """Output id for a Disqus post id."""
    return f"{ID_PREFIX}{post_id}"


def avatar_url(author: PostAuthor) -> str | None:
    """Disqus avatar URL for the author's username, else display name."""
    handle = author.username or author.name
    if not handle:
        return None
    return AVATAR_URL.format(handle=handle)


def parse_created_at(value: str) -> datetime:
    """Parse an export timestamp (ISO 8601, "Z" allowed). Naive means UTC."""
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError as e:
        raise MalformedExportError(f"Invalid createdAt {value!r}: {e}") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def comment_from_post(post: PostRecord) -> CommentFile:
    """Build the comment record for one post (no filtering)."""
    return CommentFile(
        id=comment_id(post.id),
        reply_to_id=comment_id(post.parent_id) if post.parent_id else None,
        date=parse_created_at(post.created_at),
        name=post.author.name,
        avatar=avatar_url(post.author),
        message=post.message,
    )


def map_comments(posts: Iterable[PostRecord], index: Mapping[str, str]) -> Iterator[tuple[str, CommentFile]]:
    """Yield (slug, comment) for every kept post, in input order.

    Raises MalformedExportError on an unparseable timestamp; nothing after
    that post is yielded.
    """
    for post in posts:
        if post.is_spam:
            continue
        slug = index.get(post.thread_id)
        if slug is None:
            continue
        yield slug, comment_from_post(post)
