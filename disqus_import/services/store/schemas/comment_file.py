"""Comment record as stored in _data/comments/{slug}/{id}.yml."""

from datetime import datetime

from pydantic import BaseModel, Field


class CommentFile(BaseModel):
    """One comment of a page, read by the site's comment templates."""

    id: str = Field(..., description="Comment id, e.g. dsq-123456")
    reply_to_id: str | None = Field(
        default=None,
        alias="replyToId",
        description="Id of the comment this one replies to. Omitted for top-level comments.",
    )
    date: datetime = Field(..., description="When the comment was posted")
    name: str | None = Field(default=None, description="Author display name")
    avatar: str | None = Field(default=None, description="Author avatar URL")
    message: str = Field(..., description="Comment body (HTML)")

    model_config = {"extra": "forbid", "populate_by_name": True}
