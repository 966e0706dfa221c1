"""Post (single comment) from the export."""

from pydantic import BaseModel, Field


class PostAuthor(BaseModel):
    """Comment author; every field may be missing in the export."""

    name: str | None = None
    email: str | None = None
    username: str | None = None


class PostRecord(BaseModel):
    """Single comment in a thread."""

    id: str
    thread_id: str = Field(..., description="dsq:id of the thread the post belongs to")
    parent_id: str | None = Field(default=None, description="dsq:id of the post this one replies to")
    author: PostAuthor
    created_at: str = Field(..., description="Timestamp as written in the export")
    message: str
    is_spam: bool = False
