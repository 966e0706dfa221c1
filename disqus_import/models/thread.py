"""Discussion thread from the export."""

from pydantic import BaseModel


class ThreadRecord(BaseModel):
    """Discussion thread: one published page on a site."""

    id: str
    link: str
