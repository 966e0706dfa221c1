"""Disqus XML export reader.

The export is one large document:

    <disqus xmlns="http://disqus.com" xmlns:dsq="http://disqus.com/disqus-internals">
      <category dsq:id="..">..</category>
      <thread dsq:id="..">..<link>https://site/post</link>..</thread>
      <post dsq:id="..">
        <message>..</message><createdAt>..</createdAt><isSpam>false</isSpam>
        <author><name/><email/><username/></author>
        <thread dsq:id=".."/><parent dsq:id=".."/>
      </post>
    </disqus>

Only thread and post subtrees are materialized, one at a time.
"""

import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator
from pathlib import Path

from disqus_import.models import PostAuthor, PostRecord, ThreadRecord

NS = "http://disqus.com"
DSQ_NS = "http://disqus.com/disqus-internals"
DSQ_ID = f"{{{DSQ_NS}}}id"

THREAD = "thread"
POST = "post"


class MalformedExportError(Exception):
    """Raised when an export element lacks a required part."""

    pass


def local_name(tag: str) -> str:
    """Tag without its {namespace} prefix."""
    return tag.rpartition("}")[2]


def iter_elements(path: Path | str, names: Iterable[str] = (THREAD, POST)) -> Iterator[ET.Element]:
    """Yield the outermost elements whose local name is in names, in document order.

    Each yielded element is complete (all children parsed). Elements nested
    inside a yielded one (e.g. the <thread dsq:id/> reference inside a post)
    are part of that subtree and are not yielded separately. Every call
    re-reads the file from the start.

    Keep both names even when only one kind is wanted: a post carries a
    <thread dsq:id/> reference child that would otherwise be yielded.
    """
    wanted = frozenset(names)
    root: ET.Element | None = None
    depth = 0
    for event, elem in ET.iterparse(str(path), events=("start", "end")):
        if root is None:
            root = elem
            continue
        if event == "start":
            if depth or local_name(elem.tag) in wanted:
                depth += 1
            continue
        if not depth:
            if elem is not root:
                # finished subtree we have no use for
                root.clear()
            continue
        depth -= 1
        if depth == 0:
            yield elem
            root.clear()


def _child(elem: ET.Element, name: str) -> ET.Element | None:
    return elem.find(f"{{{NS}}}{name}")


def _required_child(elem: ET.Element, name: str, elem_id: str) -> ET.Element:
    child = _child(elem, name)
    if child is None:
        raise MalformedExportError(f"{local_name(elem.tag)} {elem_id!r} has no <{name}>")
    return child


def _required_id(elem: ET.Element) -> str:
    value = elem.get(DSQ_ID)
    if value is None:
        raise MalformedExportError(f"<{local_name(elem.tag)}> without dsq:id attribute")
    return value


def _optional_text(elem: ET.Element, name: str) -> str | None:
    child = _child(elem, name)
    if child is None or child.text is None:
        return None
    return child.text


def thread_from_element(elem: ET.Element) -> ThreadRecord:
    """Build a ThreadRecord from a <thread> element."""
    thread_id = _required_id(elem)
    link = _required_child(elem, "link", thread_id)
    return ThreadRecord(id=thread_id, link=(link.text or "").strip())


def post_from_element(elem: ET.Element) -> PostRecord:
    """Build a PostRecord from a <post> element.

    Raises MalformedExportError when author, message, createdAt or the
    thread reference is missing.
    """
    post_id = _required_id(elem)
    author = _required_child(elem, "author", post_id)
    message = _required_child(elem, "message", post_id)
    created_at = _required_child(elem, "createdAt", post_id)
    thread_ref = _required_child(elem, "thread", post_id)
    thread_id = thread_ref.get(DSQ_ID)
    if not thread_id:
        raise MalformedExportError(f"post {post_id!r} references a thread without dsq:id")
    if not (created_at.text or "").strip():
        raise MalformedExportError(f"post {post_id!r} has an empty <createdAt>")

    parent = _child(elem, "parent")
    parent_id = parent.get(DSQ_ID) if parent is not None else None

    return PostRecord(
        id=post_id,
        thread_id=thread_id,
        parent_id=parent_id or None,
        author=PostAuthor(
            name=_optional_text(author, "name"),
            email=_optional_text(author, "email"),
            username=_optional_text(author, "username"),
        ),
        created_at=created_at.text.strip(),
        message=message.text or "",
        is_spam=(_optional_text(elem, "isSpam") or "").strip().lower() == "true",
    )


class ExportReader:
    """Restartable access to the threads and posts of one export file.

    threads() and posts() each start a new pass over the file.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def threads(self) -> Iterator[ThreadRecord]:
        for elem in iter_elements(self._path):
            if local_name(elem.tag) == THREAD:
                yield thread_from_element(elem)

    def posts(self) -> Iterator[PostRecord]:
        for elem in iter_elements(self._path):
            if local_name(elem.tag) == POST:
                yield post_from_element(elem)
