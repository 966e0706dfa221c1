"""Shared fixtures: a small Disqus export and an empty Jekyll site."""

from pathlib import Path

import pytest
from export_builder import post_xml, thread_xml, write_export


@pytest.fixture
def export_path(tmp_path: Path) -> Path:
    """Export with two site threads, one foreign thread and five posts.

    Kept: P1 (T1), P2 reply to P1 (T1), P5 (T2). Dropped: P3 spam, P4 on other.com.
    """
    return write_export(
        tmp_path / "export.xml",
        '<category dsq:id="1"><forum>blog</forum><title>General</title><isDefault>true</isDefault></category>\n',
        thread_xml("T1", "https://site.com/posts/Hello-World"),
        thread_xml("T2", "https://Site.com/posts/second-post/"),
        thread_xml("T3", "https://other.com/posts/elsewhere"),
        post_xml("P1", "T1", message="<p>Hi</p>", name="Jane"),
        post_xml("P2", "T1", message="Thanks", name="Bob", username="bob42", parent_id="P1"),
        post_xml("P3", "T1", message="Buy now", name="Spammer", is_spam=True),
        post_xml("P4", "T3", message="Elsewhere", name="Eve"),
        post_xml("P5", "T2", message="Second", name=None, email=None, created_at="2021-06-15T08:30:00"),
    )


@pytest.fixture
def jekyll_dir(tmp_path: Path) -> Path:
    site = tmp_path / "site"
    site.mkdir()
    return site
