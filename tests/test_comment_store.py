"""Tests for comment YAML files (comment_store, CommentFile schema)."""

from datetime import datetime, timezone
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from disqus_import.services.store import (
    CommentFile,
    comment_path,
    list_comments,
    load_comment,
    save_comment,
)

DATE = datetime(2020, 1, 1, tzinfo=timezone.utc)


def _comment(**kwargs) -> CommentFile:
    data = {"id": "dsq-P1", "date": DATE, "name": "Jane", "message": "Hi"}
    data.update(kwargs)
    return CommentFile(**data)


class TestCommentFile:
    """CommentFile accepts both field names for the reply id."""

    def test_alias_and_field_name(self) -> None:
        assert _comment(replyToId="dsq-P0").reply_to_id == "dsq-P0"
        assert _comment(reply_to_id="dsq-P0").reply_to_id == "dsq-P0"

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _comment(email="jane@example.com")


class TestCommentStore:
    """save_comment, load_comment, list_comments."""

    def test_comment_path_layout(self, tmp_path: Path) -> None:
        assert comment_path(tmp_path, "hello-world", "dsq-P1") == (
            tmp_path / "_data" / "comments" / "hello-world" / "dsq-P1.yml"
        )

    def test_custom_comments_dir(self, tmp_path: Path) -> None:
        path = save_comment(tmp_path, "hello", _comment(), comments_dir="data/c")
        assert path == tmp_path / "data" / "c" / "hello" / "dsq-P1.yml"
        assert load_comment(tmp_path, "hello", "dsq-P1", comments_dir="data/c") is not None

    def test_save_creates_dirs_and_writes_fields_in_order(self, tmp_path: Path) -> None:
        path = save_comment(
            tmp_path,
            "hello-world",
            _comment(reply_to_id="dsq-P0", avatar="https://disqus.com/api/users/avatars/Jane.jpg"),
        )
        assert path.is_file()
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert list(data) == ["id", "replyToId", "date", "name", "avatar", "message"]
        assert data["id"] == "dsq-P1"
        assert data["replyToId"] == "dsq-P0"
        assert data["date"] == DATE
        assert data["message"] == "Hi"

    def test_absent_optional_fields_are_omitted(self, tmp_path: Path) -> None:
        """None fields are left out of the file, not written as null or ''."""
        path = save_comment(tmp_path, "s", _comment(name=None))
        content = path.read_text(encoding="utf-8")
        assert "replyToId" not in content
        assert "name" not in content
        assert "avatar" not in content
        assert "null" not in content

    def test_save_overwrites(self, tmp_path: Path) -> None:
        save_comment(tmp_path, "s", _comment(message="old"))
        save_comment(tmp_path, "s", _comment(message="new"))
        loaded = load_comment(tmp_path, "s", "dsq-P1")
        assert loaded is not None
        assert loaded.message == "new"

    def test_save_is_deterministic(self, tmp_path: Path) -> None:
        path = save_comment(tmp_path, "s", _comment(message="<p>a\nb</p>"))
        first = path.read_bytes()
        save_comment(tmp_path, "s", _comment(message="<p>a\nb</p>"))
        assert path.read_bytes() == first

    def test_unicode_written_as_is(self, tmp_path: Path) -> None:
        path = save_comment(tmp_path, "s", _comment(name="Zoë", message="Ünïcödé ✓"))
        content = path.read_text(encoding="utf-8")
        assert "Zoë" in content
        assert "✓" in content

    def test_load_round_trip(self, tmp_path: Path) -> None:
        comment = _comment(reply_to_id="dsq-P0", message="<p>multi\nline</p>")
        save_comment(tmp_path, "s", comment)
        assert load_comment(tmp_path, "s", "dsq-P1") == comment

    def test_load_missing_returns_none(self, tmp_path: Path) -> None:
        assert load_comment(tmp_path, "s", "dsq-404") is None

    def test_load_invalid_returns_none(self, tmp_path: Path) -> None:
        """Invalid YAML or schema returns None."""
        path = comment_path(tmp_path, "s", "dsq-1")
        path.parent.mkdir(parents=True)
        path.write_text("not: valid: yaml: [[[", encoding="utf-8")
        assert load_comment(tmp_path, "s", "dsq-1") is None
        path.write_text("id: dsq-1\n", encoding="utf-8")
        assert load_comment(tmp_path, "s", "dsq-1") is None
        path.write_text("", encoding="utf-8")
        assert load_comment(tmp_path, "s", "dsq-1") is None

    def test_list_comments(self, tmp_path: Path) -> None:
        save_comment(tmp_path, "s", _comment(id="dsq-2"))
        save_comment(tmp_path, "s", _comment(id="dsq-1"))
        save_comment(tmp_path, "other", _comment(id="dsq-3"))
        assert [c.id for c in list_comments(tmp_path, "s")] == ["dsq-1", "dsq-2"]

    def test_list_comments_no_dir(self, tmp_path: Path) -> None:
        assert list_comments(tmp_path, "missing") == []
