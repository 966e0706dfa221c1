"""Comment storage in _data/comments/ as YAML files.

One directory per page slug, one file per comment: {slug}/{comment_id}.yml.
Files are overwritten on every import, so reruns give the same tree.
"""

import logging
from pathlib import Path

import yaml

from disqus_import.services.store.schemas import CommentFile

COMMENTS_DIR = "_data/comments"
EXTENSION = ".yml"

LOG = logging.getLogger("disqus_import.services.store.comment_store")


def _comments_dir(jekyll_dir: Path, slug: str, comments_dir: str = COMMENTS_DIR) -> Path:
    return Path(jekyll_dir) / comments_dir / slug


def comment_path(jekyll_dir: Path, slug: str, comment_id: str, comments_dir: str = COMMENTS_DIR) -> Path:
    """Path of the data file for one comment."""
    return _comments_dir(jekyll_dir, slug, comments_dir) / f"{comment_id}{EXTENSION}"


def save_comment(
    jekyll_dir: Path,
    slug: str,
    comment: CommentFile,
    comments_dir: str = COMMENTS_DIR,
) -> Path:
    """Write comment to {comments_dir}/{slug}/{id}.yml.

    Creates the slug dir if needed. Absent optional fields are left out of
    the file.
    """
    path = comment_path(jekyll_dir, slug, comment.id, comments_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = comment.model_dump(mode="python", by_alias=True, exclude_none=True)
    raw = yaml.dump(
        payload,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=1000,
    )
    path.write_text(raw, encoding="utf-8")
    LOG.debug("Saved comment %s to %s", comment.id, path)
    return path


def load_comment(
    jekyll_dir: Path,
    slug: str,
    comment_id: str,
    comments_dir: str = COMMENTS_DIR,
) -> CommentFile | None:
    """Load comment from {comments_dir}/{slug}/{comment_id}.yml.

    Returns None if missing or invalid.
    """
    path = comment_path(jekyll_dir, slug, comment_id, comments_dir)
    if not path.is_file():
        return None
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        if not data:
            return None
        return CommentFile.model_validate(data)
    except (OSError, yaml.YAMLError, ValueError) as e:
        LOG.warning("Failed to load comment %s: %s", path, e)
        return None


def list_comments(jekyll_dir: Path, slug: str, comments_dir: str = COMMENTS_DIR) -> list[CommentFile]:
    """All readable comments of one page, ordered by file name."""
    base = _comments_dir(jekyll_dir, slug, comments_dir)
    if not base.is_dir():
        return []
    out = []
    for f in sorted(base.glob(f"*{EXTENSION}")):
        comment = load_comment(jekyll_dir, slug, f.stem, comments_dir)
        if comment is not None:
            out.append(comment)
    return out
