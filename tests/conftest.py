"""Root test configuration: a sample data root on disk"""

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path

import pytest


PROFILE = {
    "id": "u1",
    "username": "ada",
    "avatar": "img/me.png",
    "bio": "Writes about engines.",
    "email": "ada@example.com",
}


def write_article(articles_dir: Path, name: str, text: str, mtime: datetime = None) -> Path:
    """Write an article file, optionally pinning its modification time."""
    articles_dir.mkdir(parents=True, exist_ok=True)
    p = articles_dir / name
    p.write_text(text, encoding="utf-8")
    if mtime is not None:
        ts = mtime.timestamp()
        os.utime(p, (ts, ts))
    return p


@pytest.fixture(name="data_root")
def data_root_fixture(tmp_path):
    """Data root with a profile, two dated articles, one undated article, and an asset."""
    root = tmp_path / "data"
    (root / "assets" / "img").mkdir(parents=True)
    (root / "assets" / "img" / "me.png").write_bytes(b"\x89PNG")
    (root / "profile.json").write_text(json.dumps(PROFILE), encoding="utf-8")

    articles = root / "articles"
    write_article(articles, "older.md", "---\ntitle: Older Post\npublishDate: 2024-01-01\n---\n\nFirst words.\n")
    write_article(articles, "newer.md", "---\npublishDate: 2024-06-01\n---\n# Newer Post\n\nLater words.\n")
    write_article(
        articles, "undated.md", "# Undated\n\nNo header here.\n",
        mtime=datetime(2023, 3, 4, 23, 30, tzinfo=timezone.utc),
    )
    return root


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep config.yaml lookups and MDBLOG_* vars from leaking between tests."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("MDBLOG_"):
            monkeypatch.delenv(key)


@pytest.fixture(name="write_article")
def write_article_fixture():
    return write_article


@pytest.fixture(autouse=True)
def reset_mdblog_logger():
    """CLI commands install a console handler; restore the default logger afterwards."""
    yield
    logger = logging.getLogger("mdblog")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
