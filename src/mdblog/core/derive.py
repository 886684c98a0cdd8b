"""Field resolution for articles: metadata first, then content and filesystem fallbacks"""

import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from mdblog.core.models import Article, FrontMatter
from mdblog.errors import DataLoadError


logger = logging.getLogger(__name__)

HEADING_PREFIX_RE = re.compile(r"^#+[ \t\n\r\x0b\x0c]*")
ISO_DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')

# ASCII whitespace and separators only; NBSP and other Unicode spaces are content.
WHITESPACE = " \t\n\r\x0b\x0c\x1c\x1d\x1e\x1f"


def choose_value(candidate: Optional[str], fallback: str) -> str:
    """Return candidate unless it is missing or blank."""
    if candidate is None or not candidate.strip(WHITESPACE):
        return fallback
    return candidate


def strip_extension(filename: str) -> str:
    """'post.draft.md' -> 'post.draft'; dotfiles like '.md' keep their name."""
    index = filename.rfind('.')
    return filename[:index] if index > 0 else filename


def first_heading(body: list[str]) -> Optional[str]:
    """Text of the first '#' line in body, or None if absent or empty."""
    for line in body:
        line = line.strip(WHITESPACE)
        if line.startswith('#'):
            text = HEADING_PREFIX_RE.sub("", line).strip(WHITESPACE)
            return text or None
    return None


def modified_date(path: Path) -> str:
    """File mtime as a UTC calendar date (YYYY-MM-DD)."""
    mtime = path.stat().st_mtime
    return datetime.fromtimestamp(mtime, tz=timezone.utc).date().isoformat()


def join_content(body: list[str]) -> str:
    """Rejoin body lines with '\\n' and drop leading whitespace only."""
    return "\n".join(body).lstrip(WHITESPACE)


def resolve_id(meta: dict[str, str], stem: str) -> str:
    return choose_value(meta.get("id"), stem)


def resolve_title(meta: dict[str, str], body: list[str], stem: str) -> str:
    return choose_value(meta.get("title"), first_heading(body) or stem)


def resolve_publish_date(meta: dict[str, str], path: Path) -> str:
    value = meta.get("publishDate")
    if value is None or not value.strip(WHITESPACE):
        return modified_date(path)
    if not ISO_DATE_RE.match(value):
        logger.warning("Non-ISO publishDate %r in %s; sorting will be lexicographic", value, path)
    return value


def build_article(path: Path, fm: FrontMatter) -> Article:
    """Assemble an Article from a parsed file; reads the mtime only when needed."""
    stem = strip_extension(path.name)
    try:
        publish_date = resolve_publish_date(fm.meta, path)
    except OSError as e:
        raise DataLoadError("Cannot read modification time of article", path) from e
    return Article(
        id=resolve_id(fm.meta, stem),
        title=resolve_title(fm.meta, fm.body, stem),
        publish_date=publish_date,
        content=join_content(fm.body),
    )
