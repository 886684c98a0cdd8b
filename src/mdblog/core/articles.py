"""Article discovery, parsing, and ordering for the articles directory"""

import logging
from pathlib import Path
from typing import Optional

from mdblog.core.derive import build_article
from mdblog.core.frontmatter import parse_frontmatter
from mdblog.core.models import Article, ArticleDetail, ArticleSummary
from mdblog.errors import DataLoadError


logger = logging.getLogger(__name__)

MD_SUFFIX = '.md'


def discover_articles(articles_dir: Path) -> list[Path]:
    """Return direct .md children of articles_dir sorted by name; [] if the dir is missing."""
    if not articles_dir.is_dir():
        return []
    try:
        entries = list(articles_dir.iterdir())
    except OSError as e:
        raise DataLoadError("Cannot read articles directory", articles_dir) from e
    return sorted(
        (p for p in entries if p.is_file() and p.name.lower().endswith(MD_SUFFIX)),
        key=lambda p: p.name,
    )


def split_lines(text: str) -> list[str]:
    """Split on newlines only; a final terminator does not add an empty line.

    read_text has already folded \\r\\n and \\r into \\n.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_article(path: Path) -> Article:
    """Read one Markdown file and derive its Article."""
    try:
        lines = split_lines(path.read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError) as e:
        raise DataLoadError("Cannot parse article file", path) from e
    return build_article(path, parse_frontmatter(lines))


def load_articles(articles_dir: Path) -> list[Article]:
    """Parse every article, newest publishDate first; ties keep name order.

    The load is all-or-nothing: one bad file fails the whole directory.
    """
    paths = discover_articles(articles_dir)
    try:
        articles = [parse_article(p) for p in paths]
    except DataLoadError as e:
        raise DataLoadError(f"Cannot load articles directory ({e})", articles_dir) from e
    articles.sort(key=lambda a: a.publish_date, reverse=True)
    logger.debug("Loaded %d article(s) from %s", len(articles), articles_dir)
    return articles


def list_summaries(articles_dir: Path) -> list[ArticleSummary]:
    return [a.summary() for a in load_articles(articles_dir)]


def get_by_id(articles_dir: Path, article_id: str) -> Optional[ArticleDetail]:
    """First article in sorted order whose id matches, or None."""
    for article in load_articles(articles_dir):
        if article.id == article_id:
            return article.detail()
    return None
