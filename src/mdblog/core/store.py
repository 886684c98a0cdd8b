"""BlogDataStore: the read-only facade over a data root"""

import os
from pathlib import Path
from typing import Optional

from mdblog.core import articles, profile
from mdblog.core.models import ArticleDetail, ArticleSummary, Profile
from mdblog.errors import ConfigError


ARTICLES_DIR_NAME = "articles"
ASSETS_DIR_NAME = "assets"


class BlogDataStore:
    """Serves profile and articles from disk; every call re-reads the filesystem."""

    def __init__(self, data_path: str, base_url: Optional[str] = None):
        if data_path is None or not str(data_path).strip():
            raise ConfigError("Missing data path: set data_path in config.yaml or MDBLOG_DATA_PATH")
        self.data_root = Path(os.path.abspath(os.path.expanduser(data_path)))
        self.base_url = (base_url or "").strip()

    @property
    def articles_dir(self) -> Path:
        return self.data_root / ARTICLES_DIR_NAME

    @property
    def assets_dir(self) -> Path:
        return self.data_root / ASSETS_DIR_NAME

    @property
    def profile_path(self) -> Path:
        return self.data_root / profile.PROFILE_FILE_NAME

    def get_profile(self) -> Profile:
        return profile.load_profile(self.profile_path, self.base_url)

    def list_article_summaries(self) -> list[ArticleSummary]:
        return articles.list_summaries(self.articles_dir)

    def get_article_detail(self, article_id: str) -> Optional[ArticleDetail]:
        return articles.get_by_id(self.articles_dir, article_id)
