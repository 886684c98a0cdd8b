"""Data models for articles and the profile, plus the internal front-matter result"""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ArticleSummary(_CamelModel):
    """Listing projection of an article (no body)."""
    id: str
    title: str
    publish_date: str               # YYYY-MM-DD


class ArticleDetail(ArticleSummary):
    """Full projection of an article including its Markdown body."""
    content: str


class Article(ArticleDetail):
    """An article derived from one Markdown file; rebuilt on every read."""

    def summary(self) -> ArticleSummary:
        return ArticleSummary(id=self.id, title=self.title, publish_date=self.publish_date)

    def detail(self) -> ArticleDetail:
        return ArticleDetail(
            id=self.id, title=self.title, publish_date=self.publish_date, content=self.content,
        )


class ProfileConfig(BaseModel):
    """On-disk shape of profile.json; avatar is a path relative to the assets dir."""
    model_config = ConfigDict(extra="ignore")

    id:       str = ""
    username: str = ""
    avatar:   str = ""
    bio:      str = ""
    email:    str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value


class Profile(_CamelModel):
    """Public profile with the avatar resolved to a URL."""
    id: str
    username: str
    avatar_url: str                 # absolute, root-relative, or "" when unset
    bio: str
    email: str


@dataclass
class FrontMatter:
    """Parsed metadata header and the body lines that follow it."""
    meta: dict[str, str] = field(default_factory=dict)
    body: list[str] = field(default_factory=list)
