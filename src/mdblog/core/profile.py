"""Profile descriptor loading and avatar URL resolution"""

import re
from pathlib import Path

from pydantic import ValidationError

from mdblog.core.models import Profile, ProfileConfig
from mdblog.errors import DataLoadError


ASSET_URL_PREFIX = "/blog-assets/"
PROFILE_FILE_NAME = "profile.json"

_LEADING_SLASHES_RE = re.compile(r'^/+')


def read_profile_config(path: Path) -> ProfileConfig:
    """Deserialize profile.json; any read or shape problem is fatal."""
    try:
        return ProfileConfig.model_validate_json(path.read_bytes())
    except (OSError, ValidationError) as e:
        raise DataLoadError("Cannot read profile descriptor", path) from e


def normalize_relative_path(path: str) -> str:
    """'\\img\\me.png' -> 'img/me.png'."""
    return _LEADING_SLASHES_RE.sub('', path.replace('\\', '/'))


def build_avatar_url(avatar: str, base_url: str = "") -> str:
    """Resolve an assets-relative avatar path to a root-relative or absolute URL."""
    if not avatar or not avatar.strip():
        return ""
    relative = ASSET_URL_PREFIX + normalize_relative_path(avatar)
    if not base_url or not base_url.strip():
        return relative
    return base_url.removesuffix('/') + relative


def load_profile(path: Path, base_url: str = "") -> Profile:
    config = read_profile_config(path)
    return Profile(
        id=config.id,
        username=config.username,
        avatar_url=build_avatar_url(config.avatar, base_url),
        bio=config.bio,
        email=config.email,
    )
