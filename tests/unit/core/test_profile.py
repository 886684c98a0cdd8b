"""Unit tests for core/profile.py"""

import json

import pytest

from mdblog.core.profile import build_avatar_url, load_profile, normalize_relative_path, read_profile_config
from mdblog.errors import DataLoadError


@pytest.mark.parametrize("avatar,base_url,expected", [
    ("img/me.png",     "",                "/blog-assets/img/me.png"),
    ("img/me.png",     "https://x.com/",  "https://x.com/blog-assets/img/me.png"),
    ("img/me.png",     "https://x.com",   "https://x.com/blog-assets/img/me.png"),
    ("img/me.png",     "   ",             "/blog-assets/img/me.png"),
    ("/img/me.png",    "",                "/blog-assets/img/me.png"),
    ("\\img\\me.png",  "",                "/blog-assets/img/me.png"),
    ("///me.png",      "https://x.com/",  "https://x.com/blog-assets/me.png"),
    ("",               "https://x.com/",  ""),
    ("   ",            "",                ""),
])
def test_build_avatar_url(avatar, base_url, expected):
    assert build_avatar_url(avatar, base_url) == expected


def test_normalize_relative_path():
    assert normalize_relative_path("\\\\a\\b/c.png") == "a/b/c.png"


def test_load_profile(data_root):
    profile = load_profile(data_root / "profile.json")
    assert profile.model_dump(by_alias=True) == {
        "id": "u1",
        "username": "ada",
        "avatarUrl": "/blog-assets/img/me.png",
        "bio": "Writes about engines.",
        "email": "ada@example.com",
    }


def test_load_profile_with_base_url(data_root):
    profile = load_profile(data_root / "profile.json", "https://blog.example/")
    assert profile.avatar_url == "https://blog.example/blog-assets/img/me.png"


def test_missing_fields_default_to_empty(tmp_path):
    p = tmp_path / "profile.json"
    p.write_text(json.dumps({"username": "ada", "extra": 1}))
    config = read_profile_config(p)
    assert config.username == "ada"
    assert config.avatar == ""
    assert load_profile(p).avatar_url == ""


def test_missing_profile_is_fatal(tmp_path):
    p = tmp_path / "profile.json"
    with pytest.raises(DataLoadError) as exc_info:
        load_profile(p)
    assert exc_info.value.path == p
    assert str(p) in str(exc_info.value)


@pytest.mark.parametrize("text", [
    "{not json",
    "[1, 2]",
    '{"username": 42}',
])
def test_malformed_profile_is_fatal(tmp_path, text):
    p = tmp_path / "profile.json"
    p.write_text(text)
    with pytest.raises(DataLoadError):
        load_profile(p)


def test_profile_reread_every_call(tmp_path):
    p = tmp_path / "profile.json"
    p.write_text(json.dumps({"username": "one"}))
    assert load_profile(p).username == "one"
    p.write_text(json.dumps({"username": "two"}))
    assert load_profile(p).username == "two"


def test_null_fields_read_as_empty(tmp_path):
    p = tmp_path / "profile.json"
    p.write_text(json.dumps({"id": "u1", "username": "ada", "avatar": None, "bio": None, "email": None}))
    profile = load_profile(p, "https://x.com/")
    assert profile.avatar_url == ""
    assert profile.bio == ""
    assert profile.email == ""
    assert profile.username == "ada"
