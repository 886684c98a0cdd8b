"""CLI command implementations"""

import json
from typing import Annotated, Optional

import typer
import uvicorn

from mdblog.api.app import create_app
from mdblog.config import Settings, load_config
from mdblog.core.store import BlogDataStore
from mdblog.errors import DataLoadError
from mdblog.logging_utils import setup_logging


DataPathOption = Annotated[Optional[str], typer.Option("--data-path", help="Data root directory")]
BaseUrlOption = Annotated[Optional[str], typer.Option("--base-url", help="Public base URL for avatar links")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and route mdblog logs to the console."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def _store(settings: Settings) -> BlogDataStore:
    try:
        return BlogDataStore(settings.data_path, settings.base_url)
    except ValueError as e:
        _fail(str(e))


def serve_cmd(
    data_path: DataPathOption = None,
    base_url: BaseUrlOption = None,
    host: Annotated[Optional[str], typer.Option("--host", help="Interface to bind")] = None,
    port: Annotated[Optional[int], typer.Option("--port", help="Port to listen on")] = None,
    ):
    """Serve the profile and articles as JSON over HTTP."""
    settings = _settings(overrides={"data_path": data_path, "base_url": base_url, "host": host, "port": port})
    try:
        app = create_app(settings)
    except ValueError as e:
        _fail(str(e))
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


def articles_cmd(data_path: DataPathOption = None):
    """Print article summaries (newest first) as JSON."""
    store = _store(_settings(overrides={"data_path": data_path}))
    try:
        summaries = store.list_article_summaries()
    except DataLoadError as e:
        _fail("Could not list articles", e)
    payload = [s.model_dump(by_alias=True) for s in summaries]
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def show_cmd(
    article_id: Annotated[str, typer.Argument(help="Article id")],
    data_path: DataPathOption = None,
    ):
    """Print one article with its content as JSON."""
    store = _store(_settings(overrides={"data_path": data_path}))
    try:
        article = store.get_article_detail(article_id)
    except DataLoadError as e:
        _fail("Could not load articles", e)
    if article is None:
        typer.echo(f"Article not found: {article_id}", err=True)
        raise typer.Exit(1)
    typer.echo(article.model_dump_json(by_alias=True, indent=2))


def profile_cmd(data_path: DataPathOption = None, base_url: BaseUrlOption = None):
    """Print the profile with its resolved avatar URL as JSON."""
    store = _store(_settings(overrides={"data_path": data_path, "base_url": base_url}))
    try:
        profile = store.get_profile()
    except DataLoadError as e:
        _fail("Could not load profile", e)
    typer.echo(profile.model_dump_json(by_alias=True, indent=2))
