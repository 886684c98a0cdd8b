"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdblog.cli.commands import articles_cmd, profile_cmd, serve_cmd, show_cmd


app = typer.Typer(name="mdblog", no_args_is_help=True, help="Serve a Markdown blog as a JSON API")

app.command(name="serve")(serve_cmd)
app.command(name="articles")(articles_cmd)
app.command(name="show")(show_cmd)
app.command(name="profile")(profile_cmd)
