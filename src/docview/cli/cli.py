"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docview.cli.commands import classify_cmd, list_cmd, open_cmd, render_cmd, serve_cmd


app = typer.Typer(name="docview", no_args_is_help=True, help="Local document viewer with markdown rendering")

app.command(name="serve")(serve_cmd)
app.command(name="open")(open_cmd)
app.command(name="render")(render_cmd)
app.command(name="classify")(classify_cmd)
app.command(name="list")(list_cmd)
