"""CLI entrypoint: Typer app definition and command registration"""

import typer

from boardmark.cli.commands import config_cmd, extract_cmd, parse_cmd


app = typer.Typer(name="boardmark", no_args_is_help=True, help="Board note markup parser")

app.command(name="parse")(parse_cmd)
app.command(name="extract")(extract_cmd)
app.command(name="config")(config_cmd)
