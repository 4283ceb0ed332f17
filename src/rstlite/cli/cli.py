"""CLI entrypoint: Typer app definition and command registration"""

import typer

from rstlite.cli.commands import grammar_cmd, main_callback, parse_cmd


app = typer.Typer(name="rstlite", no_args_is_help=True, help="Parse a subset of reStructuredText into structured documents")

app.callback()(main_callback)
app.command(name="parse")(parse_cmd)
app.command(name="grammar")(grammar_cmd)
