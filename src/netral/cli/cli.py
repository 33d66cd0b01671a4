"""CLI entrypoint: Typer app definition and command registration"""

import typer

from netral.cli.commands import extensions_cmd, new_cmd, parse_cmd, render_cmd, show_cmd, themes_cmd


app = typer.Typer(name="netral", no_args_is_help=True, help="Netral element syntax: Block sites, Deck slides, Doc documents")

app.command(name="parse")(parse_cmd)
app.command(name="show")(show_cmd)
app.command(name="render")(render_cmd)
app.command(name="new")(new_cmd)
app.command(name="themes")(themes_cmd)
app.command(name="extensions")(extensions_cmd)
