"""Main CLI application."""

import typer

from uxid.cli.commands import decode, generate

app = typer.Typer(
    name="uxid",
    help="UXID CLI - generate and inspect sortable, prefixed identifiers",
    no_args_is_help=True,
)

app.command("generate")(generate.generate)
app.command("decode")(decode.decode)
