"""Decode command."""

from typing import Any

import typer
from rich.table import Table
from rich.text import Text

from uxid.cli.utils import console, exit_with_error
from uxid.exceptions import UXIDError
from uxid.models import UXID
from uxid.service import get_uxid_service


def _iso_time(record: UXID) -> str | None:
    # Timestamps past year 9999 have no datetime representation
    try:
        value = record.datetime
    except OverflowError:
        return None
    return value.isoformat() if value else None


def _decoded_fields(record: UXID) -> dict[str, Any]:
    fields = record.model_dump(mode="json", exclude={"rand"})
    fields["rand"] = str(record.rand)
    fields["datetime"] = _iso_time(record)
    return fields


def decode(
    value: str = typer.Argument(..., help="UXID string to decode"),
    as_json: bool = typer.Option(False, "--json", help="Print the decoded fields as JSON"),
):
    """Decode a UXID and show its parts.

    The random suffix is shown as encoded; its bytes and size cannot be
    recovered from the string.

    Examples:
        uxid decode usr_01HF3NZ4Q8K2X7M5TP9R0WBVE6
        uxid decode 01HF3NZ4Q8K2X7M5TP9R0WBVE6 --json
    """
    try:
        record = get_uxid_service().decode(value)
    except UXIDError as e:
        exit_with_error(e)

    fields = _decoded_fields(record)
    if as_json:
        console.print_json(data=fields)
        return

    table = Table(title="UXID", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name in ("string", "prefix", "encoded", "time_encoded", "rand_encoded", "time", "datetime", "rand", "rand_size", "size"):
        field_value = fields[name]
        table.add_row(name, Text("none", style="dim") if field_value is None else Text(str(field_value)))
    console.print(table)
