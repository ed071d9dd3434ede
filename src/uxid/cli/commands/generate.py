"""Generate command."""

import typer

from uxid.cli.utils import console, exit_with_error
from uxid.exceptions import UXIDError
from uxid.service import get_uxid_service


def generate(
    prefix: str | None = typer.Option(None, "--prefix", "-p", help="Prefix tag, e.g. 'usr'"),
    size: str | None = typer.Option(None, "--size", "-s", help="Size preset: xsmall/xs, small/s, medium/m, large/l, xlarge/xl"),
    rand_size: int | None = typer.Option(None, "--rand-size", "-r", help="Number of random bytes"),
    time: int | None = typer.Option(None, "--time", "-t", help="Timestamp in milliseconds since the Unix epoch (default: now)"),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of identifiers to generate"),
):
    """Generate one or more UXIDs, one per line.

    Examples:
        uxid generate
        uxid generate --prefix usr --size small
        uxid generate -n 5 --rand-size 8
    """
    service = get_uxid_service()
    for _ in range(count):
        try:
            value = service.generate(prefix=prefix, size=size, rand_size=rand_size, time=time)
        except UXIDError as e:
            exit_with_error(e)
        console.print(value, markup=False, highlight=False, soft_wrap=True)
