"""
camping.py
  - search
  - serve
"""

import asyncio
import json
import logging

import typer
import uvicorn

from rich import box
from rich.console import Console
from rich.table import Table

from .core import DEFAULT_HOST, DEFAULT_PORT, day_to_weekday, setup_logging
from .models import ApiChoice
from .results import CampgroundResult
from .search import search

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def result_table(result: CampgroundResult) -> Table:

    availtab = Table(title=result.campground_name, box=box.SIMPLE_HEAD)
    availtab.add_column("Start date")
    availtab.add_column("Campsite name")
    availtab.add_column("URL")

    for start_date, units in result.results_by_start_date.items():
        for unit in units:
            url = f"[link={unit.url}]{unit.url}[/link]" if unit.url else ""
            availtab.add_row(start_date, unit.name, url)

    return availtab


app = typer.Typer(help="weekend campsite availability finder")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    setup_logging(verbose)


@app.command("search", help="find stays starting on a weekday at a campground")
def search_campground(
    campground: str,
    api: ApiChoice = typer.Option(ApiChoice.recreation_gov, "--api", "-a", help="Reservation provider"),
    day: str = typer.Option("fri", "--day", "-d", help="Start day, mon..sun or 1..7"),
    nights: int = typer.Option(2, "--nights", "-n", help="Nights to stay"),
    months: int = typer.Option(3, "--months", "-m", help="Months to check"),
    table: bool = typer.Option(False, "--table", "-t", help="Print a table instead of JSON"),
):
    weekday = day_to_weekday(day)

    try:
        result = asyncio.run(search(api, campground, weekday, nights, months))
    except Exception as err:
        logger.debug("search failed", exc_info=True)
        err_console.print(str(err), markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)

    if table:
        console.print(result_table(result))
    else:
        typer.echo(json.dumps(result.to_json()))


@app.command("serve", help="serve the search endpoint over HTTP")
def serve(
    host: str = typer.Option(DEFAULT_HOST, "--host", help="Interface to bind"),
    port: int = typer.Option(DEFAULT_PORT, "--port", "-p", help="Port to listen on"),
):
    console.print(f"Server ready on port {port}")
    uvicorn.run("campsearch.server:app", host=host, port=port)
