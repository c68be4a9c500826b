import datetime as dt
import logging
from typing import Iterable, Union

from dateutil import rrule
from rich.console import Console
from rich.logging import RichHandler

IntOrStr = Union[int, str]

RECREATION_GOV_URL = "https://www.recreation.gov"
RESERVE_CA_URL = "https://calirdr.usedirect.com/rdr/rdr"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 19090

DAY_ABBREVIATIONS = ["mon", "tue", "wed", "thu", "fri", "sat", "sun"]
DAY_NAMES = [
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
]

LOG_FORMAT = "%(message)s"


def format_date(date_object: dt.date, with_ms: bool = True) -> str:
    ms = ".000" if with_ms else ""
    date_formatted = dt.datetime.strftime(
        dt.datetime(date_object.year, date_object.month, date_object.day),
        f"%Y-%m-%dT00:00:00{ms}Z",
    )
    return date_formatted


def month_starts(start_date: dt.date, count: int) -> list[dt.date]:
    """First day of each of the `count` months beginning with `start_date`'s."""
    if count <= 0:
        return []
    start_month = dt.datetime(start_date.year, start_date.month, 1)
    months: Iterable[dt.datetime] = rrule.rrule(
        freq=rrule.MONTHLY, dtstart=start_month, count=count
    )
    return [month.date() for month in months]


def day_to_weekday(day: str) -> int:
    """ISO weekday for a day abbreviation or number, 0 when unrecognized."""
    day = day.strip().lower()
    if day.isdigit():
        return int(day) if 1 <= int(day) <= 7 else 0
    if day[:3] not in DAY_ABBREVIATIONS:
        return 0
    return DAY_ABBREVIATIONS.index(day[:3]) + 1


def weekday_to_day(weekday: int) -> str:
    if not 1 <= weekday <= 7:
        raise ValueError(f"weekday must be between 1 and 7, got {weekday}")
    return DAY_NAMES[weekday - 1]


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
