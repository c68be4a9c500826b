"""
Date range matching and itinerary consolidation.

A campsite's calendar is scanned once, left to right, by a greedy two-state
machine. Ranges found across the campsites of a campground are then grouped
so that every distinct range is listed once with all the sites offering it.
"""

import datetime as dt
import itertools
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any, Iterable, Optional, Union


@dataclass(frozen=True)
class DayAvailability:
    date: dt.date
    is_available: bool


@dataclass(frozen=True, order=True)
class DateRange:
    start: dt.date
    end: dt.date

    @property
    def nights(self) -> int:
        return (self.end - self.start).days

    def __str__(self) -> str:
        return f"{self.start.isoformat()} to {self.end.isoformat()}"


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Accumulating:
    start: dt.date
    length: int


MatchState = Union[Idle, Accumulating]

IDLE = Idle()


@dataclass
class CampsiteMatch:
    campsite: Any
    matching_ranges: list[DateRange]


@dataclass
class Itinerary:
    range: DateRange
    campsites: list[Any] = field(default_factory=list)

    def add(self, campsite: Any) -> None:
        if not any(site is campsite for site in self.campsites):
            self.campsites.append(campsite)


def _calendar(availabilities: Iterable[DayAvailability]) -> list[DayAvailability]:
    """
    Sort a campsite's days and make them one entry per calendar day.

    Several entries for the same date merge into a day that is available only
    if all of them are. Dates missing between the first and last reported
    day become unavailable days.
    """
    by_date = sorted(availabilities, key=attrgetter("date"))
    days: list[DayAvailability] = []

    for date, group in itertools.groupby(by_date, key=attrgetter("date")):
        is_available = all(day.is_available for day in group)

        if days:
            missing = days[-1].date + dt.timedelta(days=1)
            while missing < date:
                days.append(DayAvailability(missing, False))
                missing += dt.timedelta(days=1)

        days.append(DayAvailability(date, is_available))

    return days


def _advance(
    state: MatchState,
    day: DayAvailability,
    start_weekday: int,
    length_of_stay: int,
) -> tuple[MatchState, Optional[DateRange]]:
    if isinstance(state, Accumulating):
        if state.length == length_of_stay:
            # the day after the last night closes the range, booked or not
            return IDLE, DateRange(state.start, day.date)
        if day.is_available:
            return Accumulating(state.start, state.length + 1), None
        # a failed attempt consumes the day, it is not a new start candidate
        return IDLE, None

    if day.is_available and day.date.isoweekday() == start_weekday:
        return Accumulating(day.date, 1), None

    return IDLE, None


def match_available_date_ranges(
    availabilities: Iterable[DayAvailability],
    start_weekday: int,
    length_of_stay: int,
) -> list[DateRange]:
    """
    Find the stays of `length_of_stay` nights that begin on `start_weekday`.

    `start_weekday` is an ISO weekday, Monday is 1 and Sunday is 7. The scan
    is greedy: once a candidate starts, the days it covers are never
    revisited, so ranges never overlap. A candidate still open when the
    calendar runs out is dropped. Bad parameters give no ranges.
    """
    if length_of_stay <= 0 or not 1 <= start_weekday <= 7:
        return []

    result: list[DateRange] = []
    state: MatchState = IDLE

    for day in _calendar(availabilities):
        state, found = _advance(state, day, start_weekday, length_of_stay)
        if found is not None:
            result.append(found)

    return result


def range_key(date_range: DateRange) -> tuple[int, int]:
    return (date_range.start.toordinal(), date_range.end.toordinal())


def consolidate_itineraries(matches: Iterable[CampsiteMatch]) -> list[Itinerary]:
    """
    Group campsites that share an identical range into one itinerary.

    Campsites keep the order in which they were first seen. Itineraries are
    ordered by start date; itineraries starting the same day keep the order
    their range was first seen in.
    """
    itineraries: dict[tuple[int, int], Itinerary] = {}

    for match in matches:
        for date_range in match.matching_ranges:
            key = range_key(date_range)
            if key not in itineraries:
                itineraries[key] = Itinerary(date_range)
            itineraries[key].add(match.campsite)

    return sorted(itineraries.values(), key=lambda itin: itin.range.start)
