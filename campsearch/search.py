import asyncio
import logging
from typing import Optional, Sequence, Union

from .core import IntOrStr
from .matching import (
    CampsiteMatch,
    Itinerary,
    consolidate_itineraries,
    match_available_date_ranges,
)
from .models import ApiChoice, ReservationApi, pick_api
from .results import CampgroundError, CampgroundResult, ResultUnit

logger = logging.getLogger(__name__)


class CampgroundNotFoundError(LookupError):

    def __init__(self, campground_id: IntOrStr) -> None:
        super().__init__(f"No campground with id {campground_id}")
        self.campground_id = campground_id


def shape_results(
    provider: ApiChoice, itineraries: Sequence[Itinerary]
) -> dict[str, list[ResultUnit]]:
    """
    Key itineraries by their ISO start date.

    Two itineraries starting on the same day but ending on different days
    share a key; the one later in `itineraries` replaces the earlier one.
    """
    results: dict[str, list[ResultUnit]] = {}

    for itinerary in itineraries:
        units = [
            ResultUnit(
                name=site.name,
                url=site.url if provider.has_permalinks else None,
            )
            for site in itinerary.campsites
        ]
        results[itinerary.range.start.isoformat()] = units

    return results


async def search(
    provider: ApiChoice,
    campground_id: IntOrStr,
    start_weekday: int,
    length_of_stay: int,
    months_to_check: int,
    api: Optional[ReservationApi] = None,
) -> CampgroundResult:
    """
    Find the campsites of one campground bookable for `length_of_stay` nights
    from a `start_weekday` (ISO, Monday is 1) within `months_to_check` months.

    Raises CampgroundNotFoundError when the provider doesn't know the id.
    Provider failures propagate as raised.
    """
    api = api or pick_api(provider)

    campground = await api.get_campground(campground_id, months_to_check)
    if campground is None:
        logger.warning("campground %s not found on %s", campground_id, provider.value)
        raise CampgroundNotFoundError(campground_id)

    campsites = await api.get_campsites(
        campground_id, months_to_check, campground=campground
    )

    matches = []
    for site in campsites:
        ranges = match_available_date_ranges(
            site.get_available_dates(), start_weekday, length_of_stay
        )
        if len(ranges) > 0:
            matches.append(CampsiteMatch(site, ranges))

    logger.debug(
        "%s: %d of %d campsites match", campground.name, len(matches), len(campsites)
    )

    itineraries = consolidate_itineraries(matches)

    return CampgroundResult(
        campground_name=campground.name,
        results_by_start_date=shape_results(provider, itineraries),
    )


async def search_many(
    provider: ApiChoice,
    campground_ids: Sequence[IntOrStr],
    start_weekday: int,
    length_of_stay: int,
    months_to_check: int,
    api: Optional[ReservationApi] = None,
) -> list[Union[CampgroundResult, CampgroundError]]:
    """
    Search several campgrounds concurrently.

    Results come back in the order of `campground_ids`. A campground that
    fails is reported as a CampgroundError in its slot, the others are kept.
    """
    api = api or pick_api(provider)

    outcomes = await asyncio.gather(
        *(
            search(
                provider,
                campground_id,
                start_weekday,
                length_of_stay,
                months_to_check,
                api=api,
            )
            for campground_id in campground_ids
        ),
        return_exceptions=True,
    )

    results: list[Union[CampgroundResult, CampgroundError]] = []
    for campground_id, outcome in zip(campground_ids, outcomes):
        if isinstance(outcome, Exception):
            logger.warning("search for campground %s failed: %s", campground_id, outcome)
            results.append(
                CampgroundError(campground_id=str(campground_id), message=str(outcome))
            )
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            results.append(outcome)

    return results
