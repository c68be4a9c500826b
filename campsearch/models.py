import asyncio
import datetime as dt
import enum
import logging
from typing import Any, Optional, Protocol, Sequence

from .api.camp import (
    CampsiteAvailabilityStatus,
    RGApiCampground,
    RGApiCampgroundAvailability,
    RgApiCampsiteAvailability,
)
from .api.client import RecreationGovClient, ReserveCaliforniaClient
from .api.reserve_ca import RCApiFacility, RCApiUnit
from .core import IntOrStr, RECREATION_GOV_URL, month_starts
from .matching import DayAvailability

logger = logging.getLogger(__name__)


class ApiChoice(str, enum.Enum):
    recreation_gov = "recreation_gov"
    reserve_ca = "reserve_ca"

    @classmethod
    def from_query(cls, value: Optional[str]) -> "ApiChoice":
        """Anything that isn't ReserveCalifornia searches recreation.gov."""
        if value == cls.reserve_ca.value:
            return cls.reserve_ca
        return cls.recreation_gov

    @property
    def has_permalinks(self) -> bool:
        # ReserveCalifornia builds its booking pages per session
        return self is not ApiChoice.reserve_ca


class Campground(Protocol):
    name: str


class Campsite(Protocol):
    name: str

    @property
    def url(self) -> Optional[str]: ...

    def get_available_dates(self) -> list[DayAvailability]: ...


class ReservationApi(Protocol):

    async def get_campground(
        self, campground_id: IntOrStr, months_to_check: int = 1
    ) -> Optional[Campground]: ...

    async def get_campsites(
        self,
        campground_id: IntOrStr,
        months_to_check: int,
        campground: Optional[Campground] = None,
    ) -> Sequence[Campsite]: ...


class RecreationGovCampground:

    api_campground: RGApiCampground

    def __init__(self, api_campground: RGApiCampground) -> None:
        self.api_campground = api_campground

    def __getattr__(self, attr: str) -> Any:
        if attr not in type(self.api_campground).model_fields:
            raise AttributeError(attr)
        return getattr(self.api_campground, attr)


class RecreationGovCampsite:

    api_availability: RgApiCampsiteAvailability

    def __init__(self, api_availability: RgApiCampsiteAvailability) -> None:
        self.api_availability = api_availability

    def __getattr__(self, attr: str) -> Any:
        if attr not in type(self.api_availability).model_fields:
            raise AttributeError(attr)
        return getattr(self.api_availability, attr)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id}, name={self.name})"

    @property
    def name(self) -> str:
        return self.api_availability.site

    @property
    def url(self) -> str:
        return f"{RECREATION_GOV_URL}/camping/campsites/{self.id}"

    def get_available_dates(self) -> list[DayAvailability]:
        return [
            DayAvailability(
                date.date(), status == CampsiteAvailabilityStatus.available
            )
            for date, status in self.api_availability.availabilities.items()
        ]


class RecreationGovApi:
    """recreation.gov, one availability request per calendar month."""

    async def get_campground(
        self, campground_id: IntOrStr, months_to_check: int = 1
    ) -> Optional[RecreationGovCampground]:
        client = RecreationGovClient()
        api_campground = await asyncio.to_thread(client.find_campground, campground_id)
        if api_campground is None:
            return None
        return RecreationGovCampground(api_campground)

    @staticmethod
    def _fetch_month(
        campground_id: IntOrStr, month: dt.date
    ) -> RGApiCampgroundAvailability:
        client = RecreationGovClient()
        return client.get_campground_availability(campground_id, month)

    @staticmethod
    def _merge_months(
        availability_months: Sequence[RGApiCampgroundAvailability],
    ) -> list[RgApiCampsiteAvailability]:
        campsites: dict[str, RgApiCampsiteAvailability] = {}

        for api_month in availability_months:
            for site_id, site_avail in api_month.campsites.items():
                if site_id in campsites:
                    campsites[site_id].availabilities.update(site_avail.availabilities)
                else:
                    campsites[site_id] = site_avail.model_copy(deep=True)

        return list(campsites.values())

    async def get_campsites(
        self,
        campground_id: IntOrStr,
        months_to_check: int,
        campground: Optional[RecreationGovCampground] = None,
        start_date: Optional[dt.date] = None,
    ) -> list[RecreationGovCampsite]:
        months = month_starts(start_date or dt.date.today(), months_to_check)
        logger.debug("fetching %d month(s) for campground %s", len(months), campground_id)

        availability_months = await asyncio.gather(*(
            asyncio.to_thread(self._fetch_month, campground_id, month)
            for month in months
        ))

        return [
            RecreationGovCampsite(site_avail)
            for site_avail in self._merge_months(availability_months)
        ]


class ReserveCaliforniaCampground:

    api_facility: RCApiFacility

    def __init__(self, api_facility: RCApiFacility) -> None:
        self.api_facility = api_facility

    @property
    def name(self) -> str:
        return self.api_facility.name or ""

    @property
    def campsites(self) -> list["ReserveCaliforniaCampsite"]:
        units = self.api_facility.units or {}
        return [ReserveCaliforniaCampsite(unit) for unit in units.values()]


class ReserveCaliforniaCampsite:

    api_unit: RCApiUnit

    def __init__(self, api_unit: RCApiUnit) -> None:
        self.api_unit = api_unit

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id}, name={self.name})"

    @property
    def id(self) -> int:
        return self.api_unit.id

    @property
    def name(self) -> str:
        return self.api_unit.name

    @property
    def url(self) -> None:
        return None

    def get_available_dates(self) -> list[DayAvailability]:
        return [
            DayAvailability(api_slice.date.date(), api_slice.is_available)
            for api_slice in self.api_unit.slices.values()
        ]


class ReserveCaliforniaApi:
    """ReserveCalifornia, the whole window in one grid request."""

    async def get_campground(
        self,
        campground_id: IntOrStr,
        months_to_check: int = 1,
        start_date: Optional[dt.date] = None,
    ) -> Optional[ReserveCaliforniaCampground]:
        """The facility with its units' availability for `months_to_check` months."""
        client = ReserveCaliforniaClient()
        grid = await asyncio.to_thread(
            client.get_grid,
            campground_id,
            start_date or dt.date.today(),
            months_to_check,
        )
        if grid.facility is None or not grid.facility.name:
            return None
        return ReserveCaliforniaCampground(grid.facility)

    async def get_campsites(
        self,
        campground_id: IntOrStr,
        months_to_check: int,
        campground: Optional[ReserveCaliforniaCampground] = None,
        start_date: Optional[dt.date] = None,
    ) -> list[ReserveCaliforniaCampsite]:
        # a campground from get_campground already holds the grid
        if campground is None:
            campground = await self.get_campground(
                campground_id, months_to_check, start_date=start_date
            )
        if campground is None:
            return []
        return campground.campsites


def pick_api(choice: ApiChoice) -> ReservationApi:
    if choice is ApiChoice.reserve_ca:
        return ReserveCaliforniaApi()
    return RecreationGovApi()
