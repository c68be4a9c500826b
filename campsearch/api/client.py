import datetime as dt
import logging
from typing import Optional

from apiclient import (
    APIClient,
    endpoint,
    JsonResponseHandler,
    JsonRequestFormatter,
)
from apiclient.exceptions import ClientError
from dateutil.relativedelta import relativedelta
from fake_useragent import UserAgent

from ..core import IntOrStr, RECREATION_GOV_URL, RESERVE_CA_URL, format_date
from .camp import RGApiCampground, RGApiCampgroundAvailability
from .reserve_ca import RCApiGrid

logger = logging.getLogger(__name__)


@endpoint(base_url=f"{RECREATION_GOV_URL}/api")
class RecreationGovEndpoint:
    campground = "camps/campgrounds/{id}"
    campground_availability = "camps/availability/campground/{id}/month"


@endpoint(base_url=RESERVE_CA_URL)
class ReserveCaliforniaEndpoint:
    grid = "search/grid"


class BaseClient(APIClient):

    def __init__(self):
        super().__init__(
            response_handler=JsonResponseHandler,
            request_formatter=JsonRequestFormatter,
        )

    def get_default_headers(self) -> dict[str, str]:
        headers: dict[str, str] = super().get_default_headers()
        headers["User-Agent"] = UserAgent().random
        return headers


class RecreationGovClient(BaseClient):

    def get_campground(self, campground_id: IntOrStr) -> RGApiCampground:
        url = RecreationGovEndpoint.campground.format(id=campground_id)
        headers = self.get_default_headers()
        logger.debug("GET %s", url)
        resp = self.get(url, headers=headers)
        return RGApiCampground.model_validate(resp["campground"])

    def find_campground(self, campground_id: IntOrStr) -> Optional[RGApiCampground]:
        """Like `get_campground`, but an unknown id gives None."""
        try:
            return self.get_campground(campground_id)
        except ClientError as err:
            if err.status_code == 404:
                return None
            raise

    def get_campground_availability(
        self, campground_id: IntOrStr, start_date: dt.date
    ) -> RGApiCampgroundAvailability:
        url = RecreationGovEndpoint.campground_availability.format(id=campground_id)
        headers = self.get_default_headers()
        start_date = start_date.replace(day=1)
        params = {
            "start_date": format_date(start_date)
        }
        logger.debug("GET %s %s", url, params)
        resp = self.get(url, headers=headers, params=params)
        return RGApiCampgroundAvailability.model_validate(resp)


class ReserveCaliforniaClient(BaseClient):

    @staticmethod
    def _grid_request(
        facility_id: IntOrStr, start_date: dt.date, end_date: dt.date
    ) -> dict:
        return {
            "FacilityId": str(facility_id),
            "StartDate": start_date.isoformat(),
            "EndDate": end_date.isoformat(),
            "IsADA": False,
            "InSeasonOnly": True,
            "MinVehicleLength": 0,
            "RestrictADA": False,
            "SleepingUnitId": 0,
            "UnitCategoryId": 0,
            "UnitSort": "orderby",
            "UnitTypesGroupIds": [],
            "WebOnly": True,
        }

    def get_grid(
        self, facility_id: IntOrStr, start_date: dt.date, months: int = 1
    ) -> RCApiGrid:
        """Unit availability from the first of `start_date`'s month for `months` months."""
        url = ReserveCaliforniaEndpoint.grid
        headers = self.get_default_headers()
        start_date = start_date.replace(day=1)
        end_date = start_date + relativedelta(months=max(months, 1)) - dt.timedelta(days=1)
        data = self._grid_request(facility_id, start_date, end_date)
        logger.debug("POST %s %s", url, data)
        resp = self.post(url, data, headers=headers)
        return RCApiGrid.model_validate(resp or {})
