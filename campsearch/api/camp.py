import datetime as dt
import enum

from pydantic import BaseModel, ConfigDict, Field


class CampsiteAvailabilityStatus(str, enum.Enum):
    available = "Available"
    lottery = "Lottery"
    not_available = "Not Available"
    not_reservable = "Not Reservable"
    not_reservable_management = "Not Reservable Management"
    not_yet_released = "NYR"
    open = "Open"
    reserved = "Reserved"


class RGApiCampground(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(..., alias="facility_id")
    name: str = Field(..., alias="facility_name")

    def __repr__(self) -> str:
        return f"{self.__repr_name__()}(id={self.id}, name={self.name})"

    def __str__(self) -> str:
        return self.__repr__()


class RgApiCampsiteAvailability(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    availabilities: dict[dt.datetime, str] = Field(default_factory=dict)
    id: str = Field(..., alias="campsite_id")
    site: str

    def __repr__(self) -> str:
        return f"{self.__repr_name__()}(id={self.id}, site={self.site})"

    def __str__(self) -> str:
        return self.__repr__()


class RGApiCampgroundAvailability(BaseModel):
    model_config = ConfigDict(extra="ignore")

    campsites: dict[str, RgApiCampsiteAvailability] = Field(default_factory=dict)
