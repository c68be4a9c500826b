import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RCApiSlice(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    date: dt.datetime = Field(..., alias="Date")
    is_free: bool = Field(False, alias="IsFree")
    is_blocked: bool = Field(False, alias="IsBlocked")

    @property
    def is_available(self) -> bool:
        return self.is_free and not self.is_blocked


class RCApiUnit(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int = Field(..., alias="UnitId")
    name: str = Field(..., alias="Name")
    slices: dict[str, RCApiSlice] = Field(default_factory=dict, alias="Slices")

    def __repr__(self) -> str:
        return f"{self.__repr_name__()}(id={self.id}, name={self.name})"


class RCApiFacility(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int = Field(0, alias="FacilityId")
    name: Optional[str] = Field(None, alias="Name")
    units: Optional[dict[str, RCApiUnit]] = Field(None, alias="Units")

    def __repr__(self) -> str:
        return f"{self.__repr_name__()}(id={self.id}, name={self.name})"


class RCApiGrid(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    facility: Optional[RCApiFacility] = Field(None, alias="Facility")
    message: Optional[str] = Field(None, alias="Message")
