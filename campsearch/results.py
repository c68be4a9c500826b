from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ResultModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ResultUnit(ResultModel):
    name: str
    url: Optional[str] = None


class CampgroundResult(ResultModel):
    campground_name: str = Field(..., alias="campgroundName")
    # keyed by ISO start date only, the end of each range is not part of the schema
    results_by_start_date: dict[str, list[ResultUnit]] = Field(
        default_factory=dict, alias="results"
    )


class CampgroundError(ResultModel):
    is_error: Literal[True] = Field(True, alias="isError")
    campground_id: str = Field(..., alias="campgroundId")
    message: str


class SearchArgs(ResultModel):
    api: str
    campgrounds: list[str]
    start_day_of_week: int = Field(..., alias="startDayOfWeek")
    length_of_stay: int = Field(..., alias="lengthOfStay")
    months_to_check: int = Field(..., alias="monthsToCheck")


class ValidSearchResult(ResultModel):
    is_error: Literal[False] = Field(False, alias="isError")
    args: SearchArgs
    start_day: str = Field(..., alias="startDay")
    results: list[Union[CampgroundResult, CampgroundError]]


class ErrorSearchResult(ResultModel):
    is_error: Literal[True] = Field(True, alias="isError")
    message: str
