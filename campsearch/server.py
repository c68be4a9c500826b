import logging
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from .core import weekday_to_day
from .models import ApiChoice
from .results import ErrorSearchResult, SearchArgs, ValidSearchResult
from .search import search_many

logger = logging.getLogger(__name__)

app = FastAPI(title="campsearch")


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error for %s", request.url)
    return JSONResponse(
        status_code=500, content=ErrorSearchResult(message=str(exc)).to_json()
    )


@app.get("/search")
async def search_campgrounds(
    campground: list[str] = Query(...),
    weekday: int = Query(..., ge=1, le=7),
    nights: int = Query(..., ge=1),
    months: int = Query(..., ge=1),
    api: Optional[str] = Query(None),
) -> JSONResponse:
    provider = ApiChoice.from_query(api)

    results = await search_many(provider, campground, weekday, nights, months)

    payload = ValidSearchResult(
        args=SearchArgs(
            api=api or provider.value,
            campgrounds=campground,
            start_day_of_week=weekday,
            length_of_stay=nights,
            months_to_check=months,
        ),
        start_day=weekday_to_day(weekday),
        results=results,
    )
    return JSONResponse(content=payload.to_json())
