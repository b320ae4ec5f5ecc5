from __future__ import annotations

import logging
from typing import Any, Callable

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_forecast_fetcher

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/bergen-temp")
def bergen_temperature(
    fetch: Callable[[], Any] = Depends(get_forecast_fetcher),
) -> Any:
    try:
        return fetch()
    except Exception as exc:
        logger.exception("Error fetching weather data")
        raise HTTPException(status_code=500, detail="Failed to fetch") from exc
