"""
Stats Routes: 통계 대시보드 데이터.

- GET /api/stats/regions → 지역별 관광지 수
- GET /api/stats/types → 타입별 관광지 수 + 비율
- GET /api/stats/summary → 총계 + Top 3
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.app.providers.tour_api import TourApiClient
from src.app.routes.tour import get_tour_client, upstream_status
from src.app.services.stats import StatsService
from src.domain.errors import TourApiError

logger = logging.getLogger(__name__)

api_router = APIRouter()  # API endpoints


def get_stats_service(
    client: TourApiClient = Depends(get_tour_client),
) -> StatsService:
    return StatsService(client)


def _error_response(error: TourApiError) -> JSONResponse:
    logger.error(f"Stats error: {error.to_dict()}")
    return JSONResponse(
        status_code=upstream_status(error),
        content={"success": False, "error": error.message or str(error)},
    )


@api_router.get("/regions")
async def region_stats(
    service: StatsService = Depends(get_stats_service),
) -> Any:
    """지역별 통계."""
    try:
        stats = await service.get_region_stats()
    except TourApiError as e:
        return _error_response(e)
    return {"success": True, "data": [s.to_dict() for s in stats]}


@api_router.get("/types")
async def type_stats(
    service: StatsService = Depends(get_stats_service),
) -> Any:
    """타입별 통계."""
    try:
        stats = await service.get_type_stats()
    except TourApiError as e:
        return _error_response(e)
    return {"success": True, "data": [s.to_dict() for s in stats]}


@api_router.get("/summary")
async def stats_summary(
    service: StatsService = Depends(get_stats_service),
) -> Any:
    """통계 요약."""
    try:
        summary = await service.get_stats_summary()
    except TourApiError as e:
        return _error_response(e)
    return {"success": True, "data": summary.to_dict()}
