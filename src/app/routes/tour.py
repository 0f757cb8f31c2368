"""
Tour Routes: 한국관광공사 API 프록시.

- GET /api/tour?endpoint=<name>&... → 7개 upstream 엔드포인트 디스패치
- GET /api/tour/infinite → 무한 스크롤용 다음 페이지 (키워드 있으면 검색, 없으면 지역 목록)

응답에는 edge 캐시용 Cache-Control 힌트만 붙이고, 서버 쪽 캐시는 하지 않음.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.app.config import CacheConfig
from src.app.providers.tour_api import TourApiClient
from src.domain.constants import (
    ALL_ENDPOINTS,
    DEFAULT_INFINITE_ARRANGE,
    DEFAULT_NUM_OF_ROWS,
    DEFAULT_PAGE_NO,
    ENDPOINT_AREA_BASED_LIST,
    ENDPOINT_AREA_CODE,
    ENDPOINT_DETAIL_COMMON,
    ENDPOINT_DETAIL_IMAGE,
    ENDPOINT_DETAIL_INTRO,
    ENDPOINT_DETAIL_PET_TOUR,
    ENDPOINT_SEARCH_KEYWORD,
)
from src.domain.errors import InvalidArgumentError, NotFoundError, TourApiError
from src.domain.schemas import AreaBasedListParams, SearchKeywordParams

logger = logging.getLogger(__name__)

api_router = APIRouter()  # API endpoints


def get_tour_client(request: Request) -> TourApiClient:
    """Request에서 공유 TourApiClient 가져오기."""
    return request.app.state.tour_client


def get_cache_config(request: Request) -> CacheConfig:
    """Request에서 CacheConfig 가져오기."""
    return request.app.state.cache_config


# =============================================================================
# Helpers
# =============================================================================

def _int_param(value: str | None) -> int | None:
    """숫자 파라미터 (없거나 숫자가 아니면 None)."""
    if value is None:
        return None
    try:
        number = int(value)
    except ValueError:
        return None
    return number if number > 0 else None


def _str_param(query: Any, name: str) -> str | None:
    value = query.get(name)
    return value if value else None


def _list_params(query: Any) -> dict[str, Any]:
    """areaBasedList2 / searchKeyword2 공통 필터."""
    return {
        "area_code": _str_param(query, "areaCode"),
        "sigungu_code": _str_param(query, "sigunguCode"),
        "content_type_id": _str_param(query, "contentTypeId"),
        "cat1": _str_param(query, "cat1"),
        "cat2": _str_param(query, "cat2"),
        "cat3": _str_param(query, "cat3"),
        "num_of_rows": _int_param(query.get("numOfRows")),
        "page_no": _int_param(query.get("pageNo")),
        "arrange": _str_param(query, "arrange"),
        "modified_time": _str_param(query, "modifiedtime"),
    }


def _serialize(result: Any) -> Any:
    """레코드/페이지 결과 → JSON."""
    if result is None:
        return None
    if isinstance(result, list):
        return [item.to_dict() for item in result]
    return result.to_dict()


def _bad_request(message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message, **extra})


def upstream_status(error: TourApiError) -> int:
    """상위 응답 상태가 에러(4xx/5xx)일 때만 그대로, 나머지는 500."""
    status = error.status_code
    if status is not None and status >= 400:
        return status
    return 500


def _error_status(error: TourApiError) -> int:
    if isinstance(error, InvalidArgumentError):
        return 400
    if isinstance(error, NotFoundError):
        return 404
    return upstream_status(error)


# =============================================================================
# API Routes
# =============================================================================

@api_router.get("")
async def tour_proxy(
    request: Request,
    client: TourApiClient = Depends(get_tour_client),
    cache: CacheConfig = Depends(get_cache_config),
) -> JSONResponse:
    """
    upstream 엔드포인트 프록시.

    Example:
        GET /api/tour?endpoint=areaBasedList2&areaCode=1&contentTypeId=12
        GET /api/tour?endpoint=detailCommon2&contentId=125266
    """
    query = request.query_params
    endpoint = query.get("endpoint")

    if not endpoint:
        return _bad_request("endpoint parameter is required")

    content_id = query.get("contentId")

    try:
        if endpoint == ENDPOINT_AREA_CODE:
            result = await client.get_area_codes(_str_param(query, "areaCode"))

        elif endpoint == ENDPOINT_AREA_BASED_LIST:
            result = await client.get_area_based_list(
                AreaBasedListParams(**_list_params(query))
            )

        elif endpoint == ENDPOINT_SEARCH_KEYWORD:
            keyword = query.get("keyword")
            if not keyword:
                return _bad_request(
                    "keyword parameter is required for searchKeyword2"
                )
            result = await client.search_keyword(
                SearchKeywordParams(keyword=keyword, **_list_params(query))
            )

        elif endpoint == ENDPOINT_DETAIL_COMMON:
            if not content_id:
                return _bad_request("contentId parameter is required for detailCommon2")
            result = await client.get_detail_common(content_id)

        elif endpoint == ENDPOINT_DETAIL_INTRO:
            content_type_id = query.get("contentTypeId")
            if not content_id or not content_type_id:
                return _bad_request(
                    "contentId and contentTypeId parameters are required for detailIntro2"
                )
            result = await client.get_detail_intro(content_id, content_type_id)

        elif endpoint == ENDPOINT_DETAIL_IMAGE:
            if not content_id:
                return _bad_request("contentId parameter is required for detailImage2")
            result = await client.get_detail_images(content_id)

        elif endpoint == ENDPOINT_DETAIL_PET_TOUR:
            if not content_id:
                return _bad_request(
                    "contentId parameter is required for detailPetTour2"
                )
            result = await client.get_detail_pet_tour(content_id)

        else:
            return _bad_request(
                f"Unknown endpoint: {endpoint}",
                availableEndpoints=list(ALL_ENDPOINTS),
            )

    except TourApiError as e:
        logger.error(f"Tour API error: {e.to_dict()}")
        return JSONResponse(
            status_code=_error_status(e),
            content={
                "success": False,
                "error": e.message or str(e),
                "apiErrorCode": e.api_error_code,
                "statusCode": e.status_code,
            },
        )

    return JSONResponse(
        content={"success": True, "data": _serialize(result)},
        headers={"Cache-Control": cache.tour},
    )


@api_router.get("/infinite")
async def tour_infinite(
    keyword: str | None = None,
    areaCode: str | None = None,  # noqa: N803
    contentTypeId: str | None = None,  # noqa: N803
    arrange: str | None = None,
    pageNo: str | None = None,  # noqa: N803
    numOfRows: str | None = None,  # noqa: N803
    client: TourApiClient = Depends(get_tour_client),
    cache: CacheConfig = Depends(get_cache_config),
) -> JSONResponse:
    """
    무한 스크롤 다음 페이지.

    기본값: arrange=C (수정일순), pageNo=1, numOfRows=20
    """
    filters: dict[str, Any] = {
        "area_code": areaCode or None,
        "content_type_id": contentTypeId or None,
        "arrange": arrange or DEFAULT_INFINITE_ARRANGE,
        "page_no": _int_param(pageNo) or DEFAULT_PAGE_NO,
        "num_of_rows": _int_param(numOfRows) or DEFAULT_NUM_OF_ROWS,
    }

    try:
        if keyword and keyword.strip():
            result = await client.search_keyword(
                SearchKeywordParams(keyword=keyword.strip(), **filters)
            )
        else:
            result = await client.get_area_based_list(AreaBasedListParams(**filters))
    except TourApiError as e:
        logger.error(f"Failed to fetch tours: {e.to_dict()}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "관광지 목록을 불러오는 중 오류가 발생했습니다.",
                "details": str(e),
            },
        )

    return JSONResponse(
        content=result.to_dict(),
        headers={"Cache-Control": cache.infinite},
    )
