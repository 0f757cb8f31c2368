"""
한국관광공사 KorService2 API 클라이언트.

역할:
- 검증된 파라미터 → upstream GET 요청
- 재시도 정책 (최대 3회, 1s → 2s 지수 백오프, jitter 없음)
- envelope/items 정규화 → domain 레코드

에러 정책:
- 빈 식별자/키워드 → InvalidArgumentError (네트워크 호출 없음)
- 서비스 키 없음 → ConfigurationError (재시도 없음)
- 네트워크/HTTP/envelope 실패 → 재시도 후 마지막 에러
"""

import asyncio
import logging
from typing import Any, TypeVar

import httpx

from src.app.config import TourApiConfig
from src.core.envelope import envelope_error, extract_items, extract_pagination
from src.domain.constants import (
    ENDPOINT_AREA_BASED_LIST,
    ENDPOINT_AREA_CODE,
    ENDPOINT_DETAIL_COMMON,
    ENDPOINT_DETAIL_IMAGE,
    ENDPOINT_DETAIL_INTRO,
    ENDPOINT_DETAIL_PET_TOUR,
    ENDPOINT_SEARCH_KEYWORD,
    PET_TOUR_SUPPRESSED_CODE,
    RESPONSE_TYPE,
)
from src.domain.errors import (
    ConfigurationError,
    InvalidArgumentError,
    NotFoundError,
    TransportError,
    UpstreamApplicationError,
    UpstreamHttpError,
)
from src.domain.schemas import (
    AreaBasedListParams,
    AreaCode,
    PaginatedResult,
    PetTourInfo,
    SearchKeywordParams,
    TourDetail,
    TourImage,
    TourIntro,
    TourItem,
    TourRecord,
)
from src.utils.retry import AttemptOutcome, SleepFunc, retry_with_exponential_backoff

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=TourRecord)


def _require(value: str | None, name: str) -> str:
    """trim 후 빈 값이면 InvalidArgumentError."""
    text = (value or "").strip()
    if not text:
        raise InvalidArgumentError(f"{name} is required", argument=name)
    return text


def _mask_query(query: dict[str, str]) -> dict[str, str]:
    """로그용: serviceKey 마스킹."""
    if "serviceKey" not in query:
        return query
    return {**query, "serviceKey": "[MASKED]"}


class TourApiClient:
    """
    KorService2 비동기 클라이언트.

    호출 간 공유 상태 없음 (캐시 없음). 설정은 생성자에서 주입.

    Usage:
        async with TourApiClient(config) as client:
            page = await client.search_keyword(SearchKeywordParams(keyword="경복궁"))
    """

    def __init__(
        self,
        config: TourApiConfig,
        http_client: httpx.AsyncClient | None = None,
        sleep: SleepFunc = asyncio.sleep,
    ):
        """
        Args:
            config: TourApiConfig (서비스 키 포함)
            http_client: 외부 주입 httpx 클라이언트 (None이면 lazy 생성, close 책임 가짐)
            sleep: 백오프 대기 함수 (테스트에서 주입)
        """
        self.config = config
        self._client = http_client
        self._owns_client = http_client is None
        self._sleep = sleep

    async def __aenter__(self) -> "TourApiClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    def _get_client(self) -> httpx.AsyncClient:
        """httpx 클라이언트 (lazy init)."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
        return self._client

    async def aclose(self) -> None:
        """직접 생성한 httpx 클라이언트만 닫음."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    # =========================================================================
    # Request / Retry
    # =========================================================================

    def _common_params(self) -> dict[str, str]:
        """
        모든 요청 공통 파라미터.

        Raises:
            ConfigurationError: 서비스 키 없음
        """
        service_key = (self.config.service_key or "").strip()
        if not service_key:
            raise ConfigurationError(
                "TOUR_API_KEY or NEXT_PUBLIC_TOUR_API_KEY environment variable is not set"
            )
        return {
            "serviceKey": service_key,
            "MobileOS": self.config.mobile_os,
            "MobileApp": self.config.mobile_app,
            "_type": RESPONSE_TYPE,
        }

    async def _attempt(
        self, endpoint: str, url: str, query: dict[str, str]
    ) -> AttemptOutcome[Any]:
        """GET 1회. 예외 대신 AttemptOutcome으로 결과 보고."""
        try:
            response = await self._get_client().get(
                url,
                params=query,
                headers={"Accept": "application/json"},
            )
        except httpx.TransportError as e:
            return AttemptOutcome.failure(
                TransportError(str(e) or type(e).__name__, endpoint=endpoint)
            )

        if not response.is_success:
            return AttemptOutcome.failure(
                UpstreamHttpError(response.status_code, endpoint=endpoint)
            )

        try:
            payload = response.json()
        except ValueError:
            return AttemptOutcome.failure(
                UpstreamHttpError(
                    response.status_code,
                    "Invalid JSON response body",
                    endpoint=endpoint,
                )
            )

        error = envelope_error(payload)
        if error is not None:
            return AttemptOutcome.failure(error)

        return AttemptOutcome.success(payload)

    async def _fetch(self, endpoint: str, params: dict[str, str] | None = None) -> Any:
        """
        재시도 포함 GET → 검증된 envelope.

        Returns:
            resultCode "0000" envelope (dict)
        """
        query = {**self._common_params(), **(params or {})}
        url = f"{self.config.base_url}/{endpoint}"
        logger.debug(f"GET {url} params={_mask_query(query)}")

        return await retry_with_exponential_backoff(
            lambda: self._attempt(endpoint, url, query),
            max_attempts=self.config.max_attempts,
            initial_delay=self.config.initial_delay,
            exponential_base=self.config.exponential_base,
            sleep=self._sleep,
        )

    async def _fetch_records(
        self, endpoint: str, record_type: type[R], params: dict[str, str] | None = None
    ) -> list[R]:
        payload = await self._fetch(endpoint, params)
        return [record_type.from_dict(item) for item in extract_items(payload)]

    async def _fetch_page(
        self, endpoint: str, params: AreaBasedListParams
    ) -> PaginatedResult[TourItem]:
        payload = await self._fetch(endpoint, params.to_query())
        items = [TourItem.from_dict(item) for item in extract_items(payload)]
        total_count, num_of_rows, page_no, total_pages = extract_pagination(
            payload, num_of_rows=params.rows, page_no=params.page
        )
        return PaginatedResult(
            items=items,
            total_count=total_count,
            num_of_rows=num_of_rows,
            page_no=page_no,
            total_pages=total_pages,
        )

    # =========================================================================
    # Operations
    # =========================================================================

    async def get_area_codes(
        self, area_code: str | None = None, num_of_rows: int | None = None
    ) -> list[AreaCode]:
        """
        지역코드 조회 (areaCode2).

        Args:
            area_code: 상위 지역코드 (없으면 시/도 목록)
            num_of_rows: 최대 건수 (없으면 upstream 기본값)
        """
        params: dict[str, str] = {}
        if area_code and area_code.strip():
            params["areaCode"] = area_code.strip()
        if num_of_rows:
            params["numOfRows"] = str(num_of_rows)
        return await self._fetch_records(ENDPOINT_AREA_CODE, AreaCode, params)

    async def get_area_based_list(
        self, params: AreaBasedListParams | None = None
    ) -> PaginatedResult[TourItem]:
        """지역 기반 목록 조회 (areaBasedList2)."""
        return await self._fetch_page(
            ENDPOINT_AREA_BASED_LIST, params or AreaBasedListParams()
        )

    async def search_keyword(
        self, params: SearchKeywordParams
    ) -> PaginatedResult[TourItem]:
        """
        키워드 검색 (searchKeyword2).

        Raises:
            InvalidArgumentError: keyword가 비어 있음
        """
        _require(params.keyword, "keyword")
        return await self._fetch_page(ENDPOINT_SEARCH_KEYWORD, params)

    async def get_detail_common(self, content_id: str) -> TourDetail:
        """
        공통 정보 조회 (detailCommon2).

        Raises:
            NotFoundError: 결과 0건
        """
        content_id = _require(content_id, "contentId")
        items = await self._fetch_records(
            ENDPOINT_DETAIL_COMMON, TourDetail, {"contentId": content_id}
        )
        if not items:
            raise NotFoundError(
                f"Tour detail not found for contentId: {content_id}",
                content_id=content_id,
            )
        return items[0]

    async def get_detail_intro(self, content_id: str, content_type_id: str) -> TourIntro:
        """
        소개(운영) 정보 조회 (detailIntro2).

        Raises:
            NotFoundError: 결과 0건
        """
        content_id = _require(content_id, "contentId")
        content_type_id = _require(content_type_id, "contentTypeId")
        items = await self._fetch_records(
            ENDPOINT_DETAIL_INTRO,
            TourIntro,
            {"contentId": content_id, "contentTypeId": content_type_id},
        )
        if not items:
            raise NotFoundError(
                f"Tour intro not found for contentId: {content_id}, "
                f"contentTypeId: {content_type_id}",
                content_id=content_id,
                content_type_id=content_type_id,
            )
        return items[0]

    async def get_detail_images(self, content_id: str) -> list[TourImage]:
        """이미지 목록 조회 (detailImage2). 0건이면 빈 리스트."""
        content_id = _require(content_id, "contentId")
        return await self._fetch_records(
            ENDPOINT_DETAIL_IMAGE, TourImage, {"contentId": content_id}
        )

    async def get_detail_pet_tour(self, content_id: str) -> PetTourInfo | None:
        """
        반려동물 정보 조회 (detailPetTour2).

        반려동물 정보는 선택 데이터:
        - 0건 → None
        - resultCode SERVICE_ERROR → None
        - 그 외 실패는 그대로 전파
        """
        content_id = _require(content_id, "contentId")
        try:
            items = await self._fetch_records(
                ENDPOINT_DETAIL_PET_TOUR, PetTourInfo, {"contentId": content_id}
            )
        except UpstreamApplicationError as e:
            if e.api_error_code == PET_TOUR_SUPPRESSED_CODE:
                logger.info(
                    f"Pet tour info unavailable for contentId {content_id}: {e}"
                )
                return None
            raise

        if not items:
            return None
        return items[0]
