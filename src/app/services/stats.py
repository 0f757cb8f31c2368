"""
Stats Service: 지역별/타입별 관광지 분포 통계.

- 지역/타입마다 numOfRows=1 목록 조회 → totalCount만 사용
- 호출은 asyncio.gather로 병렬 (호출 간 순서 보장 없음 → 결과는 count 기준 정렬)
- 개별 지역/타입 실패는 0건으로 처리하고 계속 진행
"""

import asyncio
import logging
from datetime import UTC, datetime

from src.app.providers.tour_api import TourApiClient
from src.domain.constants import CONTENT_TYPE_NAMES
from src.domain.errors import TourApiError
from src.domain.schemas import AreaBasedListParams, RegionStats, StatsSummary, TypeStats

logger = logging.getLogger(__name__)

# 시/도 목록 조회 시 요청 건수 (17개 시/도 + 여유)
AREA_CODE_ROWS = 50
TOP_N = 3


class StatsService:
    """
    통계 서비스.

    Usage:
        service = StatsService(client)
        summary = await service.get_stats_summary()
    """

    def __init__(self, client: TourApiClient):
        self.client = client

    async def _count(self, params: AreaBasedListParams, label: str) -> int:
        """목록 totalCount 조회. 실패 시 0."""
        try:
            page = await self.client.get_area_based_list(params)
        except TourApiError as e:
            logger.warning(f"Stats lookup failed for {label}: {e}")
            return 0
        return page.total_count

    async def get_region_stats(self) -> list[RegionStats]:
        """
        지역별 관광지 수 (내림차순).

        Raises:
            TourApiError: 지역 목록 조회 자체가 실패한 경우
        """
        areas = await self.client.get_area_codes(num_of_rows=AREA_CODE_ROWS)

        counts = await asyncio.gather(*[
            self._count(
                AreaBasedListParams(area_code=area.code, num_of_rows=1, page_no=1),
                f"area {area.name} ({area.code})",
            )
            for area in areas
        ])

        stats = [
            RegionStats(code=area.code or "", name=area.name or "", count=count)
            for area, count in zip(areas, counts)
        ]
        stats.sort(key=lambda s: s.count, reverse=True)
        return stats

    async def get_type_stats(self) -> list[TypeStats]:
        """타입별 관광지 수 + 비율 (내림차순)."""
        type_ids = list(CONTENT_TYPE_NAMES)

        counts = await asyncio.gather(*[
            self._count(
                AreaBasedListParams(content_type_id=type_id, num_of_rows=1, page_no=1),
                f"type {CONTENT_TYPE_NAMES[type_id]} ({type_id})",
            )
            for type_id in type_ids
        ])

        total = sum(counts)
        stats = [
            TypeStats(
                content_type_id=type_id,
                type_name=CONTENT_TYPE_NAMES[type_id],
                count=count,
                percentage=(count / total * 100) if total > 0 else 0.0,
            )
            for type_id, count in zip(type_ids, counts)
        ]
        stats.sort(key=lambda s: s.count, reverse=True)
        return stats

    async def get_stats_summary(self) -> StatsSummary:
        """전체 요약: 총 관광지 수 (타입별 합계), Top 3 지역/타입."""
        region_stats, type_stats = await asyncio.gather(
            self.get_region_stats(),
            self.get_type_stats(),
        )

        return StatsSummary(
            total_count=sum(s.count for s in type_stats),
            top_regions=region_stats[:TOP_N],
            top_types=type_stats[:TOP_N],
            last_updated=datetime.now(UTC).isoformat(),
        )
