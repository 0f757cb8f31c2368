"""
Upstream Providers.

한국관광공사 KorService2 API 클라이언트.
설정은 TourApiConfig로 주입 (환경변수 직접 조회 없음).
"""

from .tour_api import TourApiClient

__all__ = [
    "TourApiClient",
]
