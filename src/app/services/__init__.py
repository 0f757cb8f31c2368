"""
Application Services.

역할:
- stats: 지역별/타입별 관광지 통계 (병렬 fan-out)
"""

from .stats import StatsService

__all__ = [
    "StatsService",
]
