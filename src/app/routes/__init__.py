"""
FastAPI Routes.

API 라우트 (REST): tour 프록시, stats
"""

from . import stats, tour

__all__ = ["stats", "tour"]
