"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.app.config import build_cache_config, build_tour_api_config, load_config
from src.app.providers.tour_api import TourApiClient

# Routes
from src.app.routes import stats, tour

logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드, 서비스 키 주입, TourApiClient 생성
    종료 시: httpx 클라이언트 정리
    """
    # Startup
    app.state.config = load_config()
    app.state.cache_config = build_cache_config(app.state.config)
    app.state.tour_client = TourApiClient(build_tour_api_config(app.state.config))
    logger.info("Tour API client initialized")

    yield

    # Shutdown
    await app.state.tour_client.aclose()


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="MyTrip Tour API",
    description="한국관광공사 KorService2 프록시 + 통계",
    version="0.1.0",
    lifespan=lifespan,
)


# =============================================================================
# Routes
# =============================================================================

app.include_router(tour.api_router, prefix="/api/tour", tags=["Tour API"])
app.include_router(stats.api_router, prefix="/api/stats", tags=["Stats API"])


# =============================================================================
# Root Endpoints
# =============================================================================


@app.get("/")
async def root() -> dict[str, Any]:
    """엔드포인트 안내."""
    return {
        "message": "MyTrip Tour API",
        "endpoints": {
            "tour": "/api/tour",
            "infinite": "/api/tour/infinite",
            "stats": "/api/stats/summary",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
