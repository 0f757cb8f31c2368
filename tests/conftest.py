"""
Pytest fixtures for the Tour API client tests.

구성:
- 설정/경로 fixture
- upstream envelope 생성 헬퍼
- httpx.MockTransport 기반 stub upstream (요청 기록)
- 백오프 대기 기록용 sleep
"""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path
from typing import Any

import httpx
import pytest
import pytest_asyncio

from src.app.config import TourApiConfig
from src.app.providers.tour_api import TourApiClient

TEST_BASE_URL = "https://tour.test/B551011/KorService2"

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


# =============================================================================
# Envelope Helpers
# =============================================================================

def make_envelope(
    item: Any = None,
    total_count: int | None = None,
    num_of_rows: int | None = None,
    page_no: int | None = None,
    result_code: str = "0000",
    result_msg: str = "OK",
    omit_items: bool = False,
) -> dict[str, Any]:
    """
    upstream envelope 생성.

    item=None → items: "" (upstream이 0건일 때 보내는 형태)
    omit_items=True → body에 items 키 자체가 없음
    """
    body: dict[str, Any] = {}
    if not omit_items:
        body["items"] = "" if item is None else {"item": item}
    if total_count is not None:
        body["totalCount"] = total_count
    if num_of_rows is not None:
        body["numOfRows"] = num_of_rows
    if page_no is not None:
        body["pageNo"] = page_no
    return {
        "response": {
            "header": {"resultCode": result_code, "resultMsg": result_msg},
            "body": body,
        }
    }


def make_tour_item(index: int) -> dict[str, Any]:
    """관광지 목록 항목 샘플."""
    return {
        "contentid": str(126500 + index),
        "contenttypeid": "12",
        "title": f"관광지 {index}",
        "addr1": "서울특별시 종로구",
        "areacode": "1",
        "mapx": "126.9769930325",
        "mapy": "37.5788222356",
        "modifiedtime": "20240101120000",
    }


@pytest.fixture
def envelope() -> Callable[..., dict[str, Any]]:
    """make_envelope fixture."""
    return make_envelope


# =============================================================================
# Stub Upstream
# =============================================================================

class StubUpstream:
    """
    요청을 기록하고 미리 정한 응답을 순서대로 돌려주는 upstream.

    responses 원소:
    - dict → 200 JSON
    - httpx.Response → 그대로
    - Exception → 전송 계층에서 raise
    마지막 원소는 소진 후에도 반복 사용.
    """

    def __init__(self, *responses: Any):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests) - 1, len(self.responses) - 1)
        response = self.responses[index]
        if isinstance(response, Exception):
            raise response
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, json=response)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


class RecordingSleep:
    """백오프 대기 시간을 기록만 하는 sleep."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def upstream() -> type[StubUpstream]:
    """StubUpstream 클래스 (테스트에서 응답 순서 지정)."""
    return StubUpstream


@pytest.fixture
def tour_item() -> Callable[[int], dict[str, Any]]:
    """make_tour_item fixture."""
    return make_tour_item


@pytest.fixture
def tour_config() -> TourApiConfig:
    """테스트용 설정 (가짜 서비스 키)."""
    return TourApiConfig(service_key="test-service-key", base_url=TEST_BASE_URL)


@pytest.fixture
def recorded_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_client(
    tour_config: TourApiConfig, recorded_sleep: RecordingSleep
) -> Callable[..., TourApiClient]:
    """
    StubUpstream을 연결한 TourApiClient 생성기.

    Usage:
        stub = StubUpstream(envelope)
        client = make_client(stub)
    """

    def _make(stub: StubUpstream, config: TourApiConfig | None = None) -> TourApiClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(stub.handler))
        return TourApiClient(
            config or tour_config,
            http_client=http_client,
            sleep=recorded_sleep,
        )

    return _make


@pytest_asyncio.fixture
async def stub_client(
    make_client: Callable[..., TourApiClient],
) -> AsyncGenerator[Callable[..., TourApiClient], None]:
    """make_client + 테스트 종료 시 httpx 클라이언트 정리."""
    created: list[TourApiClient] = []

    def _make(stub: StubUpstream, config: TourApiConfig | None = None) -> TourApiClient:
        client = make_client(stub, config)
        created.append(client)
        return client

    yield _make

    for client in created:
        await client._get_client().aclose()
