"""
Envelope 정규화: upstream 응답 → 내부 데이터 모델.

upstream(KorService2) 응답의 불일치를 이 모듈 한 곳에서만 흡수:
- body.items.item: 없음 / 단일 객체 / 배열
- body.items: 결과가 없을 때 "" (빈 문자열)로 오는 경우
- 에러 envelope: response.header 또는 최상위 resultCode
"""

import math
from collections.abc import Mapping
from typing import Any

from src.domain.constants import (
    DEFAULT_NUM_OF_ROWS,
    DEFAULT_PAGE_NO,
    DEFAULT_TOTAL_COUNT,
    SUCCESS_RESULT_CODE,
)
from src.domain.errors import TourApiError, UpstreamApplicationError

MALFORMED_ENVELOPE = "MALFORMED_ENVELOPE"


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


# =============================================================================
# Header
# =============================================================================

def read_header(payload: Any) -> tuple[str, str]:
    """
    (resultCode, resultMsg) 추출.

    정상 응답은 response.header에, 일부 에러 응답은 최상위에 코드가 옴.
    둘 다 없으면 ("", "")
    """
    if not isinstance(payload, Mapping):
        return "", ""

    response = payload.get("response")
    if isinstance(response, Mapping):
        header = response.get("header")
        if isinstance(header, Mapping):
            return (
                str(header.get("resultCode") or ""),
                str(header.get("resultMsg") or ""),
            )

    if "resultCode" in payload:
        return str(payload.get("resultCode") or ""), str(payload.get("resultMsg") or "")

    return "", ""


def envelope_error(payload: Any) -> UpstreamApplicationError | None:
    """
    envelope 수준 실패 검사.

    resultCode == "0000"만 성공. 그 외는 HTTP 상태와 무관하게 실패.
    """
    result_code, result_msg = read_header(payload)
    if result_code == SUCCESS_RESULT_CODE:
        return None
    if not result_code:
        return UpstreamApplicationError("", result_msg or "Missing response header")
    return UpstreamApplicationError(result_code, result_msg)


def read_body(payload: Any) -> Mapping[str, Any]:
    """response.body (없으면 빈 dict)."""
    if not isinstance(payload, Mapping):
        return {}
    response = payload.get("response")
    if not isinstance(response, Mapping):
        return {}
    body = response.get("body")
    return body if isinstance(body, Mapping) else {}


# =============================================================================
# Items
# =============================================================================

def normalize_items(raw: Any) -> list[dict[str, Any]]:
    """
    body.items.item → 순서 있는 리스트.

    - 없음 (None, "") → []
    - 단일 객체 → [객체]
    - 배열 → 그대로 (순서 유지, 재정렬 없음)

    Raises:
        TourApiError: 세 가지 형태 어디에도 해당하지 않을 때
    """
    if _is_absent(raw):
        return []
    if isinstance(raw, Mapping):
        return [dict(raw)]
    if isinstance(raw, list):
        for index, item in enumerate(raw):
            if not isinstance(item, Mapping):
                raise TourApiError(
                    MALFORMED_ENVELOPE,
                    "Unexpected items.item element",
                    index=index,
                    item_type=type(item).__name__,
                )
        return [dict(item) for item in raw]

    raise TourApiError(
        MALFORMED_ENVELOPE,
        "Unexpected items.item shape",
        item_type=type(raw).__name__,
    )


def extract_items(payload: Any) -> list[dict[str, Any]]:
    """envelope에서 item 목록 추출."""
    items = read_body(payload).get("items")
    if _is_absent(items):
        return []
    if not isinstance(items, Mapping):
        raise TourApiError(
            MALFORMED_ENVELOPE,
            "Unexpected body.items shape",
            items_type=type(items).__name__,
        )
    return normalize_items(items.get("item"))


# =============================================================================
# Pagination
# =============================================================================

def _positive_int(value: Any) -> int | None:
    """양의 정수로 변환 (0, 음수, 변환 불가 → None)."""
    if _is_absent(value) or isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def compute_total_pages(total_count: int, num_of_rows: int) -> int:
    """ceil(total_count / num_of_rows). num_of_rows가 0 이하면 0."""
    if num_of_rows <= 0:
        return 0
    return math.ceil(total_count / num_of_rows)


def extract_pagination(
    payload: Any,
    num_of_rows: int = DEFAULT_NUM_OF_ROWS,
    page_no: int = DEFAULT_PAGE_NO,
) -> tuple[int, int, int, int]:
    """
    (totalCount, numOfRows, pageNo, totalPages) 추출.

    body에 값이 없으면 기본값(0, 요청한 numOfRows, 요청한 pageNo) 사용.
    totalPages는 upstream 값과 무관하게 항상 재계산.
    """
    body = read_body(payload)
    total_count = _positive_int(body.get("totalCount")) or DEFAULT_TOTAL_COUNT
    rows = _positive_int(body.get("numOfRows")) or num_of_rows
    page = _positive_int(body.get("pageNo")) or page_no
    return total_count, rows, page, compute_total_pages(total_count, rows)
