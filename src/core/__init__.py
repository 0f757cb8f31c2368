"""
Core layer: upstream 응답 정규화.

역할:
- envelope 성공/실패 판정
- items.item 형태 정규화 (없음/단일/배열)
- 페이지네이션 재계산
"""

from .envelope import (
    compute_total_pages,
    envelope_error,
    extract_items,
    extract_pagination,
    normalize_items,
    read_header,
)

__all__ = [
    "normalize_items",
    "extract_items",
    "extract_pagination",
    "compute_total_pages",
    "envelope_error",
    "read_header",
]
