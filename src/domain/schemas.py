"""
Data schemas for the Tour API client.

규칙:
- 필드명은 upstream(KorService2) 키와 동일하게 사용 (contentid, firstimage 등)
- 모르는 필드도 버리지 않음 → extra에 보관, to_dict()로 원본 그대로 복원
- 모든 객체는 호출마다 새로 생성 (캐시/공유 상태 없음)
"""

from dataclasses import dataclass, field, fields
from typing import Any, Generic, TypeVar

from .constants import DEFAULT_NUM_OF_ROWS, DEFAULT_PAGE_NO

# =============================================================================
# Record Base
# =============================================================================

R = TypeVar("R", bound="TourRecord")


@dataclass
class TourRecord:
    """
    upstream item 레코드 공통 베이스.

    알려진 필드는 속성으로, 나머지는 extra로 보관.
    """

    extra: dict[str, Any] = field(default_factory=dict, kw_only=True)

    @classmethod
    def from_dict(cls: type[R], data: dict[str, Any]) -> R:
        known = {f.name for f in fields(cls) if f.name != "extra"}
        kwargs = {k: v for k, v in data.items() if k in known}
        extra = {k: v for k, v in data.items() if k not in known}
        return cls(**kwargs, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용. None 값은 제외 (upstream에 없던 키)."""
        result: dict[str, Any] = {}
        for f in fields(self):
            if f.name == "extra":
                continue
            value = getattr(self, f.name)
            if value is not None:
                result[f.name] = value
        result.update(self.extra)
        return result


# =============================================================================
# Item Records
# =============================================================================

@dataclass
class TourItem(TourRecord):
    """관광지 목록 항목 (areaBasedList2, searchKeyword2)."""
    contentid: str | None = None
    contenttypeid: str | None = None
    title: str | None = None
    addr1: str | None = None
    addr2: str | None = None
    areacode: str | None = None
    sigungucode: str | None = None
    mapx: str | None = None  # 경도
    mapy: str | None = None  # 위도
    mlevel: str | None = None
    firstimage: str | None = None
    firstimage2: str | None = None
    tel: str | None = None
    cat1: str | None = None
    cat2: str | None = None
    cat3: str | None = None
    zipcode: str | None = None
    booktour: str | None = None
    createdtime: str | None = None
    modifiedtime: str | None = None


@dataclass
class TourDetail(TourRecord):
    """공통 상세 정보 (detailCommon2)."""
    contentid: str | None = None
    contenttypeid: str | None = None
    title: str | None = None
    addr1: str | None = None
    addr2: str | None = None
    zipcode: str | None = None
    tel: str | None = None
    telname: str | None = None
    homepage: str | None = None
    overview: str | None = None
    firstimage: str | None = None
    firstimage2: str | None = None
    mapx: str | None = None
    mapy: str | None = None
    cat1: str | None = None
    cat2: str | None = None
    cat3: str | None = None
    cpyrhtDivCd: str | None = None
    booktour: str | None = None
    createdtime: str | None = None
    modifiedtime: str | None = None


@dataclass
class TourIntro(TourRecord):
    """
    운영 정보 (detailIntro2).

    콘텐츠 타입별로 필드가 달라 공통 필드만 속성으로 두고
    타입별 필드(usefee, opentimefood, roomcount 등)는 extra에 보관.
    """
    contentid: str | None = None
    contenttypeid: str | None = None
    usetime: str | None = None
    restdate: str | None = None
    infocenter: str | None = None
    parking: str | None = None
    chkpet: str | None = None


@dataclass
class TourImage(TourRecord):
    """이미지 정보 (detailImage2)."""
    contentid: str | None = None
    originimgurl: str | None = None
    serialnum: str | None = None
    smallimageurl: str | None = None
    imgname: str | None = None
    cpyrhtDivCd: str | None = None


@dataclass
class PetTourInfo(TourRecord):
    """반려동물 동반 정보 (detailPetTour2)."""
    contentid: str | None = None
    contenttypeid: str | None = None
    chkpetleash: str | None = None  # 동반 가능 여부
    chkpetsize: str | None = None
    chkpetplace: str | None = None
    chkpetfee: str | None = None
    petinfo: str | None = None
    parking: str | None = None


@dataclass
class AreaCode(TourRecord):
    """지역 코드 (areaCode2)."""
    code: str | None = None
    name: str | None = None
    rnum: int | None = None


# =============================================================================
# Query Parameters
# =============================================================================

def _put(query: dict[str, str], key: str, value: Any) -> None:
    """빈 값은 보내지 않음."""
    if value is None:
        return
    text = str(value).strip()
    if text:
        query[key] = text


@dataclass
class AreaBasedListParams:
    """지역 기반 목록 조회 파라미터 (areaBasedList2)."""
    area_code: str | None = None
    sigungu_code: str | None = None
    content_type_id: str | None = None
    cat1: str | None = None
    cat2: str | None = None
    cat3: str | None = None
    num_of_rows: int | None = None
    page_no: int | None = None
    arrange: str | None = None  # A 제목순, B 조회순, C 수정일순, D 생성일순
    modified_time: str | None = None  # YYYYMMDD

    @property
    def rows(self) -> int:
        return self.num_of_rows or DEFAULT_NUM_OF_ROWS

    @property
    def page(self) -> int:
        return self.page_no or DEFAULT_PAGE_NO

    def to_query(self) -> dict[str, str]:
        """upstream 쿼리 파라미터 (camelCase)."""
        query: dict[str, str] = {
            "numOfRows": str(self.rows),
            "pageNo": str(self.page),
        }
        _put(query, "areaCode", self.area_code)
        _put(query, "sigunguCode", self.sigungu_code)
        _put(query, "contentTypeId", self.content_type_id)
        _put(query, "cat1", self.cat1)
        _put(query, "cat2", self.cat2)
        _put(query, "cat3", self.cat3)
        _put(query, "arrange", self.arrange)
        _put(query, "modifiedtime", self.modified_time)
        return query


@dataclass
class SearchKeywordParams(AreaBasedListParams):
    """키워드 검색 파라미터 (searchKeyword2). keyword 필수."""
    keyword: str = ""

    def to_query(self) -> dict[str, str]:
        query = super().to_query()
        _put(query, "keyword", self.keyword)
        return query


# =============================================================================
# Paginated Result
# =============================================================================

T = TypeVar("T", bound=TourRecord)


@dataclass
class PaginatedResult(Generic[T]):
    """
    목록/검색 결과.

    total_pages는 항상 클라이언트에서 재계산 (upstream 값 신뢰 안 함).
    """
    items: list[T]
    total_count: int
    num_of_rows: int
    page_no: int
    total_pages: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "totalCount": self.total_count,
            "numOfRows": self.num_of_rows,
            "pageNo": self.page_no,
            "totalPages": self.total_pages,
        }


# =============================================================================
# Stats Schemas
# =============================================================================

@dataclass
class RegionStats:
    """지역별 관광지 수."""
    code: str
    name: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "name": self.name, "count": self.count}


@dataclass
class TypeStats:
    """타입별 관광지 수."""
    content_type_id: str
    type_name: str
    count: int
    percentage: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "contentTypeId": self.content_type_id,
            "typeName": self.type_name,
            "count": self.count,
            "percentage": self.percentage,
        }


@dataclass
class StatsSummary:
    """통계 요약."""
    total_count: int
    top_regions: list[RegionStats]
    top_types: list[TypeStats]
    last_updated: str  # ISO 8601 (UTC)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalCount": self.total_count,
            "topRegions": [r.to_dict() for r in self.top_regions],
            "topTypes": [t.to_dict() for t in self.top_types],
            "lastUpdated": self.last_updated,
        }
