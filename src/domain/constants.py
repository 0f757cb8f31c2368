"""
Domain Constants: 한국관광공사 KorService2 API 상수.

엔드포인트 경로, 성공 코드, 콘텐츠 타입 등 시스템 전반에서 사용되는 값들.
"""

# =============================================================================
# Upstream (KorService2)
# =============================================================================

DEFAULT_BASE_URL = "https://apis.data.go.kr/B551011/KorService2"

# 엔드포인트 경로 (BASE_URL 뒤에 붙음)
ENDPOINT_AREA_CODE = "areaCode2"
ENDPOINT_AREA_BASED_LIST = "areaBasedList2"
ENDPOINT_SEARCH_KEYWORD = "searchKeyword2"
ENDPOINT_DETAIL_COMMON = "detailCommon2"
ENDPOINT_DETAIL_INTRO = "detailIntro2"
ENDPOINT_DETAIL_IMAGE = "detailImage2"
ENDPOINT_DETAIL_PET_TOUR = "detailPetTour2"

ALL_ENDPOINTS = (
    ENDPOINT_AREA_CODE,
    ENDPOINT_AREA_BASED_LIST,
    ENDPOINT_SEARCH_KEYWORD,
    ENDPOINT_DETAIL_COMMON,
    ENDPOINT_DETAIL_INTRO,
    ENDPOINT_DETAIL_IMAGE,
    ENDPOINT_DETAIL_PET_TOUR,
)

# envelope header.resultCode 성공 값 (HTTP 상태와 별개)
SUCCESS_RESULT_CODE = "0000"

# detailPetTour2에서 null로 처리하는 resultCode
PET_TOUR_SUPPRESSED_CODE = "SERVICE_ERROR"

# =============================================================================
# Common Query Parameters
# =============================================================================

DEFAULT_MOBILE_OS = "ETC"
DEFAULT_MOBILE_APP = "MyTrip"
RESPONSE_TYPE = "json"

# =============================================================================
# Pagination / Retry Defaults
# =============================================================================

DEFAULT_NUM_OF_ROWS = 20
DEFAULT_PAGE_NO = 1
DEFAULT_TOTAL_COUNT = 0

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_INITIAL_DELAY = 1.0  # 초
DEFAULT_EXPONENTIAL_BASE = 2.0
DEFAULT_TIMEOUT = 10.0  # 초

# =============================================================================
# Content Type (관광 타입)
# =============================================================================


class ContentTypeId:
    """콘텐츠 타입 ID."""

    TOURIST_SPOT = "12"       # 관광지
    CULTURAL_FACILITY = "14"  # 문화시설
    FESTIVAL = "15"           # 축제/행사
    TOUR_COURSE = "25"        # 여행코스
    LEISURE_SPORTS = "28"     # 레포츠
    ACCOMMODATION = "32"      # 숙박
    SHOPPING = "38"           # 쇼핑
    RESTAURANT = "39"         # 음식점


CONTENT_TYPE_NAMES: dict[str, str] = {
    ContentTypeId.TOURIST_SPOT: "관광지",
    ContentTypeId.CULTURAL_FACILITY: "문화시설",
    ContentTypeId.FESTIVAL: "축제/행사",
    ContentTypeId.TOUR_COURSE: "여행코스",
    ContentTypeId.LEISURE_SPORTS: "레포츠",
    ContentTypeId.ACCOMMODATION: "숙박",
    ContentTypeId.SHOPPING: "쇼핑",
    ContentTypeId.RESTAURANT: "음식점",
}

# 정렬 (arrange): A 제목순, B 조회순, C 수정일순, D 생성일순
DEFAULT_INFINITE_ARRANGE = "C"

# =============================================================================
# Cache-Control (edge 캐시 힌트)
# =============================================================================

CACHE_CONTROL_TOUR = "public, s-maxage=3600, stale-while-revalidate=86400"
CACHE_CONTROL_INFINITE = "public, s-maxage=60, stale-while-revalidate=300"
