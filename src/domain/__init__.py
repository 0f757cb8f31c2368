"""Domain layer: errors, schemas and upstream constants."""

from .errors import (
    ConfigurationError,
    InvalidArgumentError,
    NotFoundError,
    TourApiError,
    TransportError,
    UpstreamApplicationError,
    UpstreamHttpError,
)
from .schemas import (
    AreaBasedListParams,
    AreaCode,
    PaginatedResult,
    PetTourInfo,
    SearchKeywordParams,
    TourDetail,
    TourImage,
    TourIntro,
    TourItem,
)

__all__ = [
    "TourApiError",
    "ConfigurationError",
    "InvalidArgumentError",
    "TransportError",
    "UpstreamHttpError",
    "UpstreamApplicationError",
    "NotFoundError",
    "AreaBasedListParams",
    "SearchKeywordParams",
    "PaginatedResult",
    "TourItem",
    "TourDetail",
    "TourIntro",
    "TourImage",
    "PetTourInfo",
    "AreaCode",
]
