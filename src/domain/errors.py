"""
Error definitions for the Tour API client.

에러 분류:
- ConfigurationError / InvalidArgumentError → 재시도 없이 즉시 실패
- TransportError / UpstreamHttpError / UpstreamApplicationError → 재시도 대상
- NotFoundError → 단건 조회 결과 0건
"""

from typing import Any


class TourApiError(Exception):
    """
    Tour API 클라이언트 공통 에러.

    Usage:
        raise TourApiError("HTTP_ERROR", "API request failed", status_code=503)
    """

    def __init__(self, code: str, message: str = "", **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        head = f"[{self.code}] {self.message}" if self.message else f"[{self.code}]"
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{head} ({ctx_str})" if ctx_str else head

    @property
    def status_code(self) -> int | None:
        """HTTP 상태 코드 (있는 경우)."""
        return self.context.get("status_code")

    @property
    def api_error_code(self) -> str | None:
        """upstream resultCode (있는 경우)."""
        return self.context.get("result_code")

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class ConfigurationError(TourApiError):
    """서비스 키 등 필수 설정 누락. 재시도하지 않음."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(ErrorCodes.CONFIG_MISSING_SERVICE_KEY, message, **context)


class InvalidArgumentError(TourApiError):
    """필수 식별자/키워드가 비어 있음. 네트워크 호출 전에 실패."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(ErrorCodes.INVALID_ARGUMENT, message, **context)


class TransportError(TourApiError):
    """네트워크 계층 실패 (연결 거부, 타임아웃, DNS)."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(ErrorCodes.TRANSPORT_ERROR, message, **context)


class UpstreamHttpError(TourApiError):
    """2xx 이외의 HTTP 응답."""

    def __init__(self, status_code: int, message: str = "", **context: Any) -> None:
        super().__init__(
            ErrorCodes.UPSTREAM_HTTP_ERROR,
            message or f"API request failed with status {status_code}",
            status_code=status_code,
            **context,
        )


class UpstreamApplicationError(TourApiError):
    """envelope resultCode가 "0000"이 아닌 응답 (HTTP 상태와 무관)."""

    def __init__(self, result_code: str, result_msg: str, **context: Any) -> None:
        self.result_msg = result_msg
        super().__init__(
            ErrorCodes.UPSTREAM_APPLICATION_ERROR,
            f"API error: {result_msg or 'Unknown API error'}",
            result_code=result_code,
            **context,
        )


class NotFoundError(TourApiError):
    """단건 조회(detailCommon2, detailIntro2) 결과 없음."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(ErrorCodes.NOT_FOUND, message, **context)


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Config ===
    CONFIG_MISSING_SERVICE_KEY = "CONFIG_MISSING_SERVICE_KEY"

    # === Validation ===
    INVALID_ARGUMENT = "INVALID_ARGUMENT"

    # === Upstream (재시도 대상) ===
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    UPSTREAM_HTTP_ERROR = "UPSTREAM_HTTP_ERROR"
    UPSTREAM_APPLICATION_ERROR = "UPSTREAM_APPLICATION_ERROR"
    RETRIES_EXHAUSTED = "RETRIES_EXHAUSTED"

    # === Lookup ===
    NOT_FOUND = "NOT_FOUND"
