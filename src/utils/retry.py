"""
재시도 로직 유틸리티.

한 번의 시도는 예외를 던지지 않고 AttemptOutcome(성공 값 또는 실패 태그)를 반환하고,
재시도 루프는 태그만 보고 다음 상태를 결정합니다.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from src.domain.errors import ErrorCodes, TourApiError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SleepFunc = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class AttemptOutcome(Generic[T]):
    """
    단일 시도 결과.

    error가 None이면 성공, 아니면 실패.
    """
    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "AttemptOutcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> "AttemptOutcome[T]":
        return cls(error=error)


def backoff_delays(
    max_attempts: int,
    initial_delay: float = 1.0,
    exponential_base: float = 2.0,
    max_delay: float = 60.0,
) -> list[float]:
    """
    시도 사이 대기 시간 목록 (마지막 시도 뒤에는 대기 없음).

    Example:
        backoff_delays(3) → [1.0, 2.0]
    """
    delays = []
    delay = initial_delay
    for _ in range(max(max_attempts - 1, 0)):
        delays.append(delay)
        delay = min(delay * exponential_base, max_delay)
    return delays


async def retry_with_exponential_backoff(
    attempt: Callable[[], Awaitable[AttemptOutcome[T]]],
    max_attempts: int = 3,
    initial_delay: float = 1.0,
    max_delay: float = 60.0,
    exponential_base: float = 2.0,
    sleep: SleepFunc = asyncio.sleep,
) -> T:
    """
    지수 백오프를 사용한 재시도.

    Args:
        attempt: 한 번의 시도를 수행하는 비동기 함수 (AttemptOutcome 반환)
        max_attempts: 총 시도 횟수 (첫 시도 포함)
        initial_delay: 첫 대기 시간(초)
        max_delay: 최대 대기 시간(초)
        exponential_base: 지수 백오프 기수
        sleep: 대기 함수 (테스트에서 주입)

    Returns:
        성공한 시도의 값

    Raises:
        마지막 시도의 에러, 시도 기록이 없으면 TourApiError(RETRIES_EXHAUSTED)
    """
    delays = backoff_delays(max_attempts, initial_delay, exponential_base, max_delay)
    last_error: Exception | None = None

    for attempt_no in range(max_attempts):
        outcome = await attempt()

        if outcome.ok:
            if attempt_no > 0:
                logger.info(
                    f"Retry succeeded on attempt {attempt_no + 1}/{max_attempts}"
                )
            return outcome.value  # type: ignore[return-value]

        last_error = outcome.error

        if attempt_no == max_attempts - 1:
            logger.error(
                f"All {max_attempts} attempts failed. Last error: {last_error}"
            )
            break

        delay = delays[attempt_no]
        logger.warning(
            f"Attempt {attempt_no + 1}/{max_attempts} failed: {last_error}. "
            f"Retrying in {delay:.1f}s..."
        )
        await sleep(delay)

    if last_error is not None:
        raise last_error

    raise TourApiError(
        ErrorCodes.RETRIES_EXHAUSTED,
        "API request failed after retries",
        max_attempts=max_attempts,
    )
