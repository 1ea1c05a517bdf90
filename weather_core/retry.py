"""Retry orchestration with exponential backoff.

fetch_with_retry() wraps any WeatherBackend. Attempts run strictly in
sequence; between failed attempts the calling task sleeps for
2**attempt time units (2, 4, 8, ...). The schedule has no upper cap.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from .backends.base import WeatherBackend
from .domains.weather import WeatherRecord
from .envelope import ResultEnvelope, fail

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3


@dataclass(slots=True)
class RetryContext:
    """Per-call retry bookkeeping, discarded once the call resolves."""

    max_attempts: int
    attempt: int = 0
    last_error: str = ""

    @property
    def exhausted(self) -> bool:
        return self.attempt >= self.max_attempts


def backoff_delay(attempt: int, *, delay_unit: float = 1.0) -> float:
    """Return the delay after a failed attempt (1-indexed)."""
    return (2**attempt) * delay_unit


async def fetch_with_retry(
    city: str,
    backend: WeatherBackend,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    *,
    delay_unit: float = 1.0,
) -> ResultEnvelope[WeatherRecord]:
    """Fetch weather for a city, retrying failures with exponential backoff.

    Args:
        city: City name passed unchanged to the backend.
        backend: Data source to query.
        max_attempts: Total number of attempts, at least 1.
        delay_unit: Seconds per backoff time unit.

    Returns:
        The first successful envelope, or a failure envelope naming the
        attempt count and the last backend error.

    Raises:
        ValueError: If max_attempts is less than 1.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    ctx = RetryContext(max_attempts=max_attempts)
    while not ctx.exhausted:
        ctx.attempt += 1
        result = await backend.fetch_by_city(city)
        if result.success:
            return result

        ctx.last_error = result.error or "Unknown error"
        _LOGGER.warning(
            "Weather fetch for %r failed (attempt %d/%d): %s",
            city,
            ctx.attempt,
            ctx.max_attempts,
            ctx.last_error,
        )

        if not ctx.exhausted:
            delay = backoff_delay(ctx.attempt, delay_unit=delay_unit)
            _LOGGER.info("Retrying %r in %.1fs", city, delay)
            await asyncio.sleep(delay)

    return fail(f"Failed after {ctx.max_attempts} attempts: {ctx.last_error}")
