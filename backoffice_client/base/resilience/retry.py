from __future__ import annotations

import asyncio
import functools
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, Optional, TypeVar

T = TypeVar("T")

RetryCallback = Callable[[int, Exception], None]
Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class RetryConfig:
    max_retries: int = 3
    initial_delay: float = 1.0  # seconds
    max_delay: float = 10.0  # seconds

    def delay_for(self, retry_number: int) -> float:
        """Backoff before the ``retry_number``-th retry (1-indexed), capped at ``max_delay``."""
        return min(self.initial_delay * 2 ** (retry_number - 1), self.max_delay)

    def delays(self) -> Iterable[float]:
        for retry_number in range(1, self.max_retries + 1):
            yield self.delay_for(retry_number)


DEFAULT_RETRY_CONFIG = RetryConfig()


async def retry_async(
    fn: Callable[[], Awaitable[T]],
    config: Optional[RetryConfig] = None,
    *,
    on_retry: Optional[RetryCallback] = None,
    sleep: Sleep = asyncio.sleep,
) -> T:
    """Await ``fn`` up to ``config.max_retries + 1`` times.

    - Every exception is retried; classification is left to the caller
    - ``on_retry(retry_number, error)`` runs before each backoff sleep
    - Exponential backoff without jitter, capped at ``max_delay``
    - When attempts run out the last error is re-raised unchanged
    - ``config=None`` means :data:`DEFAULT_RETRY_CONFIG`
    """
    cfg = config or DEFAULT_RETRY_CONFIG
    last_exc: Optional[Exception] = None
    for attempt in range(cfg.max_retries + 1):
        try:
            return await fn()
        except Exception as e:
            last_exc = e
            if attempt < cfg.max_retries:
                retry_number = attempt + 1
                if on_retry is not None:
                    on_retry(retry_number, e)
                await sleep(cfg.delay_for(retry_number))
    # Only reachable after every attempt raised.
    if last_exc is None:  # pragma: no cover - max_retries < 0
        raise RuntimeError("retry_async: no attempt was made")
    raise last_exc


def with_retry(
    config: Optional[RetryConfig] = None,
    *,
    on_retry: Optional[RetryCallback] = None,
):
    """Return a decorator applying :func:`retry_async` to a coroutine function.

    Preserves the original function signature.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            return await retry_async(lambda: func(*args, **kwargs), config, on_retry=on_retry)

        return wrapper

    return decorator


__all__ = [
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "retry_async",
    "with_retry",
]
