"""Retry with exponential backoff for provider calls."""

import asyncio
import logging
from typing import Awaitable, Callable, Tuple, Type, TypeVar

from .exceptions import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Errors that depend only on static input; retrying them cannot succeed.
NON_RETRYABLE: Tuple[Type[BaseException], ...] = (ConfigurationError, ValidationError)


async def retry(
    fn: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    base_delay: float = 1.0,
    non_retryable: Tuple[Type[BaseException], ...] = NON_RETRYABLE
) -> T:
    """
    Call ``fn`` until it succeeds, sleeping ``base_delay * 2**attempt`` between tries.

    Args:
        fn: Zero-argument coroutine function
        max_retries: Retries after the first attempt
        base_delay: Delay before the first retry, in seconds
        non_retryable: Exception types re-raised immediately

    Returns:
        The first successful result

    Raises:
        The last error once all attempts are exhausted
    """
    last_exception = None

    for attempt in range(max_retries + 1):
        try:
            return await fn()
        except non_retryable:
            raise
        except Exception as e:
            last_exception = e
            if attempt == max_retries:
                break
            delay = base_delay * (2 ** attempt)
            logger.warning(f"Attempt {attempt + 1} failed, retrying in {delay}s: {e}")
            await asyncio.sleep(delay)

    raise last_exception
