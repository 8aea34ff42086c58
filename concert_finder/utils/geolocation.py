"""Single-shot coordinate lookup with a hard timeout."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Union

logger = logging.getLogger(__name__)

DEFAULT_LOCATE_TIMEOUT = 10.0


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


class _Unavailable:
    """Sentinel returned when no coordinates could be determined."""

    def __repr__(self) -> str:
        return "UNAVAILABLE"

    def __bool__(self) -> bool:
        return False


UNAVAILABLE = _Unavailable()

LocateResult = Union[Coordinates, _Unavailable]


async def locate(
    lookup: Callable[[], Awaitable[Coordinates]],
    timeout: float = DEFAULT_LOCATE_TIMEOUT,
) -> LocateResult:
    """
    Await a coordinate lookup once, bounded by a timeout.

    There are no retries; a timeout, an error, or a result that is not
    Coordinates all resolve to UNAVAILABLE.

    Args:
        lookup: Zero-argument coroutine function producing Coordinates
        timeout: Seconds to wait before giving up

    Returns:
        Coordinates, or UNAVAILABLE
    """
    try:
        result = await asyncio.wait_for(lookup(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"Location lookup timed out after {timeout}s")
        return UNAVAILABLE
    except Exception as e:
        logger.warning(f"Location lookup failed: {e}")
        return UNAVAILABLE

    if not isinstance(result, Coordinates):
        logger.warning(f"Location lookup returned {type(result).__name__}, ignoring")
        return UNAVAILABLE
    return result
