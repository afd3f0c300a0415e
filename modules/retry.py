import time
from typing import Callable, TypeVar

import settings
from modules.logger import logger

T = TypeVar("T")


def retry(
    fn: Callable[[], T],
    max_retries: int = settings.MAX_RETRIES,
    delay: float = settings.RETRY_DELAY,
    sleep: Callable[[float], None] = time.sleep,
    label: str = "",
    log=logger,
) -> T:
    """
    Call `fn` until it succeeds, at most `max_retries` times, sleeping a fixed
    `delay` between attempts. The last error is re-raised.
    """
    if max_retries < 1:
        raise ValueError("max_retries must be at least 1")

    for attempt in range(1, max_retries + 1):
        try:
            return fn()
        except Exception as err:
            if attempt >= max_retries:
                raise

            log.debug(f"{label} Error on attempt {attempt}: {err}")
            log.warning(
                f"{label} Error occurred. Retrying... ({attempt}/{max_retries})".strip()
            )
            sleep(delay)
