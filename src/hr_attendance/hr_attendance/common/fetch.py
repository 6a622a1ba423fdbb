from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)


def fetch_parallel(calls: Mapping[str, Callable[[], Any]], *, max_workers: int) -> dict[str, Any]:
    """Run independent repository reads concurrently and wait for all of them.

    The first failure is re-raised to the caller once every read has settled.
    """

    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
        futures = {name: executor.submit(fn) for name, fn in calls.items()}
        results = {name: future.result() for name, future in futures.items()}

    logger.debug(
        "fetched %s",
        ", ".join(f"{name}={len(v) if hasattr(v, '__len__') else 1}" for name, v in results.items()),
    )
    return results
