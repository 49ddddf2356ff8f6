"""Deadline-bounded concurrent execution of per-package lookups."""

from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Iterable, List, Optional, TypeVar

from pkgcurate.logging_config import logger

T = TypeVar("T")
R = TypeVar("R")


def run_batch(
    items: Iterable[T],
    worker: Callable[[T], Optional[R]],
    max_workers: int,
    deadline: Optional[float] = None,
) -> List[R]:
    """
    Run `worker` for every item on a thread pool and collect non-None results.

    Args:
        items: Work items, typically package identifiers
        worker: Callable returning a result or None for "no data"
        max_workers: Maximum number of concurrent workers
        deadline: Seconds to wait for the whole batch; None waits for all

    Returns:
        Results of the workers that finished in time, in no particular order.
        Items still pending at the deadline are cancelled, items in flight are
        abandoned. A worker that raises counts as "no data".
    """
    work = list(items)
    if not work:
        return []

    executor = ThreadPoolExecutor(max_workers=min(max_workers, len(work)), thread_name_prefix="curation")
    futures = {executor.submit(worker, item): item for item in work}
    try:
        done, not_done = wait(futures, timeout=deadline)
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    if not_done:
        logger.warning(f"Curation deadline of {deadline}s expired, {len(not_done)} of {len(work)} lookups abandoned")

    results: List[R] = []
    for future in done:
        error = future.exception()
        if error is not None:
            logger.warning(f"Curation lookup for {futures[future]} failed: {error}")
            continue
        result = future.result()
        if result is not None:
            results.append(result)
    return results
