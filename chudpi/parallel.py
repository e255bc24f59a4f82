import logging
import threading
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import Iterable, List, Tuple

from .constants import EXECUTORS
from .precision import clamp_workers
from .series import PQT, combine, split


logger = logging.getLogger(__name__)


def partition_terms(terms: int, workers: int) -> List[Tuple[int, int]]:
    """Cut ``[0, terms)`` into contiguous ranges, one per worker.

    Every range has ``terms // units`` terms except the last, which also takes
    the remainder. There are never more ranges than terms.
    """
    terms = int(terms)
    if terms < 1:
        raise ValueError("terms must be >= 1")
    units = min(clamp_workers(workers), terms)
    chunk = terms // units
    ranges = []
    for i in range(units):
        a = i * chunk
        b = terms if i == units - 1 else (i + 1) * chunk
        ranges.append((a, b))
    return ranges


def fold(triples: Iterable[PQT]) -> PQT:
    """Combine per-range triples in range order, left to right."""
    it = iter(triples)
    try:
        acc = next(it)
    except StopIteration:
        raise ValueError("nothing to fold") from None
    for nxt in it:
        acc = combine(acc, nxt)
    return acc


def _split_range(ab: Tuple[int, int]) -> PQT:
    a, b = ab
    name = threading.current_thread().name
    logger.debug("%s: split [%d, %d) started", name, a, b)
    result = split(a, b)
    logger.debug("%s: split [%d, %d) finished", name, a, b)
    return result


def _make_executor(executor: str, max_workers: int):
    if executor == "thread":
        return ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="chudpi")
    return ProcessPoolExecutor(max_workers=max_workers)


def compute_pqt(terms: int, workers: int = 1, executor: str = "thread") -> PQT:
    executor = (executor or "thread").lower().strip()
    if executor not in EXECUTORS:
        raise ValueError("unsupported executor")
    ranges = partition_terms(terms, workers)
    logger.debug("ranges: %s", ranges)
    if len(ranges) == 1:
        return _split_range(ranges[0])
    with _make_executor(executor, len(ranges)) as ex:
        # map() yields in submission order, after every worker has finished
        chunks = list(ex.map(_split_range, ranges))
    logger.debug("combining %d partial results", len(chunks))
    return fold(chunks)
