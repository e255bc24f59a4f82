import logging
import time
from dataclasses import dataclass
from decimal import ROUND_DOWN, Context, Decimal

from .constants import SCALE, SQRT_ARG
from .parallel import compute_pqt
from .precision import PrecisionBudget, clamp_workers
from .series import PQT
from .stats import RunStats


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PiResult:
    value: str
    stats: RunStats


def pi_from_pqt(pqt: PQT, budget: PrecisionBudget) -> str:
    """Turn the aggregate triple into π with ``budget.digits`` decimals.

    The trailing digit is truncated, not rounded.
    """
    if pqt.t == 0:
        raise ValueError("t must be non-zero")
    ctx = Context(prec=budget.decimal_precision)
    root = ctx.sqrt(Decimal(SQRT_ARG))
    num = ctx.multiply(ctx.multiply(Decimal(SCALE), root), Decimal(pqt.q))
    pi = ctx.divide(num, Decimal(pqt.t))
    quantum = Decimal((0, (1,), -budget.digits))
    pi = pi.quantize(quantum, rounding=ROUND_DOWN, context=ctx)
    return format(pi, "f")


def chudnovsky_pi_decimal_string(digits_after_point: int, workers: int = 1, executor: str = "thread") -> str:
    budget = PrecisionBudget.for_digits(digits_after_point)
    workers = clamp_workers(workers)
    pqt = compute_pqt(budget.terms, workers=workers, executor=executor)
    return pi_from_pqt(pqt, budget)


def compute_pi(digits_after_point: int, workers: int = 1, executor: str = "thread") -> PiResult:
    workers = clamp_workers(workers)
    t0 = time.perf_counter()
    value = chudnovsky_pi_decimal_string(digits_after_point, workers=workers, executor=executor)
    t1 = time.perf_counter()
    stats = RunStats(elapsed=t1 - t0, threads=workers, digits=int(digits_after_point))
    logger.debug("computed %d digits in %.3fs", stats.digits, stats.elapsed)
    return PiResult(value, stats)
