import logging
from typing import Iterator, Tuple

from mpmath.ctx_mp import MPContext


logger = logging.getLogger(__name__)

_GUARD_DIGITS = 30


def pi_digits_spigot() -> Iterator[int]:
    q, r, t, k, n, l = 1, 0, 1, 1, 3, 3
    while True:
        if 4 * q + r - t < n * t:
            yield n
            q, r, t, k, n, l = (
                10 * q,
                10 * (r - n * t),
                t,
                k,
                ((10 * (3 * q + r)) // t) - 10 * n,
                l,
            )
        else:
            q, r, t, k, n, l = (
                q * k,
                (2 * q + r) * l,
                t * l,
                k + 1,
                (q * (7 * k + 2) + r * l) // (t * l),
                l + 2,
            )


def extract_fractional_digits(display: str) -> str:
    if "." not in display:
        return ""
    return display.split(".", 1)[1]


def _spigot_prefix(count: int) -> str:
    g = pi_digits_spigot()
    next(g)
    return "".join(str(next(g)) for _ in range(count))


def _mpmath_prefix(count: int) -> str:
    ctx = MPContext()
    ctx.dps = count + _GUARD_DIGITS
    s = ctx.nstr(ctx.pi, count + _GUARD_DIGITS, min_fixed=-(10**6), max_fixed=10**6)
    return extract_fractional_digits(s)[:count]


def reference_fractional_digits(count: int, method: str = "mpmath") -> str:
    count = int(count)
    if count <= 0:
        return ""
    method = method.lower().strip()
    if method == "spigot":
        return _spigot_prefix(count)
    if method == "mpmath":
        return _mpmath_prefix(count)
    raise ValueError("unsupported verification method")


def verify_fractional_digits(fractional_digits: str, samples: int, method: str = "mpmath") -> Tuple[bool, str]:
    samples = int(samples)
    if samples <= 0:
        return True, "verification skipped"
    count = min(samples, len(fractional_digits))
    expected = reference_fractional_digits(count, method=method)
    ok = expected == fractional_digits[:count]
    logger.debug("verified %d digits against %s: %s", count, method, ok)
    return ok, f"pi {method.lower().strip()}"
