"""Binary splitting of the Chudnovsky series.

A term range ``[a, b)`` is reduced to a :class:`PQT` triple. Two adjacent
triples combine into the triple of their union, so the whole series can be
evaluated as a tree of exact integer products.
"""

from dataclasses import dataclass

from .constants import A, B, C3_OVER_24


@dataclass(frozen=True)
class PQT:
    p: int
    q: int
    t: int


def leaf_term(k: int) -> PQT:
    """Return the triple of the single term ``k``."""
    if k < 0:
        raise ValueError("k must be >= 0")
    if k == 0:
        return PQT(1, 1, A)
    p = -(6 * k - 5) * (2 * k - 1) * (6 * k - 1)
    q = k * k * k * C3_OVER_24
    return PQT(p, q, p * (A + B * k))


def combine(left: PQT, right: PQT) -> PQT:
    """Merge the triples of ``[a, m)`` and ``[m, b)`` into ``[a, b)``.

    ``left`` must cover the range directly before ``right``. P and Q do not
    care about the order but T does.
    """
    return PQT(
        left.p * right.p,
        left.q * right.q,
        right.q * left.t + left.p * right.t,
    )


def _split(a: int, b: int) -> PQT:
    if b - a == 1:
        return leaf_term(a)
    m = (a + b) // 2
    left = _split(a, m)
    right = _split(m, b)
    return combine(left, right)


def split(a: int, b: int) -> PQT:
    """Return the triple of the term range ``[a, b)``."""
    a = int(a)
    b = int(b)
    if a < 0:
        raise ValueError("a must be >= 0")
    if b <= a:
        raise ValueError("b must be > a")
    return _split(a, b)
