import logging
import math
from dataclasses import dataclass

from .constants import BITS_PER_DIGIT, DIGITS_PER_TERM, PRECISION_DIGIT_MARGIN, TERM_MARGIN


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrecisionBudget:
    digits: int
    terms: int
    bits: int

    @classmethod
    def for_digits(cls, digits: int) -> "PrecisionBudget":
        digits = int(digits)
        if digits < 0:
            raise ValueError("digits must be >= 0")
        terms = digits // DIGITS_PER_TERM + TERM_MARGIN
        bits = (digits + PRECISION_DIGIT_MARGIN) * BITS_PER_DIGIT
        budget = cls(digits, terms, bits)
        logger.debug("budget: digits=%d terms=%d bits=%d", digits, terms, bits)
        return budget

    @property
    def decimal_precision(self) -> int:
        # significant decimal digits carried by ``bits`` binary digits
        return int(math.ceil(self.bits * math.log10(2)))


def clamp_workers(workers) -> int:
    workers = int(workers)
    if workers < 1:
        logger.debug("worker count %d clamped to 1", workers)
        return 1
    return workers
