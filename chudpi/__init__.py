__all__ = [
    "PQT",
    "PiResult",
    "PrecisionBudget",
    "RunStats",
    "chudnovsky_pi_decimal_string",
    "clamp_workers",
    "combine",
    "compute_pi",
    "compute_pqt",
    "fold",
    "leaf_term",
    "partition_terms",
    "pi_from_pqt",
    "split",
    "verify_fractional_digits",
]

from .chudnovsky import PiResult, chudnovsky_pi_decimal_string, compute_pi, pi_from_pqt
from .parallel import compute_pqt, fold, partition_terms
from .precision import PrecisionBudget, clamp_workers
from .series import PQT, combine, leaf_term, split
from .stats import RunStats
from .verify import verify_fractional_digits
