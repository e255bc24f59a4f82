from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class RunStats:
    elapsed: float
    threads: int
    digits: int

    @property
    def digits_per_second(self) -> float:
        if self.elapsed <= 0:
            return 0.0
        return self.digits / self.elapsed

    def report(self) -> List[str]:
        return [
            "======= Stats =======",
            f"Time      : {self.elapsed:.3f} s",
            f"Threads   : {self.threads}",
            f"Decimals  : {self.digits}",
            f"Dec / sec : {self.digits_per_second:.0f}",
        ]
