"""Random source interface for the generator.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence
from typing import Protocol

__all__ = ["RandomSource"]


class RandomSource(Protocol):
    """Source of random values used by the generator.

    ``random.Random`` satisfies this protocol, so a seeded instance gives
    reproducible output:

        >>> Generator(random.Random(1234)).generate(env)

    Methods must behave like their ``random.Random`` namesakes:
    - randint: uniform integer in [a, b], both inclusive
    - choices: k independent uniform picks from population
    - randbytes: n uniform random bytes
    """

    def randint(self, a: int, b: int) -> int:
        ...  # pragma: no cover  # Protocol stub - not executable

    def choices(self, population: Sequence[str], *, k: int) -> list[str]:
        ...  # pragma: no cover  # Protocol stub - not executable

    def randbytes(self, n: int) -> bytes:
        ...  # pragma: no cover  # Protocol stub - not executable
