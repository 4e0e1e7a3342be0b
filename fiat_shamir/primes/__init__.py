"""Prime number testing module."""

from .MillerRabin import MillerRabin
from .SequentialPrimalityTester import SequentialPrimalityTester
from .ParallelPrimalityTester import ParallelPrimalityTester
from .abstract.IPrimalityTester import IPrimalityTester

__all__ = [
    "MillerRabin",
    "SequentialPrimalityTester",
    "ParallelPrimalityTester",
    "IPrimalityTester",
]
