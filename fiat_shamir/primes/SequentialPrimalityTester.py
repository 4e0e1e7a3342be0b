import logging

from ..exceptions import InvalidArgumentError
from ..mpc import MPC
from ..mpc.types import MPZ, T
from ..protocol_constants import (
    DEFAULT_PRECISION,
    DEFAULT_WORD_SIZE,
    MIN_PRECISION,
    MIN_WORD_SIZE,
)
from ..random import IRandomSource, NumberDraw
from .MillerRabin import MillerRabin
from .abstract.IPrimalityTester import IPrimalityTester

logger = logging.getLogger(__name__)


class SequentialPrimalityTester(IPrimalityTester):
    """Single-threaded implementation of primality testing."""

    def __init__(
        self,
        random_source: IRandomSource,
        precision: int = DEFAULT_PRECISION,
        word_size: int = DEFAULT_WORD_SIZE,
    ) -> None:
        """Initialize the tester.

        Args:
            random_source (IRandomSource): Source of the Miller-Rabin witnesses
            precision (int): Miller-Rabin rounds, error = 1/2^(2*precision)
            word_size (int): Length in bytes of the drawn witnesses
        """
        if precision < MIN_PRECISION or word_size < MIN_WORD_SIZE or random_source is None:
            raise InvalidArgumentError(
                f"precision < {MIN_PRECISION} or word_size < {MIN_WORD_SIZE} or random_source is None"
            )
        self._miller_rabin = MillerRabin(NumberDraw(random_source, word_size), precision)

    def is_prime(self, number: T) -> bool:
        return self._miller_rabin.test(MPC.mpz(number))

    def next_prime(self, start: T) -> MPZ:
        number = MPC.mpz(start)
        if number <= 2:
            return MPC.mpz(2)
        if number % 2 == 0:
            number += 1

        tested = 1
        while not self._miller_rabin.test(number):
            number += 2
            tested += 1

        logger.debug("Found a %d bit prime after %d candidates", number.bit_length(), tested)
        return number
