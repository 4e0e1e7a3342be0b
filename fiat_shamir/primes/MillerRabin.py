from typing import Callable, Optional, Tuple

from ..mpc import MPC
from ..mpc.types import MPZ
from ..random import NumberDraw


class MillerRabin:
    """Miller-Rabin probabilistic primality test.

    Each round draws a random witness y in [2, n) and passes when
    gcd(y, n) = 1 and either y^z = 1 or y^(2^i * z) = -1 (mod n) for some
    0 <= i < w, where n - 1 = 2^w * z with z odd. A composite passes a round
    with probability at most 1/4, so `precision` rounds bound the error by
    1/2^(2*precision).
    """

    def __init__(self, draw: NumberDraw, precision: int) -> None:
        self._draw = draw
        self._precision = precision

    def get_precision(self) -> int:
        return self._precision

    def test(
        self, number: MPZ, should_continue: Optional[Callable[[], bool]] = None
    ) -> bool:
        """Run the test on number.

        Args:
            number (mpz): Number to test
            should_continue (Callable[[], bool], optional): Checked before every
                round, the test gives up and returns False once it is False

        Returns:
            bool: True if number is probably prime
        """
        if number == 2:
            return True
        if number < 2 or number % 2 == 0:
            return False

        w, z = MillerRabin.decompose(number)
        for _ in range(self._precision):
            if should_continue is not None and not should_continue():
                return False
            if not self._round(self._witness(number), number, w, z):
                return False
        return True

    @staticmethod
    def decompose(number: MPZ) -> Tuple[int, MPZ]:
        """Write number - 1 as 2^w * z with z odd.

        Returns:
            Tuple[int, mpz]: The pair (w, z)
        """
        z = MPC.mpz(number - 1)
        w = 0
        while z % 2 == 0:
            w += 1
            z >>= 1
        return w, z

    # Private methods
    # --------------

    def _witness(self, number: MPZ) -> MPZ:
        # uniform enough over [2, number) for number much smaller than 2^(8*word_size)
        return 2 + self._draw.get_big() % (number - 2)

    @staticmethod
    def _round(y: MPZ, number: MPZ, w: int, z: MPZ) -> bool:
        if MPC.gcd(y, number) != 1:
            return False

        x = MPC.powmod(y, z, number)
        if x == 1:
            return True
        for _ in range(w):
            if x == number - 1:
                return True
            x = MPC.square_mod(x, number)
        return False
