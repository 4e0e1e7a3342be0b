from abc import ABC, abstractmethod
from ...mpc.types import MPZ, T


class IPrimalityTester(ABC):
    """Abstract base class defining the interface for primality testing."""

    @abstractmethod
    def is_prime(self, number: T) -> bool:
        """Miller-Rabin primality test.

        Args:
            number (mpz): Number to test

        Returns:
            bool: True if number is probably prime, the error being at most
                  1/2^(2*precision)
        """

    @abstractmethod
    def next_prime(self, start: T) -> MPZ:
        """Find a prime number at or above the given value.

        Args:
            start (mpz): Starting value

        Returns:
            mpz: A probable prime >= start
        """
