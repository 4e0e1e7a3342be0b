from abc import ABC, abstractmethod
from ..types import MPZ, T


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: T) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            mpz: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def powmod(base: T, exp: T, mod: T) -> MPZ:
        """Compute (base ** exp) % mod efficiently.

        Args:
            base (mpz): Base value
            exp (mpz): Exponent value
            mod (mpz): Modulus value

        Returns:
            mpz: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def mod(value: T, modulus: T) -> MPZ:
        """Compute value % modulus.

        Args:
            value (mpz): Value to reduce
            modulus (mpz): Modulus to reduce by

        Returns:
            mpz: Result of modular reduction
        """

    @staticmethod
    @abstractmethod
    def square_mod(value: T, modulus: T) -> MPZ:
        """Compute value ** 2 % modulus.

        Args:
            value (mpz): Value to square
            modulus (mpz): Modulus to reduce by

        Returns:
            mpz: The modular square
        """

    @staticmethod
    @abstractmethod
    def gcd(first: T, second: T) -> MPZ:
        """Compute the greatest common divisor of two integers.

        Args:
            first (mpz): First value
            second (mpz): Second value

        Returns:
            mpz: gcd(first, second)
        """

    @staticmethod
    @abstractmethod
    def from_signed_bytes(data: bytes) -> MPZ:
        """Decode a little-endian two's-complement byte string.

        Args:
            data (bytes): Encoded integer

        Returns:
            mpz: Decoded integer
        """

    @staticmethod
    @abstractmethod
    def to_signed_bytes(value: T) -> bytes:
        """Encode an integer as minimal little-endian two's-complement bytes.

        Args:
            value (mpz): Integer to encode

        Returns:
            bytes: Encoded integer, a single zero byte for 0
        """
