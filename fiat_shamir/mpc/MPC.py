import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ, T


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: T) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def powmod(base: T, exp: T, mod: T) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def mod(value: T, modulus: T) -> MPZ:
        return gmpy2.mpz(value) % modulus

    @staticmethod
    def square_mod(value: T, modulus: T) -> MPZ:
        return gmpy2.powmod(value, 2, modulus)

    @staticmethod
    def gcd(first: T, second: T) -> MPZ:
        return gmpy2.gcd(first, second)

    @staticmethod
    def from_signed_bytes(data: bytes) -> MPZ:
        return gmpy2.mpz(int.from_bytes(data, "little", signed=True))

    @staticmethod
    def to_signed_bytes(value: T) -> bytes:
        value = int(value)
        # one extra bit for the sign, at least one byte for zero
        length = (value.bit_length() + 8) // 8
        return value.to_bytes(length, "little", signed=True)
