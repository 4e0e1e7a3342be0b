from typing import TYPE_CHECKING

from ..mpc import MPC
from ..mpc.types import MPZ, T
from .PublicKey import PublicKey

if TYPE_CHECKING:
    from ..protocol.Prover import Prover
    from ..random import IRandomSource


class PrivateKey:
    """Secret of a Fiat-Shamir key pair.

    The key is a square root of the public value modulo a composite whose
    factorization is unknown to everyone, the key owner included.
    """

    def __init__(self, key: T, modulus: T, size: int) -> None:
        """Initialize a private key.

        Args:
            key (mpz): The secret, 0 < key < modulus
            modulus (mpz): The composite modulus
            size (int): Word size in bytes the modulus was generated with
        """
        self._key = MPC.mpz(key)
        self._modulus = MPC.mpz(modulus)
        self._size = int(size)

    def get_key(self) -> MPZ:
        return self._key

    def get_modulus(self) -> MPZ:
        return self._modulus

    def get_size(self) -> int:
        return self._size

    def get_public_key(self) -> PublicKey:
        """Return the PublicKey to hand to verifiers."""
        return PublicKey(MPC.square_mod(self._key, self._modulus), self._modulus, self._size)

    def get_prover(self, random_source: "IRandomSource") -> "Prover":
        """Return a Prover for an identification session with this key."""
        from ..protocol.Prover import Prover

        return Prover(self, random_source)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrivateKey):
            return NotImplemented
        return (
            self._key == other._key
            and self._modulus == other._modulus
            and self._size == other._size
        )

    def __hash__(self) -> int:
        return hash((int(self._key), int(self._modulus), self._size))

    def __repr__(self) -> str:
        # never print the secret
        return f"<PrivateKey(size={self._size}, modulus={self._modulus.digits(16)[:16]}...)>"
