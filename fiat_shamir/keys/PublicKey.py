from typing import TYPE_CHECKING, Optional

from ..mpc import MPC
from ..mpc.types import MPZ, T

if TYPE_CHECKING:
    from ..protocol.Verifier import Verifier
    from ..random import IRandomSource


class PublicKey:
    """Public value of a Fiat-Shamir key pair, key = secret^2 mod modulus."""

    def __init__(self, key: T, modulus: T, size: int) -> None:
        """Initialize a public key.

        Args:
            key (mpz): The quadratic residue published by the prover
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

    def get_verifier(self, random_source: Optional["IRandomSource"] = None) -> "Verifier":
        """Return a Verifier for an identification session against this key."""
        from ..protocol.Verifier import Verifier

        return Verifier(self, random_source)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return (
            self._key == other._key
            and self._modulus == other._modulus
            and self._size == other._size
        )

    def __hash__(self) -> int:
        return hash((int(self._key), int(self._modulus), self._size))

    def __repr__(self) -> str:
        return f"<PublicKey(size={self._size}, modulus={self._modulus.digits(16)[:16]}...)>"
