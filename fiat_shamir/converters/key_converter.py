"""Converter for the binary representation of keys.

Layout, little-endian scalars:

    [4 bytes: int32 length L of the key bytes]
    [4 bytes: uint32 word size]
    [L bytes: key, two's-complement]
    [remaining bytes: modulus, two's-complement]
"""

import struct
from typing import Tuple, Union

from ..exceptions import BadEncodingError
from ..keys import PrivateKey, PublicKey
from ..mpc import MPC
from ..mpc.types import MPZ

_HEADER = struct.Struct("<iI")


class KeyConverter:
    """Converter between keys and their binary representation."""

    @staticmethod
    def to_bytes(key: Union[PrivateKey, PublicKey]) -> bytes:
        """Convert a PrivateKey or a PublicKey to bytes.

        Args:
            key (PrivateKey | PublicKey): The key to convert

        Returns:
            bytes: The encoded key
        """
        key_bytes = MPC.to_signed_bytes(key.get_key())
        modulus_bytes = MPC.to_signed_bytes(key.get_modulus())
        return _HEADER.pack(len(key_bytes), key.get_size()) + key_bytes + modulus_bytes

    @staticmethod
    def private_key_from_bytes(data: bytes) -> PrivateKey:
        """Restore a PrivateKey encoded with to_bytes.

        Raises:
            BadEncodingError: data does not represent a key
        """
        return PrivateKey(*KeyConverter._decode(data, min_key=1))

    @staticmethod
    def public_key_from_bytes(data: bytes) -> PublicKey:
        """Restore a PublicKey encoded with to_bytes.

        Raises:
            BadEncodingError: data does not represent a key
        """
        return PublicKey(*KeyConverter._decode(data, min_key=0))

    @staticmethod
    def to_hex(key: Union[PrivateKey, PublicKey]) -> str:
        return KeyConverter.to_bytes(key).hex()

    @staticmethod
    def private_key_from_hex(data: str) -> PrivateKey:
        return KeyConverter.private_key_from_bytes(KeyConverter._from_hex(data))

    @staticmethod
    def public_key_from_hex(data: str) -> PublicKey:
        return KeyConverter.public_key_from_bytes(KeyConverter._from_hex(data))

    # Private methods
    # --------------

    @staticmethod
    def _from_hex(data: str) -> bytes:
        try:
            return bytes.fromhex(data)
        except ValueError as e:
            raise BadEncodingError("data is not a hex string") from e

    @staticmethod
    def _decode(data: bytes, min_key: int) -> Tuple[MPZ, MPZ, int]:
        try:
            length, size = _HEADER.unpack_from(data, 0)
        except (struct.error, TypeError) as e:
            raise BadEncodingError("data does not hold a key header") from e

        key_start = _HEADER.size
        modulus_start = key_start + length
        if length <= 0 or modulus_start >= len(data):
            raise BadEncodingError("key length does not fit the data")

        key = MPC.from_signed_bytes(data[key_start:modulus_start])
        modulus = MPC.from_signed_bytes(data[modulus_start:])
        if modulus <= 1 or not min_key <= key < modulus:
            raise BadEncodingError("data does not represent a key")
        return key, modulus, size
