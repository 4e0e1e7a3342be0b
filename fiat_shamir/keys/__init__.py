"""Key pair module."""

from .PrivateKey import PrivateKey
from .PublicKey import PublicKey
from .KeyFactory import KeyFactory

__all__ = ["PrivateKey", "PublicKey", "KeyFactory"]
