"""Fiat-Shamir zero-knowledge identification."""

from .exceptions import (
    BadEncodingError,
    FiatShamirError,
    InvalidArgumentError,
    InvalidProtocolStateError,
)
from .random import IRandomSource, NumberDraw, SecureRandomSource
from .primes import IPrimalityTester, ParallelPrimalityTester, SequentialPrimalityTester
from .keys import KeyFactory, PrivateKey, PublicKey
from .converters import KeyConverter
from .protocol import Identification, Prover, ProverState, Verifier, VerifierState
from .SelfTest import SelfTest

__all__ = [
    "BadEncodingError",
    "FiatShamirError",
    "InvalidArgumentError",
    "InvalidProtocolStateError",
    "IRandomSource",
    "NumberDraw",
    "SecureRandomSource",
    "IPrimalityTester",
    "ParallelPrimalityTester",
    "SequentialPrimalityTester",
    "KeyFactory",
    "PrivateKey",
    "PublicKey",
    "KeyConverter",
    "Identification",
    "Prover",
    "ProverState",
    "Verifier",
    "VerifierState",
    "SelfTest",
]
