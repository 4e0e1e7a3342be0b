"""Identification protocol module."""

from .ProtocolState import ProverState, VerifierState
from .Prover import Prover
from .Verifier import Verifier
from .Identification import Identification

__all__ = ["ProverState", "VerifierState", "Prover", "Verifier", "Identification"]
