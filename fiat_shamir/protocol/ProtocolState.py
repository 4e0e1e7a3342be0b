from enum import Enum


class ProverState(Enum):
    """States of a Prover session."""
    READY = "ready"
    COMMITTED = "committed"


class VerifierState(Enum):
    """States of a Verifier session."""
    READY = "ready"
    CHALLENGE_SENT = "challenge_sent"
