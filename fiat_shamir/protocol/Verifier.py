import logging
from typing import Optional

from ..exceptions import InvalidArgumentError, InvalidProtocolStateError
from ..keys import PublicKey
from ..mpc import MPC
from ..mpc.types import MPZ, T
from ..random import IRandomSource, NumberDraw, SecureRandomSource
from .ProtocolState import VerifierState

logger = logging.getLogger(__name__)


class Verifier:
    """Party checking that a Prover holds the secret of a PublicKey.

    A single round accepts a cheating prover with probability 1/2, callers
    repeat rounds to reach the soundness they need.
    """

    def __init__(
        self, public_key: PublicKey, random_source: Optional[IRandomSource] = None
    ) -> None:
        """Initialize a verifier.

        Args:
            public_key (PublicKey): The key the prover claims to own
            random_source (IRandomSource, optional): Source of the challenges,
                a SecureRandomSource when omitted. Predictable challenges let
                a cheating prover pass every round.
        """
        if public_key is None or public_key.get_modulus() <= 1:
            raise InvalidArgumentError("public_key is None or modulus <= 1")
        self._key = public_key
        self._bits = NumberDraw(random_source or SecureRandomSource(), 1)
        self._session_number = MPC.mpz(0)
        self._challenge = False
        self._result = False
        self._state = VerifierState.READY

    def get_state(self) -> VerifierState:
        return self._state

    def step1(self, commitment: T) -> bool:
        """Take the result of Prover.step1 and return the challenge to send back."""
        if self._state is not VerifierState.READY:
            raise InvalidProtocolStateError("Called Verifier.step1 twice without Verifier.step2")
        if commitment < 2:
            raise InvalidArgumentError("commitment < 2")

        self._session_number = MPC.mpz(commitment)
        self._challenge = self._bits.get_bit()
        self._result = False
        self._state = VerifierState.CHALLENGE_SENT
        return self._challenge

    def step2(self, response: T) -> bool:
        """Take the result of Prover.step2 and return whether the round is accepted."""
        if self._state is not VerifierState.CHALLENGE_SENT:
            raise InvalidProtocolStateError("Called Verifier.step2 before calling Verifier.step1")
        self._state = VerifierState.READY

        modulus = self._key.get_modulus()
        if self._challenge:
            expected = MPC.mod(self._session_number * self._key.get_key(), modulus)
        else:
            expected = self._session_number

        self._result = MPC.square_mod(response, modulus) == expected
        if not self._result:
            logger.warning("Identification round rejected")
        return self._result

    def check_state(self) -> bool:
        """Return the result of the last round."""
        return self._result

    def reset(self) -> None:
        self._session_number = MPC.mpz(0)
        self._challenge = False
        self._result = False
        self._state = VerifierState.READY
