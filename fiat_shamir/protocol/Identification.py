import logging

from ..exceptions import InvalidArgumentError
from .Prover import Prover
from .Verifier import Verifier

logger = logging.getLogger(__name__)


class Identification:
    """Runs repeated identification rounds between a local prover and verifier."""

    @staticmethod
    def run(prover: Prover, verifier: Verifier, rounds: int) -> bool:
        """Run rounds of the protocol, stopping at the first rejection.

        A cheating prover survives all rounds with probability 1/2^rounds.

        Args:
            prover (Prover): The party proving its identity
            verifier (Verifier): The party checking it
            rounds (int): Number of rounds, at least 1

        Returns:
            bool: True if every round was accepted
        """
        if rounds < 1:
            raise InvalidArgumentError("rounds < 1")

        for iteration in range(rounds):
            commitment = prover.step1()
            challenge = verifier.step1(commitment)
            response = prover.step2(challenge)
            if not verifier.step2(response):
                logger.debug("Rejected at round %d of %d", iteration + 1, rounds)
                return False
        return True
