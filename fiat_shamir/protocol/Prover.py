from ..exceptions import InvalidArgumentError, InvalidProtocolStateError
from ..keys import PrivateKey
from ..mpc import MPC
from ..mpc.types import MPZ, T
from ..protocol_constants import DEFAULT_WORD_SIZE, MIN_WORD_SIZE
from ..random import IRandomSource, NumberDraw
from .ProtocolState import ProverState


class Prover:
    """Party proving knowledge of the secret of a PrivateKey.

    A round is step1 (commitment) then step2 (response to the challenge).
    """

    def __init__(self, private_key: PrivateKey, random_source: IRandomSource) -> None:
        """Initialize a prover.

        Args:
            private_key (PrivateKey): The key to prove knowledge of
            random_source (IRandomSource): Source of the session numbers, it is
                                           not closed by the prover
        """
        if private_key is None or private_key.get_modulus() <= 1:
            raise InvalidArgumentError("private_key is None or modulus <= 1")
        self._key = private_key
        self._draw = NumberDraw(random_source, max(private_key.get_size(), MIN_WORD_SIZE))
        self._session_number = MPC.mpz(0)
        self._state = ProverState.READY

    @classmethod
    def from_secret(
        cls,
        secret: T,
        modulus: T,
        random_source: IRandomSource,
        word_size: int = DEFAULT_WORD_SIZE,
    ) -> "Prover":
        """Build a prover from a bare secret and modulus."""
        if modulus <= 1 or word_size < MIN_WORD_SIZE or random_source is None:
            raise InvalidArgumentError(
                f"modulus <= 1 or word_size < {MIN_WORD_SIZE} or random_source is None"
            )
        return cls(PrivateKey(secret, modulus, word_size), random_source)

    def get_state(self) -> ProverState:
        return self._state

    def step1(self) -> MPZ:
        """Start a round and return the commitment to send to Verifier.step1.

        Calling it again before step2 discards the pending commitment and
        commits to a fresh session number.
        """
        modulus = self._key.get_modulus()
        session_number = MPC.mod(self._draw.get_big(), modulus)
        while session_number < 2:  # 0 and 1 would reveal the key in step2
            session_number = MPC.mod(self._draw.get_big(), modulus)

        self._session_number = session_number
        self._state = ProverState.COMMITTED
        return MPC.square_mod(session_number, modulus)

    def step2(self, challenge: bool) -> MPZ:
        """Answer the challenge returned by Verifier.step1."""
        if self._state is not ProverState.COMMITTED:
            raise InvalidProtocolStateError("Called Prover.step2 before calling Prover.step1")
        self._state = ProverState.READY

        if challenge:
            return MPC.mod(self._session_number * self._key.get_key(), self._key.get_modulus())
        return self._session_number

    def reset(self) -> None:
        """Abandon the current round."""
        self._session_number = MPC.mpz(0)
        self._state = ProverState.READY
