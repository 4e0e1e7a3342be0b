import logging
import time
from concurrent.futures import ThreadPoolExecutor

from ..exceptions import InvalidArgumentError
from ..mpc import MPC
from ..mpc.types import MPZ, T
from ..primes import IPrimalityTester, ParallelPrimalityTester, SequentialPrimalityTester
from ..protocol_constants import (
    KEY_MIN_PRECISION,
    KEY_MIN_WORD_SIZE,
    NEAR_SQUARE_THRESHOLD,
    PARALLEL_KEY_THREADS,
)
from ..random import IRandomSource, NumberDraw
from .PrivateKey import PrivateKey
from .PublicKey import PublicKey

logger = logging.getLogger(__name__)


class KeyFactory:
    """Factory for Fiat-Shamir key pairs."""

    @staticmethod
    def new_key(
        random_source: IRandomSource,
        word_size: int = KEY_MIN_WORD_SIZE,
        threads: int = 1,
        precision: int = KEY_MIN_PRECISION,
    ) -> PrivateKey:
        """Generate a fresh modulus and a random secret.

        Args:
            random_source (IRandomSource): Secure source of random bytes
            word_size (int): Length in bytes of the modulus, at least 128
            threads (int): Threads used for the prime search, 4 or more
                           searches both primes in parallel
            precision (int): Miller-Rabin rounds, at least 60

        Returns:
            PrivateKey: The generated key
        """
        KeyFactory._validate(random_source, word_size, threads, precision)
        modulus = KeyFactory._generate_modulus(random_source, word_size, threads, precision)
        key = KeyFactory._generate_key(random_source, word_size, modulus)

        logger.info("Generated a %d bit key pair", modulus.bit_length())
        return PrivateKey(key, modulus, word_size)

    @staticmethod
    def new_key_from_secret(
        secret: T,
        random_source: IRandomSource,
        word_size: int = KEY_MIN_WORD_SIZE,
        threads: int = 1,
        precision: int = KEY_MIN_PRECISION,
    ) -> PrivateKey:
        """Generate a fresh modulus for a secret chosen by the caller.

        Raises:
            InvalidArgumentError: The secret fails the key check against the
                                  generated modulus
        """
        KeyFactory._validate(random_source, word_size, threads, precision)
        secret = MPC.mpz(secret)
        if secret <= 3:
            raise InvalidArgumentError("secret <= 3")

        modulus = KeyFactory._generate_modulus(random_source, word_size, threads, precision)
        if secret >= modulus or not KeyFactory.key_check(secret, modulus):
            raise InvalidArgumentError("secret is not a valid key for the generated modulus")

        return PrivateKey(secret, modulus, word_size)

    @staticmethod
    def resume_private_key(public_key: PublicKey, secret: T) -> PrivateKey:
        """Rebuild the PrivateKey matching a known PublicKey.

        Raises:
            InvalidArgumentError: secret^2 mod modulus is not the public value
        """
        secret = MPC.mpz(secret)
        modulus = public_key.get_modulus()
        if not 0 < secret < modulus or MPC.square_mod(secret, modulus) != public_key.get_key():
            raise InvalidArgumentError("secret does not match the public key")
        return PrivateKey(secret, modulus, public_key.get_size())

    @staticmethod
    def get_public_key(private_key: PrivateKey) -> PublicKey:
        return private_key.get_public_key()

    @staticmethod
    def security_check(first: T, second: T) -> bool:
        """Reject prime seeds that would make the modulus easy to factor.

        Close factors fall to Fermat factorization, so (first - second)^4 must
        exceed first * second, and the product must stay far from both squares.
        """
        product = first * second
        if (first - second) ** 4 <= product:
            return False
        if abs(product - first * first) <= NEAR_SQUARE_THRESHOLD:
            return False
        if abs(product - second * second) <= NEAR_SQUARE_THRESHOLD:
            return False
        return True

    @staticmethod
    def key_check(key: T, modulus: T) -> bool:
        """Check a secret against its modulus.

        The secret and its square must both be invertible, and squaring must
        wrap around the modulus so the square root is not the integer one.
        """
        if key <= 3 or MPC.gcd(key, modulus) != 1:
            return False
        square = key * key
        reduced = MPC.mod(square, modulus)
        return MPC.gcd(reduced, modulus) == 1 and reduced != square

    # Private methods
    # --------------

    @staticmethod
    def _validate(
        random_source: IRandomSource, word_size: int, threads: int, precision: int
    ) -> None:
        if (
            random_source is None
            or word_size < KEY_MIN_WORD_SIZE
            or threads < 1
            or precision < KEY_MIN_PRECISION
        ):
            raise InvalidArgumentError(
                f"random_source is None or word_size < {KEY_MIN_WORD_SIZE} "
                f"or threads < 1 or precision < {KEY_MIN_PRECISION}"
            )

    @staticmethod
    def _generate_modulus(
        random_source: IRandomSource, word_size: int, threads: int, precision: int
    ) -> MPZ:
        start_time = time.time()
        draw = NumberDraw(random_source, word_size // 2)

        first = draw.get_big()
        second = draw.get_big()
        while not KeyFactory.security_check(first, second):
            logger.debug("Prime seeds failed the security check, drawing again")
            second = draw.get_big()

        main_tester: IPrimalityTester
        worker_tester: IPrimalityTester
        if threads < PARALLEL_KEY_THREADS:
            main_tester = SequentialPrimalityTester(random_source, precision, word_size)
            worker_tester = SequentialPrimalityTester(random_source, precision, word_size)
            first = worker_tester.next_prime(first)
            second = main_tester.next_prime(second)
        else:
            main_tester = ParallelPrimalityTester(
                random_source, precision, word_size, threads - threads // 2
            )
            worker_tester = ParallelPrimalityTester(
                random_source, precision, word_size, threads // 2
            )
            with ThreadPoolExecutor(max_workers=1, thread_name_prefix="modulus") as executor:
                worker = executor.submit(worker_tester.next_prime, first)
                second = main_tester.next_prime(second)
                first = worker.result()

        logger.debug("Modulus generated in %.4f seconds", time.time() - start_time)
        return first * second

    @staticmethod
    def _generate_key(random_source: IRandomSource, word_size: int, modulus: MPZ) -> MPZ:
        draw = NumberDraw(random_source, word_size)
        key = MPC.mod(draw.get_big(), modulus)
        while not KeyFactory.key_check(key, modulus):
            key = MPC.mod(draw.get_big(), modulus)
        return key
