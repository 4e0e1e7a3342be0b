import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from ..exceptions import InvalidArgumentError
from ..mpc import MPC
from ..mpc.types import MPZ, T
from ..protocol_constants import (
    DEFAULT_PRECISION,
    DEFAULT_WORD_SIZE,
    MIN_PRECISION,
    MIN_THREADS,
    MIN_WORD_SIZE,
)
from ..random import IRandomSource, NumberDraw
from .MillerRabin import MillerRabin
from .abstract.IPrimalityTester import IPrimalityTester

logger = logging.getLogger(__name__)


class _PrimeSearch:
    """State shared by the workers of a single next_prime call."""

    def __init__(self) -> None:
        self._stop = threading.Event()
        self._claim = threading.Lock()
        self._done = threading.Event()
        self._result: Optional[MPZ] = None
        self._error: Optional[BaseException] = None
        self._winner: Optional[int] = None

    def should_continue(self) -> bool:
        return not self._stop.is_set()

    def stop(self) -> None:
        self._stop.set()

    def complete(self, result: MPZ, worker_id: int) -> bool:
        """Record the prime found by a worker, only the first caller wins."""
        if not self._claim.acquire(blocking=False):
            return False
        self._result = result
        self._winner = worker_id
        self._stop.set()
        self._done.set()
        return True

    def fail(self, error: BaseException) -> bool:
        if not self._claim.acquire(blocking=False):
            return False
        self._error = error
        self._stop.set()
        self._done.set()
        return True

    def wait(self) -> MPZ:
        self._done.wait()
        if self._error is not None:
            raise self._error
        return self._result

    def get_winner(self) -> Optional[int]:
        return self._winner


class ParallelPrimalityTester(IPrimalityTester):
    """Multi-threaded implementation of primality testing.

    next_prime splits the odd candidates into `threads` disjoint residue
    classes: worker i starts at start + 2i and steps by 2 * threads. The first
    worker to find a prime wins and the others are cancelled between
    Miller-Rabin rounds. The result is a prime >= start, not necessarily the
    smallest one.
    """

    def __init__(
        self,
        random_source: IRandomSource,
        precision: int = DEFAULT_PRECISION,
        word_size: int = DEFAULT_WORD_SIZE,
        threads: int = MIN_THREADS,
    ) -> None:
        """Initialize the tester.

        Args:
            random_source (IRandomSource): Source of the Miller-Rabin witnesses,
                                           shared by all workers
            precision (int): Miller-Rabin rounds, error = 1/2^(2*precision)
            word_size (int): Length in bytes of the drawn witnesses
            threads (int): Number of workers per next_prime call
        """
        if (
            precision < MIN_PRECISION
            or word_size < MIN_WORD_SIZE
            or threads < MIN_THREADS
            or random_source is None
        ):
            raise InvalidArgumentError(
                f"precision < {MIN_PRECISION} or word_size < {MIN_WORD_SIZE} "
                f"or threads < {MIN_THREADS} or random_source is None"
            )
        self._miller_rabin = MillerRabin(NumberDraw(random_source, word_size), precision)
        self._threads = threads

    def get_threads(self) -> int:
        return self._threads

    def is_prime(self, number: T) -> bool:
        return self._miller_rabin.test(MPC.mpz(number))

    def next_prime(self, start: T) -> MPZ:
        number = MPC.mpz(start)
        if number <= 2:
            return MPC.mpz(2)
        if number % 2 == 0:
            number += 1

        search = _PrimeSearch()
        with ThreadPoolExecutor(
            max_workers=self._threads, thread_name_prefix="prime-search"
        ) as executor:
            for worker_id in range(self._threads):
                executor.submit(self._search, search, number, worker_id)
            try:
                result = search.wait()
            finally:
                search.stop()

        logger.debug(
            "Worker %d of %d found a %d bit prime",
            search.get_winner(),
            self._threads,
            result.bit_length(),
        )
        return result

    # Private methods
    # --------------

    def _search(self, search: _PrimeSearch, start: MPZ, worker_id: int) -> None:
        try:
            number = start + 2 * worker_id
            increment = 2 * self._threads
            while search.should_continue():
                if self._miller_rabin.test(number, search.should_continue):
                    search.complete(number, worker_id)
                    return
                number += increment
        except Exception as e:
            logger.debug("Worker %d failed: %r", worker_id, e)
            search.fail(e)
