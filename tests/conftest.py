import itertools
from typing import Iterable

import pytest

from fiat_shamir.random import IRandomSource, SecureRandomSource


class FixedRandomSource(IRandomSource):
    """Repeats a fixed byte pattern, for tests that need known draws."""

    def __init__(self, pattern: Iterable[int]) -> None:
        self._bytes = itertools.cycle(list(pattern))
        self.calls = 0

    def fill(self, buffer: bytearray) -> None:
        self.calls += 1
        for i in range(len(buffer)):
            buffer[i] = next(self._bytes)


@pytest.fixture
def fixed_random_source():
    """Factory fixture building a random source that repeats a byte pattern."""
    def _create(*pattern: int) -> FixedRandomSource:
        return FixedRandomSource(pattern)
    return _create


@pytest.fixture(scope="session")
def private_key():
    """Fixture generating one full size key pair for the whole test session."""
    from fiat_shamir.keys import KeyFactory

    return KeyFactory.new_key(SecureRandomSource(), word_size=128, threads=1, precision=60)


@pytest.fixture
def small_key():
    """Fixture with a toy key: 10^2 mod 77 = 23."""
    from fiat_shamir.keys import PrivateKey

    return PrivateKey(10, 77, 8)
