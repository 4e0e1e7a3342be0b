from unittest.mock import patch

import gmpy2
import pytest
from gmpy2 import mpz

from fiat_shamir.exceptions import InvalidArgumentError
from fiat_shamir.keys import KeyFactory, PrivateKey, PublicKey
from fiat_shamir.primes import ParallelPrimalityTester, SequentialPrimalityTester
from fiat_shamir.random import SecureRandomSource


def test_generated_key_invariants(private_key):
    key = private_key.get_key()
    modulus = private_key.get_modulus()
    assert isinstance(private_key, PrivateKey)
    assert private_key.get_size() == 128
    assert 3 < key < modulus
    assert gmpy2.gcd(key, modulus) == 1
    assert key * key % modulus != key * key
    assert KeyFactory.key_check(key, modulus)
    assert modulus.bit_length() <= 1024
    assert not gmpy2.is_prime(modulus)

def test_public_key_is_the_square_of_the_secret(private_key):
    public_key = KeyFactory.get_public_key(private_key)
    assert isinstance(public_key, PublicKey)
    assert public_key.get_key() == private_key.get_key() ** 2 % private_key.get_modulus()
    assert public_key.get_modulus() == private_key.get_modulus()
    assert public_key.get_size() == private_key.get_size()
    assert public_key == private_key.get_public_key()

def test_generated_secrets_pass_the_key_check(private_key):
    """The secret draw loop only ever returns keys that pass key_check."""
    modulus = private_key.get_modulus()
    for _ in range(200):
        key = KeyFactory._generate_key(SecureRandomSource(), 128, modulus)
        assert key > 3
        assert gmpy2.gcd(key, modulus) == 1
        assert gmpy2.gcd(key * key % modulus, modulus) == 1
        assert key * key % modulus != key * key

def test_sequential_testers_below_four_threads():
    with patch.object(
        SequentialPrimalityTester,
        "next_prime",
        autospec=True,
        side_effect=SequentialPrimalityTester.next_prime,
    ) as next_prime:
        private_key = KeyFactory.new_key(SecureRandomSource(), 128, threads=3, precision=60)
    assert next_prime.call_count == 2
    assert KeyFactory.key_check(private_key.get_key(), private_key.get_modulus())

def test_parallel_testers_from_four_threads():
    with patch.object(
        ParallelPrimalityTester,
        "next_prime",
        autospec=True,
        side_effect=ParallelPrimalityTester.next_prime,
    ) as next_prime:
        private_key = KeyFactory.new_key(SecureRandomSource(), 128, threads=4, precision=60)
    assert next_prime.call_count == 2
    assert sorted(call.args[0].get_threads() for call in next_prime.call_args_list) == [2, 2]
    assert KeyFactory.key_check(private_key.get_key(), private_key.get_modulus())

@pytest.mark.parametrize(
    "source, word_size, threads, precision",
    [
        (None, 128, 1, 60),
        (SecureRandomSource(), 127, 1, 60),
        (SecureRandomSource(), 128, 0, 60),
        (SecureRandomSource(), 128, -2, 60),
        (SecureRandomSource(), 128, 1, 59),
    ],
)
def test_invalid_arguments(source, word_size, threads, precision):
    with pytest.raises(InvalidArgumentError):
        KeyFactory.new_key(source, word_size, threads, precision)
    with pytest.raises(InvalidArgumentError):
        KeyFactory.new_key_from_secret(2**700 + 1, source, word_size, threads, precision)

def test_new_key_from_secret():
    secret = mpz(2**700 + 1)
    private_key = KeyFactory.new_key_from_secret(secret, SecureRandomSource())
    assert private_key.get_key() == secret
    assert private_key.get_size() == 128
    assert KeyFactory.key_check(secret, private_key.get_modulus())

@pytest.mark.parametrize("secret", [2, 3, 2**2000])
def test_new_key_from_invalid_secret(secret):
    with pytest.raises(InvalidArgumentError):
        KeyFactory.new_key_from_secret(secret, SecureRandomSource())

def test_resume_private_key(private_key):
    public_key = private_key.get_public_key()
    resumed = KeyFactory.resume_private_key(public_key, private_key.get_key())
    assert resumed == private_key

@pytest.mark.parametrize("offset", [1, -1])
def test_resume_private_key_rejects_wrong_secret(private_key, offset):
    with pytest.raises(InvalidArgumentError):
        KeyFactory.resume_private_key(private_key.get_public_key(), private_key.get_key() + offset)

def test_resume_private_key_rejects_out_of_range_secret(small_key):
    public_key = small_key.get_public_key()
    assert KeyFactory.resume_private_key(public_key, 10) == small_key
    with pytest.raises(InvalidArgumentError):
        KeyFactory.resume_private_key(public_key, 10 + 77)

@pytest.mark.parametrize(
    "first, second, expected",
    [
        (100, 101, False),          # (p - q)^4 below p * q
        (1000, 2000, False),        # p * q too close to p^2
        (2**20, 2**20 + 2**16, True),
        (2**40, 2**20, True),
    ],
)
def test_security_check(first, second, expected):
    assert KeyFactory.security_check(mpz(first), mpz(second)) is expected

@pytest.mark.parametrize(
    "key, expected",
    [
        (2, False),     # too small
        (7, False),     # shares a factor with 77
        (5, False),     # 25 < 77, the square does not wrap
        (10, True),
    ],
)
def test_key_check(key, expected):
    assert KeyFactory.key_check(mpz(key), mpz(77)) is expected
