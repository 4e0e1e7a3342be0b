from unittest.mock import patch

import pytest

from fiat_shamir.exceptions import InvalidArgumentError
from fiat_shamir.keys import KeyFactory
from fiat_shamir.protocol import Identification, Prover, Verifier
from fiat_shamir.random import NumberDraw, SecureRandomSource

ROUNDS = 20


def run_rounds(prover, verifier, rounds=ROUNDS):
    results = []
    for _ in range(rounds):
        challenge = verifier.step1(prover.step1())
        results.append(verifier.step2(prover.step2(challenge)))
    return results

def test_honest_prover_is_always_accepted(private_key):
    random_source = SecureRandomSource()
    prover = private_key.get_prover(random_source)
    verifier = private_key.get_public_key().get_verifier(random_source)
    assert run_rounds(prover, verifier) == [True] * ROUNDS
    assert Identification.run(prover, verifier, ROUNDS)

def test_wrong_secret_is_rejected(private_key):
    """A forger passes a round with probability 1/2, 20 rounds all pass with 2^-20."""
    random_source = SecureRandomSource()
    verifier = private_key.get_public_key().get_verifier(random_source)
    wrong_secret = NumberDraw(random_source, 128).get_big() % private_key.get_modulus()
    forger = Prover.from_secret(wrong_secret, private_key.get_modulus(), random_source)
    assert False in run_rounds(forger, verifier)

def test_wrong_secret_fails_every_key_challenge(private_key):
    random_source = SecureRandomSource()
    key = private_key.get_key()
    forger = Prover.from_secret(key - key // 3, private_key.get_modulus(), random_source)
    verifier = Verifier(private_key.get_public_key(), random_source)
    with patch.object(NumberDraw, "get_bit", return_value=True):
        assert run_rounds(forger, verifier, 5) == [False] * 5

def test_concrete_scenario(private_key):
    """Honest rounds all pass, an independent secret and modulus pair fails at least once."""
    random_source = SecureRandomSource()
    verifier = Verifier(private_key.get_public_key(), random_source)
    honest = Prover(private_key, random_source)
    assert all(run_rounds(honest, verifier))

    other_key = KeyFactory.new_key(random_source, word_size=128, threads=1, precision=60)
    forger = Prover.from_secret(other_key.get_key(), other_key.get_modulus(), random_source)
    assert not all(run_rounds(forger, verifier))

def test_run_stops_at_first_rejection(private_key):
    random_source = SecureRandomSource()
    key = private_key.get_key()
    forger = Prover.from_secret(key - key // 3, private_key.get_modulus(), random_source)
    verifier = Verifier(private_key.get_public_key(), random_source)
    with patch.object(NumberDraw, "get_bit", return_value=True):
        with patch.object(Verifier, "step2", autospec=True, side_effect=Verifier.step2) as step2:
            assert Identification.run(forger, verifier, ROUNDS) is False
    assert step2.call_count == 1

@pytest.mark.parametrize("rounds", [0, -1])
def test_invalid_rounds(private_key, rounds):
    random_source = SecureRandomSource()
    with pytest.raises(InvalidArgumentError):
        Identification.run(
            private_key.get_prover(random_source),
            private_key.get_public_key().get_verifier(),
            rounds,
        )
