from unittest.mock import patch

import pytest

from fiat_shamir import SelfTest
from fiat_shamir.exceptions import InvalidArgumentError
from fiat_shamir.protocol import Identification
from fiat_shamir.random import SecureRandomSource


def test_run_passes():
    assert SelfTest.run(SecureRandomSource(), word_size=128, rounds=20, precision=60, threads=1)

def test_run_with_parallel_key_generation():
    assert SelfTest.run(SecureRandomSource(), word_size=128, rounds=20, precision=60, threads=4)

def test_default_uses_environment(monkeypatch):
    monkeypatch.setenv("FIAT_SHAMIR_ROUNDS", "16")
    monkeypatch.setenv("PARALLELISM_DIVISOR", "100000")
    with patch.object(Identification, "run", side_effect=[True, False]) as run:
        assert SelfTest.default()
    assert [call.args[2] for call in run.call_args_list] == [16, 16]

@pytest.mark.parametrize("outcomes", [[False], [True, True]])
def test_run_reports_failures(outcomes):
    """Fails when the honest prover is rejected or the forger accepted."""
    with patch.object(Identification, "run", side_effect=outcomes):
        assert not SelfTest.run(SecureRandomSource(), 128, 20, 60, 1)

def test_invalid_rounds():
    with pytest.raises(InvalidArgumentError):
        SelfTest.run(SecureRandomSource(), 128, 0, 60, 1)

def test_invalid_key_parameters():
    with pytest.raises(InvalidArgumentError):
        SelfTest.run(SecureRandomSource(), 64, 20, 60, 1)

def test_identify_honest_and_forged(private_key):
    """The real secret is accepted and key - key // 3 on the same modulus is not."""
    random_source = SecureRandomSource()
    verifier = private_key.get_public_key().get_verifier(random_source)
    assert SelfTest.identify_honest(private_key, verifier, random_source, 20)
    assert not SelfTest.identify_forged(private_key, verifier, random_source, 20)

def test_run_uses_identify_helpers():
    with patch.object(SelfTest, "identify_honest", return_value=True) as honest, \
            patch.object(SelfTest, "identify_forged", return_value=False) as forged:
        assert SelfTest.run(SecureRandomSource(), 128, 20, 60, 1)
    honest.assert_called_once()
    forged.assert_called_once()
