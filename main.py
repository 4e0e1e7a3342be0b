"""Self test harness for key generation and identification."""

import argparse
import logging
import time
from typing import List, Optional

from fiat_shamir import KeyConverter, KeyFactory, SecureRandomSource, SelfTest
from fiat_shamir.exceptions import InvalidArgumentError
from fiat_shamir.utils import EnvironmentManager, EnvironmentVariables, SystemSpecs


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate a key pair and run honest and forged identifications against it."
    )
    parser.add_argument(
        "--word-size",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.WORD_SIZE),
        help="Length of the modulus in bytes (at least 128)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.ROUNDS),
        help="Identification rounds, a forger passes with probability 1/2^rounds",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.PRECISION),
        help="Miller-Rabin rounds (at least 60)",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=SystemSpecs.get_num_threads(),
        help="Threads for the prime search, 4 or more search both primes in parallel",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the harness and return the process exit code."""
    args = parse_args(argv)
    logging.basicConfig(
        level=EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    random_source = SecureRandomSource()

    print("=" * 80)
    print("FIAT-SHAMIR IDENTIFICATION TEST HARNESS")
    print("=" * 80)
    print(f"\nWord size: {args.word_size} bytes")
    print(f"Rounds:    {args.rounds}")
    print(f"Precision: {args.precision}")
    print(f"Threads:   {args.threads}")

    if args.rounds < 1:
        print("\n✗ Invalid arguments: rounds < 1")
        return 1

    print("\n" + "=" * 80)
    print("STEP 1: GENERATE KEY PAIR")
    print("=" * 80)
    start_time = time.time()
    try:
        private_key = KeyFactory.new_key(random_source, args.word_size, args.threads, args.precision)
    except InvalidArgumentError as e:
        print(f"\n✗ Invalid arguments: {e}")
        return 1
    gen_time = time.time() - start_time
    public_key = private_key.get_public_key()

    print(f"\nKey pair generated in {gen_time:.2f} seconds")
    print(f"  modulus bits = {private_key.get_modulus().bit_length()}")
    print(f"  public key   = {KeyConverter.to_hex(public_key)[:50]}...")

    verifier = public_key.get_verifier(random_source)

    print("\n" + "=" * 80)
    print("STEP 2: IDENTIFY WITH THE PRIVATE KEY")
    print("=" * 80)
    start_time = time.time()
    honest = SelfTest.identify_honest(private_key, verifier, random_source, args.rounds)
    honest_time = time.time() - start_time
    print(f"\nHonest prover accepted: {honest} ({honest_time:.4f} seconds)")

    print("\n" + "=" * 80)
    print("STEP 3: IDENTIFY WITH A FORGED KEY")
    print("=" * 80)
    forged = SelfTest.identify_forged(private_key, verifier, random_source, args.rounds)
    print(f"\nForged prover accepted: {forged}")

    print("\n" + "=" * 80)
    print("SUMMARY")
    print("=" * 80)
    if honest and not forged:
        print("\n✓ ALL TESTS PASSED! ✓")
        return 0
    else:
        print("\n✗ TESTS FAILED! ✗")
        return 1


if __name__ == "__main__":
    exit(main())
