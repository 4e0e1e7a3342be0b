# protocol_constants.py

from dotenv import load_dotenv

load_dotenv()

MIN_PRECISION = 5               # Miller-Rabin rounds accepted by a primality tester
MIN_WORD_SIZE = 8               # Bytes accepted by a primality tester or a prover
MIN_THREADS = 2                 # Workers accepted by the parallel tester

KEY_MIN_WORD_SIZE = 128         # Bytes of a generated modulus
KEY_MIN_PRECISION = 60          # Miller-Rabin rounds used for key generation
PARALLEL_KEY_THREADS = 4        # From here on both primes are searched in parallel

NEAR_SQUARE_THRESHOLD = 2**31 - 1  # Minimum |p*q - p^2| and |p*q - q^2|

DEFAULT_PRECISION = 20
DEFAULT_WORD_SIZE = 128
DEFAULT_ROUNDS = 20             # Identification rounds, soundness error 2^-20
