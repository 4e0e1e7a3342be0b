"""Utility class for system specifications and resource management."""

import multiprocessing
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for sizing the prime search to the machine."""

    @staticmethod
    def get_num_threads() -> int:
        """
        Number of threads KeyFactory should spend on the prime search.

        CPU cores divided by PARALLELISM_DIVISOR (default 2), at least 1. Four
        or more threads make key generation search both primes in parallel.

        Returns:
            int: Number of threads to use
        """
        divisor = EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR)
        if divisor < 1:
            divisor = EnvironmentVariables.PARALLELISM_DIVISOR.default_value
        return multiprocessing.cpu_count() // divisor or 1
