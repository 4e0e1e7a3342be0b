"""Utility modules for the identification library."""

from .SystemSpecs import SystemSpecs
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables

__all__ = ["SystemSpecs", "EnvironmentManager", "EnvironmentVariables"]
