"""Converters for keys."""

from .key_converter import KeyConverter

__all__ = ["KeyConverter"]
