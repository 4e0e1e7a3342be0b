"""Random number generation module."""

from .SecureRandomSource import SecureRandomSource
from .NumberDraw import NumberDraw
from .abstract.IRandomSource import IRandomSource

__all__ = ["SecureRandomSource", "NumberDraw", "IRandomSource"]
