import secrets
from .abstract.IRandomSource import IRandomSource


class SecureRandomSource(IRandomSource):
    """Implementation of secure random byte generation."""

    def fill(self, buffer: bytearray) -> None:
        buffer[:] = secrets.token_bytes(len(buffer))
