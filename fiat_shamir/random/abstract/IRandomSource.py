from abc import ABC, abstractmethod


class IRandomSource(ABC):
    """Abstract base class defining the interface for a secure random byte source."""

    @abstractmethod
    def fill(self, buffer: bytearray) -> None:
        """Overwrite every byte of the buffer with random bytes.

        Implementations must be cryptographically secure and safe to call
        from several threads at once.

        Args:
            buffer (bytearray): Buffer to fill in place
        """
