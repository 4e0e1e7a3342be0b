from ..exceptions import InvalidArgumentError
from ..mpc import MPC
from ..mpc.types import MPZ
from .abstract.IRandomSource import IRandomSource


class NumberDraw:
    """Draws fixed-width integers from a random byte source."""

    def __init__(self, random_source: IRandomSource, word_size: int) -> None:
        """Initialize the draw.

        Args:
            random_source (IRandomSource): Source of random bytes
            word_size (int): Width in bytes of the big integers drawn
        """
        if random_source is None or word_size < 1:
            raise InvalidArgumentError("random_source is None or word_size < 1")
        self._source = random_source
        self._size = word_size

    def get_size(self) -> int:
        return self._size

    def get_big(self) -> MPZ:
        """Draw a non-negative integer of word_size bytes.

        The top bit of the most significant byte is cleared so the value is
        positive when read as two's complement.
        """
        buffer = self._draw(self._size)
        buffer[-1] &= 0x7F
        return MPC.from_signed_bytes(bytes(buffer))

    def get_int(self) -> int:
        return int.from_bytes(self._draw(4), "little", signed=True)

    def get_long(self) -> int:
        return int.from_bytes(self._draw(8), "little", signed=True)

    def get_uint(self) -> int:
        return int.from_bytes(self._draw(4), "little")

    def get_ulong(self) -> int:
        return int.from_bytes(self._draw(8), "little")

    def get_bit(self) -> bool:
        return bool(self._draw(1)[0] & 1)

    # Private methods
    # --------------

    def _draw(self, length: int) -> bytearray:
        # fresh buffer per call, one draw may be shared by worker threads
        buffer = bytearray(length)
        self._source.fill(buffer)
        return buffer
