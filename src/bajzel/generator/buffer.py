"""Fixed-capacity output buffer.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["OutputBuffer"]


class OutputBuffer:
    """Byte buffer that never grows past its capacity.

    Example:
        >>> buffer = OutputBuffer(4)
        >>> buffer.write(b"abc")
        True
        >>> buffer.write(b"def")
        False
        >>> buffer.getvalue()
        b'abcd'
    """

    __slots__ = ("_capacity", "_data")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            msg = f"capacity must be >= 0, got {capacity}"
            raise ValueError(msg)
        self._capacity = capacity
        self._data = bytearray()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def available(self) -> int:
        """Bytes that can still be written."""
        return self._capacity - len(self._data)

    @property
    def is_full(self) -> bool:
        return self.available == 0

    def write(self, data: bytes) -> bool:
        """Append as much of data as fits.

        Returns:
            True if all of data was written, False if it was truncated
        """
        room = self.available
        self._data += data[:room]
        return len(data) <= room

    def getvalue(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)
