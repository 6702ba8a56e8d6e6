"""Sequential reading of a byte buffer."""

from __future__ import annotations


class ByteReader:
    """Reads a byte buffer front to back, raising ``ValueError`` on overruns."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    def __len__(self) -> int:
        return len(self._data)

    def eof(self) -> bool:
        return self._offset >= len(self._data)

    def remain(self) -> int:
        return len(self._data) - self._offset

    def seek(self, amount: int) -> None:
        """Move the offset by ``amount``, which may be negative."""
        self._bounds_check(amount)
        self._offset += amount

    def slice(self, size: int) -> bytes:
        """Return the next ``size`` bytes and advance past them."""
        if size < 0:
            raise ValueError(f"Requested size is negative: {size}")
        self._bounds_check(size)
        chunk = self._data[self._offset : self._offset + size]
        self._offset += size
        return chunk

    def u8(self) -> int:
        """Return the next byte as an integer."""
        self._bounds_check(1)
        value = self._data[self._offset]
        self._offset += 1
        return value

    def _bounds_check(self, size: int) -> None:
        target = self._offset + size
        if target < 0 or target > len(self._data):
            raise ValueError(
                f"Slice extended past end. Offset: {self._offset} "
                f"Requested size: {size} Bytes len: {len(self._data)} "
                f"Remain: {self.remain()}"
            )