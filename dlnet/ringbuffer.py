"""Fixed-capacity circular byte buffer."""

from __future__ import annotations


class BufferFullError(Exception):
    """Raised when a write does not fit in the free space of a ring buffer."""


class RingBuffer:
    """A circular FIFO of bytes with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._storage = bytearray(capacity)
        self._capacity = capacity
        self._head = 0
        self._length = 0

    @property
    def capacity(self) -> int:
        """Total number of bytes the buffer can hold."""
        return self._capacity

    def __len__(self) -> int:
        return self._length

    def data_size(self) -> int:
        """Number of bytes currently stored."""
        return self._length

    def remain_size(self) -> int:
        """Number of bytes that can still be written."""
        return self._capacity - self._length

    def write(self, data: bytes) -> int:
        """Append ``data``; raise BufferFullError if it does not fit whole."""
        raw = bytes(data)
        size = len(raw)
        if size > self.remain_size():
            raise BufferFullError(
                f"cannot write {size} bytes, only {self.remain_size()} free"
            )
        if not size:
            return 0
        tail = (self._head + self._length) % self._capacity
        first = min(size, self._capacity - tail)
        self._storage[tail:tail + first] = raw[:first]
        self._storage[:size - first] = raw[first:]
        self._length += size
        return size

    def _check_size(self, size: int) -> int:
        if size < 0:
            raise ValueError("size must not be negative")
        return min(size, self._length)

    def peek(self, size: int) -> bytes:
        """Return up to ``size`` bytes from the front without removing them."""
        size = self._check_size(size)
        if not size:
            return b""
        first = min(size, self._capacity - self._head)
        return bytes(self._storage[self._head:self._head + first]) + bytes(
            self._storage[:size - first]
        )

    def consume(self, size: int) -> None:
        """Drop up to ``size`` bytes from the front."""
        size = self._check_size(size)
        if not size:
            return
        self._head = (self._head + size) % self._capacity
        self._length -= size

    def read(self, size: int) -> bytes:
        """Remove and return up to ``size`` bytes from the front."""
        data = self.peek(size)
        self.consume(len(data))
        return data

    def first_segment(self) -> bytes:
        """Return the stored bytes that lie contiguously from the front."""
        if not self._length:
            return b""
        size = min(self._length, self._capacity - self._head)
        return bytes(self._storage[self._head:self._head + size])