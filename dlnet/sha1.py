"""SHA-1 message digest (FIPS PUB 180-1) computed incrementally."""

from __future__ import annotations

from typing import Union

_MASK = 0xFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
_ROUND_CONSTANTS = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)
_BLOCK_SIZE = 64
_MAX_BITS = 1 << 64

Data = Union[bytes, bytearray, memoryview, str, int]


class SHA1Error(Exception):
    """Raised when the digest state is corrupted or misused."""


def _rotl(word: int, bits: int) -> int:
    return ((word << bits) & _MASK) | ((word & _MASK) >> (32 - bits))


def _to_bytes(data: Data) -> bytes:
    if isinstance(data, int):
        if not 0 <= data <= 0xFF:
            raise ValueError("a single message element must be in range 0..255")
        return bytes((data,))
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class SHA1:
    """Incremental SHA-1 hasher producing five 32-bit digest words."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Start a fresh message, discarding all previous input."""
        self._state = list(_INITIAL_STATE)
        self._bit_length = 0
        self._pending = bytearray()
        self._computed = False
        self._corrupted = False

    def update(self, data: Data) -> None:
        """Feed the next portion of the message.

        Accepts bytes-like objects, text (encoded as UTF-8) or a single byte
        value. Feeding data after the digest was taken, or past the 2**64-bit
        message limit, corrupts the hasher and raises SHA1Error.
        """
        raw = _to_bytes(data)
        if not raw:
            return
        if self._computed or self._corrupted:
            self._corrupted = True
            raise SHA1Error("cannot add input after the digest has been computed")
        new_length = self._bit_length + 8 * len(raw)
        if new_length >= _MAX_BITS:
            self._corrupted = True
            raise SHA1Error("message is too long")
        self._bit_length = new_length
        self._pending.extend(raw)
        full = len(self._pending) - len(self._pending) % _BLOCK_SIZE
        for start in range(0, full, _BLOCK_SIZE):
            self._process_block(self._pending[start:start + _BLOCK_SIZE])
        del self._pending[:full]

    def __lshift__(self, data: Data) -> "SHA1":
        self.update(data)
        return self

    def result(self) -> tuple[int, int, int, int, int]:
        """Return the digest as five 32-bit words, finishing the message."""
        if self._corrupted:
            raise SHA1Error("digest state is corrupted")
        if not self._computed:
            self._pad_message()
            self._computed = True
        return tuple(self._state)  # type: ignore[return-value]

    def hexdigest(self) -> str:
        """Return the digest as 40 lower-case hex digits."""
        return "".join(f"{word:08x}" for word in self.result())

    def _pad_message(self) -> None:
        tail = bytearray(self._pending)
        tail.append(0x80)
        tail.extend(b"\x00" * ((56 - len(tail)) % _BLOCK_SIZE))
        tail.extend(self._bit_length.to_bytes(8, "big"))
        for start in range(0, len(tail), _BLOCK_SIZE):
            self._process_block(tail[start:start + _BLOCK_SIZE])
        self._pending.clear()

    def _process_block(self, block: bytes | bytearray) -> None:
        words = [int.from_bytes(block[i:i + 4], "big") for i in range(0, _BLOCK_SIZE, 4)]
        for t in range(16, 80):
            words.append(_rotl(words[t - 3] ^ words[t - 8] ^ words[t - 14] ^ words[t - 16], 1))

        a, b, c, d, e = self._state
        for t, word in enumerate(words):
            if t < 20:
                f = (b & c) | (~b & d)
                k = _ROUND_CONSTANTS[0]
            elif t < 40:
                f = b ^ c ^ d
                k = _ROUND_CONSTANTS[1]
            elif t < 60:
                f = (b & c) | (b & d) | (c & d)
                k = _ROUND_CONSTANTS[2]
            else:
                f = b ^ c ^ d
                k = _ROUND_CONSTANTS[3]
            temp = (_rotl(a, 5) + (f & _MASK) + e + word + k) & _MASK
            e, d, c, b, a = d, c, _rotl(b, 30), a, temp

        self._state = [
            (value + delta) & _MASK
            for value, delta in zip(self._state, (a, b, c, d, e))
        ]