"""Percent-encoding of URL components with ``+`` for spaces."""

from __future__ import annotations

import string

_UNRESERVED = frozenset((string.ascii_letters + string.digits + "-_.~").encode("ascii"))
_HEX = frozenset(b"0123456789abcdefABCDEF")
_PLUS = ord("+")
_PERCENT = ord("%")
_SPACE = ord(" ")


class UrlCodecError(ValueError):
    """Raised when a URL-encoded string cannot be decoded."""


def _as_bytes(source: str | bytes, limit: int | None) -> bytes:
    raw = source.encode("utf-8") if isinstance(source, str) else bytes(source)
    if limit is None:
        return raw
    if limit < 0:
        raise ValueError("limit must not be negative")
    return raw[:limit]


def url_encode(source: str | bytes, limit: int | None = None) -> str:
    """Encode ``source``, considering at most ``limit`` bytes of it.

    Letters, digits and ``-_.~`` pass through, a space becomes ``+`` and every
    other byte becomes ``%XX`` with upper-case hex digits. Text is encoded as
    UTF-8 first.
    """
    parts = []
    for byte in _as_bytes(source, limit):
        if byte in _UNRESERVED:
            parts.append(chr(byte))
        elif byte == _SPACE:
            parts.append("+")
        else:
            parts.append(f"%{byte:02X}")
    return "".join(parts)


def url_decode(source: str | bytes, limit: int | None = None) -> str | bytes:
    """Decode ``source``, considering at most ``limit`` bytes of it.

    ``+`` becomes a space and ``%XX`` the byte it names. Text input gives text
    (decoded as UTF-8), bytes input gives bytes. A malformed escape raises
    UrlCodecError.
    """
    raw = _as_bytes(source, limit)
    out = bytearray()
    pos = 0
    while pos < len(raw):
        byte = raw[pos]
        if byte == _PLUS:
            out.append(_SPACE)
        elif byte == _PERCENT:
            digits = raw[pos + 1:pos + 3]
            if len(digits) < 2 or not all(d in _HEX for d in digits):
                raise UrlCodecError(f"malformed escape at offset {pos}")
            out.append(int(digits, 16))
            pos += 2
        else:
            out.append(byte)
        pos += 1
    if isinstance(source, str):
        try:
            return out.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise UrlCodecError("decoded bytes are not valid UTF-8") from exc
    return bytes(out)