"""Base64 encoding and lenient decoding."""

from __future__ import annotations

import base64

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_INDEX = {ch: value for value, ch in enumerate(_ALPHABET)}


def base64_encode(data: bytes) -> str:
    """Encode bytes as standard, padded base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def base64_decode(text: str | bytes) -> bytes:
    """Decode base64 text leniently.

    Decoding stops at the first ``=`` or any character outside the alphabet;
    a trailing partial group yields as many whole bytes as it holds.
    """
    if not isinstance(text, str):
        text = bytes(text).decode("latin-1")
    values = []
    for ch in text:
        value = _INDEX.get(ch)
        if value is None:
            break
        values.append(value)

    out = bytearray()
    for start in range(0, len(values), 4):
        group = values[start:start + 4]
        count = len(group)
        group += [0] * (4 - count)
        combined = (group[0] << 18) | (group[1] << 12) | (group[2] << 6) | group[3]
        out += combined.to_bytes(3, "big")[: 3 if count == 4 else count - 1]
    return bytes(out)