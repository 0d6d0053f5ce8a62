"""String helpers: splitting, trimming, replacing and hex formatting."""

from __future__ import annotations

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_DUMP_WIDTH = 16


def split(text: str, delimiter: str = "|") -> list[str]:
    """Split ``text`` on every ``delimiter``, keeping empty pieces.

    An empty text or an empty delimiter yields an empty list.
    """
    if not delimiter or not text:
        return []
    return text.split(delimiter)


def cut(text: str, delimiter: str = "|") -> list[str]:
    """Cut ``text`` in two at the first ``delimiter``.

    Empty halves are left out; if the delimiter is absent the result is empty.
    """
    if not delimiter or not text:
        return []
    head, found, tail = text.partition(delimiter)
    if not found:
        return []
    return [part for part in (head, tail) if part]


def replace(text: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old`` with ``new``.

    The text is returned unchanged when either ``old`` or ``new`` is empty.
    """
    if not old or not new:
        return text
    return text.replace(old, new)


def trim_left(text: str, trimmed: str = " ") -> str:
    """Strip leading ``trimmed`` characters; a text made only of them is kept."""
    stripped = text.lstrip(trimmed)
    return stripped if stripped else text


def trim_right(text: str, trimmed: str = " ") -> str:
    """Strip trailing ``trimmed`` characters; a text made only of them is kept."""
    stripped = text.rstrip(trimmed)
    return stripped if stripped else text


def trim(text: str, trimmed: str = " ") -> str:
    """Strip ``trimmed`` characters from both ends."""
    return trim_right(trim_left(text, trimmed), trimmed)


def is_end_with(full: str, ending: str) -> bool:
    """Return True if ``full`` ends with ``ending``."""
    return full.endswith(ending)


def hexmem(data: bytes) -> str:
    """Format bytes as lower-case hex pairs, each followed by a space."""
    return "".join(f"{byte:02x} " for byte in bytes(data))


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte < 0x80 else "."


def hexdump(data: bytes) -> str:
    """Produce a classic 16-bytes-per-line hex and ASCII dump."""
    raw = bytes(data)
    lines = ["\r\n"]
    for start in range(0, len(raw), _DUMP_WIDTH):
        chunk = raw[start:start + _DUMP_WIDTH]
        pad = _DUMP_WIDTH - len(chunk)
        hex_part = "".join(f"{byte:02x} " for byte in chunk) + "   " * pad
        text_part = "".join(_printable(byte) for byte in chunk) + " " * pad
        lines.append(f"{hex_part}{text_part}\n")
    return "".join(lines)


def bin_to_hex(data: bytes, upper: bool = False) -> str:
    """Encode bytes as a hex string, upper case when ``upper`` is true."""
    encoded = bytes(data).hex()
    return encoded.upper() if upper else encoded


def hex_to_bin(text: str) -> bytes:
    """Decode a hex string; raise ValueError on odd length or bad digits."""
    if len(text) % 2:
        raise ValueError("hex string must have an even number of digits")
    bad = next((ch for ch in text if ch not in _HEX_DIGITS), None)
    if bad is not None:
        raise ValueError(f"invalid hex digit {bad!r}")
    return bytes.fromhex(text)


def ptr2string(address: int) -> str:
    """Format an address as ``0x`` followed by hex digits without leading zeros."""
    if address < 0:
        raise ValueError("address must not be negative")
    return f"0x{address:x}"