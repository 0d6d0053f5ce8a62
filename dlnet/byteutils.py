"""Big-endian integer packing and host/network byte-order conversion."""

from __future__ import annotations

import sys


def _decode(data: bytes, width: int) -> int:
    raw = bytes(data[:width])
    if len(raw) < width:
        raise ValueError(f"need at least {width} bytes, got {len(raw)}")
    return int.from_bytes(raw, "big")


def _encode(value: int, width: int) -> bytes:
    return (value & ((1 << (8 * width)) - 1)).to_bytes(width, "big")


def decode_u32(data: bytes) -> int:
    """Read a big-endian 32-bit unsigned integer from the first four bytes."""
    return _decode(data, 4)


def decode_u24(data: bytes) -> int:
    """Read a big-endian 24-bit unsigned integer from the first three bytes."""
    return _decode(data, 3)


def decode_u16(data: bytes) -> int:
    """Read a big-endian 16-bit unsigned integer from the first two bytes."""
    return _decode(data, 2)


def encode_u32(value: int) -> bytes:
    """Pack the low 32 bits of ``value`` big-endian."""
    return _encode(value, 4)


def encode_u24(value: int) -> bytes:
    """Pack the low 24 bits of ``value`` big-endian."""
    return _encode(value, 3)


def encode_u16(value: int) -> bytes:
    """Pack the low 16 bits of ``value`` big-endian."""
    return _encode(value, 2)


def _swap_order(value: int, width: int) -> int:
    masked = value & ((1 << (8 * width)) - 1)
    return int.from_bytes(masked.to_bytes(width, sys.byteorder), "big")


def host_to_network16(value: int) -> int:
    """Convert a 16-bit value from host to network byte order."""
    return _swap_order(value, 2)


def host_to_network32(value: int) -> int:
    """Convert a 32-bit value from host to network byte order."""
    return _swap_order(value, 4)


def host_to_network64(value: int) -> int:
    """Convert a 64-bit value from host to network byte order."""
    return _swap_order(value, 8)


def network_to_host16(value: int) -> int:
    """Convert a 16-bit value from network to host byte order."""
    return _swap_order(value, 2)


def network_to_host32(value: int) -> int:
    """Convert a 32-bit value from network to host byte order."""
    return _swap_order(value, 4)


def network_to_host64(value: int) -> int:
    """Convert a 64-bit value from network to host byte order."""
    return _swap_order(value, 8)