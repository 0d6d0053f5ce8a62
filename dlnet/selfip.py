"""Discovery of the local IPv4 address used to reach a given server."""

from __future__ import annotations

import socket

_PROBE_PORT = 5060


def get_self_ip(server_ip: str) -> str:
    """Return the local IPv4 address the system would use to reach ``server_ip``.

    No packet is sent: a UDP socket is connected and its local name read.
    Raises OSError when the server cannot be resolved or routed to.
    """
    infos = socket.getaddrinfo(
        server_ip,
        str(_PROBE_PORT),
        socket.AF_INET,
        socket.SOCK_DGRAM,
        socket.IPPROTO_UDP,
        socket.AI_NUMERICSERV,
    )
    if not infos:
        raise OSError(f"no address found for {server_ip!r}")
    address = infos[0][4]
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.connect(address)
        return sock.getsockname()[0]