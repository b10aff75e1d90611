"""Client side of the module-to-module protocol."""

import socket
import struct
from dataclasses import dataclass

from kernelsim.buffer import Buffer

HANDSHAKE_REQUEST = 1
HANDSHAKE_OK = 0

_INT32 = struct.Struct("<i")
_HEADER = struct.Struct("<BI")


class HandshakeError(ConnectionError):
    """The server refused or did not answer the handshake."""


def _recv_exact(sock, size):
    """Read exactly ``size`` bytes or raise ConnectionError."""
    data = bytearray()
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            raise ConnectionError(
                f"connection closed after {len(data)} of {size} bytes"
            )
        data += chunk
    return bytes(data)


@dataclass
class Package:
    """An operation code together with its payload buffer."""

    op_code: int
    buffer: Buffer

    def serialize(self):
        """Return op code (1 byte), payload size (uint32) and payload."""
        return _HEADER.pack(int(self.op_code), self.buffer.size) + self.buffer.getvalue()


def create_connection(ip, port, server, logger):
    """Open a TCP connection to ``ip``:``port``; ``server`` names it in logs."""
    try:
        infos = socket.getaddrinfo(ip, port, socket.AF_INET, socket.SOCK_STREAM)
    except socket.gaierror as exc:
        raise ConnectionError(f"Could not resolve server address: {server}") from exc
    family, socktype, proto, _, address = infos[0]
    sock = socket.socket(family, socktype, proto)
    try:
        sock.connect(address)
    except OSError as exc:
        sock.close()
        raise ConnectionError(f"Could not connect to server: {server}") from exc
    logger.info("Connected to the requested module: %s", server)
    return sock


def handshake_client(sock, server, logger):
    """Send the handshake request and check the server accepted it."""
    sock.sendall(_INT32.pack(HANDSHAKE_REQUEST))
    try:
        (result,) = _INT32.unpack(_recv_exact(sock, _INT32.size))
    except ConnectionError as exc:
        logger.error("Error receiving handshake")
        raise HandshakeError(f"No handshake answer from server: {server}") from exc
    if result != HANDSHAKE_OK:
        logger.error("Error receiving handshake")
        raise HandshakeError(f"Handshake refused by server: {server}")
    logger.info("Handshake completed")


def send_package(package, sock):
    """Send a serialized package and return the number of bytes sent."""
    data = package.serialize()
    sock.sendall(data)
    return len(data)