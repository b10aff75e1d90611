"""Text messages exchanged between modules to test communication."""

import struct
from dataclasses import dataclass

from kernelsim.buffer import Buffer
from kernelsim.client import Package, _recv_exact, send_package
from kernelsim.opcodes import OpCode

_UINT32 = struct.Struct("<I")


@dataclass(frozen=True)
class Message:
    """A text message; ``length`` counts the terminating NUL byte."""

    length: int
    content: str


def send_message(sock, text):
    """Send ``text`` as a TEST_COMUNICACIONAL package."""
    encoded = text.encode("utf-8") + b"\0"
    buffer = Buffer(_UINT32.size + len(encoded))
    buffer.add_string(text)
    return send_package(Package(OpCode.TEST_COMUNICACIONAL, buffer), sock)


def receive_payload(sock):
    """Read a size-prefixed payload from ``sock`` and return its bytes."""
    (size,) = _UINT32.unpack(_recv_exact(sock, _UINT32.size))
    return _recv_exact(sock, size)


def extract_message(payload):
    """Decode the length-prefixed string held in ``payload``."""
    if len(payload) < _UINT32.size:
        raise ValueError("payload too short to hold a message length")
    (length,) = _UINT32.unpack_from(payload)
    raw = bytes(payload[_UINT32.size:_UINT32.size + length])
    if len(raw) < length:
        raise ValueError(
            f"payload holds {len(raw)} message bytes, {length} announced"
        )
    content = raw.split(b"\0", 1)[0].decode("utf-8")
    return Message(length, content)