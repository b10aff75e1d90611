"""Fixed-size byte buffer used to build package payloads."""

import struct

_UINT32 = struct.Struct("<I")
_UINT8 = struct.Struct("<B")


class Buffer:
    """A byte stream of fixed size, filled from the front.

    Integers are written little-endian. Bytes not yet written read as zero.
    """

    def __init__(self, size):
        if size < 0:
            raise ValueError(f"buffer size must not be negative: {size}")
        self._stream = bytearray(size)
        self._offset = 0

    @property
    def size(self):
        """Total capacity in bytes."""
        return len(self._stream)

    @property
    def offset(self):
        """Number of bytes written so far."""
        return self._offset

    def add_bytes(self, data):
        """Append raw bytes at the current offset."""
        data = bytes(data)
        end = self._offset + len(data)
        if end > len(self._stream):
            raise OverflowError(
                f"cannot add {len(data)} bytes at offset {self._offset} "
                f"to a buffer of {len(self._stream)} bytes"
            )
        self._stream[self._offset:end] = data
        self._offset = end

    def add_uint32(self, value):
        """Append an unsigned 32-bit integer."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"value out of range for uint32: {value}")
        self.add_bytes(_UINT32.pack(value))

    def add_uint8(self, value):
        """Append an unsigned 8-bit integer."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"value out of range for uint8: {value}")
        self.add_bytes(_UINT8.pack(value))

    def add_string(self, text):
        """Append a length-prefixed, NUL-terminated UTF-8 string."""
        encoded = text.encode("utf-8") + b"\0"
        self.add_uint32(len(encoded))
        self.add_bytes(encoded)

    def getvalue(self):
        """Return the whole stream, written or not."""
        return bytes(self._stream)