"""Packet framing for the programmer service's JSON-RPC channel.

Each packet is a 32-byte header followed by a JSON payload. The header holds
a big-endian magic number, a big-endian header version and the big-endian
payload length; the remaining bytes are reserved and zero.
"""

from __future__ import annotations

import struct
from typing import Iterable

MAGIC_NUMBER = 0x4150524F  # "APRO"
HEADER_VERSION = 1
HEADER_LENGTH = 32
JSONRPC_VERSION = "2.0"

_HEADER = struct.Struct(">IHI")
_MAX_PAYLOAD = 0xFFFFFFFF


class ProtocolError(Exception):
    """A received frame violates the packet format.

    ``payloads`` holds the complete payloads decoded from the same input
    before the faulty header was met.
    """

    def __init__(self, message: str, payloads: Iterable[bytes] = ()) -> None:
        super().__init__(message)
        self.payloads: tuple[bytes, ...] = tuple(payloads)


def encode_packet(payload: bytes) -> bytes:
    """Return ``payload`` prefixed with its packet header."""
    payload = bytes(payload)
    if len(payload) > _MAX_PAYLOAD:
        raise ValueError("payload too large for a single packet")
    header = _HEADER.pack(MAGIC_NUMBER, HEADER_VERSION, len(payload))
    return header.ljust(HEADER_LENGTH, b"\0") + payload


class FrameDecoder:
    """Reassembles packets from a byte stream."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        """Number of bytes buffered but not yet decoded."""
        return len(self._buffer)

    def feed(self, data: bytes) -> list[bytes]:
        """Add ``data`` and return the payloads of all packets now complete.

        A header with a wrong magic number or version raises
        :class:`ProtocolError` and discards everything buffered.
        """
        self._buffer += data
        payloads: list[bytes] = []
        while len(self._buffer) >= HEADER_LENGTH:
            magic, version, length = _HEADER.unpack_from(self._buffer)
            if magic != MAGIC_NUMBER:
                self.clear()
                raise ProtocolError("Invalid magic number", payloads)
            if version != HEADER_VERSION:
                self.clear()
                raise ProtocolError(f"Unsupported header version: {version}", payloads)
            end = HEADER_LENGTH + length
            if len(self._buffer) < end:
                break
            payloads.append(bytes(self._buffer[HEADER_LENGTH:end]))
            del self._buffer[:end]
        return payloads

    def clear(self) -> None:
        """Discard any partially received data."""
        self._buffer.clear()