"""
Digest Value Type
Fixed-size, immutable hash digest used for Merkle leaves and nodes.

This module provides:
- HASH_SIZE: digest length in bytes (32)
- Digest: immutable, ordered, hashable 32-byte value
- UNDEF_HASH: the all-zero "undefined" sentinel digest

Construction from a buffer or a hex string validates the length; a digest
can never hold anything but exactly HASH_SIZE bytes.
"""
from __future__ import annotations

from dataclasses import dataclass

from simplemerkle.schemas.errors import DigestDecodeException, DigestLengthException


HASH_SIZE: int = 32


@dataclass(frozen=True, order=True)
class Digest:
    """
    A fixed-size hash digest.

    Attributes:
        data: The raw digest bytes (exactly HASH_SIZE long)
    """
    data: bytes

    def __post_init__(self) -> None:
        """Validate digest length."""
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) != HASH_SIZE:
            raise DigestLengthException(expected=HASH_SIZE, actual=len(self.data))

    @classmethod
    def from_bytes(cls, data: bytes) -> Digest:
        """
        Build a digest from a raw buffer.

        Raises:
            DigestLengthException: If the buffer is not HASH_SIZE bytes
        """
        return cls(bytes(data))

    @classmethod
    def from_string(cls, text: str) -> Digest:
        """
        Build a digest from its hex representation.

        An optional "0x" prefix and surrounding whitespace are accepted.

        Raises:
            DigestDecodeException: If the string is not valid hex
            DigestLengthException: If the decoded value is not HASH_SIZE bytes
        """
        hex_content = text.strip()
        if hex_content[:2].lower() == "0x":
            hex_content = hex_content[2:]
        try:
            raw = bytes.fromhex(hex_content)
        except ValueError as e:
            raise DigestDecodeException(
                message=f"Invalid hex digest: {text[:16]}...",
                details={"error": str(e)},
            ) from e
        return cls(raw)

    def bytes(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.data.hex()

    def __repr__(self) -> str:
        return f"Digest({self.short_string()})"

    def short_string(self) -> str:
        """First 6 bytes as hex, for log lines."""
        return self.data[:6].hex()

    def stamp(self) -> bytes:
        """First 4 bytes of the digest."""
        return self.data[:4]

    def is_undef(self) -> bool:
        return self.data == _ZERO_BYTES


_ZERO_BYTES = bytes(HASH_SIZE)

# Undefined digest sentinel: all zero bytes
UNDEF_HASH: Digest = Digest(_ZERO_BYTES)


__all__ = [
    "HASH_SIZE",
    "Digest",
    "UNDEF_HASH",
]
