"""Fixed 48-byte header at the start of the aggregator account.

Layout (all integers little-endian):
  discriminator  [0:8]    opaque 8-byte tag
  authority      [8:40]   32-byte public key
  total_count    [40:44]  u32
  vector_length  [44:48]  u32, the length prefix of the record vector
"""

from dataclasses import dataclass

from construct import Bytes, Int32ul, Struct
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from dominance.errors import BufferTooShort

HEADER_LAYOUT = Struct(
    "discriminator" / Bytes(8),
    "authority" / Bytes(32),
    "total_count" / Int32ul,
    "vector_length" / Int32ul,
)

HEADER_SIZE = HEADER_LAYOUT.sizeof()


@dataclass(frozen=True)
class AccountHeader:
    """Decoded account header.

    The discriminator is exposed as-is; checking it is the caller's choice.
    """

    discriminator: bytes
    authority: bytes
    total_count: int
    vector_length: int

    @property
    def authority_address(self) -> str:
        """Authority public key in base58."""
        return str(Pubkey.from_bytes(self.authority))


def decode_header(buffer: bytes) -> AccountHeader | BufferTooShort:
    """Decode the header from the start of ``buffer``.

    Returns BufferTooShort if fewer than HEADER_SIZE bytes are available.
    """
    if len(buffer) < HEADER_SIZE:
        return BufferTooShort(length=len(buffer), required=HEADER_SIZE)

    parsed = HEADER_LAYOUT.parse(bytes(buffer[:HEADER_SIZE]))
    return AccountHeader(
        discriminator=parsed.discriminator,
        authority=parsed.authority,
        total_count=parsed.total_count,
        vector_length=parsed.vector_length,
    )
