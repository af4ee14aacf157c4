"""Tests for the fixed 48-byte account header."""

import struct

from conftest import AUTHORITY, DISCRIMINATOR

from dominance.errors import BufferTooShort, ErrorKind
from dominance.layout.header import HEADER_SIZE, AccountHeader, decode_header


def _raw_header(total: int, vec_len: int) -> bytes:
    return DISCRIMINATOR + AUTHORITY + struct.pack("<II", total, vec_len)


class TestDecodeHeader:
    """decode_header byte offsets and bounds."""

    def test_header_size_is_48(self) -> None:
        assert HEADER_SIZE == 48

    def test_fields_at_their_offsets(self) -> None:
        header = decode_header(_raw_header(7, 9))
        assert header == AccountHeader(
            discriminator=DISCRIMINATOR,
            authority=AUTHORITY,
            total_count=7,
            vector_length=9,
        )

    def test_counts_are_little_endian(self) -> None:
        buffer = DISCRIMINATOR + AUTHORITY + bytes([1, 0, 0, 0, 0, 1, 0, 0])
        header = decode_header(buffer)
        assert isinstance(header, AccountHeader)
        assert header.total_count == 1
        assert header.vector_length == 256

    def test_max_u32_counts(self) -> None:
        header = decode_header(_raw_header(2**32 - 1, 2**32 - 1))
        assert isinstance(header, AccountHeader)
        assert header.total_count == 4_294_967_295

    def test_trailing_bytes_ignored(self) -> None:
        header = decode_header(_raw_header(0, 0) + b"\xff" * 100)
        assert isinstance(header, AccountHeader)
        assert header.total_count == 0

    def test_discriminator_not_validated(self) -> None:
        buffer = b"\x00" * 8 + AUTHORITY + struct.pack("<II", 1, 1)
        header = decode_header(buffer)
        assert isinstance(header, AccountHeader)
        assert header.discriminator == b"\x00" * 8

    def test_short_buffer(self) -> None:
        result = decode_header(_raw_header(1, 1)[:47])
        assert result == BufferTooShort(length=47, required=48)
        assert result.kind is ErrorKind.BUFFER_TOO_SHORT
        assert "47" in result.detail

    def test_empty_buffer(self) -> None:
        assert decode_header(b"") == BufferTooShort(length=0, required=48)

    def test_accepts_memoryview(self) -> None:
        header = decode_header(memoryview(_raw_header(3, 3)))
        assert isinstance(header, AccountHeader)
        assert header.vector_length == 3


class TestAuthorityAddress:
    """Base58 rendering of the authority key."""

    def test_zero_key_is_system_program(self) -> None:
        header = AccountHeader(b"\x00" * 8, bytes(32), 0, 0)
        assert header.authority_address == "11111111111111111111111111111111"
