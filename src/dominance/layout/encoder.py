"""Build raw account bytes from headers and records.

Mirror of the decoders, using the same construct codecs. Used to produce
fixtures and offline account dumps.
"""

from collections.abc import Iterable

from dominance.layout.header import HEADER_LAYOUT, AccountHeader
from dominance.layout.record import TokenRecord
from dominance.layout.schema import FieldKind, FieldSpec, SchemaDescriptor


def encode_header(header: AccountHeader) -> bytes:
    """Serialize a header to its 48-byte form."""
    if len(header.discriminator) != 8:
        raise ValueError("discriminator must be exactly 8 bytes")
    if len(header.authority) != 32:
        raise ValueError("authority must be exactly 32 bytes")
    return HEADER_LAYOUT.build(
        {
            "discriminator": header.discriminator,
            "authority": header.authority,
            "total_count": header.total_count,
            "vector_length": header.vector_length,
        }
    )


def _check_integer(spec: FieldSpec, value: int) -> None:
    bits = spec.width * 8
    if spec.kind is FieldKind.SIGNED:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= value <= high:
        raise ValueError(f"{spec.name}={value} does not fit in {spec.width} bytes")


def _encode_field(spec: FieldSpec, value: int | str) -> bytes:
    if spec.kind is FieldKind.TEXT:
        raw = str(value).encode("utf-8")
        if len(raw) > spec.width:
            raise ValueError(f"{spec.name} is {len(raw)} bytes, window is {spec.width}")
        return raw.ljust(spec.width, b"\x00")
    _check_integer(spec, int(value))
    return spec.codec().build(int(value))


def encode_record(record: TokenRecord, schema: SchemaDescriptor) -> bytes:
    """Serialize one record. A missing timestamp is written as zero."""
    out = bytearray(schema.record_size)
    for spec in schema.fields:
        value = getattr(record, spec.name)
        if value is None:
            value = 0
        out[spec.offset : spec.end] = _encode_field(spec, value)
    return bytes(out)


def encode_account(
    header: AccountHeader, records: Iterable[TokenRecord], schema: SchemaDescriptor
) -> bytes:
    """Serialize a header followed by records.

    The header's counts are written as given, so callers can build
    deliberately inconsistent accounts.
    """
    return encode_header(header) + b"".join(encode_record(r, schema) for r in records)
