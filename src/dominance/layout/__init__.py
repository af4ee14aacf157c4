"""Binary layout of the aggregator account: schemas, decoders and encoder."""

from dominance.layout.account import DecodedAccount, decode_account, resolve_record_count
from dominance.layout.encoder import encode_account, encode_header, encode_record
from dominance.layout.header import HEADER_SIZE, AccountHeader, decode_header
from dominance.layout.record import TokenRecord, decode_record
from dominance.layout.schema import (
    COMPACT_SCHEMA,
    EXTENDED_SCHEMA,
    FieldKind,
    FieldSpec,
    SchemaDescriptor,
    SchemaVersion,
    schema_for,
)

__all__ = [
    "COMPACT_SCHEMA",
    "EXTENDED_SCHEMA",
    "HEADER_SIZE",
    "AccountHeader",
    "DecodedAccount",
    "FieldKind",
    "FieldSpec",
    "SchemaDescriptor",
    "SchemaVersion",
    "TokenRecord",
    "decode_account",
    "decode_header",
    "decode_record",
    "encode_account",
    "encode_header",
    "encode_record",
    "resolve_record_count",
    "schema_for",
]
