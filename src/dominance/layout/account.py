"""Whole-account decoding: header, count policy, then the record vector.

The header carries two record counts. ``total_count`` is the program's
counter of active tokens and ``vector_length`` is the length prefix of the
serialized vector; deployed program versions have been seen to disagree.
The decoder iterates over the smaller of the two so it never reads past
valid data, and reports a CountPolicyWarning when they differ.
"""

from dataclasses import dataclass

from dominance.errors import AccountError, CountPolicyWarning, SchemaMismatch
from dominance.layout.header import HEADER_SIZE, AccountHeader, decode_header
from dominance.layout.record import TokenRecord, decode_record
from dominance.layout.schema import SchemaDescriptor
from dominance.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DecodedAccount:
    """Header plus every record, in on-chain order."""

    header: AccountHeader
    records: tuple[TokenRecord, ...]
    schema: SchemaDescriptor
    warnings: tuple[CountPolicyWarning, ...] = ()


def resolve_record_count(header: AccountHeader) -> tuple[int, CountPolicyWarning | None]:
    """Pick how many records to decode, and whether to warn about it."""
    if header.total_count == header.vector_length:
        return header.total_count, None
    warning = CountPolicyWarning(
        total_count=header.total_count, vector_length=header.vector_length
    )
    return warning.resolved_count, warning


def decode_account(
    buffer: bytes,
    schema: SchemaDescriptor,
    expected_discriminator: bytes | None = None,
) -> DecodedAccount | AccountError:
    """Decode a raw aggregator account.

    Args:
        buffer: Raw account data, starting at the discriminator.
        schema: Record layout to apply to the vector.
        expected_discriminator: When given, the header's 8-byte tag must
            equal it or SchemaMismatch is returned. None skips the check.

    Returns:
        The DecodedAccount, or the first error met. A failing record
        aborts the whole decode; no partial account is returned.
    """
    header = decode_header(buffer)
    if isinstance(header, AccountError):
        return header

    logger.debug(
        "header_decoded",
        discriminator=header.discriminator.hex(),
        total_count=header.total_count,
        vector_length=header.vector_length,
    )

    if expected_discriminator is not None and header.discriminator != expected_discriminator:
        return SchemaMismatch(expected=expected_discriminator, actual=header.discriminator)

    count, warning = resolve_record_count(header)
    if warning is not None:
        logger.warning(
            "record_count_mismatch",
            total_count=warning.total_count,
            vector_length=warning.vector_length,
            resolved_count=count,
        )

    records: list[TokenRecord] = []
    cursor = HEADER_SIZE
    for index in range(count):
        record = decode_record(buffer[cursor : cursor + schema.record_size], schema, index)
        if isinstance(record, AccountError):
            logger.debug("record_decode_failed", index=index, kind=record.kind.value)
            return record
        records.append(record)
        cursor += schema.record_size

    logger.debug("account_decoded", schema=schema.version.value, records=len(records))
    return DecodedAccount(
        header=header,
        records=tuple(records),
        schema=schema,
        warnings=(warning,) if warning is not None else (),
    )
