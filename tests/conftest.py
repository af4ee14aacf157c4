"""Shared fixtures: synthetic aggregator accounts built with the encoder."""

import pytest

from dominance.config import AppSettings, DecodeSettings, LedgerSettings
from dominance.layout.encoder import encode_account
from dominance.layout.header import AccountHeader
from dominance.layout.record import TokenRecord
from dominance.layout.schema import COMPACT_SCHEMA, SchemaDescriptor

PROGRAM_ID = "DP9kZHS77pbTuTHKNsaxqFjrUboFLGXvyCQsxYvWM26c"
AUTHORITY = bytes(range(1, 33))
DISCRIMINATOR = bytes.fromhex("0102030405060708")


def make_header(total_count: int, vector_length: int | None = None) -> AccountHeader:
    """Header with fixed tag/authority and the given counts."""
    return AccountHeader(
        discriminator=DISCRIMINATOR,
        authority=AUTHORITY,
        total_count=total_count,
        vector_length=total_count if vector_length is None else vector_length,
    )


def build_account(
    records: list[TokenRecord],
    schema: SchemaDescriptor = COMPACT_SCHEMA,
    total_count: int | None = None,
    vector_length: int | None = None,
) -> bytes:
    """Encode records behind a header whose counts default to len(records)."""
    count = len(records) if total_count is None else total_count
    header = make_header(count, len(records) if vector_length is None else vector_length)
    return encode_account(header, records, schema)


@pytest.fixture
def btc() -> TokenRecord:
    return TokenRecord(
        symbol="BTC",
        wide_value=5_500_000_000,
        primary_text="Addr1",
        secondary_text="Feed1",
    )


@pytest.fixture
def eth() -> TokenRecord:
    return TokenRecord(
        symbol="ETH",
        wide_value=2_000_000_000,
        primary_text="Addr2",
        secondary_text="Feed2",
    )


@pytest.fixture
def compact_buffer(btc: TokenRecord, eth: TokenRecord) -> bytes:
    """The two-token BTC/ETH account in the compact layout."""
    return build_account([btc, eth])


@pytest.fixture
def ledger_settings() -> LedgerSettings:
    return LedgerSettings(program_id=PROGRAM_ID, aggregator_seed="aggregator_v2")


@pytest.fixture
def compact_settings() -> DecodeSettings:
    return DecodeSettings(schema_version="compact", scale_factor=10_000_000_000)


@pytest.fixture
def app_settings(ledger_settings: LedgerSettings, compact_settings: DecodeSettings) -> AppSettings:
    """AppSettings with test defaults (compact layout, known program id)."""
    return AppSettings(log_level="DEBUG", ledger=ledger_settings, decode=compact_settings)
