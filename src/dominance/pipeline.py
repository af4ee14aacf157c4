"""Fetched account -> validated, decoded and aggregated snapshot.

This is the boundary handed to the presentation layer: it returns either
a DominanceSnapshot or an AccountError value, and never raises for
anything the account data itself can cause.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from dominance.analytics.aggregator import AggregateResult, aggregate, format_percentage
from dominance.config import DecodeSettings, LedgerSettings
from dominance.errors import AccountError, AccountNotFound, CountPolicyWarning, OwnerMismatch
from dominance.layout.account import decode_account
from dominance.layout.schema import schema_for
from dominance.ledger.types import RawAccount
from dominance.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DominanceSnapshot:
    """Result of one fetch-decode cycle."""

    address: str
    authority: str
    schema_version: str
    aggregate: AggregateResult
    warnings: tuple[CountPolicyWarning, ...]
    decoded_at: datetime

    def to_dict(self, places: int = 3) -> dict:
        """Plain values for rendering. Raw integers are decimal strings."""
        tokens = []
        for rank, share in enumerate(self.aggregate.records, start=1):
            record = share.record
            observed_at = record.observed_at
            tokens.append(
                {
                    "rank": rank,
                    "symbol": record.symbol,
                    "dominance": str(record.wide_value),
                    "dominance_pct": format_percentage(share.percentage, places),
                    "address": record.primary_text,
                    "price_feed_id": record.secondary_text,
                    "timestamp": record.timestamp,
                    "observed_at": observed_at.isoformat() if observed_at else None,
                }
            )
        return {
            "address": self.address,
            "authority": self.authority,
            "schema_version": self.schema_version,
            "tokens": tokens,
            "total_dominance": str(self.aggregate.total_wide_value_sum),
            "total_dominance_pct": format_percentage(self.aggregate.total_percentage, places),
            "warnings": [w.to_dict() for w in self.warnings],
            "decoded_at": self.decoded_at.isoformat(),
        }


def process_account(
    raw: RawAccount,
    ledger: LedgerSettings,
    decode: DecodeSettings,
    now: datetime | None = None,
) -> DominanceSnapshot | AccountError:
    """Validate ownership, decode and aggregate one fetched account.

    Args:
        raw: The ledger's answer for the aggregator address.
        ledger: Supplies the program id that must own the account.
        decode: Schema version, scale factor and optional discriminator.
        now: Decode instant; defaults to the current UTC time.

    Returns:
        DominanceSnapshot on success, otherwise the AccountError that
        stopped the cycle.
    """
    if not raw.exists:
        return AccountNotFound(address=raw.address)
    if raw.owner != ledger.program_id:
        return OwnerMismatch(address=raw.address, owner=raw.owner, expected_owner=ledger.program_id)

    schema = schema_for(decode.schema_version)
    account = decode_account(raw.data, schema, decode.discriminator_bytes())
    if isinstance(account, AccountError):
        logger.warning(
            "account_decode_failed",
            address=raw.address,
            kind=account.kind.value,
            detail=account.detail,
        )
        return account

    result = aggregate(account, decode.scale_factor)
    logger.info(
        "account_decoded",
        address=raw.address,
        records=len(result.records),
        total_dominance=str(result.total_wide_value_sum),
        total_pct=format_percentage(result.total_percentage, decode.display_places),
    )
    return DominanceSnapshot(
        address=raw.address,
        authority=account.header.authority_address,
        schema_version=schema.version.value,
        aggregate=result,
        warnings=account.warnings,
        decoded_at=now or datetime.now(timezone.utc),
    )
