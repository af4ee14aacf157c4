"""Dominance aggregation over a decoded account.

All arithmetic on the raw u64 values is exact integer arithmetic. The only
conversion to Decimal happens once per output number, at the final
division by the scale factor. Percentages are never summed.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from dominance.layout.account import DecodedAccount
from dominance.layout.record import TokenRecord

# Enough digits to divide a sum of 2**32 u64 values without rounding the integer part
_PRECISION = 60
_HUNDRED = Decimal(100)


@dataclass(frozen=True)
class RecordShare:
    """A record and its own dominance percentage."""

    record: TokenRecord
    percentage: Decimal


@dataclass(frozen=True)
class AggregateResult:
    """Per-record and total dominance derived from one decode."""

    records: tuple[RecordShare, ...]
    total_wide_value_sum: int
    total_percentage: Decimal


def to_percentage(value: int, scale_factor: Decimal) -> Decimal:
    """Convert a raw fixed-point value to a percentage: value / scale * 100."""
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return Decimal(value) / scale_factor * _HUNDRED


def format_percentage(value: Decimal, places: int = 3) -> str:
    """Render a percentage with a fixed number of decimals, e.g. '55.000%'."""
    quantum = Decimal(1).scaleb(-places)
    # Integer digits plus requested decimals must fit in the context
    digits = max(value.adjusted(), 0) + 1 + max(places, 0)
    with localcontext() as ctx:
        ctx.prec = max(_PRECISION, digits + 1)
        return f"{value.quantize(quantum, rounding=ROUND_HALF_UP)}%"


def aggregate(account: DecodedAccount, scale_factor: Decimal | int) -> AggregateResult:
    """Sum the raw dominance values and derive percentages.

    Args:
        account: Output of decode_account.
        scale_factor: Raw value that represents 100%.

    Returns:
        AggregateResult with each record's own percentage, the exact
        integer sum, and the total percentage derived from that sum.

    Raises:
        ValueError: if scale_factor is not positive.
    """
    scale = Decimal(scale_factor)
    if scale <= 0:
        raise ValueError(f"scale_factor must be positive, got {scale_factor}")

    total = sum(record.wide_value for record in account.records)
    shares = tuple(
        RecordShare(record=record, percentage=to_percentage(record.wide_value, scale))
        for record in account.records
    )
    return AggregateResult(
        records=shares,
        total_wide_value_sum=total,
        total_percentage=to_percentage(total, scale),
    )
