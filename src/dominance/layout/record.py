"""Decoding of a single fixed-size token record."""

from dataclasses import dataclass
from datetime import datetime, timezone

from dominance.errors import InvalidText, TruncatedRecord
from dominance.layout.schema import FieldKind, FieldSpec, SchemaDescriptor


@dataclass(frozen=True)
class TokenRecord:
    """One entry of the aggregator's token vector.

    ``wide_value`` is the raw u64 dominance and ``timestamp`` the raw i64
    seconds; both stay Python ints so no precision is lost above 2**53.
    """

    symbol: str
    wide_value: int
    primary_text: str
    secondary_text: str
    timestamp: int | None = None

    @property
    def observed_at(self) -> datetime | None:
        """Timestamp as an aware UTC datetime, None if absent or unrepresentable."""
        if self.timestamp is None:
            return None
        try:
            return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None


def read_text(window: bytes) -> str:
    """Decode a zero-padded UTF-8 window, stopping at the first zero byte.

    A window with no zero byte is decoded whole.

    Raises:
        UnicodeDecodeError: if the bytes before the terminator are not UTF-8.
    """
    end = window.find(b"\x00")
    if end != -1:
        window = window[:end]
    return window.decode("utf-8")


def _read_field(record_slice: bytes, spec: FieldSpec) -> int | str:
    window = bytes(record_slice[spec.offset : spec.end])
    if spec.kind is FieldKind.TEXT:
        return read_text(window)
    return spec.codec().parse(window)


def decode_record(
    record_slice: bytes, schema: SchemaDescriptor, index: int = 0
) -> TokenRecord | TruncatedRecord | InvalidText:
    """Decode one record from the start of ``record_slice``.

    Args:
        record_slice: Bytes beginning at the record. Anything past
            ``schema.record_size`` is ignored.
        schema: Layout to decode with.
        index: Position of the record in the account, used in errors.

    Returns:
        The TokenRecord, TruncatedRecord if the slice is shorter than the
        record size, or InvalidText for the first string field that is
        not UTF-8.
    """
    if len(record_slice) < schema.record_size:
        return TruncatedRecord(
            index=index, expected=schema.record_size, remaining=len(record_slice)
        )

    values: dict[str, int | str] = {}
    for spec in schema.fields:
        try:
            values[spec.name] = _read_field(record_slice, spec)
        except UnicodeDecodeError:
            return InvalidText(field=spec.name, record_index=index)

    return TokenRecord(
        symbol=values["symbol"],  # type: ignore[arg-type]
        wide_value=values["wide_value"],  # type: ignore[arg-type]
        primary_text=values["primary_text"],  # type: ignore[arg-type]
        secondary_text=values["secondary_text"],  # type: ignore[arg-type]
        timestamp=values.get("timestamp"),  # type: ignore[arg-type]
    )
