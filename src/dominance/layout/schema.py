"""Record layout descriptors for the aggregator account.

A SchemaDescriptor lists every field of one fixed-size record with its
byte offset, width and kind. The two layouts seen on chain differ only in
a trailing timestamp, so both are declared here side by side and selected
by SchemaVersion rather than by separate decode functions.

Each field kind maps to a construct codec shared by the decoder and
the encoder.
"""

from dataclasses import dataclass
from enum import Enum

from construct import Bytes, BytesInteger, Construct

from dominance.exceptions import SchemaDefinitionError

# Every layout must provide these; "timestamp" is optional
REQUIRED_FIELDS = frozenset({"symbol", "wide_value", "primary_text", "secondary_text"})


class SchemaVersion(str, Enum):
    """Known record layouts."""

    COMPACT = "compact"  # 146 bytes, no timestamp
    EXTENDED = "extended"  # 154 bytes, trailing i64 timestamp


class FieldKind(str, Enum):
    """How a field's byte window is interpreted."""

    UNSIGNED = "unsigned"  # little-endian unsigned integer
    SIGNED = "signed"  # little-endian two's complement integer
    TEXT = "text"  # UTF-8, zero padded


@dataclass(frozen=True)
class FieldSpec:
    """One field of a record: name, byte window and interpretation."""

    name: str
    offset: int
    width: int
    kind: FieldKind

    @property
    def end(self) -> int:
        return self.offset + self.width

    def codec(self) -> Construct:
        """Return the construct codec for this field's window."""
        if self.kind is FieldKind.TEXT:
            return Bytes(self.width)
        return BytesInteger(self.width, signed=self.kind is FieldKind.SIGNED, swapped=True)


@dataclass(frozen=True)
class SchemaDescriptor:
    """Layout of one fixed-size record for a given schema version.

    Raises:
        SchemaDefinitionError: if a field falls outside the record,
            overlaps another field, or a name is repeated.
    """

    version: SchemaVersion
    record_size: int
    fields: tuple[FieldSpec, ...]

    def __post_init__(self) -> None:
        if self.record_size <= 0:
            raise SchemaDefinitionError(f"record_size must be positive, got {self.record_size}")

        names = [f.name for f in self.fields]
        if len(set(names)) != len(names):
            raise SchemaDefinitionError(f"duplicate field names in {self.version.value} schema")
        missing = REQUIRED_FIELDS - set(names)
        if missing:
            raise SchemaDefinitionError(f"schema lacks required fields: {sorted(missing)}")

        previous_end = 0
        for spec in sorted(self.fields, key=lambda f: f.offset):
            if spec.width <= 0:
                raise SchemaDefinitionError(f"field '{spec.name}' has non-positive width")
            if spec.offset < previous_end:
                raise SchemaDefinitionError(f"field '{spec.name}' overlaps the previous field")
            if spec.end > self.record_size:
                raise SchemaDefinitionError(
                    f"field '{spec.name}' ends at {spec.end}, past record size {self.record_size}"
                )
            previous_end = spec.end

    def field(self, name: str) -> FieldSpec | None:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None

    @property
    def has_timestamp(self) -> bool:
        return self.field("timestamp") is not None


SYMBOL_WIDTH = 10
TEXT_WIDTH = 64

_COMMON_FIELDS = (
    FieldSpec("symbol", 0, SYMBOL_WIDTH, FieldKind.TEXT),
    FieldSpec("wide_value", 10, 8, FieldKind.UNSIGNED),
    FieldSpec("primary_text", 18, TEXT_WIDTH, FieldKind.TEXT),
    FieldSpec("secondary_text", 82, TEXT_WIDTH, FieldKind.TEXT),
)

COMPACT_SCHEMA = SchemaDescriptor(
    version=SchemaVersion.COMPACT,
    record_size=146,
    fields=_COMMON_FIELDS,
)

EXTENDED_SCHEMA = SchemaDescriptor(
    version=SchemaVersion.EXTENDED,
    record_size=154,
    fields=(*_COMMON_FIELDS, FieldSpec("timestamp", 146, 8, FieldKind.SIGNED)),
)

_SCHEMAS = {
    SchemaVersion.COMPACT: COMPACT_SCHEMA,
    SchemaVersion.EXTENDED: EXTENDED_SCHEMA,
}


def schema_for(version: SchemaVersion | str) -> SchemaDescriptor:
    """Look up the descriptor for a schema version tag."""
    return _SCHEMAS[SchemaVersion(version)]
