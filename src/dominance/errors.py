"""Failure and warning values returned by the decode pipeline.

Every decode step returns either its product or one of the AccountError
subclasses below; callers branch with ``isinstance(result, AccountError)``.
Nothing here is raised. Each error carries a machine-readable ``kind``
and a human-readable ``detail`` for the presentation layer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Classification of a terminal pipeline failure."""

    ACCOUNT_NOT_FOUND = "account_not_found"
    OWNER_MISMATCH = "owner_mismatch"
    BUFFER_TOO_SHORT = "buffer_too_short"
    TRUNCATED_RECORD = "truncated_record"
    INVALID_TEXT = "invalid_text"
    SCHEMA_MISMATCH = "schema_mismatch"
    ADDRESS_DERIVATION = "address_derivation"
    TRANSPORT = "transport"


@dataclass(frozen=True)
class AccountError(ABC):
    """Base for all terminal failures."""

    kind: ClassVar[ErrorKind]

    @property
    @abstractmethod
    def detail(self) -> str:
        """Human-readable description of the failure."""

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "detail": self.detail}


@dataclass(frozen=True)
class AccountNotFound(AccountError):
    """The ledger reports no account at the address."""

    kind: ClassVar[ErrorKind] = ErrorKind.ACCOUNT_NOT_FOUND
    address: str

    @property
    def detail(self) -> str:
        return f"Aggregator account ({self.address}) not found. Has it been initialized?"


@dataclass(frozen=True)
class OwnerMismatch(AccountError):
    """The account exists but is owned by a different program."""

    kind: ClassVar[ErrorKind] = ErrorKind.OWNER_MISMATCH
    address: str
    owner: str
    expected_owner: str

    @property
    def detail(self) -> str:
        return f"Account owner ({self.owner}) does not match program ID ({self.expected_owner})."


@dataclass(frozen=True)
class BufferTooShort(AccountError):
    """Fewer bytes than the fixed header needs."""

    kind: ClassVar[ErrorKind] = ErrorKind.BUFFER_TOO_SHORT
    length: int
    required: int

    @property
    def detail(self) -> str:
        return f"Account data is {self.length} bytes; the header alone needs {self.required}."


@dataclass(frozen=True)
class TruncatedRecord(AccountError):
    """A record would read past the end of the buffer.

    ``index`` is zero-based.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.TRUNCATED_RECORD
    index: int
    expected: int
    remaining: int

    @property
    def shortfall(self) -> int:
        return self.expected - self.remaining

    @property
    def detail(self) -> str:
        return (
            f"Record {self.index} needs {self.expected} bytes but only "
            f"{self.remaining} remain ({self.shortfall} short)."
        )


@dataclass(frozen=True)
class InvalidText(AccountError):
    """A string field is not valid UTF-8."""

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_TEXT
    field: str
    record_index: int

    @property
    def detail(self) -> str:
        return f"Field '{self.field}' of record {self.record_index} is not valid UTF-8."


@dataclass(frozen=True)
class SchemaMismatch(AccountError):
    """The account discriminator differs from the expected tag."""

    kind: ClassVar[ErrorKind] = ErrorKind.SCHEMA_MISMATCH
    expected: bytes
    actual: bytes

    @property
    def detail(self) -> str:
        return f"Discriminator {self.actual.hex()} does not match expected {self.expected.hex()}."


@dataclass(frozen=True)
class AddressDerivationFailure(AccountError):
    """The aggregator address could not be derived from seed and program id."""

    kind: ClassVar[ErrorKind] = ErrorKind.ADDRESS_DERIVATION
    seed: str
    program_id: str
    reason: str

    @property
    def detail(self) -> str:
        return f"Cannot derive address for seed '{self.seed}' under {self.program_id}: {self.reason}"


@dataclass(frozen=True)
class TransportFailure(AccountError):
    """The ledger client failed to answer."""

    kind: ClassVar[ErrorKind] = ErrorKind.TRANSPORT
    address: str
    reason: str

    @property
    def detail(self) -> str:
        return f"Failed to fetch account {self.address}: {self.reason}"


@dataclass(frozen=True)
class CountPolicyWarning:
    """Non-fatal: the header's two record counts disagree.

    Decoding proceeds with the smaller of the two.
    """

    total_count: int
    vector_length: int

    @property
    def resolved_count(self) -> int:
        return min(self.total_count, self.vector_length)

    @property
    def detail(self) -> str:
        return (
            f"Header total_count ({self.total_count}) does not match vector length "
            f"({self.vector_length}); decoding {self.resolved_count} records."
        )

    def to_dict(self) -> dict:
        return {
            "kind": "count_policy_warning",
            "total_count": self.total_count,
            "vector_length": self.vector_length,
            "detail": self.detail,
        }
