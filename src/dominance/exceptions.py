"""Exceptions for programming mistakes and collaborator failures.

Decode-path failures are not raised; they are returned as values from
``dominance.errors``. What lives here is what the caller cannot recover
from by inspecting a result: a malformed schema definition, or a ledger
client that failed to answer.
"""


class DominanceError(Exception):
    """Base exception for all dominance-monitor errors."""


class SchemaDefinitionError(DominanceError):
    """Raised when a SchemaDescriptor is internally inconsistent."""


class LedgerTransportError(DominanceError):
    """Raised by LedgerClient implementations when the fetch itself fails."""
