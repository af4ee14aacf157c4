"""Ledger-side value types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawAccount:
    """An account as returned by the ledger, before any decoding.

    ``owner`` is the owning program's base58 address; ``data`` is never
    mutated by the decoder.
    """

    address: str
    exists: bool
    owner: str = ""
    data: bytes = b""

    @classmethod
    def missing(cls, address: str) -> "RawAccount":
        return cls(address=address, exists=False)
