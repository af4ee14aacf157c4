"""Ledger collaborator interfaces and types."""

from dominance.ledger.client import AddressDeriver, LedgerClient, ProgramAddressDeriver
from dominance.ledger.types import RawAccount

__all__ = ["AddressDeriver", "LedgerClient", "ProgramAddressDeriver", "RawAccount"]
