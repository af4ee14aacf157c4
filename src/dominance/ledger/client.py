"""Abstract ledger collaborators.

The decode pipeline depends only on these interfaces. Transport, retries
and RPC specifics belong to concrete implementations outside this package.
"""

from abc import ABC, abstractmethod

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from dominance.ledger.types import RawAccount


class LedgerClient(ABC):
    """Abstract base class for ledger RPC clients."""

    @abstractmethod
    async def fetch_account(self, address: str) -> RawAccount:
        """Fetch an account by base58 address.

        Returns a RawAccount with ``exists=False`` when the ledger has no
        such account. Implementations raise LedgerTransportError when the
        request itself fails.
        """
        ...


class AddressDeriver(ABC):
    """Derives the deterministic account address for a seed."""

    @abstractmethod
    async def derive_address(self, seed: str, program_id: str) -> str:
        """Return the base58 address owned by ``program_id`` for ``seed``.

        Raises ValueError when the seed or program id cannot be used.
        """
        ...


class ProgramAddressDeriver(AddressDeriver):
    """Program-derived address lookup delegated to solders."""

    async def derive_address(self, seed: str, program_id: str) -> str:
        address, _bump = Pubkey.find_program_address(
            [seed.encode("utf-8")], Pubkey.from_string(program_id)
        )
        return str(address)
