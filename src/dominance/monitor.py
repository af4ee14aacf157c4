"""Fetch-then-decode refresh cycle for the aggregator account.

Each refresh derives the aggregator address, fetches the account and hands
it to the decode pipeline. Cycles never overlap: a refresh requested while
another is in flight is skipped rather than queued, matching a refresh
control that stays disabled until the pending cycle finishes.
"""

from __future__ import annotations

import asyncio

from dominance.config import AppSettings
from dominance.errors import AccountError, AddressDerivationFailure, TransportFailure
from dominance.exceptions import LedgerTransportError
from dominance.ledger.client import AddressDeriver, LedgerClient
from dominance.logging import get_logger
from dominance.pipeline import DominanceSnapshot, process_account

logger = get_logger(__name__)


class DominanceMonitor:
    """Single-flight refresher for the dominance aggregator.

    Args:
        settings: Application settings; ledger and decode groups are used.
        client: Ledger RPC client.
        deriver: Aggregator address derivation.
    """

    def __init__(
        self,
        settings: AppSettings,
        client: LedgerClient,
        deriver: AddressDeriver,
    ) -> None:
        self._settings = settings
        self._client = client
        self._deriver = deriver
        self._cycle_lock = asyncio.Lock()

    @property
    def is_refreshing(self) -> bool:
        return self._cycle_lock.locked()

    async def refresh(self) -> DominanceSnapshot | AccountError | None:
        """Run one fetch-decode cycle.

        Returns:
            The snapshot or terminal error of this cycle, or None if a
            cycle was already in flight and this call was skipped.
        """
        if self._cycle_lock.locked():
            logger.info("refresh_skipped", reason="cycle_in_flight")
            return None

        async with self._cycle_lock:
            return await self._cycle()

    async def _cycle(self) -> DominanceSnapshot | AccountError:
        ledger = self._settings.ledger
        try:
            address = await self._deriver.derive_address(ledger.aggregator_seed, ledger.program_id)
        except ValueError as e:
            logger.error(
                "address_derivation_failed",
                seed=ledger.aggregator_seed,
                program_id=ledger.program_id,
                error=str(e),
            )
            return AddressDerivationFailure(
                seed=ledger.aggregator_seed, program_id=ledger.program_id, reason=str(e)
            )
        logger.debug("aggregator_address_derived", address=address, seed=ledger.aggregator_seed)

        try:
            raw = await self._client.fetch_account(address)
        except LedgerTransportError as e:
            logger.error("refresh_failed", address=address, error=str(e))
            return TransportFailure(address=address, reason=str(e))

        result = process_account(raw, ledger, self._settings.decode)
        if isinstance(result, AccountError):
            logger.warning("refresh_failed", address=address, kind=result.kind.value)
        return result
