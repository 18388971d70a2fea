"""Invoice number generation

Numbers are a fixed prefix followed by epoch milliseconds (INV1718035200123).
Candidates already present in the ledger are skipped, so two submissions in
the same millisecond still get distinct numbers.
"""

import logging
import time
from typing import Callable
from src.app.services.ledger_store import LedgerStore

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 100


class InvoiceNumberGenerator:
    def __init__(
        self,
        ledger: LedgerStore,
        prefix: str = "INV",
        clock: Callable[[], float] = time.time,
    ):
        self.ledger = ledger
        self.prefix = prefix
        self.clock = clock
        self._last_sequence = 0

    async def next_number(self) -> str:
        """
        Generate an invoice number not yet used in the ledger

        Returns:
            Invoice number string

        Raises:
            RuntimeError: if no free number is found within MAX_ATTEMPTS
        """
        sequence = max(int(self.clock() * 1000), self._last_sequence + 1)

        for _ in range(MAX_ATTEMPTS):
            candidate = f"{self.prefix}{sequence}"
            if not await self.ledger.invoice_number_exists(candidate):
                self._last_sequence = sequence
                return candidate
            logger.debug(f"Invoice number {candidate} already taken")
            sequence += 1

        raise RuntimeError(
            f"No free invoice number after {MAX_ATTEMPTS} attempts (prefix {self.prefix})"
        )
