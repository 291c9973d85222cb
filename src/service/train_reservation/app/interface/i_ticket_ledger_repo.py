"""
Ticket Ledger Repository Interface

Persists the full ticket ledger; every save overwrites what was stored before.
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.train_reservation.app.dto import LedgerLoadResult
from src.service.train_reservation.domain.entity import Ticket


class ITicketLedgerRepo(ABC):
    @abstractmethod
    def load(self, *, strict: bool) -> LedgerLoadResult:
        """
        Read every persisted ticket in ledger order

        A missing store is an empty ledger, not an error.

        Args:
            strict: raise LedgerFormatError on the first malformed record
                instead of collecting it in ``rejected``

        Raises:
            PersistenceError: the store exists but cannot be read
        """
        pass

    @abstractmethod
    def save(self, *, tickets: List[Ticket]) -> None:
        """
        Replace the stored ledger with ``tickets``

        Raises:
            PersistenceError: the store cannot be written
        """
        pass

    @abstractmethod
    def backup(self) -> str | None:
        """Copy the current store aside; returns its location, None if nothing to copy"""
        pass
