"""
Initialize Reservation State Use Case

Runs once at startup, after the trains are seeded: loads the ledger file and
re-occupies the seat of every restored ticket.
"""

from typing import List

from src.platform.exception.exceptions import LedgerFormatError, PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.train_reservation.app.dto import InitializeResult
from src.service.train_reservation.app.interface import ITicketLedgerRepo
from src.service.train_reservation.domain.aggregate import ReservationState


class InitializeReservationStateUseCase:
    """
    Flow:
    1. Load the persisted ledger (missing file -> empty ledger)
       -> unreadable file: reported, session starts with an empty ledger
          and the file is copied aside before the next save overwrites it
    2. Malformed or conflicting records
       -> lenient (default): skipped, the rest is restored
       -> strict: nothing is restored
       Either way the file is copied aside before the next save overwrites it
    3. Restore tickets, re-occupying their seats
    """

    def __init__(
        self,
        *,
        state: ReservationState,
        ticket_ledger_repo: ITicketLedgerRepo,
        strict_load: bool = False,
    ):
        self.state = state
        self.ticket_ledger_repo = ticket_ledger_repo
        self.strict_load = strict_load

    @Logger.io
    def execute(self) -> InitializeResult:
        try:
            loaded = self.ticket_ledger_repo.load(strict=self.strict_load)
            if self.strict_load and (conflicts := self.state.find_restore_conflicts(loaded.tickets)):
                raise conflicts[0]
        except PersistenceError as e:
            Logger.base.error(f'❌ [INIT] Could not load ledger: {e}')
            return InitializeResult(
                load_error=e.message, backup_path=self._backup_before_overwrite()
            )
        except LedgerFormatError as e:
            Logger.base.error(f'❌ [INIT] Ledger load aborted: {e} -> {e.line!r}')
            return InitializeResult(
                rejected=[e],
                load_error=f'Error loading tickets: {e}',
                backup_path=self._backup_before_overwrite(),
            )

        rejected: List[LedgerFormatError] = loaded.rejected + self.state.restore_tickets(
            loaded.tickets
        )
        for error in rejected:
            Logger.base.warning(f'⚠️ [INIT] Skipped ledger record: {error} -> {error.line!r}')
        backup_path = self._backup_before_overwrite() if rejected else None

        restored_count = len(self.state.ledger)
        Logger.base.info(
            f'📂 [INIT] {restored_count} tickets restored across {len(self.state.trains)} trains, '
            f'next ticket id {self.state.ledger.next_id}'
        )
        return InitializeResult(
            restored_count=restored_count, rejected=rejected, backup_path=backup_path
        )

    def _backup_before_overwrite(self) -> str | None:
        try:
            backup_path = self.ticket_ledger_repo.backup()
        except PersistenceError as e:
            Logger.base.error(f'❌ [INIT] Could not back up ledger: {e}')
            return None
        if backup_path:
            Logger.base.warning(f'⚠️ [INIT] Original ledger copied to {backup_path}')
        return backup_path
