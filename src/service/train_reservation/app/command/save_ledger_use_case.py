from src.platform.logging.loguru_io import Logger
from src.service.train_reservation.app.interface import ITicketLedgerRepo
from src.service.train_reservation.domain.aggregate import ReservationState


class SaveLedgerUseCase:
    def __init__(self, *, state: ReservationState, ticket_ledger_repo: ITicketLedgerRepo):
        self.state = state
        self.ticket_ledger_repo = ticket_ledger_repo

    @Logger.io
    def execute(self) -> int:
        """Persist the ledger as it is now; raises PersistenceError on failure"""
        tickets = self.state.ledger.tickets
        self.ticket_ledger_repo.save(tickets=tickets)
        Logger.base.info(f'💾 [SAVE] {len(tickets)} tickets saved')
        return len(tickets)
