"""
Cancel Ticket Use Case
"""

from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.train_reservation.app.dto import CancellationOutcome, CancelTicketResult
from src.service.train_reservation.app.interface import ITicketLedgerRepo
from src.service.train_reservation.domain.aggregate import ReservationState


class CancelTicketUseCase:
    def __init__(self, *, state: ReservationState, ticket_ledger_repo: ITicketLedgerRepo):
        self.state = state
        self.ticket_ledger_repo = ticket_ledger_repo

    @Logger.io
    def execute(self, ticket_id: int) -> CancelTicketResult:
        """Free the ticket's seat, drop it from the ledger and persist the ledger"""
        ticket = self.state.ledger.find(ticket_id)
        if ticket is None:
            Logger.base.warning(f'⚠️ [CANCEL] Ticket {ticket_id} not found')
            return CancelTicketResult(
                outcome=CancellationOutcome.TICKET_NOT_FOUND, ticket_id=ticket_id
            )

        train = self.state.find_train(ticket.train_no)
        if train is not None:
            train.cancel_seat(ticket.coach, ticket.seat)
        else:
            Logger.base.warning(
                f'⚠️ [CANCEL] Train {ticket.train_no} unknown, no seat freed for ticket {ticket_id}'
            )

        self.state.ledger.cancel(ticket_id)
        Logger.base.info(f'🗑️ [CANCEL] Ticket {ticket_id} cancelled')

        try:
            self.ticket_ledger_repo.save(tickets=self.state.ledger.tickets)
        except PersistenceError as e:
            Logger.base.warning(f'⚠️ [CANCEL] Ticket {ticket_id} removed in memory, save failed: {e}')
            return CancelTicketResult(
                outcome=CancellationOutcome.CANCELLED,
                ticket_id=ticket_id,
                ticket=ticket,
                persist_error=e.message,
            )

        return CancelTicketResult(
            outcome=CancellationOutcome.CANCELLED, ticket_id=ticket_id, ticket=ticket
        )
