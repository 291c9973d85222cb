"""
Book Ticket Use Case
"""

from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.train_reservation.app.dto import (
    BookingOutcome,
    BookTicketRequest,
    BookTicketResult,
)
from src.service.train_reservation.app.interface import ITicketLedgerRepo
from src.service.train_reservation.domain.aggregate import ReservationState
from src.service.train_reservation.domain.reservation_validators import (
    resolve_train,
    validate_age,
    validate_passenger_name,
)


class BookTicketUseCase:
    """
    Book Ticket Use Case

    Flow:
    1. Validate name, age and train number (raises DomainError / NotFoundError)
    2. Assign the first free seat of the passenger's berth band
       -> none free: NO_SEAT_AVAILABLE, ledger untouched, no id consumed
    3. Issue the ticket into the ledger
    4. Persist the full ledger
       -> save failure is reported on the result, the booking is kept
    """

    def __init__(self, *, state: ReservationState, ticket_ledger_repo: ITicketLedgerRepo):
        self.state = state
        self.ticket_ledger_repo = ticket_ledger_repo

    @Logger.io
    def execute(self, request: BookTicketRequest) -> BookTicketResult:
        passenger_name = validate_passenger_name(request.passenger_name)
        age = validate_age(request.age)
        train = resolve_train(self.state, request.train_no)

        position = train.assign_seat(age)
        if position is None:
            Logger.base.warning(
                f'⚠️ [BOOK] No seat available on train {train.train_no} for age {age}'
            )
            return BookTicketResult(outcome=BookingOutcome.NO_SEAT_AVAILABLE)

        ticket = self.state.ledger.issue(
            passenger_name=passenger_name,
            age=age,
            train_no=train.train_no,
            coach=position.coach,
            seat=position.seat,
        )
        Logger.base.info(
            f'🎫 [BOOK] Ticket {ticket.id} issued on train {train.train_no} '
            f'coach {position.coach} seat {position.seat}'
        )

        try:
            self.ticket_ledger_repo.save(tickets=self.state.ledger.tickets)
        except PersistenceError as e:
            Logger.base.warning(f'⚠️ [BOOK] Ticket {ticket.id} kept in memory, save failed: {e}')
            return BookTicketResult(
                outcome=BookingOutcome.BOOKED, ticket=ticket, persist_error=e.message
            )

        return BookTicketResult(outcome=BookingOutcome.BOOKED, ticket=ticket)
