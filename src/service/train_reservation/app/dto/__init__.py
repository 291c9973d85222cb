"""Train Reservation Application DTOs"""

from src.service.train_reservation.app.dto.reservation_dto import (
    BookingOutcome,
    BookTicketRequest,
    BookTicketResult,
    CancellationOutcome,
    CancelTicketResult,
    InitializeResult,
    LedgerLoadResult,
    TrainAvailability,
)

__all__ = [
    'BookingOutcome',
    'BookTicketRequest',
    'BookTicketResult',
    'CancellationOutcome',
    'CancelTicketResult',
    'InitializeResult',
    'LedgerLoadResult',
    'TrainAvailability',
]
