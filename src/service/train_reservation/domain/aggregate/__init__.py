"""Train Reservation Aggregates"""

from src.service.train_reservation.domain.aggregate.reservation_state_aggregate import (
    SEEDED_TRAIN_CATALOG,
    ReservationState,
)
from src.service.train_reservation.domain.aggregate.ticket_ledger_aggregate import (
    DEFAULT_TICKET_ID_START,
    TicketLedger,
)

__all__ = ['DEFAULT_TICKET_ID_START', 'ReservationState', 'SEEDED_TRAIN_CATALOG', 'TicketLedger']
