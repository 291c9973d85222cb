"""Reservation DTOs for the train reservation use cases."""

from enum import StrEnum
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import LedgerFormatError
from src.service.train_reservation.domain.entity import Ticket


class BookingOutcome(StrEnum):
    BOOKED = 'booked'
    NO_SEAT_AVAILABLE = 'no_seat_available'


class CancellationOutcome(StrEnum):
    CANCELLED = 'cancelled'
    TICKET_NOT_FOUND = 'ticket_not_found'


@attrs.define
class BookTicketRequest:
    passenger_name: str
    age: int
    train_no: int


@attrs.define
class BookTicketResult:
    outcome: BookingOutcome
    ticket: Optional[Ticket] = None
    persist_error: Optional[str] = None  # Set when the ledger could not be saved

    @property
    def is_booked(self) -> bool:
        return self.outcome is BookingOutcome.BOOKED


@attrs.define
class CancelTicketResult:
    outcome: CancellationOutcome
    ticket_id: int
    ticket: Optional[Ticket] = None
    persist_error: Optional[str] = None

    @property
    def is_cancelled(self) -> bool:
        return self.outcome is CancellationOutcome.CANCELLED


@attrs.define
class LedgerLoadResult:
    """Raw result of reading the ledger store"""

    tickets: List[Ticket] = attrs.field(factory=list)
    rejected: List[LedgerFormatError] = attrs.field(factory=list)


@attrs.define
class InitializeResult:
    restored_count: int = 0
    rejected: List[LedgerFormatError] = attrs.field(factory=list)
    backup_path: Optional[str] = None
    load_error: Optional[str] = None


@attrs.define
class TrainAvailability:
    train_no: int
    name: str
    source: str
    destination: str
    available: int
    total: int
