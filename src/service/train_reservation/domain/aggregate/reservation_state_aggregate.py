"""
Reservation State Aggregate - Aggregate Root for the whole console session

Owns the train catalog and the ticket ledger. It is built once at startup and
handed to every use case, so there is no module-level mutable state.
"""

from typing import Dict, List, Optional, Tuple

import attrs

from src.platform.exception.exceptions import LedgerFormatError
from src.platform.logging.loguru_io import Logger
from src.service.train_reservation.domain.aggregate.ticket_ledger_aggregate import (
    DEFAULT_TICKET_ID_START,
    TicketLedger,
)
from src.service.train_reservation.domain.entity import Ticket, Train
from src.service.train_reservation.domain.ticket_record_codec import TicketRecordCodec


# (train_no, name, source, destination)
SEEDED_TRAIN_CATALOG: Tuple[Tuple[int, str, str, str], ...] = (
    (101, 'Shatabdi', 'Delhi', 'Bhopal'),
    (102, 'Rajdhani', 'Mumbai', 'Delhi'),
    (103, 'Duronto', 'Chennai', 'Kolkata'),
)


@attrs.define
class ReservationState:
    trains: Dict[int, Train] = attrs.field(factory=dict)
    ledger: TicketLedger = attrs.field(factory=TicketLedger)

    @classmethod
    def seeded(cls, *, ticket_id_start: int = DEFAULT_TICKET_ID_START) -> 'ReservationState':
        trains = {
            train_no: Train(train_no=train_no, name=name, source=source, destination=destination)
            for train_no, name, source, destination in SEEDED_TRAIN_CATALOG
        }
        return cls(trains=trains, ledger=TicketLedger(next_id=ticket_id_start))

    def list_trains(self) -> List[Train]:
        return list(self.trains.values())

    def find_train(self, train_no: int) -> Optional[Train]:
        return self.trains.get(train_no)

    def find_restore_conflicts(self, tickets: List[Ticket]) -> List[LedgerFormatError]:
        """Check loaded tickets against ledger and grid invariants without mutating"""
        return self._partition_restorable(tickets)[1]

    @Logger.io
    def restore_tickets(self, tickets: List[Ticket]) -> List[LedgerFormatError]:
        """
        Put loaded tickets back into the ledger and re-occupy their seats

        Conflicting tickets are skipped and returned. A ticket for an unknown
        train is kept without marking a seat.
        """
        accepted, conflicts = self._partition_restorable(tickets)
        for ticket in accepted:
            train = self.find_train(ticket.train_no)
            if train is None:
                Logger.base.warning(
                    f'⚠️ [RESTORE] Ticket {ticket.id} references unknown train {ticket.train_no}, '
                    f'no seat marked'
                )
            else:
                train.occupy_seat(ticket.seat_position)
        self.ledger.restore(accepted)
        return conflicts

    def _partition_restorable(
        self, tickets: List[Ticket]
    ) -> Tuple[List[Ticket], List[LedgerFormatError]]:
        """
        A ticket conflicts when its id is already used, or when its seat is
        outside the grid or already held by the ledger or an earlier ticket in
        ``tickets``. Tickets for unknown trains never conflict on seats.
        """
        seen_ids = {t.id for t in self.ledger.tickets}
        claimed_seats: set[Tuple[int, int, int]] = set()
        accepted: List[Ticket] = []
        conflicts: List[LedgerFormatError] = []

        for ticket in tickets:
            reason = self._restore_conflict(ticket, seen_ids, claimed_seats)
            if reason:
                conflicts.append(
                    LedgerFormatError(
                        f'ticket {ticket.id} rejected: {reason}',
                        line=TicketRecordCodec.encode_ticket(ticket=ticket),
                    )
                )
                continue
            seen_ids.add(ticket.id)
            claimed_seats.add((ticket.train_no, ticket.coach, ticket.seat))
            accepted.append(ticket)
        return accepted, conflicts

    def _restore_conflict(
        self,
        ticket: Ticket,
        seen_ids: set[int],
        claimed_seats: set[Tuple[int, int, int]],
    ) -> Optional[str]:
        if ticket.id in seen_ids:
            return 'duplicate id'
        train = self.find_train(ticket.train_no)
        if train is None:
            return None
        position = ticket.seat_position
        if not train.contains(position):
            return f'seat {position.seat_id} is outside train {train.train_no}'
        if (
            train.is_occupied(position)
            or (ticket.train_no, ticket.coach, ticket.seat) in claimed_seats
        ):
            return f'seat {position.seat_id} on train {train.train_no} is already booked'
        return None
