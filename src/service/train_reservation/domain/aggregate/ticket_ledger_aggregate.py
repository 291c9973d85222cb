"""
Ticket Ledger Aggregate

[Business Invariants]
- Ledger order is booking order
- Ticket ids are unique and strictly increasing over the process lifetime,
  including ids restored from the ledger file
- The id counter never moves backwards, not even after a cancellation
"""

from typing import Iterable, List, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.train_reservation.domain.entity import Ticket
from src.service.train_reservation.domain.ticket_record_codec import TicketRecordCodec


DEFAULT_TICKET_ID_START = 1000


@attrs.define
class TicketLedger:
    next_id: int = DEFAULT_TICKET_ID_START
    _tickets: List[Ticket] = attrs.field(factory=list, alias='tickets')

    @property
    def tickets(self) -> List[Ticket]:
        """Snapshot in booking order"""
        return list(self._tickets)

    def __len__(self) -> int:
        return len(self._tickets)

    def find(self, ticket_id: int) -> Optional[Ticket]:
        return next((t for t in self._tickets if t.id == ticket_id), None)

    @Logger.io
    def issue(
        self, *, passenger_name: str, age: int, train_no: int, coach: int, seat: int
    ) -> Ticket:
        ticket = Ticket(
            id=self.next_id,
            passenger_name=passenger_name,
            age=age,
            train_no=train_no,
            coach=coach,
            seat=seat,
        )
        self.next_id += 1
        self._tickets.append(ticket)
        return ticket

    @Logger.io
    def cancel(self, ticket_id: int) -> Optional[Ticket]:
        ticket = self.find(ticket_id)
        if ticket is not None:
            self._tickets.remove(ticket)
        return ticket

    @Logger.io
    def restore(self, tickets: Iterable[Ticket]) -> None:
        """Append tickets loaded from storage and move the counter past their ids"""
        for ticket in tickets:
            if self.find(ticket.id) is not None:
                raise DomainError(f'Duplicate ticket id {ticket.id}')
            self._tickets.append(ticket)
            self.next_id = max(self.next_id, ticket.id + 1)

    def serialize(self) -> str:
        return TicketRecordCodec.encode(tickets=self._tickets)

    @staticmethod
    def deserialize(text: str) -> List[Ticket]:
        """
        Parse a serialized ledger, header skipped, strictly line by line

        Only parses; pass the result to ``restore`` to append the tickets and
        move ``next_id`` to max(next_id, max loaded id + 1).
        """
        return TicketRecordCodec.decode(text=text, strict=True).tickets
