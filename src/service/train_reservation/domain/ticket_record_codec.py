"""
Ticket Record Codec

Plain comma-delimited text, one header line then one ticket per line:

    ID,Name,Age,TrainNo,Coach,Seat
    1000,Alice Smith,52,101,1,1

There is no quoting or escaping, so a name must never contain a comma.
"""

import re
from typing import Iterable, List, Tuple

import attrs

from src.platform.exception.exceptions import LedgerFormatError
from src.service.train_reservation.domain.entity import Ticket


HEADER = 'ID,Name,Age,TrainNo,Coach,Seat'
DELIMITER = ','
FIELD_COUNT = 6

_INTEGER_PATTERN = re.compile(r'[+-]?\d+')


@attrs.define
class DecodedRecords:
    tickets: List[Ticket] = attrs.field(factory=list)
    rejected: List[LedgerFormatError] = attrs.field(factory=list)


class TicketRecordCodec:
    @staticmethod
    def encode_ticket(*, ticket: Ticket) -> str:
        return DELIMITER.join(
            str(value)
            for value in (
                ticket.id,
                ticket.passenger_name,
                ticket.age,
                ticket.train_no,
                ticket.coach,
                ticket.seat,
            )
        )

    @staticmethod
    def encode(*, tickets: Iterable[Ticket]) -> str:
        lines = [HEADER, *(TicketRecordCodec.encode_ticket(ticket=t) for t in tickets)]
        return '\n'.join(lines) + '\n'

    @staticmethod
    def decode_line(*, line: str, line_number: int) -> Ticket:
        parts = line.split(DELIMITER)
        if len(parts) != FIELD_COUNT:
            raise LedgerFormatError(
                f'expected {FIELD_COUNT} fields, got {len(parts)}',
                line_number=line_number,
                line=line,
            )

        raw_id, name, raw_age, raw_train_no, raw_coach, raw_seat = parts
        numeric_fields = [
            raw.strip() for raw in (raw_id, raw_age, raw_train_no, raw_coach, raw_seat)
        ]
        if not all(_INTEGER_PATTERN.fullmatch(raw) for raw in numeric_fields):
            raise LedgerFormatError(
                'numeric field is not an integer', line_number=line_number, line=line
            )

        ticket_id, age, train_no, coach, seat = (int(raw) for raw in numeric_fields)
        if coach < 1 or seat < 1:
            raise LedgerFormatError(
                'coach and seat must be 1 or greater', line_number=line_number, line=line
            )

        return Ticket(
            id=ticket_id,
            passenger_name=name,
            age=age,
            train_no=train_no,
            coach=coach,
            seat=seat,
        )

    @staticmethod
    def iter_body_lines(*, text: str) -> Iterable[Tuple[int, str]]:
        """Yield (line_number, line) for every non-blank line after the header"""
        for line_number, line in enumerate(text.splitlines(), start=1):
            if line_number == 1:
                continue
            if line.strip():
                yield line_number, line

    @staticmethod
    def decode(*, text: str, strict: bool = True) -> DecodedRecords:
        """
        Decode a whole ledger file

        strict=True raises on the first malformed line; otherwise malformed
        lines are collected in ``rejected`` and decoding continues.
        """
        result = DecodedRecords()
        for line_number, line in TicketRecordCodec.iter_body_lines(text=text):
            try:
                result.tickets.append(
                    TicketRecordCodec.decode_line(line=line, line_number=line_number)
                )
            except LedgerFormatError as e:
                if strict:
                    raise
                result.rejected.append(e)
        return result
