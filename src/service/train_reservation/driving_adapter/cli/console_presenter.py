"""Console line formats for trains, tickets and startup reports"""

from typing import List

from src.service.train_reservation.app.dto import InitializeResult, TrainAvailability
from src.service.train_reservation.domain.entity import Ticket


def format_train(train: TrainAvailability) -> str:
    return (
        f'{train.train_no} | {train.name} | {train.source} -> {train.destination} '
        f'| Available: {train.available}'
    )


def format_ticket(ticket: Ticket) -> str:
    return (
        f'Ticket ID: {ticket.id} | Name: {ticket.passenger_name} | Age: {ticket.age} '
        f'| Train: {ticket.train_no} | Coach: {ticket.coach} | Seat: {ticket.seat}'
    )


def format_initialize_report(result: InitializeResult) -> List[str]:
    lines: List[str] = []
    if result.load_error:
        lines.append(result.load_error)
    elif result.rejected:
        lines.append(f'Warning: {len(result.rejected)} invalid ticket record(s) were skipped.')
    if result.backup_path:
        lines.append(f'The original ticket file was copied to {result.backup_path}')
    return lines
