"""Train Reservation Entities"""

from src.service.train_reservation.domain.entity.ticket_entity import Ticket
from src.service.train_reservation.domain.entity.train_entity import (
    COACHES,
    SEATS_PER_COACH,
    Train,
)

__all__ = ['COACHES', 'SEATS_PER_COACH', 'Ticket', 'Train']
