from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.train_reservation.domain.aggregate import ReservationState
from src.service.train_reservation.domain.entity import Ticket


class ListTicketsUseCase:
    def __init__(self, *, state: ReservationState):
        self.state = state

    @Logger.io
    def execute(self) -> List[Ticket]:
        """All issued tickets in booking order"""
        return self.state.ledger.tickets
