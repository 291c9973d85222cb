from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.train_reservation.app.dto import TrainAvailability
from src.service.train_reservation.domain.aggregate import ReservationState


class ListTrainsUseCase:
    def __init__(self, *, state: ReservationState):
        self.state = state

    @Logger.io
    def execute(self) -> List[TrainAvailability]:
        return [
            TrainAvailability(
                train_no=train.train_no,
                name=train.name,
                source=train.source,
                destination=train.destination,
                available=train.available_count(),
                total=train.total_seats,
            )
            for train in self.state.list_trains()
        ]
