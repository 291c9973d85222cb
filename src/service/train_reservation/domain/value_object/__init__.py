"""Train Reservation Value Objects"""

from src.service.train_reservation.domain.value_object.berth_band import (
    SENIOR_AGE_THRESHOLD,
    BerthBand,
)
from src.service.train_reservation.domain.value_object.seat_position import SeatPosition

__all__ = ['BerthBand', 'SENIOR_AGE_THRESHOLD', 'SeatPosition']
