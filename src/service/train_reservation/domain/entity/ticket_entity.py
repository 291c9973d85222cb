import attrs

from src.service.train_reservation.domain.value_object import SeatPosition


@attrs.define(frozen=True)
class Ticket:
    id: int
    passenger_name: str
    age: int
    train_no: int
    coach: int
    seat: int

    @property
    def seat_position(self) -> SeatPosition:
        return SeatPosition(coach=self.coach, seat=self.seat)
