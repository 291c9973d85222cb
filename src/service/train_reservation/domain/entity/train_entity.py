from typing import List, Optional

import attrs

from src.service.train_reservation.domain.value_object import BerthBand, SeatPosition


COACHES = 7
SEATS_PER_COACH = 100


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Train {attribute.name} cannot be empty')


@attrs.define
class Train:
    """
    Train with a fixed coaches x seats occupancy grid

    The identity fields never change. Seat flags are stored 0-based internally,
    every public method takes and returns 1-based SeatPosition coordinates.
    """

    train_no: int = attrs.field(on_setattr=attrs.setters.frozen)
    name: str = attrs.field(validator=_validate_non_empty_string, on_setattr=attrs.setters.frozen)
    source: str = attrs.field(
        validator=_validate_non_empty_string, on_setattr=attrs.setters.frozen
    )
    destination: str = attrs.field(
        validator=_validate_non_empty_string, on_setattr=attrs.setters.frozen
    )
    coaches: int = attrs.field(default=COACHES, on_setattr=attrs.setters.frozen)
    seats_per_coach: int = attrs.field(default=SEATS_PER_COACH, on_setattr=attrs.setters.frozen)
    _booked_seats: List[List[bool]] = attrs.field(init=False, repr=False, eq=False)

    def __attrs_post_init__(self) -> None:
        self._booked_seats = [[False] * self.seats_per_coach for _ in range(self.coaches)]

    @property
    def total_seats(self) -> int:
        return self.coaches * self.seats_per_coach

    def contains(self, position: SeatPosition) -> bool:
        return position.coach <= self.coaches and position.seat <= self.seats_per_coach

    def is_occupied(self, position: SeatPosition) -> bool:
        return self._booked_seats[position.coach - 1][position.seat - 1]

    def assign_seat(self, age: int) -> Optional[SeatPosition]:
        """
        Occupy the first free seat of the passenger's berth band

        Coaches are scanned in ascending order, then seats within the band.
        Returns None when the band is full in every coach; the other band is
        never used as a fallback.
        """
        band_seats = BerthBand.for_age(age).seat_range(self.seats_per_coach)
        for coach_index, seats in enumerate(self._booked_seats):
            for seat_no in band_seats:
                if not seats[seat_no - 1]:
                    seats[seat_no - 1] = True
                    return SeatPosition(coach=coach_index + 1, seat=seat_no)
        return None

    def occupy_seat(self, position: SeatPosition) -> bool:
        """Mark a restored seat as booked; False if it was already taken"""
        if self.is_occupied(position):
            return False
        self._booked_seats[position.coach - 1][position.seat - 1] = True
        return True

    def cancel_seat(self, coach: int, seat: int) -> None:
        self._booked_seats[coach - 1][seat - 1] = False

    def occupied_count(self) -> int:
        return sum(sum(seats) for seats in self._booked_seats)

    def available_count(self) -> int:
        return self.total_seats - self.occupied_count()
