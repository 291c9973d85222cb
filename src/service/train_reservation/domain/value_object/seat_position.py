"""
Seat Position Value Object

1-based (coach, seat) coordinates as printed on a ticket.
"""

import attrs


def _validate_positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 1:
        raise ValueError(f'{attribute.name} must be 1 or greater, got {value}')


@attrs.define(frozen=True, order=True)
class SeatPosition:
    """Seat Position (Value Object)"""

    coach: int = attrs.field(validator=_validate_positive)
    seat: int = attrs.field(validator=_validate_positive)

    @property
    def seat_id(self) -> str:
        return f'C{self.coach}-S{self.seat}'
