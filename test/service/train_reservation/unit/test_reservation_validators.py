"""
Unit tests for booking input validators
"""

import pytest

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.service.train_reservation.domain.reservation_validators import (
    parse_age,
    parse_ticket_id,
    parse_train_number,
    resolve_train,
    validate_age,
    validate_passenger_name,
)


pytestmark = pytest.mark.unit


class TestPassengerName:
    @pytest.mark.parametrize('raw,expected', [('Alice', 'Alice'), ('  Alice Smith ', 'Alice Smith')])
    def test_letters_and_spaces_are_accepted_and_trimmed(self, raw, expected):
        assert validate_passenger_name(raw) == expected

    @pytest.mark.parametrize('raw', ['', '   ', 'Alice1', 'Smith, Alice', "O'Brien", 'Zoë'])
    def test_anything_else_is_rejected(self, raw):
        with pytest.raises(DomainError, match='only alphabets and spaces'):
            validate_passenger_name(raw)


class TestAge:
    @pytest.mark.parametrize('age', [1, 45, 46, 110])
    def test_bounds_are_inclusive(self, age):
        assert validate_age(age) == age

    @pytest.mark.parametrize('age', [0, -3, 111])
    def test_out_of_range_is_rejected(self, age):
        with pytest.raises(DomainError, match='Age must be between 1 and 110.'):
            validate_age(age)

    def test_parse_age_trims_input(self):
        assert parse_age(' 52 ') == 52

    @pytest.mark.parametrize('raw', ['', 'abc', '4.5', '4_5', '4 5'])
    def test_parse_age_rejects_non_integer(self, raw):
        with pytest.raises(DomainError, match='Invalid age'):
            parse_age(raw)


class TestTrainNumber:
    def test_parse_train_number(self):
        assert parse_train_number('101') == 101

    @pytest.mark.parametrize('raw', ['Shatabdi', '1_01'])
    def test_parse_train_number_rejects_text(self, raw):
        with pytest.raises(DomainError, match='Invalid input'):
            parse_train_number(raw)

    def test_resolve_known_train(self, reservation_state):
        assert resolve_train(reservation_state, 102).name == 'Rajdhani'

    def test_resolve_unknown_train_raises_not_found(self, reservation_state):
        with pytest.raises(NotFoundError, match='Train not found'):
            resolve_train(reservation_state, 999)


class TestTicketId:
    def test_parse_ticket_id(self):
        assert parse_ticket_id(' 1000\n') == 1000

    def test_parse_ticket_id_rejects_text(self):
        with pytest.raises(DomainError):
            parse_ticket_id('ticket')

    @pytest.mark.parametrize('raw', ['1_000', '10 00', '1e3'])
    def test_parse_ticket_id_accepts_plain_digits_only(self, raw):
        with pytest.raises(DomainError, match='valid ticket ID'):
            parse_ticket_id(raw)

    def test_parse_ticket_id_accepts_sign(self):
        assert parse_ticket_id('+1000') == 1000
