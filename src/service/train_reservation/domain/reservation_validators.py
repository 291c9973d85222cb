"""
Pure validation rules for booking input

Each function returns the normalized value or raises; the console adapter
decides whether to re-prompt.
"""

import re

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.service.train_reservation.domain.aggregate import ReservationState
from src.service.train_reservation.domain.entity import Train


MIN_AGE = 1
MAX_AGE = 110

_NAME_PATTERN = re.compile(r'[A-Za-z ]+')
_INTEGER_PATTERN = re.compile(r'[+-]?\d+')


def validate_passenger_name(name: str) -> str:
    normalized = name.strip()
    if not normalized or not _NAME_PATTERN.fullmatch(normalized):
        raise DomainError('Invalid name. Please enter only alphabets and spaces.')
    return normalized


def validate_age(age: int) -> int:
    if not MIN_AGE <= age <= MAX_AGE:
        raise DomainError(f'Age must be between {MIN_AGE} and {MAX_AGE}.')
    return age


def parse_age(raw: str) -> int:
    return validate_age(_parse_int(raw, 'Invalid age. Please enter a valid number.'))


def parse_train_number(raw: str) -> int:
    return _parse_int(raw, 'Invalid input. Please enter a valid train number.')


def parse_ticket_id(raw: str) -> int:
    return _parse_int(raw, 'Invalid input. Please enter a valid ticket ID.')


def resolve_train(state: ReservationState, train_no: int) -> Train:
    train = state.find_train(train_no)
    if train is None:
        raise NotFoundError('Train not found. Please enter a valid train number.')
    return train


def _parse_int(raw: str, message: str) -> int:
    """Plain decimal digits with an optional sign; no underscores or spaces inside"""
    normalized = raw.strip()
    if not _INTEGER_PATTERN.fullmatch(normalized):
        raise DomainError(message)
    return int(normalized)
