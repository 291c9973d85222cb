"""
Unit tests for BookTicketUseCase

Test Coverage:
1. Validation happens before any mutation (DomainError / NotFoundError)
2. Successful booking issues a ticket and persists the full ledger
3. Band exhaustion: NO_SEAT_AVAILABLE, no ticket, no id consumed, no save
4. Save failure is reported on the result and not rolled back
"""

import pytest

from src.platform.exception.exceptions import DomainError, NotFoundError, PersistenceError
from src.service.train_reservation.app.command.book_ticket_use_case import BookTicketUseCase
from src.service.train_reservation.app.dto import BookingOutcome, BookTicketRequest


pytestmark = pytest.mark.unit


class TestBookTicketUseCase:
    @pytest.fixture
    def use_case(self, reservation_state, mock_ledger_repo) -> BookTicketUseCase:
        return BookTicketUseCase(state=reservation_state, ticket_ledger_repo=mock_ledger_repo)

    def test_senior_booking_gets_first_lower_seat_and_is_saved(
        self, use_case, reservation_state, mock_ledger_repo
    ):
        # When
        result = use_case.execute(BookTicketRequest(passenger_name='Alice Smith', age=52, train_no=101))

        # Then
        assert result.outcome is BookingOutcome.BOOKED
        assert result.is_booked
        assert result.persist_error is None
        assert (result.ticket.id, result.ticket.coach, result.ticket.seat) == (1000, 1, 1)
        assert reservation_state.ledger.tickets == [result.ticket]
        mock_ledger_repo.save.assert_called_once_with(tickets=[result.ticket])

    def test_general_booking_gets_first_upper_seat(self, use_case):
        result = use_case.execute(BookTicketRequest(passenger_name='Bob', age=30, train_no=102))

        assert (result.ticket.train_no, result.ticket.coach, result.ticket.seat) == (102, 1, 51)

    def test_name_is_trimmed_before_issuing(self, use_case):
        result = use_case.execute(BookTicketRequest(passenger_name='  Bob Jones ', age=30, train_no=101))

        assert result.ticket.passenger_name == 'Bob Jones'

    @pytest.mark.parametrize(
        'request_kwargs,error',
        [
            ({'passenger_name': 'R2D2', 'age': 30, 'train_no': 101}, DomainError),
            ({'passenger_name': 'Bob', 'age': 0, 'train_no': 101}, DomainError),
            ({'passenger_name': 'Bob', 'age': 111, 'train_no': 101}, DomainError),
            ({'passenger_name': 'Bob', 'age': 30, 'train_no': 999}, NotFoundError),
        ],
    )
    def test_invalid_request_is_rejected_without_mutation(
        self, use_case, reservation_state, mock_ledger_repo, request_kwargs, error
    ):
        with pytest.raises(error):
            use_case.execute(BookTicketRequest(**request_kwargs))

        assert len(reservation_state.ledger) == 0
        assert reservation_state.ledger.next_id == 1000
        assert all(t.occupied_count() == 0 for t in reservation_state.list_trains())
        mock_ledger_repo.save.assert_not_called()

    def test_full_band_returns_no_seat_and_consumes_no_id(
        self, use_case, reservation_state, mock_ledger_repo
    ):
        # Given: every senior seat of train 101 is taken
        train = reservation_state.find_train(101)
        for _ in range(7 * 50):
            train.assign_seat(60)

        # When
        result = use_case.execute(BookTicketRequest(passenger_name='Carol', age=60, train_no=101))

        # Then
        assert result.outcome is BookingOutcome.NO_SEAT_AVAILABLE
        assert result.ticket is None
        assert len(reservation_state.ledger) == 0
        assert reservation_state.ledger.next_id == 1000
        mock_ledger_repo.save.assert_not_called()

    def test_full_band_on_one_train_does_not_affect_others(self, use_case, reservation_state):
        train = reservation_state.find_train(101)
        for _ in range(7 * 50):
            train.assign_seat(60)

        result = use_case.execute(BookTicketRequest(passenger_name='Carol', age=60, train_no=102))

        assert result.is_booked
        assert (result.ticket.coach, result.ticket.seat) == (1, 1)

    def test_save_failure_keeps_booking_in_memory(
        self, use_case, reservation_state, mock_ledger_repo
    ):
        # Given: the ledger file cannot be written
        mock_ledger_repo.save.side_effect = PersistenceError('Error saving tickets: disk full')

        # When
        result = use_case.execute(BookTicketRequest(passenger_name='Dave', age=40, train_no=103))

        # Then: booked, error reported, no rollback
        assert result.outcome is BookingOutcome.BOOKED
        assert result.persist_error == 'Error saving tickets: disk full'
        assert reservation_state.ledger.tickets == [result.ticket]
        assert reservation_state.find_train(103).occupied_count() == 1
