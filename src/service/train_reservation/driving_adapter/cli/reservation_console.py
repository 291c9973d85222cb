"""
Reservation Console

Interactive menu on stdin/stdout. Input is re-prompted until the pure
validators accept it; every business decision stays in the use cases.
"""

from typing import Callable, TypeVar

from src.platform.config.di import Container
from src.platform.exception.exceptions import CustomBaseError, PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.train_reservation.app.dto import BookTicketRequest
from src.service.train_reservation.domain.reservation_validators import (
    parse_age,
    parse_ticket_id,
    parse_train_number,
    resolve_train,
    validate_passenger_name,
)
from src.service.train_reservation.driving_adapter.cli.console_presenter import (
    format_initialize_report,
    format_ticket,
    format_train,
)


_T = TypeVar('_T')

MENU_OPTIONS = (
    '1. View Trains',
    '2. Book Ticket',
    '3. Cancel Ticket',
    '4. View Tickets',
    '5. Exit',
)


class ReservationConsole:
    def __init__(
        self,
        *,
        container: Container,
        title: str = 'Railway Reservation System',
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.container = container
        self.title = title
        self.read_line = read_line
        self.write = write
        self._actions: dict[str, Callable[[], None]] = {
            '1': self.view_trains,
            '2': self.book_ticket,
            '3': self.cancel_ticket,
            '4': self.view_tickets,
        }

    def start(self) -> None:
        result = self.container.initialize_reservation_state_use_case().execute()
        for line in format_initialize_report(result):
            self.write(line)

    def run(self) -> None:
        """Menu loop; returns after Exit or end of input"""
        self.start()
        while True:
            self.show_menu()
            try:
                choice = self.read_line('Choice: ').strip()
            except (EOFError, KeyboardInterrupt):
                self.write('')
                self.exit()
                return

            if choice == '5':
                self.exit()
                return

            action = self._actions.get(choice)
            if action is None:
                self.write('Invalid choice.')
                continue

            try:
                action()
            except (EOFError, KeyboardInterrupt):
                self.write('')
                self.exit()
                return
            except CustomBaseError as e:
                self.write(f'Error: {e.message}')
            except Exception as e:
                Logger.base.exception(f'❌ [CONSOLE] Unexpected error: {e}')
                self.write(f'Error: {e}')

    def show_menu(self) -> None:
        self.write(f'\n--- {self.title} ---')
        for option in MENU_OPTIONS:
            self.write(option)

    def view_trains(self) -> None:
        for train in self.container.list_trains_use_case().execute():
            self.write(format_train(train))

    def book_ticket(self) -> None:
        state = self.container.reservation_state()
        name = self._prompt_until_valid('Enter Name: ', validate_passenger_name)
        age = self._prompt_until_valid('Enter Age (1-110): ', parse_age)
        train_no = self._prompt_until_valid(
            'Enter Train Number: ',
            lambda raw: resolve_train(state, parse_train_number(raw)).train_no,
        )

        result = self.container.book_ticket_use_case().execute(
            BookTicketRequest(passenger_name=name, age=age, train_no=train_no)
        )
        if not result.is_booked or result.ticket is None:
            self.write('No seat available as per your berth preference.')
            return

        if result.persist_error:
            self.write(result.persist_error)
        self.write(f'Ticket Booked! Ticket ID: {result.ticket.id}')

    def cancel_ticket(self) -> None:
        ticket_id = parse_ticket_id(self.read_line('Enter Ticket ID to cancel: '))
        result = self.container.cancel_ticket_use_case().execute(ticket_id)
        if not result.is_cancelled:
            self.write('Ticket not found.')
            return

        if result.persist_error:
            self.write(result.persist_error)
        self.write('Ticket cancelled successfully.')

    def view_tickets(self) -> None:
        tickets = self.container.list_tickets_use_case().execute()
        if not tickets:
            self.write('No tickets booked.')
            return
        for ticket in tickets:
            self.write(format_ticket(ticket))

    def exit(self) -> None:
        try:
            self.container.save_ledger_use_case().execute()
        except PersistenceError as e:
            self.write(e.message)
        self.write('Thank you!')

    def _prompt_until_valid(self, prompt: str, parse: Callable[[str], _T]) -> _T:
        while True:
            raw = self.read_line(prompt)
            try:
                return parse(raw)
            except CustomBaseError as e:
                self.write(e.message)
