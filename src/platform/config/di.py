"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.train_reservation.app.command.book_ticket_use_case import BookTicketUseCase
from src.service.train_reservation.app.command.cancel_ticket_use_case import CancelTicketUseCase
from src.service.train_reservation.app.command.initialize_reservation_state_use_case import (
    InitializeReservationStateUseCase,
)
from src.service.train_reservation.app.command.save_ledger_use_case import SaveLedgerUseCase
from src.service.train_reservation.app.query.list_tickets_use_case import ListTicketsUseCase
from src.service.train_reservation.app.query.list_trains_use_case import ListTrainsUseCase
from src.service.train_reservation.domain.aggregate import ReservationState
from src.service.train_reservation.driven_adapter.repo.csv_ticket_ledger_repo_impl import (
    CsvTicketLedgerRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Ledger file repository
    ticket_ledger_repo = providers.Singleton(
        CsvTicketLedgerRepoImpl, file_path=config_service.provided.TICKET_FILE_PATH
    )

    # Application state (seeded train catalog + ticket ledger), one per process
    reservation_state = providers.Singleton(
        ReservationState.seeded, ticket_id_start=config_service.provided.TICKET_ID_START
    )

    # Command use cases
    initialize_reservation_state_use_case = providers.Factory(
        InitializeReservationStateUseCase,
        state=reservation_state,
        ticket_ledger_repo=ticket_ledger_repo,
        strict_load=config_service.provided.LEDGER_STRICT_LOAD,
    )
    book_ticket_use_case = providers.Factory(
        BookTicketUseCase, state=reservation_state, ticket_ledger_repo=ticket_ledger_repo
    )
    cancel_ticket_use_case = providers.Factory(
        CancelTicketUseCase, state=reservation_state, ticket_ledger_repo=ticket_ledger_repo
    )
    save_ledger_use_case = providers.Factory(
        SaveLedgerUseCase, state=reservation_state, ticket_ledger_repo=ticket_ledger_repo
    )

    # Query use cases
    list_trains_use_case = providers.Factory(ListTrainsUseCase, state=reservation_state)
    list_tickets_use_case = providers.Factory(ListTicketsUseCase, state=reservation_state)


container = Container()


def cleanup() -> None:
    container.reset_singletons()
