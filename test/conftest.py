"""
Test Configuration and Fixtures

This module provides:
- Test log directory isolation (set before application modules are imported)
- Fresh ReservationState per test (seeded catalog, empty ledger)
- Ledger repository doubles: a MagicMock for unit tests and a real
  CsvTicketLedgerRepoImpl on tmp_path for integration tests
- A DI container whose settings point at tmp_path
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are built at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Never let a developer's ledger settings leak into tests
    for key in ('TICKET_FILE_PATH', 'TICKET_ID_START', 'LEDGER_STRICT_LOAD'):
        os.environ.pop(key, None)


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

from dependency_injector import providers  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.core_setting import Settings  # noqa: E402
from src.platform.config.di import Container  # noqa: E402
from src.service.train_reservation.app.dto import LedgerLoadResult  # noqa: E402
from src.service.train_reservation.app.interface import ITicketLedgerRepo  # noqa: E402
from src.service.train_reservation.domain.aggregate import ReservationState  # noqa: E402
from src.service.train_reservation.driven_adapter.repo.csv_ticket_ledger_repo_impl import (  # noqa: E402
    CsvTicketLedgerRepoImpl,
)


LEDGER_HEADER = 'ID,Name,Age,TrainNo,Coach,Seat'


@pytest.fixture
def reservation_state() -> ReservationState:
    """Seeded trains 101/102/103, empty ledger, next id 1000"""
    return ReservationState.seeded()


@pytest.fixture
def mock_ledger_repo() -> MagicMock:
    repo = MagicMock(spec=ITicketLedgerRepo)
    repo.load.return_value = LedgerLoadResult()
    repo.backup.return_value = None
    return repo


@pytest.fixture
def ticket_file(tmp_path: Path) -> Path:
    return tmp_path / 'tickets.csv'


@pytest.fixture
def csv_ledger_repo(ticket_file: Path) -> CsvTicketLedgerRepoImpl:
    return CsvTicketLedgerRepoImpl(file_path=ticket_file)


@pytest.fixture
def write_ledger_file(ticket_file: Path):
    """Write body lines under the standard header"""

    def _write(*lines: str, header: str = LEDGER_HEADER) -> Path:
        ticket_file.write_text('\n'.join([header, *lines]) + '\n', encoding='utf-8')
        return ticket_file

    return _write


@pytest.fixture
def test_container(ticket_file: Path) -> Generator[Container, None, None]:
    """Fresh container per test with the ledger file under tmp_path"""
    container = Container()
    container.config_service.override(providers.Object(Settings(TICKET_FILE_PATH=ticket_file)))
    yield container
    container.reset_singletons()
    container.config_service.reset_override()
