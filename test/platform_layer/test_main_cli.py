from pathlib import Path
from unittest.mock import patch

import pytest

from src import main as main_module
from src.main import build_parser, configure_container


pytestmark = pytest.mark.unit


class TestBuildParser:
    def test_defaults(self):
        args = build_parser().parse_args([])

        assert args.ticket_file is None
        assert args.strict_load is False

    def test_flags(self):
        args = build_parser().parse_args(['--ticket-file', 'data/t.csv', '--strict-load'])

        assert args.ticket_file == 'data/t.csv'
        assert args.strict_load is True

    def test_version_flag_prints_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(['--version'])

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == 'railway-reservation 0.1.0'


class TestConfigureContainer:
    def test_no_flags_keeps_settings(self, test_container, ticket_file):
        settings = configure_container(build_parser().parse_args([]), test_container)

        assert settings.TICKET_FILE_PATH == ticket_file
        assert settings.LEDGER_STRICT_LOAD is False

    def test_flags_override_settings(self, test_container, tmp_path):
        args = build_parser().parse_args(
            ['--ticket-file', str(tmp_path / 'other.csv'), '--strict-load']
        )

        settings = configure_container(args, test_container)

        assert settings.TICKET_FILE_PATH == tmp_path / 'other.csv'
        assert settings.LEDGER_STRICT_LOAD is True
        assert test_container.ticket_ledger_repo().file_path == Path(tmp_path / 'other.csv')
        assert test_container.initialize_reservation_state_use_case().strict_load is True


class TestMain:
    def test_runs_console_and_returns_zero(self, test_container, tmp_path):
        with (
            patch.object(main_module, 'container', test_container),
            patch.object(main_module, 'ReservationConsole') as console_cls,
            patch.object(main_module, 'cleanup') as cleanup,
        ):
            exit_code = main_module.main(['--ticket-file', str(tmp_path / 'x.csv')])

        assert exit_code == 0
        console_cls.assert_called_once_with(
            container=test_container, title='Railway Reservation System'
        )
        console_cls.return_value.run.assert_called_once_with()
        cleanup.assert_called_once_with()
