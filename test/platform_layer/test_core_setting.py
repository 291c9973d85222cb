from pathlib import Path

from pydantic import ValidationError
import pytest

from src.platform.config.core_setting import Settings


pytestmark = pytest.mark.unit


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.PROJECT_NAME == 'Railway Reservation System'
        assert settings.DEBUG is False
        assert settings.LOG_LEVEL == 'WARNING'
        assert settings.TICKET_FILE_PATH == Path('tickets.csv')
        assert settings.TICKET_ID_START == 1000
        assert settings.LEDGER_STRICT_LOAD is False

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv('TICKET_FILE_PATH', str(tmp_path / 'ledger.csv'))
        monkeypatch.setenv('TICKET_ID_START', '5000')
        monkeypatch.setenv('LEDGER_STRICT_LOAD', 'true')
        monkeypatch.setenv('LOG_LEVEL', ' info ')

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.TICKET_FILE_PATH == tmp_path / 'ledger.csv'
        assert settings.TICKET_ID_START == 5000
        assert settings.LEDGER_STRICT_LOAD is True
        assert settings.LOG_LEVEL == 'INFO'

    @pytest.mark.parametrize('value', [0, -1])
    def test_ticket_id_start_must_be_positive(self, value):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, TICKET_ID_START=value)  # type: ignore[call-arg]
