from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.platform.constant.path import DEFAULT_TICKET_FILE


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Railway Reservation System'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Enables Logger.io tracing and the file log sink
    LOG_LEVEL: str = 'WARNING'  # Console sink level when DEBUG is off

    # Ticket ledger persistence
    TICKET_FILE_PATH: Path = DEFAULT_TICKET_FILE
    TICKET_ID_START: int = 1000
    LEDGER_STRICT_LOAD: bool = False  # Abort load on the first malformed line

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator('TICKET_ID_START')
    @classmethod
    def validate_ticket_id_start(cls, v: int) -> int:
        if v < 1:
            raise ValueError('TICKET_ID_START must be a positive integer')
        return v


settings = Settings()  # type: ignore
