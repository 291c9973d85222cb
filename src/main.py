"""
Railway Reservation Console

Seeds the train catalog, restores the ticket ledger and runs the interactive menu.
"""

import argparse
from typing import Optional, Sequence

from dependency_injector import providers

from src.platform.config.core_setting import Settings, settings
from src.platform.config.di import Container, cleanup, container
from src.platform.logging.loguru_io import Logger
from src.service.train_reservation.driving_adapter.cli.reservation_console import (
    ReservationConsole,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='railway-reservation', description='Interactive train seat reservation console'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {settings.VERSION}')
    parser.add_argument(
        '--ticket-file',
        default=None,
        help='Path to the ticket ledger file (default: TICKET_FILE_PATH or tickets.csv)',
    )
    parser.add_argument(
        '--strict-load',
        action='store_true',
        help='Abort loading the ledger on the first malformed record',
    )
    return parser


def configure_container(args: argparse.Namespace, app_container: Container) -> Settings:
    app_settings: Settings = app_container.config_service()
    overrides: dict = {}
    if args.ticket_file:
        overrides['TICKET_FILE_PATH'] = args.ticket_file
    if args.strict_load:
        overrides['LEDGER_STRICT_LOAD'] = True
    if overrides:
        app_settings = Settings(**{**app_settings.model_dump(), **overrides})
        app_container.config_service.override(providers.Object(app_settings))
    return app_settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    app_settings = configure_container(args, container)
    Logger.base.info(
        f'🚀 [{app_settings.PROJECT_NAME}] v{app_settings.VERSION} starting, '
        f'ledger file {app_settings.TICKET_FILE_PATH}'
    )

    ReservationConsole(container=container, title=app_settings.PROJECT_NAME).run()

    cleanup()
    Logger.base.info(f'👋 [{app_settings.PROJECT_NAME}] Shut down')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
