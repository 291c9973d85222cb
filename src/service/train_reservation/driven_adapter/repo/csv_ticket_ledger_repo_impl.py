import os
from pathlib import Path
import shutil
import tempfile
from typing import List, Tuple

from src.platform.exception.exceptions import LedgerFormatError, PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.train_reservation.app.dto import LedgerLoadResult
from src.service.train_reservation.app.interface import ITicketLedgerRepo
from src.service.train_reservation.domain.entity import Ticket
from src.service.train_reservation.domain.ticket_record_codec import TicketRecordCodec


ENCODING = 'utf-8'
BACKUP_SUFFIX = '.bak'


class CsvTicketLedgerRepoImpl(ITicketLedgerRepo):
    """Ledger stored as one comma-delimited text file, rewritten on every save"""

    def __init__(self, file_path: Path | str):
        self.file_path = Path(file_path)

    @property
    def backup_path(self) -> Path:
        return self.file_path.with_name(self.file_path.name + BACKUP_SUFFIX)

    @Logger.io
    def load(self, *, strict: bool) -> LedgerLoadResult:
        if not self.file_path.exists():
            Logger.base.info(f'📂 [LEDGER] {self.file_path} not found, starting with no tickets')
            return LedgerLoadResult()

        try:
            raw = self.file_path.read_bytes()
        except OSError as e:
            raise PersistenceError(f'Error loading tickets: {e}') from e

        text, undecodable = self._decode_text(raw, strict=strict)
        decoded = TicketRecordCodec.decode(text=text, strict=strict)
        rejected = sorted(undecodable + decoded.rejected, key=lambda e: e.line_number or 0)
        return LedgerLoadResult(tickets=decoded.tickets, rejected=rejected)

    @staticmethod
    def _decode_text(raw: bytes, *, strict: bool) -> Tuple[str, List[LedgerFormatError]]:
        """
        Decode line by line so one bad byte only costs its own row

        An undecodable line is blanked out, keeping the numbering of the rest.
        """
        lines: List[str] = []
        undecodable: List[LedgerFormatError] = []
        for line_number, raw_line in enumerate(raw.splitlines(), start=1):
            if line_number == 1:
                # Header, never parsed
                lines.append(raw_line.decode(ENCODING, errors='replace'))
                continue
            try:
                lines.append(raw_line.decode(ENCODING))
            except UnicodeDecodeError:
                error = LedgerFormatError(
                    f'line is not valid {ENCODING}',
                    line=raw_line.decode(ENCODING, errors='replace'),
                    line_number=line_number,
                )
                if strict:
                    raise error
                undecodable.append(error)
                lines.append('')
        return '\n'.join(lines), undecodable

    @Logger.io
    def save(self, *, tickets: List[Ticket]) -> None:
        """Write to a sibling temp file, then swap it in so a crash never truncates the ledger"""
        text = TicketRecordCodec.encode(tickets=tickets)
        tmp_name = None
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                'w',
                encoding=ENCODING,
                dir=self.file_path.parent,
                prefix=f'.{self.file_path.name}.',
                suffix='.tmp',
                delete=False,
            ) as tmp_file:
                tmp_name = tmp_file.name
                tmp_file.write(text)
            os.replace(tmp_name, self.file_path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f'Error saving tickets: {e}') from e

    @Logger.io
    def backup(self) -> str | None:
        if not self.file_path.exists():
            return None
        try:
            shutil.copyfile(self.file_path, self.backup_path)
        except OSError as e:
            raise PersistenceError(f'Error backing up tickets: {e}') from e
        return str(self.backup_path)
