class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DomainError(CustomBaseError):
    pass


class NotFoundError(CustomBaseError):
    pass


class PersistenceError(CustomBaseError):
    """Ledger file could not be read or written"""

    pass


class LedgerFormatError(CustomBaseError):
    """A persisted ledger line could not be parsed"""

    def __init__(self, message: str, *, line: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f'Line {line_number}: {message}' if line_number else message)
