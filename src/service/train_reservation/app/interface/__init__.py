from src.service.train_reservation.app.interface.i_ticket_ledger_repo import ITicketLedgerRepo

__all__ = ['ITicketLedgerRepo']
