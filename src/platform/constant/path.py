from pathlib import Path


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Log directory
LOG_DIR = BASE_DIR / 'logs'

# Default ledger file, resolved against the working directory at runtime
DEFAULT_TICKET_FILE = Path('tickets.csv')
