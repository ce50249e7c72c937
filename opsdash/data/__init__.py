"""Sheet tokenizing, normalization, record mapping, and in-memory session state."""
from .tokenizer import tokenize, map_rows, parse_csv
from .normalize import clean_text, parse_date, parse_number
from .chargebacks import parse_chargebacks
from .schemas import DateRange, QuickRange, Snapshot
from .store import DataStore, filter_by_date
