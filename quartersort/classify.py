"""Map a file's creation time to year and quarter labels."""
from typing import Tuple

from .errors import QuarterIndexError
from .models import FileRecord

UNDEFINED = "UNDEFINED"

# The numeric prefix keeps the folders in calendar order when listed.
QUARTER_LABELS = (
    "00_jan_to_mar",
    "01_apr_to_jun",
    "02_jul_to_sep",
    "03_oct_to_dec",
)


def year_of(record: FileRecord) -> str:
    if not record.has_created_at:
        return UNDEFINED
    return f"{record.created_at.year:04d}"


def quarter_index(month: int) -> int:
    """Return 0 for Jan-Mar, 1 for Apr-Jun, 2 for Jul-Sep, 3 for Oct-Dec."""
    return (month - 1) // 3


def quarter_of(record: FileRecord) -> str:
    if not record.has_created_at:
        return UNDEFINED
    index = quarter_index(record.created_at.month)
    if not 0 <= index < len(QUARTER_LABELS):
        raise QuarterIndexError(f"invalid quarter index: {index}")
    return QUARTER_LABELS[index]


def labels_for(record: FileRecord) -> Tuple[str, str]:
    return year_of(record), quarter_of(record)
