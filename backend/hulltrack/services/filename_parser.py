"""Hull number and revision date extraction from production order filenames.

Expected shape: ``Production Order 39154 - Feb. 13, 25.pdf``.
"""

import logging
import re

logger = logging.getLogger(__name__)

FILENAME_PATTERN = re.compile(r"Production Order\s+(\d+)\s*-\s*(.+)\.pdf$", re.IGNORECASE)

MONTHS = {
    "Jan": "01",
    "Feb": "02",
    "Mar": "03",
    "Apr": "04",
    "May": "05",
    "Jun": "06",
    "Jul": "07",
    "Aug": "08",
    "Sep": "09",
    "Oct": "10",
    "Nov": "11",
    "Dec": "12",
}


def parse_order_filename(file_name: str) -> tuple[str | None, str | None]:
    """Return ``(hull_number, revision_date)`` or ``(None, None)``.

    The revision date is rebuilt as ``YYYY-MM-DD`` without calendar
    validation, so ``Feb. 31, 25`` becomes ``"2025-02-31"``.
    """
    match = FILENAME_PATTERN.search(file_name)
    if not match:
        return None, None

    hull_number = match.group(1)
    parts = match.group(2).replace(".", "").strip().split()
    if len(parts) < 3:
        return None, None

    month = MONTHS.get(parts[0])
    if month is None:
        logger.warning("Unrecognized month abbreviation %r in %r", parts[0], file_name)
        return None, None

    day = parts[1].replace(",", "").strip()
    year = parts[2].strip()
    if len(year) == 2:
        year = "20" + year
    if len(day) == 1:
        day = "0" + day

    return hull_number, f"{year}-{month}-{day}"
