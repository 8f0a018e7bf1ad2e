"""Reading and writing the fixed-layout spreadsheets used for bulk imports.

Only the first worksheet is read. ``.xlsx`` goes through openpyxl, ``.csv``
through the csv module; both yield plain lists of cell values so the
importers never care which format arrived.
"""

import csv
import io
import logging
import zipfile
from typing import Any, Literal

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import InvalidFileException

logger = logging.getLogger(__name__)

ExportFormat = Literal["xlsx", "csv"]

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"

HEADER_FILL = PatternFill(start_color="1F4E79", end_color="1F4E79", fill_type="solid")
HEADER_FONT = Font(color="FFFFFF", bold=True)


class SpreadsheetError(Exception):
    """Raised when an uploaded spreadsheet cannot be read."""


def read_rows(data: bytes, file_name: str) -> list[list[Any]]:
    """Return every row of the first worksheet, header included."""
    lowered = file_name.lower()
    if lowered.endswith(".csv"):
        return _read_csv(data)
    if lowered.endswith(".xlsx"):
        return _read_xlsx(data)
    raise SpreadsheetError(
        f"Unsupported file type for {file_name!r}; upload an .xlsx or .csv file."
    )


def _read_csv(data: bytes) -> list[list[Any]]:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise SpreadsheetError("Error reading CSV file.") from exc
    return [list(row) for row in csv.reader(io.StringIO(text))]


def _read_xlsx(data: bytes) -> list[list[Any]]:
    try:
        workbook = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as exc:
        raise SpreadsheetError("Error reading Excel file.") from exc

    try:
        worksheet = workbook.worksheets[0]
        return [list(row) for row in worksheet.iter_rows(values_only=True)]
    finally:
        workbook.close()


def write_xlsx(header: list[str], rows: list[list[Any]], sheet_title: str) -> bytes:
    """Build a single-sheet workbook with a styled header row."""
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = sheet_title[:31]

    worksheet.append(header)
    for cell in worksheet[1]:
        cell.fill = HEADER_FILL
        cell.font = HEADER_FONT
    for row in rows:
        worksheet.append(row)

    for index, name in enumerate(header, start=1):
        worksheet.column_dimensions[get_column_letter(index)].width = max(12, len(name) + 4)

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def write_csv(header: list[str], rows: list[list[Any]]) -> bytes:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(header)
    writer.writerows(["" if value is None else value for value in row] for row in rows)
    return output.getvalue().encode("utf-8")


def write_sheet(
    header: list[str],
    rows: list[list[Any]],
    sheet_title: str,
    fmt: ExportFormat = "xlsx",
) -> bytes:
    if fmt == "csv":
        return write_csv(header, rows)
    return write_xlsx(header, rows, sheet_title)


def media_type_for(fmt: ExportFormat) -> str:
    return CSV_MEDIA_TYPE if fmt == "csv" else XLSX_MEDIA_TYPE
