"""Upload parsing and file download responses shared by the import routes."""

from typing import Any

from fastapi import HTTPException, UploadFile
from fastapi.responses import Response

from hulltrack.services.importers import SheetLayout
from hulltrack.services.spreadsheets import (
    ExportFormat,
    SpreadsheetError,
    media_type_for,
    read_rows,
    write_sheet,
)


async def read_upload_rows(file: UploadFile) -> list[list[Any]]:
    """Read an uploaded workbook into rows, mapping read failures to HTTP 400."""
    data = await file.read()
    if not data:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    try:
        return read_rows(data, file.filename or "")
    except SpreadsheetError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


def file_response(content: bytes, file_name: str, media_type: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{file_name}"'},
    )


def sheet_download(
    layout: SheetLayout,
    rows: list[list[Any]],
    fmt: ExportFormat = "xlsx",
    file_stem: str | None = None,
) -> Response:
    """Serialize rows under the layout's header; no rows gives a template."""
    content = write_sheet(layout.header, rows, layout.sheet_title, fmt)
    return file_response(content, f"{file_stem or layout.file_stem}.{fmt}", media_type_for(fmt))
