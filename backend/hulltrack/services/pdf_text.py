"""Text recovery from production order PDFs.

Fragments are collected with their vertical position and regrouped into
lines: a fragment closer than the threshold to the current line's anchor
joins that line, anything else starts a new line. There is no column or
table awareness.
"""

import io
import logging
from dataclasses import dataclass

from pypdf import PdfReader

from hulltrack.core.config import settings

logger = logging.getLogger(__name__)


class PdfExtractionError(Exception):
    """Raised when a document cannot be read at all."""


@dataclass
class TextFragment:
    """A run of text and its vertical position in page space."""

    text: str
    y: float


def group_fragments_into_lines(
    fragments: list[TextFragment],
    threshold: float = 5.0,
) -> list[str]:
    """Group fragments into lines, top of the page first."""
    ordered = sorted(fragments, key=lambda fragment: -fragment.y)

    lines: list[str] = []
    current_line: list[str] = []
    current_y: float | None = None
    for fragment in ordered:
        if current_y is None:
            current_y = fragment.y
            current_line.append(fragment.text)
        elif abs(current_y - fragment.y) < threshold:
            current_line.append(fragment.text)
        else:
            lines.append(" ".join(current_line))
            current_line = [fragment.text]
            current_y = fragment.y

    if current_line:
        lines.append(" ".join(current_line))
    return lines


def render_page(fragments: list[TextFragment], threshold: float, page_number: int) -> str:
    """Render one page, falling back to document order if grouping fails."""
    try:
        return "\n".join(group_fragments_into_lines(fragments, threshold)) + "\n"
    except (TypeError, ValueError):
        logger.warning("Line grouping failed on page %d, using raw order", page_number, exc_info=True)
        return " ".join(fragment.text for fragment in fragments) + "\n"


def _page_fragments(page) -> list[TextFragment]:
    fragments: list[TextFragment] = []

    def visitor(text, cm, tm, font_dict, font_size):
        cleaned = text.strip("\r\n")
        if not cleaned.strip():
            return
        # y of the text matrix mapped through the current transformation matrix
        y = tm[4] * cm[1] + tm[5] * cm[3] + cm[5]
        fragments.append(TextFragment(text=cleaned, y=y))

    page.extract_text(visitor_text=visitor)
    return fragments


def extract_pdf_text(data: bytes, threshold: float | None = None) -> str:
    """Return the text of a PDF with lines reconstructed per page."""
    if threshold is None:
        threshold = settings.PDF_LINE_THRESHOLD

    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [_page_fragments(page) for page in reader.pages]
    except Exception as exc:
        raise PdfExtractionError(f"Failed to extract data from PDF: {exc}") from exc

    full_text = "".join(
        render_page(fragments, threshold, number)
        for number, fragments in enumerate(pages, start=1)
    )
    logger.debug("Extracted %d characters from %d pages", len(full_text), len(pages))
    return full_text


def split_option_lines(text: str) -> list[str]:
    """Non-empty, trimmed lines of extracted text."""
    return [line.strip() for line in text.splitlines() if line.strip()]
