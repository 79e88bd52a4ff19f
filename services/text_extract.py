"""Attachment bytes -> plain text. Failures are logged and reported as ""."""
import io
import logging
from pathlib import Path
from typing import Union

from docx import Document
from pdfminer.high_level import extract_text as pdfminer_extract_text
from pypdf import PdfReader

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {"pdf", "docx", "doc", "txt"}
MIN_PDF_TEXT = 500


def _pdf_text(data: bytes) -> str:
    try:
        reader = PdfReader(io.BytesIO(data))
        text = "\n".join(p.extract_text() or "" for p in reader.pages)
    except Exception as e:
        logger.info("pypdf could not read PDF (%s); switching to pdfminer", e)
        return pdfminer_extract_text(io.BytesIO(data))
    if len(text.strip()) < MIN_PDF_TEXT:
        # pdfminer often recovers more text from sparse or oddly encoded PDFs
        try:
            alt = pdfminer_extract_text(io.BytesIO(data))
        except Exception as e:
            logger.info("pdfminer fallback failed: %s", e)
            return text
        if len(alt.strip()) > len(text.strip()):
            return alt
    return text


def _docx_text(data: bytes) -> str:
    doc = Document(io.BytesIO(data))
    lines = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            lines.extend(cell.text for cell in row.cells)
    return "\n".join(lines).strip()


def _plain_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1", errors="ignore")


def extract_text(data: bytes, extension: str) -> str:
    extension = extension.lower().lstrip(".")
    try:
        if extension == "pdf":
            return _pdf_text(data)
        if extension in {"docx", "doc"}:
            return _docx_text(data)
        if extension == "txt":
            return _plain_text(data)
    except Exception as e:
        logger.error("Failed to extract text from %s attachment: %s", extension, e)
        return ""
    return ""


def extract_text_from_file(path: Union[str, Path], extension: str = "") -> str:
    path = Path(path)
    return extract_text(path.read_bytes(), extension or path.suffix)
