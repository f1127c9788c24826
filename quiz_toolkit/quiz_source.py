import logging
from pathlib import Path
from typing import IO, List, Optional

from pypdf import PdfReader

from . import settings
from .errors import SourceError

logger = logging.getLogger(__name__)

PDF_MIMETYPE = "application/pdf"


def extract_pdf_text(source: Path | IO[bytes]) -> str:
    try:
        reader = PdfReader(source)
        pages: List[str] = []
        for page in reader.pages:
            pages.append(page.extract_text() or "")
    except Exception as e:
        logger.error(f"PDF parsing error: {e}", exc_info=True)
        raise SourceError("Failed to parse PDF. Please ensure it contains readable text.") from e
    return "\n".join(pages)


def _is_pdf(filename: Optional[str], mimetype: Optional[str]) -> bool:
    if mimetype:
        return mimetype == PDF_MIMETYPE
    return bool(filename) and filename.lower().endswith(".pdf")


def prepare_source(
    text: Optional[str] = None,
    pdf: Optional[IO[bytes]] = None,
    filename: Optional[str] = None,
    mimetype: Optional[str] = None,
    *,
    min_chars: int,
    max_chars: int,
    purpose: str = "generate a quiz",
    too_short: Optional[str] = None,
) -> str:
    """
    Pick the uploaded PDF (preferred) or the pasted text, check it is long
    enough and cut it down to ``max_chars``. Raises SourceError with a
    message fit for the user.
    """
    if pdf is not None:
        if not _is_pdf(filename, mimetype):
            raise SourceError("Invalid file type. Please upload a PDF.")
        content = extract_pdf_text(pdf).strip()
    elif text and text.strip():
        content = text.strip()
    else:
        raise SourceError(f"Please upload a PDF or paste some text to {purpose}.")

    if len(content) < min_chars:
        raise SourceError(too_short or (
            f"The source text is too short. Please provide at least {min_chars} characters of content."
        ))

    if len(content) > max_chars:
        logger.info(f"Truncating source from {len(content)} to {max_chars} characters")
        content = content[:max_chars]
    return content


def prepare_quiz_source(text=None, pdf=None, filename=None, mimetype=None) -> str:
    return prepare_source(
        text, pdf, filename, mimetype,
        min_chars=settings.QUIZ_MIN_SOURCE_CHARS,
        max_chars=settings.QUIZ_MAX_SOURCE_CHARS,
    )


def prepare_summary_source(text=None, pdf=None, filename=None, mimetype=None) -> str:
    return prepare_source(
        text, pdf, filename, mimetype,
        min_chars=settings.SUMMARY_MIN_SOURCE_CHARS,
        max_chars=settings.SUMMARY_MAX_SOURCE_CHARS,
        purpose="summarize",
        too_short="The content is too short to summarize. Please provide more text.",
    )
