from __future__ import annotations

import logging
import warnings
from pathlib import Path

import pdfplumber
from pdfplumber.utils.exceptions import PdfminerException

from calib_models import MissingInputResource

logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", module="pdfminer")

logger = logging.getLogger(__name__)


def _clean(raw_lines: list[str]) -> list[str]:
    """Drop line terminators and blank lines, keeping order."""
    return [ln.rstrip("\r\n") for ln in raw_lines if ln.strip()]


def _read_pdf_lines(path: Path) -> list[str]:
    raw: list[str] = []
    with pdfplumber.open(path) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text() or ""
            raw.extend(page_text.split("\n"))
    return raw


def read_lines(path: str | Path) -> list[str]:
    """Read every calibration line from *path* before any processing starts.

    PDFs go through pdfplumber page by page; anything else is read as UTF-8 text.
    """
    path = Path(path)
    if not path.is_file():
        raise MissingInputResource(str(path))

    try:
        if path.suffix.lower() == ".pdf":
            raw = _read_pdf_lines(path)
        else:
            # only "\n" ends a line; read bytes so "\r" is not translated
            raw = path.read_bytes().decode("utf-8").split("\n")
    except (OSError, UnicodeDecodeError, PdfminerException) as exc:
        raise MissingInputResource(str(path), reason=f"cannot read input ({exc})") from exc

    lines = _clean(raw)
    logger.debug("Read %d calibration lines from %s", len(lines), path)
    return lines
