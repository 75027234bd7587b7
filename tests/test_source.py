"""Tests for calib_source.read_lines (text and PDF line sources)."""

import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

_root = str(Path(__file__).resolve().parent.parent)
if _root not in sys.path:
    sys.path.insert(0, _root)

from calib_models import MissingInputResource
from calib_source import read_lines


def _fake_pdf(*page_texts):
    pdf = MagicMock()
    pages = []
    for text in page_texts:
        page = MagicMock()
        page.extract_text.return_value = text
        pages.append(page)
    pdf.pages = pages
    opener = MagicMock()
    opener.return_value.__enter__.return_value = pdf
    return opener


class ReadTextLinesTests(unittest.TestCase):
    def test_strips_terminators_and_blank_lines(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "input.txt"
            path.write_bytes(b"1abc2\r\ntwo1nine\n\n   \noneight\n")
            self.assertEqual(read_lines(path), ["1abc2", "two1nine", "oneight"])

    def test_only_newline_ends_a_line(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "input.txt"
            path.write_bytes("1a\u2028b2\n3x\r4\n".encode("utf-8"))
            self.assertEqual(read_lines(path), ["1a\u2028b2", "3x\r4"])

    def test_accepts_str_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "input.txt"
            path.write_text("a1\n", encoding="utf-8")
            self.assertEqual(read_lines(str(path)), ["a1"])

    def test_empty_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "input.txt"
            path.write_text("", encoding="utf-8")
            self.assertEqual(read_lines(path), [])

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(MissingInputResource) as ctx:
            read_lines("/nonexistent/input.txt")
        self.assertEqual(ctx.exception.path, "/nonexistent/input.txt")

    def test_directory_is_not_a_line_source(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(MissingInputResource):
                read_lines(tmp)

    def test_undecodable_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "input.txt"
            path.write_bytes(b"\xff\xfe\xfa")
            with self.assertRaises(MissingInputResource):
                read_lines(path)


class ReadPdfLinesTests(unittest.TestCase):
    def test_pages_are_concatenated_in_order(self) -> None:
        opener = _fake_pdf("1abc2\ntwo1nine", None, "oneight\n")
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "calibration.PDF"
            path.write_bytes(b"%PDF-1.4")
            with patch("calib_source.pdfplumber.open", opener):
                lines = read_lines(path)
        opener.assert_called_once_with(path)
        self.assertEqual(lines, ["1abc2", "two1nine", "oneight"])

    def test_malformed_pdf_is_reported(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "calibration.pdf"
            path.write_bytes(b"not a pdf at all")
            with self.assertRaises(MissingInputResource) as ctx:
                read_lines(path)
        self.assertIn("cannot read input", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
