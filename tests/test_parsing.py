import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.parsing.parse import PdfExtractionError, extract_pdf_text  # noqa: E402
from pdf_factory import build_blank_pdf, build_text_pdf  # noqa: E402


class PdfExtractionTests(unittest.TestCase):
    def test_text_pdf_returns_text_and_page_count(self):
        content = build_text_pdf(["Jane Doe", "jane@example.com", "Python developer"])
        document = extract_pdf_text(content)
        self.assertEqual(document.page_count, 1)
        self.assertIn("jane@example.com", document.text)
        self.assertIn("Python developer", document.text)
        self.assertEqual(document.parsing_warnings, [])

    def test_blank_pages_yield_empty_text_and_warning(self):
        document = extract_pdf_text(build_blank_pdf(pages=2))
        self.assertEqual(document.page_count, 2)
        self.assertEqual(document.text, "")
        self.assertEqual(document.parsing_warnings, ["No extractable text found in PDF."])

    def test_corrupt_bytes_raise_extraction_error(self):
        with self.assertRaises(PdfExtractionError) as ctx:
            extract_pdf_text(b"this is not a pdf at all")
        self.assertIn("scanned, image-based, or corrupted", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
