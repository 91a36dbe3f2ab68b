"""Shared test fixtures."""
from typing import List

import fitz  # PyMuPDF
import pytest


@pytest.fixture
def make_pdf(tmp_path):
    """Factory that writes a PDF with one page per text string and returns its path."""
    def _make_pdf(pages: List[str], name: str = "sample.pdf", user_password: str = None) -> str:
        path = tmp_path / name
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            page.insert_text((72, 72), text, fontsize=11)
        if user_password:
            doc.save(
                str(path),
                encryption=fitz.PDF_ENCRYPT_AES_256,
                owner_pw="owner-secret",
                user_pw=user_password
            )
        else:
            doc.save(str(path))
        doc.close()
        return str(path)
    
    return _make_pdf
