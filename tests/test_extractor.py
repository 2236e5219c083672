"""Tests for document text extraction and link / skill spotting."""

from __future__ import annotations

import io

import docx
import pytest

from recruit_ai.services.extractor import extract_links, extract_skills, extract_text


def test_plain_text_is_decoded() -> None:
    assert extract_text("Jane Doe\nPython".encode("utf-8"), "text/plain; charset=utf-8") == "Jane Doe\nPython"


def test_docx_paragraphs_are_extracted() -> None:
    document = docx.Document()
    document.add_paragraph("Jane Doe")
    document.add_paragraph("Skills: Python, SQL")
    buffer = io.BytesIO()
    document.save(buffer)

    text = extract_text(
        buffer.getvalue(),
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    )
    assert "Jane Doe" in text
    assert "Skills: Python, SQL" in text


def test_broken_pdf_raises_value_error() -> None:
    with pytest.raises(ValueError):
        extract_text(b"definitely not a pdf", "application/pdf")


def test_unknown_type_falls_back_to_text() -> None:
    assert extract_text(b"just some text", "application/octet-stream") == "just some text"


def test_links_are_classified() -> None:
    text = (
        "Jane Doe   jane@example.com\n"
        "https://www.linkedin.com/in/jane/ https://github.com/jane/\n"
        "https://github.com/other https://jane.dev (mailto:hire.jane@example.org)"
    )
    parsed = extract_links(text)
    assert parsed.linkedin == "https://www.linkedin.com/in/jane"
    assert parsed.github == "https://github.com/jane"
    assert parsed.other_links == ["https://jane.dev"]
    assert parsed.emails == ["hire.jane@example.org", "jane@example.com"]
    assert "\n" not in parsed.text_content


def test_links_on_empty_text() -> None:
    parsed = extract_links("")
    assert parsed.linkedin is None
    assert parsed.github is None
    assert parsed.emails == []
    assert parsed.other_links == []


def test_skills_use_word_boundaries() -> None:
    text = "Worked with JavaScript, C++ and PostgreSQL; some Go."
    assert extract_skills(text, ["Java", "C++", "go", "SQL", "PostgreSQL"]) == ["C++", "go", "PostgreSQL"]
