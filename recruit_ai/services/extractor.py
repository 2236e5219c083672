"""
Uploaded document ➜ plain text, plus link / skill spotting on that text.

PDF goes through pdfplumber, Word documents through python-docx, anything
declared as text is decoded as UTF-8.
"""
import io
import logging
import re
from typing import List, Optional

import docx
import pdfplumber
from pydantic import BaseModel, Field

logger = logging.getLogger("uvicorn.error")

# silence noisy PDF logging
logging.getLogger("pdfminer").setLevel(logging.ERROR)

PDF_TYPES = {"application/pdf"}
DOCX_TYPES = {
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/msword",
}

_URL_RE = re.compile(r"https?://[^\s)]+", re.I)
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_MAILTO_RE = re.compile(r"mailto:([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})", re.I)
_CID_RE = re.compile(r"\(cid:\d+\)")


class ParsedDocument(BaseModel):
    text_content: str = ""
    linkedin: Optional[str] = None
    github: Optional[str] = None
    emails: List[str] = Field(default_factory=list)
    other_links: List[str] = Field(default_factory=list)


def extract_text_from_pdf(file_bytes: bytes) -> str:
    text = ""
    try:
        with pdfplumber.open(io.BytesIO(file_bytes)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text += page_text + "\n"
    except Exception as e:
        logger.exception("Failed to extract text from PDF")
        raise ValueError(f"Failed to extract text from PDF: {e}")
    return _CID_RE.sub("", text)


def extract_text_from_docx(file_bytes: bytes) -> str:
    try:
        document = docx.Document(io.BytesIO(file_bytes))
    except Exception as e:
        logger.exception("Failed to extract text from Word document")
        raise ValueError(f"Failed to extract text from Word document: {e}")
    paragraphs = [p.text for p in document.paragraphs]
    # hyperlinks hidden behind display text live in the relationships
    hidden_links = [
        rel.target_ref for rel in document.part.rels.values()
        if rel.is_external and _URL_RE.match(rel.target_ref or "")
    ]
    return "\n".join(paragraphs + hidden_links)


def extract_text(file_bytes: bytes, content_type: Optional[str]) -> str:
    content_type = (content_type or "").split(";")[0].strip().lower()

    if content_type in PDF_TYPES:
        return extract_text_from_pdf(file_bytes)
    if content_type in DOCX_TYPES:
        return extract_text_from_docx(file_bytes)
    if content_type.startswith("text/"):
        return file_bytes.decode("utf-8", errors="ignore")

    try:
        return extract_text_from_pdf(file_bytes)
    except ValueError:
        logger.info("Unknown content type %r is not a PDF; decoding as text", content_type)
        return file_bytes.decode("utf-8", errors="ignore")


def _unique(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


def extract_links(text_content: str) -> ParsedDocument:
    """Classify the URLs and email addresses found in resume text.

    The first LinkedIn and the first GitHub URL win (trailing slash removed);
    every other URL lands in ``other_links``.
    """
    cleaned = re.sub(r"\s+", " ", text_content or "").strip()

    urls = _unique([u.strip() for u in _URL_RE.findall(cleaned)])
    emails = _unique(_MAILTO_RE.findall(cleaned) + _EMAIL_RE.findall(cleaned))

    linkedin = github = None
    other_links: List[str] = []
    for url in urls:
        lower_url = url.lower()
        if "linkedin.com" in lower_url:
            linkedin = linkedin or re.sub(r"/$", "", url)
        elif "github.com" in lower_url:
            github = github or re.sub(r"/$", "", url)
        else:
            other_links.append(url)

    return ParsedDocument(
        text_content=cleaned,
        linkedin=linkedin,
        github=github,
        emails=emails,
        other_links=other_links,
    )


def extract_skills(text_content: str, required_skills: List[str]) -> List[str]:
    """Required skills that appear as whole words in the text, original casing kept."""
    found = []
    for skill in required_skills or []:
        if not skill:
            continue
        pattern = re.compile(rf"(?<!\w){re.escape(skill)}(?!\w)", re.I)
        if pattern.search(text_content or ""):
            found.append(skill)
    return found
