from __future__ import annotations
import os
from typing import Dict, List, Optional

from ats_keywords import extract_reliable_keywords, match_keywords
from ats_keywords.config import MAX_KEYWORDS
from ats_keywords.logging_config import configure_logging
from ats_keywords.sections import strip_markup

TEXT_EXTS = {".txt", ".md"}
HTML_EXTS = {".html", ".htm"}


def load_text(filepath: str) -> str:
    """
    Reads a job description or CV from disk.
    .txt/.md are read as-is, .html/.htm are stripped to text, .docx goes
    through python-docx.
    """
    ext = os.path.splitext(filepath)[1].lower()

    if ext in TEXT_EXTS:
        with open(filepath, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    if ext in HTML_EXTS:
        with open(filepath, "r", encoding="utf-8", errors="replace") as f:
            return strip_markup(f.read())

    if ext == ".docx":
        try:
            from docx import Document
        except ImportError as e:
            raise RuntimeError(
                "python-docx is not installed. Run: pip install python-docx"
            ) from e

        doc = Document(filepath)
        return "\n".join(p.text for p in doc.paragraphs).strip()

    raise ValueError(f"Unsupported file type: {ext}")


def extract_keywords_from_file(filepath: str, max_keywords: int = MAX_KEYWORDS) -> Dict:
    configure_logging()
    return extract_reliable_keywords(load_text(filepath), max_keywords).model_dump()


def match_file(
    cv_path: str,
    jd_path: Optional[str] = None,
    keywords: Optional[List[str]] = None,
) -> Dict:
    """Score a CV file against explicit keywords, or against a job-description file."""
    configure_logging()
    if keywords is None:
        if not jd_path:
            raise ValueError("Either jd_path or keywords is required")
        keywords = extract_reliable_keywords(load_text(jd_path)).all
    return match_keywords(load_text(cv_path), keywords).model_dump()
