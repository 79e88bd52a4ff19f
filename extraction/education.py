import re
from typing import Optional, Union

from .normalizers import ResumeText, as_resume_text, collapse_whitespace
from .rules import Rule, first_match
from .vocab import (
    DEGREE_KEYWORDS,
    EDUCATION_LABELS,
    INSTITUTION_WORDS,
    NEW_SECTION_PREFIXES,
    SECTION_HEADINGS,
    alternation,
    keyword_regex,
)

DEGREE_RE = keyword_regex(DEGREE_KEYWORDS)
DEGREE_LOOSE_RE = keyword_regex(DEGREE_KEYWORDS, optional_dots=True)

LABEL_RE = re.compile(r"\b" + alternation(EDUCATION_LABELS) + r"\s*[:\-]\s*(.*)$", re.IGNORECASE)
LEADING_HEADER_RE = re.compile(r"^(?:Education|Qualifications?|Academic)\s*[:\-]*\s*", re.IGNORECASE)
NEW_SECTION_RE = re.compile(r"^" + alternation(NEW_SECTION_PREFIXES), re.IGNORECASE)
INSTITUTION_RE = re.compile(
    r"((?:[A-Z][\w.&'\-]*,?\s+(?:(?:of|and|for|&)\s+)?)+"
    + alternation(INSTITUTION_WORDS)
    + r"\b(?:\s+of(?:\s+[A-Z][\w.&'\-]*)+)?)"
)


def looks_like_degree_or_header(line: str) -> bool:
    """True for degree lines ("B.Tech 2019", "MBA") and bare section headings."""
    if DEGREE_LOOSE_RE.search(line):
        return True
    return line.strip().rstrip(":").strip().upper() in SECTION_HEADINGS


def starts_new_section(line: str) -> bool:
    return bool(NEW_SECTION_RE.match(line))


def education_from_label(text: ResumeText) -> Optional[str]:
    for i, line in enumerate(text):
        m = LABEL_RE.search(line)
        if not m:
            continue
        value = collapse_whitespace(m.group(1))
        if not value and i + 1 < len(text) and not starts_new_section(text[i + 1]):
            value = collapse_whitespace(text[i + 1])
        if 4 <= len(value) < 250:
            return value
    return None


def education_from_degree(text: ResumeText) -> Optional[str]:
    for i, line in enumerate(text):
        if not DEGREE_RE.search(line):
            continue
        clean = LEADING_HEADER_RE.sub("", line).strip()
        if len(clean) < 5 and i + 1 < len(text):
            nxt = text[i + 1]
            if len(nxt) < 150 and not starts_new_section(nxt):
                clean = f"{clean} - {nxt}"
        if len(clean) >= 3:
            return clean
    return None


def education_from_institution(text: ResumeText) -> Optional[str]:
    for line in text:
        m = INSTITUTION_RE.search(line)
        if m:
            return m.group(1).strip()
    return None


EDUCATION_RULES = [
    Rule("label", education_from_label),
    Rule("degree_keyword", education_from_degree, accept=lambda v: len(v) >= 3),
    Rule("institution", education_from_institution),
]


def extract_education(text: Union[str, ResumeText]) -> Optional[str]:
    return first_match(EDUCATION_RULES, as_resume_text(text))
