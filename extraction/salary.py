import re
from typing import Optional, Union

from .normalizers import ResumeText, as_resume_text, collapse_whitespace
from .rules import Rule, first_match
from .vocab import CURRENCY_MARKERS, SALARY_FALLBACK_LABELS, SALARY_LABELS, SALARY_UNITS, alternation

AMOUNT = r"\d[\d.,]*"
UNIT = alternation(SALARY_UNITS) + r"\b"
VALUE = (
    r"(?:" + alternation(CURRENCY_MARKERS) + r"\s*)?"
    + AMOUNT
    + r"(?:\s*(?:-|to)\s*" + AMOUNT + r")?"
    + r"(?:\s*" + UNIT + r"){0,2}"
)

LABELED_RE = re.compile(r"\b" + alternation(SALARY_LABELS) + r"\s*[:\-]\s*(" + VALUE + r")", re.IGNORECASE)
LOOSE_RE = re.compile(
    r"\b" + alternation(SALARY_FALLBACK_LABELS) + r"[:\s]+(" + AMOUNT + r"(?:\s*" + alternation(["LPA", "Lakh", "Lac", "K"]) + r"\b)?)",
    re.IGNORECASE,
)


def _search_lines(pattern, text: ResumeText) -> Optional[str]:
    for line in text:
        m = pattern.search(line)
        if m:
            return collapse_whitespace(m.group(1))
    return None


def salary_from_label(text: ResumeText) -> Optional[str]:
    return _search_lines(LABELED_RE, text)


def salary_from_loose_label(text: ResumeText) -> Optional[str]:
    return _search_lines(LOOSE_RE, text)


SALARY_RULES = [
    Rule("labeled", salary_from_label, accept=lambda v: 0 < len(v) < 50),
    Rule("loose_label", salary_from_loose_label),
]


def extract_salary(text: Union[str, ResumeText]) -> Optional[str]:
    return first_match(SALARY_RULES, as_resume_text(text))
