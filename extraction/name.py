"""
Candidate name detection.

Resume headers vary a lot, so the name is found by a cascade of layouts in
decreasing order of confidence: an explicit label, a label on the previous
line, the first line of the document, a name followed by a job title, and
finally a set of name-shaped patterns over the top lines. Blocklists keep
section headers, addresses and job titles from being read as names.
"""
import re
from typing import Optional, Union

from .education import looks_like_degree_or_header
from .normalizers import ResumeText, as_resume_text, collapse_whitespace, title_case
from .rules import Rule, first_match
from .vocab import (
    FIRST_LINE_BLOCKLIST,
    JOB_TITLE_MARKERS,
    NAME_BLOCKLIST,
    NAME_LABEL_ONLY,
    NAME_LABELS,
    TITLE_QUALIFIERS,
    alternation,
    contains_any,
)

LABEL_ONLY_WINDOW = 12
TOP_WINDOW = 15

LABEL_LINE_RE = re.compile(r"^" + alternation(NAME_LABELS) + r"\s*:\s*(.+)$", re.IGNORECASE)
LABEL_ONLY_RE = re.compile(
    r"^" + alternation(re.escape(l).replace(r"\ ", r"\s+") for l in NAME_LABEL_ONLY) + r"\s*:?$",
    re.IGNORECASE,
)
NAME_CHARS_RE = re.compile(r"^[A-Za-z\s.\-']+$")
DIGIT_RE = re.compile(r"\d")

CAPITALIZED_RE = re.compile(r"^[A-Z][a-z]+(?:\s[A-Z]\.?|\s[A-Z][a-z]+|-[A-Z][a-z]+)*(?:,?\s(?:Jr\.?|Sr\.?|III|II|IV))?$")
ALL_CAPS_RE = re.compile(r"^[A-Z]{2,}(?:\s[A-Z]\.?|\s[A-Z]{2,}|-[A-Z]{2,})*(?:,?\s(?:JR\.?|SR\.?|III|II|IV))?$")
SINGLE_WORD_RE = re.compile(r"^[A-Za-z]{2,30}$")

SEPARATORS = " -|,:"


def is_valid_name(value: str) -> bool:
    value = value.strip()
    return 2 <= len(value) <= 60 and "@" not in value and not DIGIT_RE.search(value)


def _word_count(value: str) -> int:
    return len(value.split())


def _plain_top_line(line: str) -> bool:
    return len(line) <= 80 and "@" not in line and not DIGIT_RE.search(line)


def name_from_label_line(text: ResumeText) -> Optional[str]:
    for line in text:
        m = LABEL_LINE_RE.match(line)
        if m:
            candidate = collapse_whitespace(m.group(1))
            if is_valid_name(candidate):
                return candidate
    return None


def name_after_label_only(text: ResumeText) -> Optional[str]:
    top = text.top(LABEL_ONLY_WINDOW)
    for i, line in enumerate(top):
        if not LABEL_ONLY_RE.match(line) or i + 1 >= len(text):
            continue
        nxt = text[i + 1]
        if is_valid_name(nxt) and not looks_like_degree_or_header(nxt):
            return collapse_whitespace(nxt)
    return None


def name_from_first_line(text: ResumeText) -> Optional[str]:
    if not text:
        return None
    first = text[0]
    if len(first) > 50 or "@" in first or DIGIT_RE.search(first):
        return None
    if looks_like_degree_or_header(first) or contains_any(first.upper(), FIRST_LINE_BLOCKLIST):
        return None
    if not NAME_CHARS_RE.match(first):
        return None
    words = _word_count(first)
    if 2 <= words <= 5 or (words == 1 and 2 <= len(first) <= 30):
        return title_case(first)
    return None


def _title_marker(upper_line: str) -> Optional[str]:
    for marker in JOB_TITLE_MARKERS:
        if marker in upper_line:
            return marker
    return None


def name_before_job_title(text: ResumeText) -> Optional[str]:
    for line in text.top(TOP_WINDOW):
        if not _plain_top_line(line):
            continue
        upper = line.upper()
        marker = _title_marker(upper)
        if marker is None:
            continue
        pos = upper.find(marker)
        if pos <= 2:
            continue
        part = line[:pos].strip(SEPARATORS)
        if not (is_valid_name(part) and NAME_CHARS_RE.match(part)):
            continue
        if looks_like_degree_or_header(part) or not 1 <= _word_count(part) <= 4:
            continue
        if all(w.upper() in TITLE_QUALIFIERS for w in part.split()):
            continue
        return title_case(part)
    return None


def _name_pattern(line: str) -> Optional[str]:
    if CAPITALIZED_RE.match(line):
        return line
    if ALL_CAPS_RE.match(line):
        return title_case(line)
    if NAME_CHARS_RE.match(line) and line[0].isalpha() and 2 <= _word_count(line) <= 5:
        return title_case(line)
    if SINGLE_WORD_RE.match(line):
        return title_case(line)
    return None


def name_from_top_patterns(text: ResumeText) -> Optional[str]:
    for line in text.top(TOP_WINDOW):
        if not _plain_top_line(line):
            continue
        if contains_any(line.upper(), NAME_BLOCKLIST) or looks_like_degree_or_header(line):
            continue
        found = _name_pattern(line)
        if found:
            return found
    return None


NAME_RULES = [
    Rule("same_line_label", name_from_label_line, accept=is_valid_name),
    Rule("label_then_next_line", name_after_label_only, accept=is_valid_name),
    Rule("first_line", name_from_first_line, accept=is_valid_name),
    Rule("before_job_title", name_before_job_title, accept=is_valid_name),
    Rule("top_line_patterns", name_from_top_patterns, accept=is_valid_name),
]


def extract_name(text: Union[str, ResumeText]) -> Optional[str]:
    return first_match(NAME_RULES, as_resume_text(text))
