"""
Current and preferred location.

Both fields are reduced by ``normalize_location_to_city_state`` to at most two
place-like segments ("City, State" or "City, Country"). The reduction is
structural: split the address, then keep the trailing segments that look like
place names. No city or country list is consulted, and a full street address
is never returned.
"""
import re
from typing import List, Optional, Union

from .normalizers import ResumeText, as_resume_text, collapse_whitespace
from .rules import Rule, first_match
from .vocab import (
    CURRENT_LOCATION_KEYWORDS,
    CURRENT_LOCATION_LABELS,
    PREFERRED_LOCATION_KEYWORDS,
    PREFERRED_LOCATION_LABELS,
    SECTION_BOUNDARY_MARKERS,
    alternation,
    contains_any,
)

MAX_SEGMENT_LEN = 45
MAX_SEGMENTS = 2
SHORT_FORM_LEN = 60

PART_SPLIT_RE = re.compile(r"\s*,\s*|\s+[\-\u2013\u2014]\s+")
DIGITS_ONLY_RE = re.compile(r"^\d+$")
PLACE_CHARS_RE = re.compile(r"^[A-Za-z0-9\s.\-'()]+$")
SHORT_FORM_RE = re.compile(r"^[A-Za-z\s,\-.]+$")

CURRENT_LABEL_RE = re.compile(r"\b" + alternation(CURRENT_LOCATION_LABELS) + r"\s*[:\-]\s*(.{2,})$", re.IGNORECASE)
CURRENT_KEYWORD_RE = re.compile(
    r"\b" + alternation(re.escape(k).replace(r"\ ", r"\s+") for k in CURRENT_LOCATION_KEYWORDS) + r"\b",
    re.IGNORECASE,
)
PREFERRED_LABEL_RE = re.compile(r"\b" + alternation(PREFERRED_LOCATION_LABELS) + r"\s*[:\-]\s*(.{2,200})", re.IGNORECASE)


# --- Address normalizer -----------------------------------------------------

def _is_place_segment(part: str) -> bool:
    if len(part) > MAX_SEGMENT_LEN or len(part) < 2:
        return False
    clean = re.sub(r"\s+", "", part)
    if not clean or DIGITS_ONLY_RE.match(clean):
        return False
    return bool(PLACE_CHARS_RE.match(part))


def extract_place_segments(address: str) -> List[str]:
    """Last one or two place-like segments of ``address``, in reading order."""
    parts = [p.strip() for p in PART_SPLIT_RE.split(address)]
    parts = [p for p in parts if p]
    found: List[str] = []
    for part in reversed(parts):
        if _is_place_segment(part):
            found.insert(0, part)
            if len(found) >= MAX_SEGMENTS:
                break
    return found


def normalize_location_to_city_state(raw: Optional[str]) -> Optional[str]:
    raw = collapse_whitespace(raw or "")
    if not raw:
        return None

    segments = extract_place_segments(raw)
    if segments:
        return ", ".join(segments)

    if len(raw) <= SHORT_FORM_LEN and SHORT_FORM_RE.match(raw):
        parts = [p.strip() for p in raw.split(",")]
        parts = [p for p in parts if p and not DIGITS_ONLY_RE.match(p) and len(p) <= MAX_SEGMENT_LEN]
        if parts:
            return ", ".join(parts[-MAX_SEGMENTS:])
    return None


# --- Current location ---------------------------------------------------------

def _contact_area(text: ResumeText) -> List[str]:
    """Header lines before the first Experience/Projects style boundary."""
    lines = []
    for line in text.header():
        if contains_any(line.upper(), SECTION_BOUNDARY_MARKERS):
            break
        lines.append(line)
    return lines


def _segments(line: str) -> List[str]:
    # "Email: a@b.com | Phone: ... | Location: Pune" holds several fields
    return [s.strip() for s in line.split("|") if s.strip() and not PREFERRED_LABEL_RE.search(s)]


def current_location_from_label(text: ResumeText) -> Optional[str]:
    for line in _contact_area(text):
        for segment in _segments(line):
            m = CURRENT_LABEL_RE.search(segment)
            if m and "@" not in m.group(1):
                return collapse_whitespace(m.group(1))
    return None


def current_location_from_keyword(text: ResumeText) -> Optional[str]:
    for line in _contact_area(text):
        if not (5 <= len(line) <= 100):
            continue
        for segment in _segments(line):
            m = CURRENT_KEYWORD_RE.search(segment)
            if not m:
                continue
            raw = segment
            if m.start() == 0:
                raw = re.sub(r"^\s*[:\-]?\s*", "", segment[m.end():])
            raw = collapse_whitespace(raw)
            if raw and "@" not in raw:
                return raw
    return None


CURRENT_LOCATION_RULES = [
    Rule("labeled", current_location_from_label),
    Rule("keyword", current_location_from_keyword),
]


def extract_current_location(text: Union[str, ResumeText]) -> Optional[str]:
    raw = first_match(CURRENT_LOCATION_RULES, as_resume_text(text))
    return normalize_location_to_city_state(raw) if raw else None


# --- Preferred location -------------------------------------------------------

def preferred_location_from_label(text: ResumeText) -> Optional[str]:
    for line in text:
        m = PREFERRED_LABEL_RE.search(line)
        if m:
            return collapse_whitespace(m.group(1))
    return None


def preferred_location_from_keyword(text: ResumeText) -> Optional[str]:
    for line in text:
        if 5 <= len(line) <= 200 and any(k.lower() in line.lower() for k in PREFERRED_LOCATION_KEYWORDS):
            return line
    return None


PREFERRED_LOCATION_RULES = [
    Rule("labeled", preferred_location_from_label),
    Rule("keyword", preferred_location_from_keyword),
]


def extract_preferred_location(text: Union[str, ResumeText]) -> Optional[str]:
    raw = first_match(PREFERRED_LOCATION_RULES, as_resume_text(text))
    return normalize_location_to_city_state(raw) if raw else None
