import re
from typing import Optional, Union

from .normalizers import ResumeText, as_resume_text

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
# +91 9999999999, 99999 99999, 9898989898; years are not filtered out
MOBILE_RE = re.compile(r"(?<!\d)(?:\+?\d{1,3}[ -]?)?(?:\d{5}[ -]?\d{5}|\d{10})(?!\d)")


def extract_email(text: Union[str, ResumeText]) -> Optional[str]:
    m = EMAIL_RE.search(as_resume_text(text).joined())
    return m.group(0) if m else None


def extract_mobile(text: Union[str, ResumeText]) -> Optional[str]:
    m = MOBILE_RE.search(as_resume_text(text).joined())
    return m.group(0).strip() if m else None
