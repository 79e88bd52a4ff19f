import logging
from typing import Callable, Dict, Optional

from .contact import extract_email, extract_mobile
from .education import extract_education
from .location import extract_current_location, extract_preferred_location
from .name import extract_name
from .normalizers import ResumeText
from .record import FieldRecord
from .salary import extract_salary

logger = logging.getLogger(__name__)

EXTRACTORS: Dict[str, Callable[[ResumeText], Optional[str]]] = {
    "full_name": extract_name,
    "email": extract_email,
    "mobile": extract_mobile,
    "education": extract_education,
    "current_location": extract_current_location,
    "salary": extract_salary,
    "preferred_location": extract_preferred_location,
}


def extract_fields(raw_text: Optional[str], extension: Optional[str] = None) -> FieldRecord:
    """Classify resume text into candidate fields.

    ``extension`` is the source file's extension; it is informational and
    does not change how the text is read. Every field is extracted
    independently: a field that cannot be found, or whose extractor fails,
    is ``None`` and the others are unaffected.
    """
    text = ResumeText.from_raw(raw_text)
    values: Dict[str, Optional[str]] = {}
    for field, extractor in EXTRACTORS.items():
        try:
            values[field] = extractor(text)
        except Exception:
            logger.exception("extracting %s failed (source: %s)", field, extension or "text")
            values[field] = None
    return FieldRecord(**values)
