"""
Word lists shared by the field extractors.

Plain data only: extractors compile what they need from these tables, so a
keyword added here is picked up everywhere it applies.
"""
import re
from typing import Iterable, List, Pattern

# --- Name -----------------------------------------------------------------

# Label prefixes for "Name: Jane Doe" lines (regex fragments, case-insensitive)
NAME_LABELS: List[str] = [
    r"full\s*name",
    r"candidate\s*name",
    r"applicant\s*name",
    r"person\s*name",
    r"name\s+of\s+(?:the\s+)?candidate",
    r"name",
]

# A line made of nothing but one of these is a label for the next line
NAME_LABEL_ONLY: List[str] = ["name", "full name", "candidate name", "applicant name"]

# Substrings that disqualify the very first line from being the name
FIRST_LINE_BLOCKLIST: List[str] = [
    "RESUME", "CURRICULUM", "VITAE", "CV", "PROFILE", "OBJECTIVE", "CONTACT",
    "EXPERIENCE", "EDUCATION", "SKILLS", "DEVELOPER", "ENGINEER", "MANAGER",
]

# Substrings that disqualify a top line in the pattern cascade:
# section headers, address words, academic words, personal-detail labels
NAME_BLOCKLIST: List[str] = [
    "RESUME", "CURRICULUM", "VITAE", "CV", "BIODATA", "PROFILE", "OBJECTIVE", "CONTACT",
    "EXPERIENCE", "EDUCATION", "SKILLS", "PROJECTS", "DECLARATION", "UNIVERSITY", "COLLEGE",
    "INSTITUTE", "SCHOOL", "ACADEMY", "CAMPUS", "ROAD", "STREET", "NAGAR", "SOCIETY",
    "APARTMENT", "OPP.", "NR.", "MANAGER", "DEVELOPER", "ENGINEER", "OFFICER", "SUMMARY",
    "CAREER", "APPLICATION", "APPLYING", "DEAR", "CERTIFICATION", "TRAINING", "REFERENCE",
    "DATE OF BIRTH", "DOB", "GENDER", "MARITAL", "WORK ", " EXPERIENCE", "PHONE", "MOBILE",
    "EMAIL", "ADDRESS", "LOCATION", "PREFERRED", "SALARY", "CTC", "PACKAGE", "YEAR", "GRADUAT",
    "PASSED", "PERCENTAGE", "%", "CGPA", "GPA", "DEGREE", "QUALIFICATION", "STREAM", "BRANCH",
]

# Longer phrases first: "FULL STACK DEVELOPER" must win over "DEVELOPER"
JOB_TITLE_MARKERS: List[str] = [
    "FULL STACK DEVELOPER", "FULL STACK", "SOFTWARE DEVELOPER", "WEB DEVELOPER",
    "FRONTEND DEVELOPER", "BACKEND DEVELOPER", "DEVELOPER", "ENGINEER", "MANAGER",
    "OFFICER", "DESIGNER", "ANALYST", "CONSULTANT", "LEAD", "SPECIALIST", "COORDINATOR",
    "EXECUTIVE", "ASSOCIATE", "INTERN",
]

# Words that qualify a job title rather than name a person ("Senior Developer")
TITLE_QUALIFIERS = {
    "SENIOR", "SR", "SR.", "JUNIOR", "JR", "JR.", "LEAD", "PRINCIPAL", "CHIEF", "HEAD",
    "ASSISTANT", "TRAINEE", "STAFF", "AND", "OF", "JAVA", "PYTHON", "PHP", "WEB", "SOFTWARE",
    "DATA", "SALES", "MARKETING", "FRONTEND", "BACKEND", "MOBILE", "ANDROID", "IOS", "CLOUD",
    "NETWORK", "SYSTEM", "SYSTEMS", "QA", "TEST", "HR", "IT", "UI", "UX", "GRAPHIC", "BUSINESS",
    "PROJECT", "PRODUCT", "ACCOUNT", "ACCOUNTS", "FINANCE", "OPERATIONS", "TECHNICAL",
}

# --- Sections -------------------------------------------------------------

# A line equal to one of these (ignoring case and a trailing colon) is a heading
SECTION_HEADINGS = {
    "EDUCATION", "EDUCATIONAL QUALIFICATION", "EDUCATIONAL QUALIFICATIONS", "QUALIFICATION",
    "QUALIFICATIONS", "ACADEMIC", "ACADEMICS", "ACADEMIC DETAILS", "EXPERIENCE",
    "WORK EXPERIENCE", "PROFESSIONAL EXPERIENCE", "EMPLOYMENT", "EMPLOYMENT HISTORY",
    "WORK HISTORY", "SKILLS", "TECHNICAL SKILLS", "PROJECTS", "CERTIFICATIONS", "SUMMARY",
    "PROFILE", "OBJECTIVE", "CAREER OBJECTIVE", "CONTACT", "CONTACT DETAILS",
    "PERSONAL DETAILS", "DECLARATION", "LANGUAGES", "HOBBIES", "REFERENCES",
}

# Once one of these appears, header/contact fields are no longer trusted
SECTION_BOUNDARY_MARKERS: List[str] = [
    "PROJECT", "EXPERIENCE", "WORK EXPERIENCE", "WORK HISTORY", "EMPLOYMENT", "CAREER",
]

# A line starting with one of these opens a new section
NEW_SECTION_PREFIXES: List[str] = ["Experience", "Work", "Skills", "Projects", "Contact"]

# --- Education ------------------------------------------------------------

# Degree abbreviations are written with their usual dots; the strict matcher
# requires them, the loose one (used to reject name candidates) does not
DEGREE_KEYWORDS: List[str] = [
    "B.Tech", "M.Tech", "B.E.", "M.E.", "B.Sc", "M.Sc", "B.Com", "M.Com",
    "B.A.", "M.A.", "MCA", "BCA", "MBA", "BBA", "PGDM", "Ph.D", "PhD", "Diploma",
    "Bachelors", "Bachelor", "Masters", "Master", "B.Pharm", "M.Pharm", "B.Arch", "M.Arch",
    "LLB", "LLM", "MSW", "BMS", "B.Des", "M.Des",
]

EDUCATION_LABELS: List[str] = ["Education", "Qualifications", "Qualification", "Academic", "Degree"]

INSTITUTION_WORDS: List[str] = ["University", "College", "Institute", "Vidyapith"]

# --- Salary ---------------------------------------------------------------

SALARY_LABELS: List[str] = [
    r"Current\s+CTC", r"Expected\s+CTC", r"Expected\s+Salary", r"Current\s+Salary",
    r"CTC", r"Salary", r"Package", r"Compensation",
]
SALARY_FALLBACK_LABELS: List[str] = [r"CTC", r"Salary", r"Package"]
SALARY_UNITS: List[str] = [
    r"LPA", r"Lakhs", r"Lakh", r"Lacs", r"Lac", r"Thousand", r"Per\s+Annum", r"K",
]
CURRENCY_MARKERS: List[str] = [r"INR", r"Rs\.?", r"USD", "₹", r"\$"]

# --- Location -------------------------------------------------------------

CURRENT_LOCATION_LABELS: List[str] = [
    r"(?:Current\s+)?Location", r"Address", r"City", r"Residing\s+at", r"Place",
]
CURRENT_LOCATION_KEYWORDS: List[str] = ["Location", "Address", "City", "Residing at"]

PREFERRED_LOCATION_LABELS: List[str] = [
    r"Preferred\s+Location", r"Relocate", r"Location\s+Preference", r"Work\s+Location",
]
PREFERRED_LOCATION_KEYWORDS: List[str] = [
    "Preferred Location", "Relocate", "Location Preference", "Work Location",
]


def alternation(fragments: Iterable[str]) -> str:
    return "(?:" + "|".join(fragments) + ")"


def keyword_regex(keywords: Iterable[str], optional_dots: bool = False) -> Pattern:
    """Case-insensitive matcher for any keyword, delimited by non-letters."""
    parts = []
    for kw in keywords:
        esc = re.escape(kw)
        if optional_dots:
            esc = esc.replace(r"\.", r"\.?")
        parts.append(esc)
    return re.compile(r"(?<![A-Za-z])" + alternation(parts) + r"(?![A-Za-z])", re.IGNORECASE)


def contains_any(upper_line: str, needles: Iterable[str]) -> bool:
    return any(n in upper_line for n in needles)
