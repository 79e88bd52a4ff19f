import re
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

HEADER_WINDOW = 25

MULTISPACES_RE = re.compile(r"\s+")
SMART_QUOTES = {
    "\u2018": "'", "\u2019": "'", "\u201c": '"', "\u201d": '"', "\u2013": "-", "\u2014": "-"
}


def normalize_quotes_dashes(txt: str) -> str:
    for k, v in SMART_QUOTES.items():
        txt = txt.replace(k, v)
    return txt


def collapse_whitespace(txt: str) -> str:
    return MULTISPACES_RE.sub(" ", txt or "").strip()


def title_case(txt: str) -> str:
    # "JOHN o'neil" -> "John O'neil"
    return " ".join(w[:1].upper() + w[1:].lower() for w in txt.split())


@dataclass(frozen=True)
class ResumeText:
    """Trimmed, non-empty lines of a resume, in document order."""

    lines: Tuple[str, ...] = ()

    @classmethod
    def from_raw(cls, raw: Optional[str]) -> "ResumeText":
        text = normalize_quotes_dashes(raw or "")
        return cls(tuple(l.strip() for l in text.splitlines() if l.strip()))

    def header(self, n: int = HEADER_WINDOW) -> Tuple[str, ...]:
        return self.lines[:n]

    def top(self, n: int) -> Tuple[str, ...]:
        return self.lines[:n]

    def joined(self) -> str:
        return "\n".join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __getitem__(self, i):
        return self.lines[i]


def as_resume_text(text: Union[str, ResumeText, None]) -> ResumeText:
    if isinstance(text, ResumeText):
        return text
    return ResumeText.from_raw(text)
