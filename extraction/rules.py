"""
Ordered strategy lists.

Each field extractor is a list of ``Rule`` objects tried in order; the first
rule whose value passes its ``accept`` check wins. Rules are plain callables
over ``ResumeText`` so each can be exercised on its own.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .normalizers import ResumeText

logger = logging.getLogger(__name__)


def _non_empty(value: str) -> bool:
    return bool(value and value.strip())


@dataclass(frozen=True)
class Rule:
    name: str
    extract: Callable[[ResumeText], Optional[str]]
    accept: Callable[[str], bool] = _non_empty


def first_match(rules: Iterable[Rule], text: ResumeText) -> Optional[str]:
    for rule in rules:
        value = rule.extract(text)
        if value is not None and rule.accept(value):
            logger.debug("rule %s matched: %r", rule.name, value)
            return value.strip()
    return None
