import dataclasses

import pytest

from extraction.normalizers import HEADER_WINDOW, ResumeText, as_resume_text, title_case
from extraction.record import FIELD_NAMES, FieldRecord
from extraction.rules import Rule, first_match


def test_lines_trimmed_and_non_empty():
    text = ResumeText.from_raw("  Jane Doe \n\n\t\n  jane@x.com  \r\n")
    assert text.lines == ("Jane Doe", "jane@x.com")
    assert len(ResumeText.from_raw("")) == 0
    assert len(ResumeText.from_raw(None)) == 0


def test_smart_quotes_folded():
    assert ResumeText.from_raw("Sean O’Brien – Pune").lines == ("Sean O'Brien - Pune",)


def test_header_window():
    text = ResumeText.from_raw("\n".join(f"line {i}" for i in range(40)))
    assert len(text.header()) == HEADER_WINDOW
    assert text.header()[-1] == "line 24"
    assert text.top(3) == ("line 0", "line 1", "line 2")


def test_as_resume_text_passthrough():
    text = ResumeText.from_raw("a\nb")
    assert as_resume_text(text) is text
    assert as_resume_text("a\nb") == text


def test_title_case():
    assert title_case("JOHN   o'neil") == "John O'neil"
    assert title_case("mary-jane WATSON") == "Mary-jane Watson"


def test_first_match_respects_order_and_accept():
    text = ResumeText.from_raw("x")
    rules = [
        Rule("none", lambda t: None),
        Rule("rejected", lambda t: "too long", accept=lambda v: len(v) < 5),
        Rule("blank", lambda t: "   "),
        Rule("winner", lambda t: " ok "),
        Rule("later", lambda t: "later"),
    ]
    assert first_match(rules, text) == "ok"
    assert first_match([], text) is None


def test_field_record_never_holds_empty_strings():
    rec = FieldRecord(full_name="", email="  ", mobile="9898989898")
    assert rec.full_name is None
    assert rec.email is None
    assert rec.mobile == "9898989898"
    assert tuple(rec.as_dict()) == FIELD_NAMES


def test_field_record_is_immutable():
    rec = FieldRecord(full_name="Jane Doe")
    with pytest.raises(dataclasses.FrozenInstanceError):
        rec.full_name = "John"
