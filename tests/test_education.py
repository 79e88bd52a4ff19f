from extraction.education import (
    education_from_degree,
    education_from_institution,
    extract_education,
    looks_like_degree_or_header,
)
from extraction.normalizers import ResumeText


def test_label_line():
    assert extract_education("Highest Qualification - MBA (Finance)") == "MBA (Finance)"


def test_label_without_value_uses_next_line():
    assert extract_education("EDUCATION:\nM.Sc Physics, Pune University") == "M.Sc Physics, Pune University"


def test_degree_keyword_line():
    text = "Skills: Python\nEDUCATION\nBachelor of Engineering (Computer)\nGujarat University"
    assert extract_education(text) == "Bachelor of Engineering (Computer)"


def test_short_degree_joins_next_line():
    assert extract_education("EDUCATION\nMBA\nIIM Ahmedabad, 2018") == "MBA - IIM Ahmedabad, 2018"


def test_short_degree_stops_at_new_section():
    assert education_from_degree(ResumeText.from_raw("MBA\nExperience: 5 years")) == "MBA"


def test_institution_fallback():
    text = "Studied at Nirma Institute of Technology\nAhmedabad"
    assert education_from_institution(ResumeText.from_raw(text)) == "Nirma Institute of Technology"
    assert extract_education(text) == "Nirma Institute of Technology"


def test_degree_or_header_predicate():
    assert looks_like_degree_or_header("B.E. Mechanical")
    assert looks_like_degree_or_header("BTech, 2020")
    assert looks_like_degree_or_header("EDUCATION:")
    assert not looks_like_degree_or_header("Jane Doe")


def test_absent():
    assert extract_education("Hobbies: chess, cycling") is None
