from extraction.salary import extract_salary


def test_ctc_with_unit():
    assert extract_salary("CTC: 8.5 LPA") == "8.5 LPA"


def test_labels_and_units():
    assert extract_salary("Expected Salary - 12,00,000 Per Annum") == "12,00,000 Per Annum"
    assert extract_salary("Current CTC: INR 6 Lakhs") == "INR 6 Lakhs"
    assert extract_salary("Expected CTC: 10-12 LPA") == "10-12 LPA"


def test_first_labeled_line_wins():
    text = "Current CTC: 6 LPA\nExpected CTC: 9 LPA"
    assert extract_salary(text) == "6 LPA"


def test_loose_label_without_separator():
    assert extract_salary("Salary 45000") == "45000"


def test_no_amount():
    assert extract_salary("Salary: Negotiable") is None
    assert extract_salary("Skills: Python, Django") is None
