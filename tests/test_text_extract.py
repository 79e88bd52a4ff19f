import io

from docx import Document

from services.text_extract import extract_text, extract_text_from_file


def test_plain_text():
    assert extract_text("Asha Patel\nPune".encode("utf-8"), "txt") == "Asha Patel\nPune"


def test_plain_text_latin1_fallback():
    assert extract_text("Jos\xe9 Pereira".encode("latin-1"), ".TXT") == "Jos\xe9 Pereira"


def test_unknown_extension():
    assert extract_text(b"GIF89a", "gif") == ""


def test_broken_pdf_yields_empty_text():
    assert extract_text(b"not a pdf at all", "pdf").strip() == ""


def test_docx_paragraphs_and_tables():
    doc = Document()
    doc.add_paragraph("Asha Patel")
    table = doc.add_table(rows=1, cols=2)
    table.cell(0, 0).text = "Location"
    table.cell(0, 1).text = "Surat, Gujarat"
    buf = io.BytesIO()
    doc.save(buf)

    text = extract_text(buf.getvalue(), "docx")
    assert text.splitlines() == ["Asha Patel", "Location", "Surat, Gujarat"]


def test_extension_from_path(tmp_path):
    path = tmp_path / "resume.txt"
    path.write_text("Name: Asha Patel", encoding="utf-8")
    assert extract_text_from_file(path) == "Name: Asha Patel"
