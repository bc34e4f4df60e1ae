"""
Form rendering with ReportLab and the document endpoint
"""

import fitz
from PIL import Image

from hrapply.services.pdf_renderer import FormRenderer


def _open(pdf_bytes: bytes) -> fitz.Document:
    return fitz.open(stream=pdf_bytes, filetype="pdf")


def test_render_empty_record_produces_two_pages(tmp_path):
    renderer = FormRenderer(fonts_dir=str(tmp_path / "missing-fonts"))

    pdf_bytes = renderer.render({})

    assert pdf_bytes.startswith(b"%PDF")
    doc = _open(pdf_bytes)
    assert doc.page_count == 2
    first, second = (page.get_text() for page in doc)
    assert "EMPLOYMENT APPLICATION" in first
    assert "1 / 2" in first
    assert "F-HRM-01-05" in first
    assert "SPECIAL SKILL" in second
    assert "2 / 2" in second
    doc.close()


def test_missing_fonts_fall_back_to_helvetica(tmp_path):
    renderer = FormRenderer(fonts_dir=str(tmp_path))

    assert renderer.fonts == {"normal": "Helvetica", "bold": "Helvetica-Bold"}


def test_record_values_appear_in_document(tmp_path):
    renderer = FormRenderer(fonts_dir=str(tmp_path))

    pdf_bytes = renderer.render({
        "firstNameEn": "Somchai",
        "positionApplied": "Warehouse Supervisor",
        "work1Company": "Siam Logistics",
        "englishSpoken": "good",
        "workedBefore": "yes",
    })

    doc = _open(pdf_bytes)
    assert "Somchai" in doc[0].get_text()
    assert "Warehouse Supervisor" in doc[0].get_text()
    assert "Siam Logistics" in doc[1].get_text()
    doc.close()


def test_logo_is_drawn_when_file_exists(tmp_path):
    logo = tmp_path / "Logo.png"
    Image.new("RGB", (120, 60), color=(200, 30, 30)).save(logo)

    with_logo = _open(FormRenderer(fonts_dir=str(tmp_path), logo_path=str(logo)).render({}))
    without_logo = _open(FormRenderer(fonts_dir=str(tmp_path), logo_path=str(tmp_path / "none.png")).render({}))

    assert len(with_logo[0].get_images()) == 1
    assert len(without_logo[0].get_images()) == 0
    with_logo.close()
    without_logo.close()


def test_generate_pdf_endpoint(client):
    response = client.post("/api/generate-pdf", json={"firstNameEn": "Anong", "age": 27})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == "attachment; filename=employment-application.pdf"
    assert _open(response.content).page_count == 2


def test_generate_pdf_accepts_empty_record(client):
    response = client.post("/api/generate-pdf", json={})

    assert response.status_code == 200
    assert response.content.startswith(b"%PDF")


def test_generate_pdf_failure_is_reported(client, context):
    def broken_render(record):
        raise RuntimeError("renderer unavailable")

    context.renderer.render = broken_render

    response = client.post("/api/generate-pdf", json={})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "renderer unavailable"}


def test_section_headings_use_the_regular_face(tmp_path):
    doc = _open(FormRenderer(fonts_dir=str(tmp_path)).render({}))

    fonts = {
        span["text"]: span["font"]
        for block in doc[1].get_text("dict")["blocks"]
        for line in block.get("lines", [])
        for span in line["spans"]
    }
    heading = next(text for text in fonts if text.startswith("SPECIAL SKILL"))
    assert "Bold" not in fonts[heading]
    doc.close()
