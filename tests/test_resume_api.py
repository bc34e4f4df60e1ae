"""
Resume upload, text extraction and the completion service call
"""

import asyncio
import json
from pathlib import Path

import fitz
import pytest

from hrapply.services.ai_processor import SYS_PARSER, AIProcessor
from tests.conftest import PARSED_RESUME, FakeOpenAI


def _uploads(settings) -> list:
    upload_dir = Path(settings.upload_dir)
    return list(upload_dir.iterdir()) if upload_dir.exists() else []


def _pdf_bytes(text: str) -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


def test_parse_text_resume(client, fake_openai, settings):
    response = client.post(
        "/api/parse-resume",
        files={"resume": ("resume.txt", "Somchai Jaidee\nLogistics coordinator".encode(), "text/plain")},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": PARSED_RESUME}

    call = fake_openai.completions.calls[0]
    assert call["model"] == "gpt-4o-mini"
    assert call["temperature"] == 0.1
    assert call["messages"][0] == {"role": "system", "content": SYS_PARSER}
    assert call["messages"][1]["content"] == "Somchai Jaidee\nLogistics coordinator"
    assert _uploads(settings) == []


def test_parse_pdf_resume_extracts_text(client, fake_openai):
    response = client.post(
        "/api/parse-resume",
        files={"resume": ("resume.pdf", _pdf_bytes("Warehouse supervisor 2019-2023"), "application/pdf")},
    )

    assert response.json()["success"] is True
    sent_text = fake_openai.completions.calls[0]["messages"][1]["content"]
    assert "Warehouse supervisor 2019-2023" in sent_text


def test_missing_file_is_rejected(client, fake_openai):
    response = client.post("/api/parse-resume")

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "No file uploaded"}
    assert fake_openai.completions.calls == []


def test_non_json_reply_is_a_failure(client, context, settings):
    context.ai_processor = AIProcessor(None, client=FakeOpenAI(reply="```json\nnot json\n```"))

    response = client.post("/api/parse-resume", files={"resume": ("cv.txt", b"resume text", "text/plain")})

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert "JSON" in body["error"]
    assert _uploads(settings) == []


def test_json_array_reply_is_a_failure(client, context):
    context.ai_processor = AIProcessor(None, client=FakeOpenAI(reply=json.dumps(["a", "b"])))

    response = client.post("/api/parse-resume", files={"resume": ("cv.txt", b"resume text", "text/plain")})

    assert response.status_code == 500
    assert response.json()["success"] is False


def test_upstream_error_is_a_failure_and_not_retried(client, context, settings):
    fake = FakeOpenAI(error=RuntimeError("upstream unavailable"))
    context.ai_processor = AIProcessor(None, client=fake)

    response = client.post("/api/parse-resume", files={"resume": ("cv.txt", b"resume text", "text/plain")})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "upstream unavailable"}
    assert len(fake.completions.calls) == 1
    assert _uploads(settings) == []


def test_oversized_upload_is_a_failure(client, fake_openai, settings):
    payload = b"x" * (settings.max_file_size_bytes + 1)

    response = client.post("/api/parse-resume", files={"resume": ("big.txt", payload, "text/plain")})

    assert response.status_code == 500
    assert "too large" in response.json()["error"]
    assert fake_openai.completions.calls == []
    assert _uploads(settings) == []


def test_unconfigured_api_key_is_a_failure(client, context):
    context.ai_processor = AIProcessor(None)

    response = client.post("/api/parse-resume", files={"resume": ("cv.txt", b"resume text", "text/plain")})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "OpenAI API key is not configured"}


@pytest.mark.parametrize("reply", ['  {"firstNameEn": "Anong"}\n', '{"firstNameEn": "Anong", "age": ""}'])
async def test_extract_fields_parses_object_reply(reply):
    processor = AIProcessor(None, client=FakeOpenAI(reply=reply))

    data = await processor.extract_fields("resume")

    assert data["firstNameEn"] == "Anong"


def test_text_extraction_runs_off_the_event_loop(client, monkeypatch):
    threads = []

    def extract_in_worker(path, content_type):
        try:
            asyncio.get_running_loop()
            threads.append("event loop")
        except RuntimeError:
            threads.append("worker")
        return path.read_text()

    monkeypatch.setattr("hrapply.api.v1.resume.extract_text", extract_in_worker)

    response = client.post("/api/parse-resume", files={"resume": ("cv.txt", b"resume text", "text/plain")})

    assert response.json()["success"] is True
    assert threads == ["worker"]
