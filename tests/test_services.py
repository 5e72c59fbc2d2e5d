# tests/test_services.py

import asyncio

import pytest

from app.core.exceptions import DocumentRenderError
from app.schemas.jsa import JobContext, RenderJsaRequest
from app.services import jsa_service
from app.services.jsa_service import JsaService, jsa_filename
from app.services.storage import DocumentStore
from app.services.vision_service import analyze_photos


class RecordingStore(DocumentStore):
    name = "recording"

    def __init__(self):
        self.saved = {}

    async def save(self, filename, data):
        self.saved[filename] = data
        return f"memory://{filename}"


@pytest.mark.parametrize(
    "company, expected",
    [
        ("Acme Co", "JSA_Acme_Co_1714521600000.pdf"),
        ("A&B, Inc.", "JSA_A_B_Inc__1714521600000.pdf"),
        ("north_star-42", "JSA_north_star_42_1714521600000.pdf"),
        ("Café Roofing", "JSA_Caf_Roofing_1714521600000.pdf"),
    ],
)
def test_filename_is_sanitized(company, expected):
    assert jsa_filename(company, 1714521600000) == expected


def test_render_stores_pdf_under_timestamped_name(render_payload):
    store = RecordingStore()
    service = JsaService(store, clock=lambda: 1714521600.5)

    url = asyncio.run(service.render(RenderJsaRequest.model_validate(render_payload)))

    assert url == "memory://JSA_Acme_Co_1714521600500.pdf"
    assert store.saved["JSA_Acme_Co_1714521600500.pdf"].startswith(b"%PDF")


def test_render_failure_never_reaches_store(monkeypatch, render_payload):
    def broken(request):
        raise ValueError("bad glyph")

    monkeypatch.setattr(jsa_service, "render_jsa_pdf", broken)
    store = RecordingStore()

    with pytest.raises(DocumentRenderError):
        asyncio.run(
            JsaService(store).render(RenderJsaRequest.model_validate(render_payload))
        )

    assert store.saved == {}


def test_photo_stub_summary_counts_photos():
    result = analyze_photos(["https://a/1.jpg", "https://a/2.jpg"])

    assert result.summary == "Analyzed 2 photo(s)"
    assert len(result.hazards) == 1


def test_photo_stub_mentions_task():
    result = analyze_photos(["https://a/1.jpg"], JobContext(task="Roof repair"))

    assert result.summary == "Analyzed 1 photo(s) for task: Roof repair"


def test_photo_stub_returns_generic_hazard():
    hazard = analyze_photos(["https://a/1.jpg"]).hazards[0]

    assert hazard.category == "General"
    assert hazard.specific_risk == "Unverified site conditions"
    assert hazard.likelihood == "medium"
    assert hazard.potential_severity == "high"
    assert len(hazard.recommended_controls) == 3
    assert hazard.required_ppe == [
        "Hard hat",
        "Hi-vis vest",
        "Safety boots",
        "Safety glasses",
    ]
    assert len(hazard.references) == 1
