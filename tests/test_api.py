"""
HTTP tests for the FastAPI application.

The generation client and tracker store are replaced through
app.dependency_overrides, so no test touches a real model or the default
database file.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from services.api.app import create_app
from services.api.dependencies import get_application_store, get_generation_client, get_retry_policy
from services.api.errors import status_for_error
from shared.ai import RetryPolicy, StaticGenerationClient, UpstreamError
from shared.schemas.result import TailoringErrorInfo
from shared.tracker import ApplicationStore


@pytest.fixture
def app(tmp_path):
    app = create_app()
    store = ApplicationStore(tmp_path / "applications.db")
    app.dependency_overrides[get_application_store] = lambda: store
    app.dependency_overrides[get_retry_policy] = lambda: RetryPolicy()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def use_model(app):
    """Install a StaticGenerationClient replaying the given outcomes."""
    def install(*outcomes):
        client = StaticGenerationClient(*outcomes)
        app.dependency_overrides[get_generation_client] = lambda: client
        return client
    return install


@pytest.fixture
def client(app):
    return TestClient(app)


# ============================================================================
# Health Tests
# ============================================================================

class TestHealth:
    """Tests for health endpoints."""

    def test_fast(self, client):
        response = client.get("/health/fast")
        assert response.status_code == 200
        assert response.json() == {"ok": True}

    def test_health(self, client):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["service"] == "resume-tailor-api"

    def test_ready_without_key(self, client, monkeypatch):
        for name in ("API_OPENAI_API_KEY", "OPENAI_API_KEY", "AI_INTEGRATIONS_OPENAI_API_KEY"):
            monkeypatch.delenv(name, raising=False)
        response = client.get("/health/ready")
        assert response.status_code == 503
        assert response.json()["openai_key_loaded"] is False

    def test_ready_with_key(self, client, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test-1234567890")
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json()["openai_env_source"] in (
            "API_OPENAI_API_KEY", "OPENAI_API_KEY", "AI_INTEGRATIONS_OPENAI_API_KEY"
        )


# ============================================================================
# Resume Endpoint Tests
# ============================================================================

class TestResumeEndpoint:
    """Tests for POST /api/resume/tailor."""

    def test_success(self, client, use_model, resume_json, frontend_job):
        use_model(resume_json)
        response = client.post("/api/resume/tailor", json={"job_description": frontend_job, "request_id": "r-1"})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["request_id"] == "r-1"
        assert len(body["data"]["tailored_resume"]["experience"]) == 2

    def test_short_job_description_is_400(self, client, use_model, resume_json):
        model = use_model(resume_json)
        response = client.post("/api/resume/tailor", json={"job_description": "short"})
        assert response.status_code == 400
        assert response.json()["detail"]["category"] == "input"
        assert model.call_count == 0

    def test_missing_field_is_400(self, client, use_model, resume_json):
        use_model(resume_json)
        response = client.post("/api/resume/tailor", json={})
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "Job description is required"

    @pytest.mark.parametrize("kind,status_code", [
        ("auth", 401),
        ("quota", 402),
        ("rate_limited", 429),
        ("timeout", 504),
        ("network", 502),
        ("no_content", 502),
    ])
    def test_upstream_status(self, client, use_model, frontend_job, kind, status_code):
        use_model(UpstreamError(kind))
        response = client.post("/api/resume/tailor", json={"job_description": frontend_job})
        assert response.status_code == status_code
        detail = response.json()["detail"]
        assert detail["category"] == "upstream"
        assert detail["kind"] == kind

    def test_parse_failure_is_500(self, client, use_model, frontend_job):
        use_model("no json here")
        response = client.post("/api/resume/tailor", json={"job_description": frontend_job})
        assert response.status_code == 500
        assert response.json()["detail"]["category"] == "parse"

    def test_missing_credential_is_500(self, app, client, frontend_job, resume_json):
        app.dependency_overrides[get_generation_client] = lambda: StaticGenerationClient(
            resume_json, configured=False
        )
        response = client.post("/api/resume/tailor", json={"job_description": frontend_job})
        assert response.status_code == 500
        assert response.json()["detail"]["category"] == "configuration"


# ============================================================================
# Cover Letter Endpoint Tests
# ============================================================================

class TestCoverLetterEndpoint:
    """Tests for POST /api/cover-letter/generate."""

    def test_success(self, client, use_model, cover_letter_json, frontend_job):
        use_model(cover_letter_json)
        response = client.post("/api/cover-letter/generate", json={
            "company_name": "Acme",
            "why_this_company": "Mission",
            "job_description": frontend_job,
        })
        assert response.status_code == 200
        assert response.json()["data"]["metadata"]["tone_used"] == "professional"

    def test_missing_company(self, client, use_model, cover_letter_json, frontend_job):
        use_model(cover_letter_json)
        response = client.post("/api/cover-letter/generate", json={
            "why_this_company": "Mission",
            "job_description": frontend_job,
        })
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "Company name is required"


# ============================================================================
# Candidate Endpoint Tests
# ============================================================================

class TestCandidates:
    """Tests for the candidate registry endpoints."""

    def test_list(self, client):
        ids = [c["id"] for c in client.get("/api/candidates").json()]
        assert ids[0] == "maya-chen"
        assert set(ids) >= {"maya-chen", "daniel-okafor", "priya-raman"}

    def test_get(self, client):
        body = client.get("/api/candidates/priya-raman").json()
        assert body["profession_variant"] == "grc"

    def test_unknown_is_404(self, client):
        assert client.get("/api/candidates/nobody").status_code == 404


# ============================================================================
# Application Endpoint Tests
# ============================================================================

class TestApplications:
    """Tests for the application tracker endpoints."""

    def test_crud_flow(self, client):
        created = client.post("/api/applications", json={
            "company_name": "Acme",
            "position": "Front-End Engineer",
            "date_applied": "2024-05-01",
        })
        assert created.status_code == 201
        application_id = created.json()["id"]
        assert created.json()["status"] == "applied"

        patched = client.patch(f"/api/applications/{application_id}", json={"status": "interview"})
        assert patched.status_code == 200
        assert patched.json()["status"] == "interview"
        assert patched.json()["company_name"] == "Acme"

        assert client.get(f"/api/applications/{application_id}").status_code == 200
        assert len(client.get("/api/applications").json()) == 1

        stats = client.get("/api/applications/stats").json()
        assert stats["total"] == 1
        assert stats["interview"] == 1
        assert stats["labels"]["interview"] == "Interview"

        assert client.delete(f"/api/applications/{application_id}").status_code == 204
        assert client.get(f"/api/applications/{application_id}").status_code == 404

    def test_invalid_status_is_422(self, client):
        response = client.post("/api/applications", json={
            "company_name": "Acme",
            "position": "Engineer",
            "status": "ghosted",
        })
        assert response.status_code == 422

    def test_missing_is_404(self, client):
        assert client.patch("/api/applications/missing", json={"notes": "x"}).status_code == 404
        assert client.delete("/api/applications/missing").status_code == 404


# ============================================================================
# Export Endpoint Tests
# ============================================================================

class TestExport:
    """Tests for document downloads."""

    def test_resume_docx(self, client, make_resume_payload):
        response = client.post(
            "/api/export/resume?format=docx",
            json={"resume": make_resume_payload(), "candidate_id": "maya-chen"},
        )
        assert response.status_code == 200
        assert response.content[:2] == b"PK"
        assert "Maya_Chen_Resume_" in response.headers["content-disposition"]

    def test_resume_pdf(self, client, make_resume_payload):
        response = client.post("/api/export/resume?format=pdf", json={"resume": make_resume_payload()})
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")

    def test_cover_letter_pdf(self, client, make_cover_letter_payload):
        response = client.post("/api/export/cover-letter?format=pdf", json={
            "cover_letter": make_cover_letter_payload()["cover_letter"],
            "company_name": "Acme Corp",
        })
        assert response.status_code == 200
        assert "_CoverLetter_Acme_Corp_" in response.headers["content-disposition"]

    def test_cover_letter_non_latin_company(self, client, make_cover_letter_payload):
        response = client.post("/api/export/cover-letter?format=docx", json={
            "cover_letter": make_cover_letter_payload()["cover_letter"],
            "company_name": "株式会社メルカリ",
        })
        assert response.status_code == 200
        disposition = response.headers["content-disposition"]
        assert "Maya_Chen_CoverLetter_20" in disposition
        disposition.encode("latin-1")

    def test_unknown_format_is_422(self, client, make_resume_payload):
        response = client.post("/api/export/resume?format=rtf", json={"resume": make_resume_payload()})
        assert response.status_code == 422


# ============================================================================
# Status Mapping Tests
# ============================================================================

class TestStatusMapping:
    """Tests for error category to HTTP status mapping."""

    @pytest.mark.parametrize("category,status_code", [
        ("input", 400),
        ("configuration", 500),
        ("parse", 500),
        ("validation", 500),
        ("internal", 500),
    ])
    def test_non_upstream(self, category, status_code):
        info = TailoringErrorInfo(category=category, message="x")
        assert status_for_error(info) == status_code


# ============================================================================
# Handler Tests
# ============================================================================

class TestBlockingHandlers:
    """Tracker and export handlers do blocking work and run in the threadpool."""

    @pytest.mark.parametrize("prefix", ["/api/applications", "/api/export"])
    def test_handlers_are_sync(self, app, prefix):
        routes = [route for route in app.routes if getattr(route, "path", "").startswith(prefix)]
        assert routes
        for route in routes:
            assert not asyncio.iscoroutinefunction(route.endpoint), route.path

    def test_generation_handlers_stay_async(self, app):
        paths = {"/api/resume/tailor", "/api/cover-letter/generate"}
        endpoints = [route.endpoint for route in app.routes if getattr(route, "path", "") in paths]
        assert len(endpoints) == 2
        assert all(asyncio.iscoroutinefunction(endpoint) for endpoint in endpoints)
