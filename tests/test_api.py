# DEPENDENCIES
import pytest
from fastapi.testclient import TestClient

from app import app
from config.settings import settings


API = settings.API_PREFIX


@pytest.fixture
def client():
    # Entering the client runs the lifespan, which builds the analysis service
    with TestClient(app) as test_client:
        yield test_client


def test_service_unavailable_before_startup():
    response = TestClient(app).get(f"{API}/health")

    assert response.status_code == 503
    assert response.json()["error"] == "Service not initialized"


def test_health(client):
    response = client.get(f"{API}/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["catalog_size"] == 18


def test_clause_catalog_listing(client):
    payload = client.get(f"{API}/clauses").json()

    assert payload["total"] == 18
    assert payload["clauses"][0]["id"] == "excessive-deposit"
    assert payload["clauses"][0]["category_label"] == "Security Deposit"
    assert payload["clauses"][0]["severity_style"] == "#dc2626"


def test_analyze_text(client, sample_lease):
    response = client.post(f"{API}/analyze/text", data = {"contract_text": sample_lease})
    payload  = response.json()

    assert response.status_code == 200
    assert payload["overall_risk_score"] == 75
    assert payload["risk_level"] == "high"
    assert payload["metadata"]["malicious_count"] == 3
    assert payload["metadata"]["informational_count"] == 2
    assert len(payload["recommendations"]) == 5
    assert payload["analysis_id"]


def test_analyze_text_too_short(client):
    response = client.post(f"{API}/analyze/text", data = {"contract_text": "Rent: $900"})

    assert response.status_code == 400
    assert response.json()["error"] == "The document appears to be too short or empty. Please upload a complete rental contract."


def test_analyze_text_missing_field(client):
    response = client.post(f"{API}/analyze/text", data = {})

    assert response.status_code == 422


def test_analyze_txt_file(client, sample_lease):
    response = client.post(f"{API}/analyze/file", files = {"file": ("lease.txt", sample_lease.encode("utf-8"), "text/plain")})

    assert response.status_code == 200
    assert response.json()["overall_risk_score"] == 75


def test_analyze_file_rejects_unsupported_type(client):
    response = client.post(f"{API}/analyze/file", files = {"file": ("lease.docx", b"binary", "application/octet-stream")})

    assert response.status_code == 400
    assert "Invalid file type" in response.json()["error"]


def test_analyze_file_rejects_empty_file(client):
    response = client.post(f"{API}/analyze/file", files = {"file": ("lease.txt", b"", "text/plain")})

    assert response.status_code == 400
    assert response.json()["error"] == "File is empty"


def test_analyze_file_rejects_corrupt_pdf(client):
    response = client.post(f"{API}/analyze/file", files = {"file": ("lease.pdf", b"not really a pdf", "application/pdf")})

    assert response.status_code == 400
    assert "Could not read PDF document" in response.json()["error"]


def test_validate_text(client, sample_lease):
    payload = client.post(f"{API}/validate/text", data = {"contract_text": sample_lease}).json()

    assert payload["valid"] is True
    assert payload["confidence"] >= 30
    assert payload["report"]["scores"]["total"] == payload["confidence"]


def test_validate_short_text(client):
    payload = client.post(f"{API}/validate/text", data = {"contract_text": "too short"}).json()

    assert payload["valid"] is False
    assert payload["report"] is None


def test_generate_pdf(client, sample_lease):
    analysis = client.post(f"{API}/analyze/text", data = {"contract_text": sample_lease}).json()
    response = client.post(f"{API}/generate-pdf", json = analysis)

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")
    assert analysis["analysis_id"] in response.headers["content-disposition"]
