import pytest

fastapi = pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from abnt_references import web
from abnt_references.web import app


client = TestClient(app)


def test_format_endpoint_returns_reference():
    response = client.post(
        "/api/references/format",
        json={
            "type": "livro",
            "data": {"author": "João Silva", "title": "Livro", "city": "São Paulo", "publisher": "Atlas", "year": "2020"},
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body == {
        "success": True,
        "formattedReference": "SILVA, João. **Livro**. São Paulo: Atlas, 2020.",
        "type": "livro",
    }


def test_format_endpoint_accepts_empty_data():
    response = client.post("/api/references/format", json={"type": "book", "data": {}})

    assert response.status_code == 200
    assert "Editora" in response.json()["formattedReference"]


def test_format_endpoint_rejects_missing_fields():
    response = client.post("/api/references/format", json={"type": "book"})

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_validate_endpoint_returns_report_fields():
    response = client.post("/api/references/validate", json={"reference": "silva joão livro sem nada"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["isValid"] is False
    assert body["score"] <= 40
    assert set(body) == {"success", "isValid", "issues", "suggestions", "score"}


def test_validate_endpoint_requires_reference():
    response = client.post("/api/references/validate", json={})

    assert response.status_code == 400
    assert "error" in response.json()


def test_malformed_body_is_a_structured_failure():
    response = client.post("/api/references/validate", json={"reference": ["not", "a", "string"]})

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_sync_endpoint_normalizes_entries():
    response = client.post(
        "/api/references/sync",
        json={"references": [{"text": "Ref", "type": "blog"}], "userId": "u1"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["references"][0]["type"] == "outro"
    assert body["references"][0]["userId"] == "u1"
    assert body["syncedAt"]


def test_sync_endpoint_rejects_non_list():
    response = client.post("/api/references/sync", json={"references": "nope"})

    assert response.status_code == 400


def test_from_metadata_endpoint_builds_website_reference():
    response = client.post(
        "/api/references/from-metadata",
        json={
            "author": "João Silva",
            "title": "Artigo X",
            "siteName": "Site Y",
            "publishedDate": "2023-05-01",
            "url": "http://x.com",
            "accessDate": "01 jan. 2024",
        },
    )

    assert response.status_code == 200
    assert response.json()["abntReference"] == (
        "SILVA, João. **Artigo X**. Site Y, 2023. Disponível em: http://x.com. "
        "Acesso em: 01 jan. 2024."
    )


def test_citations_endpoint_lists_variants():
    response = client.post(
        "/api/citations",
        json={"author": "João Silva", "year": "2023", "page": "45", "quote": "Texto citado"},
    )

    citations = response.json()["citations"]
    assert [c["type"] for c in citations] == ["direct-short", "direct-long", "indirect", "author-text", "apud"]
    assert citations[0]["text"] == '"Texto citado" (SILVA, 2023, p. 45).'
    assert all(c["ready"] for c in citations)


def test_unexpected_fault_becomes_internal_error(monkeypatch):
    class BrokenFormatter:
        def format(self, *_args, **_kwargs):
            raise RuntimeError("boom")

    monkeypatch.setattr(web, "reference_formatter", BrokenFormatter())
    safe_client = TestClient(app, raise_server_exceptions=False)

    response = safe_client.post("/api/references/format", json={"type": "book", "data": {}})

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Internal error while processing the request",
    }
