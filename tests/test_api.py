# =============================================================================
# tests/test_api.py - HTTP Endpoint Tests
# =============================================================================
# Integration tests for the FastAPI application using TestClient.
# The `client` fixture serves the small sample dataset from conftest.py;
# `bundled_client` serves the dataset shipped with the package.
# =============================================================================

import logging

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_repository
from app.main import app
from core.services import DatasetError

NOT_FOUND = {"error": "Amino Acid not found"}

PROJECTION_ROUTES = [
    "",
    "/name",
    "/short_name",
    "/abbreviation",
    "/side_chain",
    "/molecular_weight",
    "/codon",
    "/codon_count",
]


# =============================================================================
# Root
# =============================================================================

def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to the Amino Acid API"}


# =============================================================================
# Lookups
# =============================================================================

class TestAminoAcidRoutes:
    """Tests for GET /{amino_acid} and its projections."""

    def test_full_record(self, client, alanine_dict):
        response = client.get("/alanine")

        assert response.status_code == 200
        assert response.json() == {"amino_acid": alanine_dict}

    def test_name(self, client):
        response = client.get("/Alanine/name")

        assert response.status_code == 200
        assert response.json() == {
            "name": "Alanine",
            "short_name": "Ala",
            "abbreviation": "A",
        }

    def test_short_name(self, client):
        response = client.get("/alanine/short_name")

        assert response.status_code == 200
        assert response.json() == {"name": "Alanine", "short_name": "Ala"}

    def test_abbreviation(self, client):
        response = client.get("/ALANINE/abbreviation")

        assert response.status_code == 200
        assert response.json() == {"name": "Alanine", "abbreviation": "A"}

    def test_side_chain(self, client):
        response = client.get("/lysine/side_chain")

        assert response.status_code == 200
        assert response.json() == {"name": "Lysine", "side_chain": "Positive"}

    def test_molecular_weight(self, client):
        response = client.get("/lysine/molecular_weight")

        assert response.status_code == 200
        assert response.json() == {"name": "Lysine", "molecular_weight": 146.19}

    def test_codon(self, client):
        response = client.get("/aspartic acid/codon")

        assert response.status_code == 200
        assert response.json() == {"name": "Aspartic Acid", "codon": ["GAT", "GAC"]}

    def test_codon_count_empty(self, client):
        response = client.get("/hydroxyproline/codon_count")

        assert response.status_code == 200
        assert response.json() == {"name": "Hydroxyproline", "codon_count": 0}

    def test_url_encoded_name(self, client):
        response = client.get("/Aspartic%20Acid/abbreviation")

        assert response.status_code == 200
        assert response.json()["abbreviation"] == "D"

    def test_side_chain_normalized_in_full_record(self, client):
        response = client.get("/aspartic acid")

        assert response.json()["amino_acid"]["side_chain"] == "Acidic"

    @pytest.mark.parametrize("suffix", PROJECTION_ROUTES)
    def test_unknown_name_is_404(self, client, suffix):
        response = client.get(f"/unknownxyz{suffix}")

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    @pytest.mark.parametrize("suffix", PROJECTION_ROUTES)
    def test_every_route_ignores_case(self, client, suffix):
        for key in ("lysine", "LYSINE", "LySiNe"):
            response = client.get(f"/{key}{suffix}")

            assert response.status_code == 200

    @pytest.mark.parametrize("key", ["docs", "redoc", "openapi.json"])
    @pytest.mark.parametrize("suffix", PROJECTION_ROUTES)
    def test_framework_paths_are_plain_keys(self, client, key, suffix):
        response = client.get(f"/{key}{suffix}")

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    def test_partial_name_is_404(self, client):
        response = client.get("/alan")

        assert response.status_code == 404
        assert response.json() == NOT_FOUND


# =============================================================================
# Catalog and Health
# =============================================================================

class TestOperationalRoutes:
    """Tests for the /api/v1 routes."""

    def test_list_amino_acids(self, client, sample_records):
        response = client.get("/api/v1/amino_acids")

        assert response.status_code == 200
        assert response.json() == {
            "count": 4,
            "amino_acids": [r["name"] for r in sample_records],
        }

    def test_health(self, client):
        data = client.get("/api/v1/health").json()

        assert data["status"] == "healthy"
        assert data["amino_acid_count"] == 4
        assert data["version"] == "1.0.0"
        assert data["environment"] == "development"

    def test_openapi_schema(self, client):
        response = client.get("/api/v1/openapi.json")

        assert response.status_code == 200
        assert "/{amino_acid}/codon_count" in response.json()["paths"]

    @pytest.mark.parametrize("path", ["/api/v1/docs", "/api/v1/redoc"])
    def test_docs_pages(self, client, path):
        response = client.get(path)

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]

    def test_liveness(self, client):
        response = client.get("/api/v1/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"


# =============================================================================
# Bundled Dataset
# =============================================================================

class TestBundledDataset:
    """The dataset shipped with the package is loaded at startup."""

    def test_every_name_resolves(self, bundled_client):
        names = bundled_client.get("/api/v1/amino_acids").json()["amino_acids"]

        assert len(names) == 22
        for name in names:
            response = bundled_client.get(f"/{name.upper()}")

            assert response.status_code == 200
            assert response.json()["amino_acid"]["name"] == name

    def test_alanine(self, bundled_client):
        response = bundled_client.get("/alanine")

        assert response.json() == {
            "amino_acid": {
                "name": "Alanine",
                "short_name": "Ala",
                "abbreviation": "A",
                "side_chain": "Nonpolar",
                "molecular_weight": 89.09,
                "codon": ["GCT", "GCC", "GCA", "GCG"],
            }
        }


# =============================================================================
# Failures
# =============================================================================

class TestFailures:
    """Startup and unexpected errors."""

    def test_missing_dataset_aborts_startup(self, tmp_path, monkeypatch):
        from app.config import settings

        monkeypatch.setattr(settings, "DATA_FILE", tmp_path / "missing.json")

        with pytest.raises(DatasetError):
            with TestClient(app):
                pass

    def test_startup_failure_logs_error_details(self, tmp_path, monkeypatch, caplog):
        from app.config import settings

        missing = tmp_path / "missing.json"
        monkeypatch.setattr(settings, "DATA_FILE", missing)

        with caplog.at_level(logging.CRITICAL, logger="app.main"):
            with pytest.raises(DatasetError):
                with TestClient(app):
                    pass

        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.CRITICAL]
        assert len(messages) == 1
        assert "DATASET_UNAVAILABLE" in messages[0]
        assert str(missing) in messages[0]

    def test_malformed_dataset_aborts_startup(self, write_dataset, monkeypatch):
        from app.config import settings

        monkeypatch.setattr(settings, "DATA_FILE", write_dataset("[{]"))

        with pytest.raises(DatasetError):
            with TestClient(app):
                pass

    def test_unexpected_error_is_500(self):
        class BrokenRepository:
            def get(self, key):
                raise RuntimeError("boom")

        app.dependency_overrides[get_repository] = lambda: BrokenRepository()
        try:
            client = TestClient(app, raise_server_exceptions=False)
            response = client.get("/alanine")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "An unexpected error occurred"}
