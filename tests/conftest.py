# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Provides sample records, temporary dataset files and an API client
# =============================================================================

import json
import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def alanine_dict():
    """Alanine as it appears in the dataset file."""
    return {
        "name": "Alanine",
        "short_name": "Ala",
        "abbreviation": "A",
        "side_chain": "Nonpolar",
        "molecular_weight": 89.09,
        "codon": ["GCT", "GCC", "GCA", "GCG"],
    }


@pytest.fixture
def sample_records(alanine_dict):
    """A small dataset with mixed side chain casing and an empty codon list."""
    return [
        alanine_dict,
        {
            "name": "Aspartic Acid",
            "short_name": "Asp",
            "abbreviation": "D",
            "side_chain": "acidic",
            "molecular_weight": 133.1,
            "codon": ["GAT", "GAC"],
        },
        {
            "name": "Lysine",
            "short_name": "Lys",
            "abbreviation": "K",
            "side_chain": "POSITIVE",
            "molecular_weight": 146.19,
            "codon": ["AAA", "AAG"],
        },
        {
            "name": "Hydroxyproline",
            "short_name": "Hyp",
            "abbreviation": "O",
            "side_chain": "Polar",
            "molecular_weight": 131.13,
            "codon": [],
        },
    ]


@pytest.fixture
def write_dataset(tmp_path):
    """Write a dataset (records or raw text) to a temporary file and return its path."""

    def _write(content, filename="amino_acids.json"):
        path = tmp_path / filename
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def dataset_file(write_dataset, sample_records):
    """Path to a temporary file holding sample_records."""
    return write_dataset(sample_records)


@pytest.fixture
def repository(dataset_file):
    """Repository built from the sample dataset."""
    from core.services import AminoAcidRepository

    return AminoAcidRepository.from_file(dataset_file)


@pytest.fixture
def client(repository):
    """API client serving the sample dataset."""
    from app.dependencies import get_repository
    from app.main import app

    app.dependency_overrides[get_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def bundled_client():
    """API client serving the bundled dataset loaded at startup."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client
