# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Amino Acid API:
# - test_models.py: Record model, side chain parsing and projections
# - test_dataset_service.py: Dataset loading and failure modes
# - test_amino_acid_service.py: Case-insensitive name lookup
# - test_api.py: HTTP endpoints
# - test_config.py: Settings parsing
# - test_lookup_script.py: Command-line lookup
#
# Run tests with: poetry run pytest
# =============================================================================
