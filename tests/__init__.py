# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the CheckInn app:
# - test_models.py: Pydantic model and payload validation tests
# - test_forms.py: Nested form parsing
# - test_flash.py: Session flash messages
# - test_services.py: Hotel/review services against an in-memory MongoDB
# - test_hotels_api.py / test_reviews_api.py: HTTP round trips
# - test_errors.py: Error page translation and method override
#
# Run tests with: poetry run pytest
# =============================================================================
