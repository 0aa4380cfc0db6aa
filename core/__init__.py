# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the hotel and review logic:
# - models/: Pydantic schemas for form input and view data
# - services/: MongoDB operations for hotels and reviews
# - validation.py: Form payload checks with aggregated error messages
# =============================================================================
