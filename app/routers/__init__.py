# =============================================================================
# app/routers/ - Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - pages.py: Home page
# - hotels.py: Hotel list/detail pages and CRUD form handlers
# - reviews.py: Review create/delete form handlers
# - health.py: Health check endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import hotels
from . import pages
from . import reviews

__all__ = [
    "health",
    "hotels",
    "pages",
    "reviews",
]
