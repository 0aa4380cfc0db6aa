# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the server-rendered web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - flash.py: One-time session messages
# - templating.py: Jinja2 rendering with flashes injected
# - routers/: Page and form handlers organized by feature
# - templates/: Jinja2 views
#
# The app layer is thin - it handles HTTP concerns and delegates
# database work to the core/ package.
# =============================================================================
