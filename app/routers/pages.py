# =============================================================================
# app/routers/pages.py - Static Pages
# =============================================================================

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.templating import render

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Landing page."""
    return render(request, "home.html")
