# =============================================================================
# app/routers/hotels.py - Hotel CRUD Pages
# =============================================================================
# Server-rendered pages and form handlers for hotels.
# Mutations flash a status message and answer 303 so the browser follows
# up with a GET. Edit and delete forms reach PUT/DELETE through the
# `?_method=` override.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from app.dependencies import DatabaseDep, HotelFormDep
from app.flash import flash
from app.templating import render
from core.services.hotel_service import HotelService

router = APIRouter()

HotelId = Annotated[str, Path(description="Hotel ObjectId")]


@router.get("", response_class=HTMLResponse)
async def list_hotels(request: Request, db: DatabaseDep):
    """List every hotel."""
    hotels = await HotelService.list_hotels(db)
    return render(request, "hotels/index.html", {"hotels": hotels})


@router.get("/new", response_class=HTMLResponse)
async def new_hotel_form(request: Request):
    """Empty creation form."""
    return render(request, "hotels/new.html")


@router.post("")
async def create_hotel(request: Request, hotel: HotelFormDep, db: DatabaseDep):
    """
    Create a hotel from the submitted form.

    Redirects to the new hotel's detail page.
    """
    created = await HotelService.create_hotel(db, hotel)
    flash(request, "success", "New hotel created!")
    return RedirectResponse(f"/hotels/{created.id}", status_code=303)


@router.get("/{hotel_id}", response_class=HTMLResponse)
async def show_hotel(request: Request, hotel_id: HotelId, db: DatabaseDep):
    """Detail page with reviews expanded."""
    hotel = await HotelService.get_hotel_with_reviews(db, hotel_id)
    return render(request, "hotels/show.html", {"hotel": hotel})


@router.get("/{hotel_id}/edit", response_class=HTMLResponse)
async def edit_hotel_form(request: Request, hotel_id: HotelId, db: DatabaseDep):
    """Edit form pre-filled with the current values."""
    hotel = await HotelService.get_hotel(db, hotel_id)
    return render(request, "hotels/edit.html", {"hotel": hotel})


@router.put("/{hotel_id}")
async def update_hotel(
    request: Request,
    hotel_id: HotelId,
    hotel: HotelFormDep,
    db: DatabaseDep,
):
    """Replace the hotel's fields and go back to its detail page."""
    updated = await HotelService.update_hotel(db, hotel_id, hotel)
    flash(request, "success", "Successfully updated Hotel")
    return RedirectResponse(f"/hotels/{updated.id}", status_code=303)


@router.delete("/{hotel_id}")
async def delete_hotel(request: Request, hotel_id: HotelId, db: DatabaseDep):
    """Delete the hotel (and its reviews) and go back to the list."""
    await HotelService.delete_hotel(db, hotel_id)
    flash(request, "success", "Deleted Hotel")
    return RedirectResponse("/hotels", status_code=303)
