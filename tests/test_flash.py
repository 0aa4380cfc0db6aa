# =============================================================================
# tests/test_flash.py - Flash Message Tests
# =============================================================================
# Unit tests on a bare request with a session dict, then the full
# redirect-then-render cycle over HTTP.
# =============================================================================

from starlette.requests import Request

from app.flash import consume_flashes, flash, get_flashed_messages


def make_request(session: dict | None = None) -> Request:
    scope = {"type": "http", "method": "GET", "path": "/", "headers": []}
    if session is not None:
        scope["session"] = session
    return Request(scope)


# =============================================================================
# Unit Tests
# =============================================================================

class TestFlashStore:
    """Writing and reading the session queue."""

    def test_flash_then_read(self):
        request = make_request({})

        flash(request, "success", "Saved")
        flash(request, "success", "Again")

        assert get_flashed_messages(request, "success") == ["Saved", "Again"]

    def test_read_clears(self):
        request = make_request({})
        flash(request, "error", "Nope")

        get_flashed_messages(request, "error")

        assert get_flashed_messages(request, "error") == []
        assert "_flashes" not in request.session

    def test_categories_are_independent(self):
        request = make_request({})
        flash(request, "success", "Yes")
        flash(request, "error", "No")

        assert get_flashed_messages(request, "error") == ["No"]
        assert get_flashed_messages(request, "success") == ["Yes"]

    def test_consume_flashes_returns_every_category(self):
        request = make_request({})
        flash(request, "success", "Yes")

        assert consume_flashes(request) == {"success": ["Yes"], "error": []}
        assert consume_flashes(request) == {"success": [], "error": []}

    def test_no_session_reads_empty(self):
        request = make_request()

        assert get_flashed_messages(request, "success") == []


# =============================================================================
# Redirect Cycle
# =============================================================================

class TestFlashOverHttp:
    """A flash shows on the next rendered page only."""

    def test_flash_survives_one_redirect(self, client, hotel_form):
        response = client.post("/hotels", data=hotel_form)

        assert response.status_code == 200
        assert "New hotel created!" in response.text

        response = client.get("/hotels")

        assert response.status_code == 200
        assert "New hotel created!" not in response.text

    def test_flash_waits_for_a_render(self, client, hotel_form):
        """A redirect that isn't followed leaves the flash queued."""
        client.post("/hotels", data=hotel_form, follow_redirects=False)

        assert "New hotel created!" in client.get("/").text
        assert "New hotel created!" not in client.get("/").text
