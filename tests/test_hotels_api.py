# =============================================================================
# tests/test_hotels_api.py - Hotel Page Tests
# =============================================================================
# HTTP round trips through routing, validation, services and templates,
# with MongoDB replaced by mongomock.
# =============================================================================

from bson import ObjectId

from lib.mongo_client import HOTELS_COLLECTION


class TestHotelPages:
    """Read-only pages."""

    def test_home(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "View Hotels" in response.text

    def test_empty_list(self, client):
        response = client.get("/hotels")

        assert response.status_code == 200
        assert "No hotels yet" in response.text

    def test_new_form(self, client):
        response = client.get("/hotels/new")

        assert response.status_code == 200
        assert 'name="hotel[name]"' in response.text

    def test_edit_form_prefilled(self, client, create_hotel):
        hotel_id = create_hotel(name="Harbour Lodge")

        response = client.get(f"/hotels/{hotel_id}/edit")

        assert response.status_code == 200
        assert 'value="Harbour Lodge"' in response.text
        assert f"/hotels/{hotel_id}?_method=PUT" in response.text

    def test_show_unknown_hotel_is_404(self, client):
        response = client.get(f"/hotels/{ObjectId()}")

        assert response.status_code == 404
        assert "Hotel not found" in response.text

    def test_show_malformed_id_is_404(self, client):
        response = client.get("/hotels/not-an-id")

        assert response.status_code == 404


class TestCreateHotel:
    """POST /hotels"""

    def test_valid_hotel_creates_one_and_redirects(self, client, db, run, hotel_form):
        response = client.post("/hotels", data=hotel_form, follow_redirects=False)

        assert response.status_code == 303
        assert run(db[HOTELS_COLLECTION].count_documents({})) == 1
        doc = run(db[HOTELS_COLLECTION].find_one({}))
        assert response.headers["location"] == f"/hotels/{doc['_id']}"
        assert doc["name"] == "Inn"
        assert doc["price"] == 10
        assert doc["reviews"] == []

    def test_redirect_lands_on_detail_page(self, client, hotel_form):
        response = client.post("/hotels", data=hotel_form)

        assert response.status_code == 200
        assert "<h5 class=\"card-title\">Inn</h5>" in response.text

    def test_missing_name_is_rejected(self, client, db, run, hotel_form):
        del hotel_form["hotel[name]"]

        response = client.post("/hotels", data=hotel_form, follow_redirects=False)

        assert response.status_code == 400
        assert "hotel.name" in response.text
        assert run(db[HOTELS_COLLECTION].count_documents({})) == 0

    def test_negative_price_is_rejected(self, client, hotel_form):
        hotel_form["hotel[price]"] = "-1"

        response = client.post("/hotels", data=hotel_form)

        assert response.status_code == 400
        assert "hotel.price" in response.text

    def test_infinite_price_is_rejected(self, client, db, run, hotel_form):
        hotel_form["hotel[price]"] = "inf"

        response = client.post("/hotels", data=hotel_form)

        assert response.status_code == 400
        assert "hotel.price" in response.text
        assert run(db[HOTELS_COLLECTION].count_documents({})) == 0

    def test_empty_body_is_rejected(self, client):
        response = client.post("/hotels", data={})

        assert response.status_code == 400
        assert "hotel" in response.text


class TestUpdateHotel:
    """PUT /hotels/{id} via method override."""

    def test_update_redirects_to_detail(self, client, create_hotel, hotel_form):
        hotel_id = create_hotel()
        hotel_form["hotel[name]"] = "Renamed Inn"

        response = client.post(f"/hotels/{hotel_id}?_method=PUT", data=hotel_form)

        assert response.status_code == 200
        assert str(response.url).endswith(f"/hotels/{hotel_id}")
        assert "Renamed Inn" in response.text
        assert "Successfully updated Hotel" in response.text

    def test_invalid_update_changes_nothing(self, client, create_hotel, hotel_form):
        hotel_id = create_hotel()
        hotel_form["hotel[name]"] = ""

        response = client.put(f"/hotels/{hotel_id}", data=hotel_form)

        assert response.status_code == 400
        assert "<h5 class=\"card-title\">Inn</h5>" in client.get(f"/hotels/{hotel_id}").text

    def test_update_unknown_hotel(self, client, hotel_form):
        response = client.put(f"/hotels/{ObjectId()}", data=hotel_form)

        assert response.status_code == 404


class TestDeleteHotel:
    """DELETE /hotels/{id} via method override."""

    def test_deleted_hotel_leaves_the_list(self, client, create_hotel):
        kept = create_hotel(name="Kept Hotel")
        gone = create_hotel(name="Gone Hotel")

        response = client.post(f"/hotels/{gone}?_method=DELETE", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/hotels"

        listing = client.get("/hotels").text
        assert "Kept Hotel" in listing
        assert "Gone Hotel" not in listing
        assert "Deleted Hotel" in listing
        assert client.get(f"/hotels/{kept}").status_code == 200

    def test_delete_unknown_hotel(self, client):
        response = client.delete(f"/hotels/{ObjectId()}")

        assert response.status_code == 404
