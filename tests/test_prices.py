"""
Tests for price endpoints.

This module contains tests for price reporting, price history and the
latest-price view.
"""

import pytest


@pytest.fixture
def station_id(client):
    """Create a test station and return its id."""
    response = client.post(
        "/api/v1/stations",
        json={
            "name": "Posto Sé",
            "address": "Praça da Sé, 100 - Centro",
            "latitude": -23.5505,
            "longitude": -46.6333,
        },
    )
    return response.json()["id"]


def _report(client, station_id, fuel_type, price):
    return client.post(
        "/api/v1/prices",
        json={"station_id": station_id, "fuel_type": fuel_type, "price": price},
    )


def test_report_diesel_out_of_range_then_in_range(client, station_id):
    response = _report(client, station_id, "diesel", 3.00)
    assert response.status_code == 400
    assert response.json()["errors"] == ["Price for diesel must be between 4.00 and 7.50"]

    response = _report(client, station_id, "diesel", 5.50)
    assert response.status_code == 200
    data = response.json()
    assert data["station_id"] == station_id
    assert data["fuel_type"] == "diesel"
    assert data["price"] == pytest.approx(5.50)
    assert "reported_at" in data


def test_report_collects_all_errors(client, station_id):
    response = _report(client, station_id, "kerosene", -1)
    assert response.status_code == 400
    assert response.json()["errors"] == ["Price must be a positive number", "Invalid fuel type"]


def test_report_non_numeric_price(client, station_id):
    response = _report(client, station_id, "ethanol", "cheap")
    assert response.status_code == 400
    assert response.json()["errors"] == ["Price must be a positive number"]


def test_report_missing_price(client, station_id):
    response = client.post("/api/v1/prices", json={"station_id": station_id, "fuel_type": "ethanol"})
    assert response.status_code == 400
    assert response.json()["errors"] == ["Price must be a positive number"]


def test_report_boolean_price(client, station_id):
    response = _report(client, station_id, "diesel", True)
    assert response.status_code == 400
    assert response.json()["errors"] == ["Price must be a positive number"]


def test_report_numeric_string_price(client, station_id):
    response = _report(client, station_id, "ethanol", "3.49")
    assert response.status_code == 200
    assert response.json()["price"] == pytest.approx(3.49)


def test_report_non_string_fuel_type(client, station_id):
    response = _report(client, station_id, 5, 5.00)
    assert response.status_code == 400
    assert response.json()["errors"] == ["Invalid fuel type"]


def test_report_for_missing_station(client):
    response = _report(client, 9999, "ethanol", 3.50)
    assert response.status_code == 404


def test_rejected_report_is_not_stored(client, station_id):
    _report(client, station_id, "ethanol", 9.99)
    response = client.get(f"/api/v1/stations/{station_id}/prices")
    assert response.status_code == 200
    assert response.json() == []


def test_list_prices_newest_first_and_growing(client, station_id):
    previous_ids = []
    for price in (5.10, 5.20, 5.30):
        assert _report(client, station_id, "regular_gasoline", price).status_code == 200
        data = client.get(f"/api/v1/stations/{station_id}/prices").json()
        ids = [report["id"] for report in data]
        assert set(previous_ids) <= set(ids)
        assert len(ids) == len(previous_ids) + 1
        previous_ids = ids

    data = client.get(f"/api/v1/stations/{station_id}/prices").json()
    assert [report["price"] for report in data] == pytest.approx([5.30, 5.20, 5.10])

    data = client.get(f"/api/v1/stations/{station_id}/prices", params={"limit": 1}).json()
    assert len(data) == 1


def test_latest_prices(client, station_id):
    _report(client, station_id, "ethanol", 3.00)
    _report(client, station_id, "diesel", 5.00)
    _report(client, station_id, "ethanol", 3.10)

    response = client.get(f"/api/v1/stations/{station_id}/latest-prices")
    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"ethanol", "diesel"}
    assert data["ethanol"]["price"] == pytest.approx(3.10)
    assert data["diesel"]["price"] == pytest.approx(5.00)
    assert "reported_at" in data["ethanol"]


def test_latest_prices_empty(client, station_id):
    response = client.get(f"/api/v1/stations/{station_id}/latest-prices")
    assert response.status_code == 200
    assert response.json() == {}


def test_latest_prices_missing_station(client):
    assert client.get("/api/v1/stations/9999/latest-prices").status_code == 404


def test_delete_station_removes_prices(client, station_id):
    for fuel_type, price in (("ethanol", 3.00), ("diesel", 5.00), ("premium_gasoline", 6.20)):
        assert _report(client, station_id, fuel_type, price).status_code == 200

    assert client.delete(f"/api/v1/stations/{station_id}").status_code == 200

    response = client.get(f"/api/v1/stations/{station_id}/prices")
    assert response.status_code == 404


def test_list_fuel_types(client):
    response = client.get("/api/v1/prices/fuel-types")
    assert response.status_code == 200
    data = {item["fuel_type"]: item for item in response.json()}
    assert set(data) == {"regular_gasoline", "premium_gasoline", "ethanol", "diesel"}
    assert data["diesel"]["min_price"] == 4.00
    assert data["diesel"]["max_price"] == 7.50
