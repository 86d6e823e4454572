"""
API tests for entry endpoints.

Tests cover:
- Add entry (success + validation errors)
- List and get entries
- CSV template, import and export
- Error responses (400, 404, 422)
"""

import csv
import io

import pytest
from fastapi.testclient import TestClient


def entry_payload(**overrides) -> dict:
    payload = {
        "date": "2024-01-01",
        "stock": "AAA",
        "quantity": 10,
        "buying_price": 100,
        "current_price": 110,
    }
    payload.update(overrides)
    return payload


# =============================================================================
# ADD ENTRY TESTS
# =============================================================================


class TestAddEntryAPI:
    """Tests for POST /entries endpoint."""

    def test_add_entry_success(self, client: TestClient):
        """
        GIVEN no entries exist
        WHEN I POST /entries with valid data
        THEN response is 201 with the new entry_id only
        """
        response = client.post("/entries", json=entry_payload())

        assert response.status_code == 201
        data = response.json()
        assert isinstance(data["entry_id"], int)
        assert set(data) == {"entry_id"}

    def test_add_entry_accepts_camel_case(self, client: TestClient):
        response = client.post("/entries", json={
            "date": "2024-01-01",
            "stock": "AAA",
            "quantity": "2.5",
            "buyingPrice": "375.00",
            "currentPrice": "370.25",
        })

        assert response.status_code == 201
        entry_id = response.json()["entry_id"]
        entry = client.get(f"/entries/{entry_id}").json()
        assert entry["total_invested"] == 937.5
        assert entry["pnl"] == pytest.approx(-11.88, abs=0.01)

    def test_add_entry_negative_quantity_allowed(self, client: TestClient):
        response = client.post("/entries", json=entry_payload(quantity=-5, buying_price=20, current_price=25))

        assert response.status_code == 201

    def test_add_entry_negative_price_rejected(self, client: TestClient):
        """
        GIVEN a payload with a negative buying price
        WHEN I POST /entries
        THEN response is 400 INVALID_ENTRY and nothing is stored
        """
        response = client.post("/entries", json=entry_payload(buying_price=-1))

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_ENTRY"
        assert "buying_price" in response.json()["message"]
        assert client.get("/entries").json()["count"] == 0

    def test_add_entry_oversized_number_rejected(self, client: TestClient):
        """
        GIVEN an existing entry
        WHEN I POST /entries with quantity "1e400"
        THEN response is 400 INVALID_ENTRY and the portfolio still loads
        """
        client.post("/entries", json=entry_payload(stock="KEEP"))

        response = client.post("/entries", json=entry_payload(quantity="1e400"))

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_ENTRY"
        assert "quantity" in response.json()["message"]
        portfolio = client.get("/portfolio")
        assert portfolio.status_code == 200
        assert [e["stock"] for e in portfolio.json()["entries"]] == ["KEEP"]

    def test_add_entry_non_numeric_rejected(self, client: TestClient):
        response = client.post("/entries", json=entry_payload(quantity="abc"))

        assert response.status_code == 422
        assert client.get("/entries").json()["count"] == 0

    def test_add_entry_missing_field_rejected(self, client: TestClient):
        payload = entry_payload()
        del payload["current_price"]

        response = client.post("/entries", json=payload)

        assert response.status_code == 422


# =============================================================================
# READ TESTS
# =============================================================================


class TestReadEntriesAPI:
    """Tests for GET /entries and GET /entries/{entry_id}."""

    def test_list_entries_empty(self, client: TestClient):
        response = client.get("/entries")

        assert response.status_code == 200
        assert response.json() == {"entries": [], "count": 0}

    def test_list_entries_insertion_order(self, client: TestClient):
        client.post("/entries", json=entry_payload(date="2024-02-01", stock="B"))
        client.post("/entries", json=entry_payload(date="2024-01-01", stock="A"))

        data = client.get("/entries").json()

        assert data["count"] == 2
        assert [e["stock"] for e in data["entries"]] == ["B", "A"]

    def test_get_entry(self, client: TestClient):
        entry_id = client.post("/entries", json=entry_payload()).json()["entry_id"]

        response = client.get(f"/entries/{entry_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["entry_id"] == entry_id
        assert data["total_invested"] == 1000.0
        assert data["total_current"] == 1100.0
        assert data["pnl"] == 100.0

    def test_get_entry_not_found(self, client: TestClient):
        response = client.get("/entries/999")

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"


# =============================================================================
# CSV TESTS
# =============================================================================


class TestEntriesCsvAPI:
    """Tests for CSV template, import and export endpoints."""

    def test_download_template(self, client: TestClient):
        response = client.get("/entries/template")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "attachment" in response.headers["content-disposition"]
        assert response.text.splitlines()[0] == "date,stock,quantity,buying_price,current_price"

    def test_import_csv(self, client: TestClient):
        """
        GIVEN a CSV with one good and one bad row
        WHEN I POST it to /entries/import
        THEN the good row is stored and the bad row reported
        """
        content = (
            "date,stock,quantity,buying_price,current_price\n"
            "2024-01-01,AAA,1,100,110\n"
            "2024-01-02,BBB,1,100,-110\n"
        )

        response = client.post(
            "/entries/import",
            files={"file": ("entries.csv", content.encode("utf-8"), "text/csv")},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["imported_count"] == 1
        assert data["error_count"] == 1
        assert data["errors"][0].startswith("Row 3:")
        assert client.get("/entries").json()["count"] == 1

    def test_import_missing_column(self, client: TestClient):
        response = client.post(
            "/entries/import",
            files={"file": ("entries.csv", b"date,stock\n2024-01-01,AAA\n", "text/csv")},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_import_empty_file(self, client: TestClient):
        response = client.post(
            "/entries/import",
            files={"file": ("entries.csv", b"", "text/csv")},
        )

        assert response.status_code == 400

    def test_export_ledger_chronological(self, client: TestClient):
        client.post("/entries", json=entry_payload(date="2024-02-01", stock="B"))
        client.post("/entries", json=entry_payload(date="2024-01-01", stock="A"))

        response = client.get("/entries/export")

        assert response.status_code == 200
        rows = list(csv.DictReader(io.StringIO(response.text)))
        assert [r["stock"] for r in rows] == ["A", "B"]
        assert "pnl" in rows[0]

    def test_export_date_series(self, client: TestClient):
        client.post("/entries", json=entry_payload(date="2024-02-01", quantity=1, buying_price=100, current_price=150))
        client.post("/entries", json=entry_payload(date="2024-02-01", quantity=1, buying_price=100, current_price=80))

        response = client.get("/entries/date-series/export")

        rows = list(csv.DictReader(io.StringIO(response.text)))
        assert len(rows) == 1
        assert rows[0]["date"] == "2024-02-01"
        assert float(rows[0]["pnl"]) == 30.0
