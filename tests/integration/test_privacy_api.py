"""Integration tests for the privacy export and deletion endpoints."""
import logging

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.services.entry_service import EntryService
from tests.factories import FIXED_NOW, create_entry


class TestExport:
    def test_export_contains_user_entries(self, client: TestClient, db: Session):
        create_entry(db, symptoms=["gas"])
        create_entry(db, user_id="someone-else")

        response = client.post("/privacy/export")

        assert response.status_code == 200
        data = response.json()
        assert data["data"]["userId"] == "demo"
        assert data["data"]["exportDate"] == FIXED_NOW.isoformat()
        assert data["meta"]["totalEntries"] == 1


class TestDelete:
    def test_delete_requires_confirmation(self, client: TestClient, db: Session, caplog):
        create_entry(db)

        with caplog.at_level(logging.WARNING, logger="app.api.privacy"):
            response = client.post("/privacy/delete", json={"confirmation": "yes please"})

        assert response.status_code == 400
        assert "Rejected data deletion for user demo" in caplog.text
        assert len(EntryService.list_entries(db, "demo")) == 1

    def test_delete_removes_entries(self, client: TestClient, db: Session):
        create_entry(db)
        create_entry(db, user_id="someone-else")

        response = client.post("/privacy/delete", json={"confirmation": "DELETE_MY_DATA"})

        assert response.status_code == 200
        data = response.json()
        assert data["data"]["status"] == "deleted"
        assert data["data"]["userId"] == "demo"
        assert EntryService.list_entries(db, "demo") == []
        assert len(EntryService.list_entries(db, "someone-else")) == 1
