"""Tests for the SQLite-backed organization store."""

import asyncio
import sqlite3

from charity_api.app.core.db import get_connection, init_db
from charity_api.app.services.store_service import StoreOrganizationService


def test_init_db_is_idempotent(database):
    init_db()
    init_db()

    conn = get_connection()
    try:
        versions = [row["version"] for row in conn.execute("SELECT version FROM migrations")]
    finally:
        conn.close()
    assert versions == [1]


def test_list_sorted_orders_by_funding(database):
    init_db()
    for name, amount in [("Big", 1000), ("Small", 500), ("Medium", 750)]:
        asyncio.run(StoreOrganizationService.add_organization(name, amount))

    result = asyncio.run(StoreOrganizationService.list_sorted())

    assert [org.org_name for org in result] == ["Small", "Medium", "Big"]
    assert [org.fund_amount for org in result] == [500.0, 750.0, 1000.0]


def test_store_endpoint(client):
    asyncio.run(StoreOrganizationService.add_organization("Elders", 2500))
    asyncio.run(StoreOrganizationService.add_organization("Kids", 1200.5))

    response = client.get("/api/store/organizations")

    assert response.status_code == 200
    assert response.json() == [
        {"id": 2, "org_name": "Kids", "fund_amount": 1200.5},
        {"id": 1, "org_name": "Elders", "fund_amount": 2500.0},
    ]


def test_store_endpoint_empty(client):
    assert client.get("/api/store/organizations").json() == []


def test_store_endpoint_database_error_is_500(client, monkeypatch):
    async def broken(cls):
        raise sqlite3.OperationalError("no such table: organizations")

    monkeypatch.setattr(StoreOrganizationService, "list_sorted", classmethod(broken))

    response = client.get("/api/store/organizations")

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to load organizations"}
