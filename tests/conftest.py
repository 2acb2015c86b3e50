"""
Pytest Configuration and Fixtures

Provides shared fixtures for all tests, including an in-memory stand-in for
the Supabase query builder.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Chainable query that records calls and answers from a row list."""

    def __init__(self, client: "FakeClient", table: str):
        self.client = client
        self.table = table
        self.calls: List[tuple] = []
        self._filters: Dict[str, Any] = {}
        self._payload: Optional[dict] = None
        self._mode = "select"
        self._single = False
        self._limit: Optional[int] = None

    def _record(self, name, *args):
        self.calls.append((name,) + args)
        return self

    def select(self, columns="*"):
        return self._record("select", columns)

    def eq(self, column, value):
        self._filters[column] = value
        return self._record("eq", column, value)

    def limit(self, count):
        self._limit = count
        return self._record("limit", count)

    def maybe_single(self):
        self._single = True
        return self._record("maybe_single")

    def insert(self, payload):
        self._mode = "insert"
        self._payload = payload
        return self._record("insert", payload)

    def update(self, payload):
        self._mode = "update"
        self._payload = payload
        return self._record("update", payload)

    def _matches(self, row):
        # PostgREST compares over the wire, so 101 and "101" are equal
        return all(
            str(row.get(column, value)) == str(value)
            for column, value in self._filters.items()
        )

    def execute(self):
        self.client.executed.append(self)
        if self.client.error is not None:
            raise self.client.error

        rows = self.client.tables.get(self.table, [])
        if self._mode == "insert":
            return FakeResponse([dict(self._payload)])
        if self._mode == "update":
            return FakeResponse([
                {**row, **self._payload} for row in rows if self._matches(row)
            ])

        data = [row for row in rows if self._matches(row)]
        if self._limit is not None:
            data = data[:self._limit]
        if self._single:
            # postgrest returns no response at all when nothing matched
            return FakeResponse(data[0]) if data else None
        return FakeResponse(data)


class FakeClient:
    """Stands in for supabase.Client in tests."""

    def __init__(self, tables: Optional[Dict[str, List[dict]]] = None, error=None):
        self.tables = tables or {}
        self.error = error
        self.executed: List[FakeQuery] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Strip PropFinder/Supabase settings and reset every singleton."""
    for name in (
        "SUPABASE_URL",
        "SUPABASE_SERVICE_ROLE_KEY",
        "PROPFINDER_ENV",
        "NODE_ENV",
        "PROPFINDER_CORS_ORIGINS",
        "PROPFINDER_DEBUG",
        "PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PROPFINDER_FRONTEND_DIR", str(tmp_path / "no-frontend"))

    from propfinder.config import reset_config
    from propfinder.core.database import reset_supabase_service
    from propfinder.api.routes import reset_properties_service

    reset_config()
    reset_supabase_service()
    reset_properties_service()
    yield
    reset_config()
    reset_supabase_service()
    reset_properties_service()


@pytest.fixture(scope="function")
def property_rows() -> List[dict]:
    """Rows shaped like the hosted `properties` table."""
    return [
        {
            "id": 101,
            "title": "Penthouse Polanco",
            "description": "Penthouse con terraza privada.",
            "price": 1200000,
            "property_type": "apartment",
            "transaction_type": "sale",
            "address": "Av. Masaryk 300",
            "city": "Ciudad de México",
            "state": "CDMX",
            "latitude": 19.4333,
            "longitude": -99.1950,
            "bedrooms": 3,
            "bathrooms": 3,
            "area": 210.0,
            "parking_spaces": 2,
            "status": "active",
            "is_active": True,
            "agent_id": "agent-1",
            "created_at": "2024-03-01T10:00:00.000Z",
            "updated_at": "2024-03-02T10:00:00.000Z",
            "agents": {
                "id": "agent-1",
                "user_profiles": {
                    "full_name": "Laura Méndez",
                    "phone": "55 1234 5678",
                    "email": "laura@example.com",
                    "avatar_url": None,
                },
            },
        },
        {
            "id": 102,
            "title": "Casa en Zapopan",
            "description": "Casa de dos plantas.",
            "price": "380000.00",
            "property_type": "house",
            "transaction_type": "sale",
            "address": "Calle Robles 12",
            "city": "Zapopan",
            "state": "Jalisco",
            "bedrooms": 4,
            "bathrooms": 2,
            "area": 180,
            "features": {"parking_spaces": 2},
            "is_active": True,
            "created_at": "2024-02-10T08:00:00.000Z",
        },
        {
            "id": 103,
            "title": "Local Comercial Centro",
            "description": "Local a pie de calle.",
            "price": 25000,
            "property_type": "commercial",
            "transaction_type": "rent",
            "address": "Av. Juárez 45",
            "city": "Guadalajara",
            "state": "Jalisco",
            "area": 95,
            "is_active": True,
            "property_images": [
                {"url": "https://cdn.example.com/b.jpg", "display_order": 2},
                {"url": "https://cdn.example.com/a.jpg", "display_order": 1},
            ],
        },
    ]


@pytest.fixture(scope="function")
def fake_client(property_rows) -> FakeClient:
    return FakeClient(tables={"properties": property_rows})


@pytest.fixture(scope="function")
def db_service(fake_client):
    """SupabaseService wired to the fake client and installed process-wide."""
    from propfinder.core.database import SupabaseService, set_supabase_service

    service = SupabaseService(client=fake_client)
    set_supabase_service(service)
    return service


@pytest.fixture(scope="function")
def failing_db_service():
    from propfinder.core.database import SupabaseService, set_supabase_service

    service = SupabaseService(client=FakeClient(error=ConnectionError("network down")))
    set_supabase_service(service)
    return service


@pytest.fixture(scope="function")
def app():
    from propfinder.api.server import create_app

    app = create_app({"TESTING": True})
    return app


@pytest.fixture(scope="function")
def client(app):
    return app.test_client()
