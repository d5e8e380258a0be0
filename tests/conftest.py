"""
Pytest configuration for Wispio core tests.

Sets up test environment and global fixtures.
"""
import os
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Tuple

import jwt
import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_PUBLISHABLE_KEY", "test-publishable-key")
os.environ.setdefault("DOCUMENT_ROOT", "user_documents")
os.environ.setdefault("LOCALE", "fr")

from wispio.core import Core, assemble_core  # noqa: E402
from wispio.utils.telemetry import Telemetry  # noqa: E402

TEST_JWT_SECRET = "test-secret-key-long-enough-for-hs256-signing"

DOCUMENT_KEY = ("owner_id", "collection", "id")


class FakeQuery:
    """Chainable stand-in for a PostgREST request builder."""

    def __init__(self, backend: "FakeSupabase", table: str):
        self._backend = backend
        self._table = table
        self._operation = "select"
        self._columns = "*"
        self._values: Optional[Dict[str, Any]] = None
        self._filters: List[Tuple[str, Any]] = []
        self._limit: Optional[int] = None

    def select(self, columns: str = "*") -> "FakeQuery":
        self._operation = "select"
        self._columns = columns
        return self

    def upsert(self, values: Dict[str, Any]) -> "FakeQuery":
        self._operation = "upsert"
        self._values = dict(values)
        return self

    def update(self, values: Dict[str, Any]) -> "FakeQuery":
        self._operation = "update"
        self._values = dict(values)
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append((column, value))
        return self

    def limit(self, count: int) -> "FakeQuery":
        self._limit = count
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        return all(row.get(column) == value for column, value in self._filters)

    async def execute(self) -> SimpleNamespace:
        self._backend.calls.append(
            {"table": self._table, "operation": self._operation, "filters": list(self._filters), "values": self._values}
        )
        failure = self._backend.failures.get(self._operation)
        if failure is not None:
            raise failure

        rows = self._backend.tables.setdefault(self._table, [])

        if self._operation == "upsert":
            key = tuple(self._values.get(column) for column in DOCUMENT_KEY)
            rows[:] = [row for row in rows if tuple(row.get(column) for column in DOCUMENT_KEY) != key]
            rows.append(dict(self._values))
            return SimpleNamespace(data=[dict(self._values)])

        matched = [row for row in rows if self._matches(row)]

        if self._operation == "update":
            for row in matched:
                row.update(self._values)
            return SimpleNamespace(data=[dict(row) for row in matched])

        if self._limit is not None:
            matched = matched[: self._limit]
        if self._columns.strip() == "*":
            return SimpleNamespace(data=[dict(row) for row in matched])
        columns = [column.strip() for column in self._columns.split(",")]
        return SimpleNamespace(data=[{column: row.get(column) for column in columns} for row in matched])


class FakeRpc:
    def __init__(self, backend: "FakeSupabase", name: str, params: Dict[str, Any]):
        self._backend = backend
        self._name = name
        self._params = params

    async def execute(self) -> SimpleNamespace:
        self._backend.calls.append({"rpc": self._name, "params": self._params})
        failure = self._backend.failures.get("rpc")
        if failure is not None:
            raise failure
        return SimpleNamespace(data=self._backend.rpc_results.get(self._name))


class FakeAuth:
    """Supabase auth double: one optional signed-in user with token claims."""

    def __init__(self):
        self.user: Optional[SimpleNamespace] = None
        self.claims: Dict[str, Any] = {}
        self.calls: List[str] = []
        self.update_calls: List[Dict[str, Any]] = []
        self.update_error: Optional[Exception] = None
        self.session_error: Optional[Exception] = None
        self.refresh_error: Optional[Exception] = None

    def sign_in(self, user_id: str, email: Optional[str] = None, **claims: Any) -> None:
        self.user = SimpleNamespace(id=user_id, email=email)
        self.claims = dict(claims)

    def sign_out(self) -> None:
        self.user = None
        self.claims = {}

    def _session(self) -> SimpleNamespace:
        payload = {"sub": self.user.id, "role": "authenticated", **self.claims}
        token = jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")
        return SimpleNamespace(user=self.user, access_token=token)

    @property
    def refresh_count(self) -> int:
        return self.calls.count("refresh_session")

    async def get_session(self) -> Optional[SimpleNamespace]:
        self.calls.append("get_session")
        if self.session_error is not None:
            raise self.session_error
        if self.user is None:
            return None
        return self._session()

    async def refresh_session(self) -> SimpleNamespace:
        self.calls.append("refresh_session")
        if self.refresh_error is not None:
            raise self.refresh_error
        if self.user is None:
            raise RuntimeError("Auth session missing!")
        session = self._session()
        return SimpleNamespace(session=session, user=self.user)

    async def update_user(self, attributes: Dict[str, Any]) -> SimpleNamespace:
        self.calls.append("update_user")
        self.update_calls.append(attributes)
        if self.update_error is not None:
            raise self.update_error
        return SimpleNamespace(user=self.user)


class FakeSupabase:
    """In-memory Supabase AsyncClient double (tables, rpc, auth)."""

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.rpc_results: Dict[str, Any] = {}
        self.failures: Dict[str, Exception] = {}
        self.calls: List[Dict[str, Any]] = []
        self.auth = FakeAuth()

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def rpc(self, name: str, params: Dict[str, Any]) -> FakeRpc:
        return FakeRpc(self, name, params)

    def seed(self, owner_id: str, collection: str, document_id: str, data: Dict[str, Any]) -> None:
        self.tables.setdefault("user_documents", []).append(
            {"owner_id": owner_id, "collection": collection, "id": document_id, "data": dict(data), "last_update": None}
        )


class ProviderAuthError(Exception):
    """Mimics Supabase's AuthApiError: a message plus a provider error code."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


@pytest.fixture
def fake_supabase() -> FakeSupabase:
    """In-memory Supabase client with nobody signed in."""
    return FakeSupabase()


@pytest.fixture
def provider_auth_error():
    """Factory for provider exceptions carrying an error code."""
    return ProviderAuthError


@pytest.fixture
def telemetry() -> Telemetry:
    """Production-profile telemetry so error log events are recorded."""
    return Telemetry(production=True)


@pytest.fixture
def core(fake_supabase: FakeSupabase, telemetry: Telemetry) -> Core:
    """Fully wired core around the fake client."""
    return assemble_core(fake_supabase, telemetry=telemetry)
