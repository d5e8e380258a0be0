"""
Tests for SessionContext.

Tests cover:
- Principal lookup with and without an active session
- Unauthenticated log events
- Auth provider failures normalized to TransportError
- Password update delegation
"""

import logging

import pytest

from wispio.auth.session import Principal, SessionContext
from wispio.errors import ErrorKind, TransportError, Unauthenticated


@pytest.fixture
def session(fake_supabase, telemetry):
    return SessionContext(fake_supabase.auth, telemetry)


class TestCurrentPrincipal:
    """Tests for get_current_principal / get_current_principal_id."""

    @pytest.mark.asyncio
    async def test_returns_principal_of_active_session(self, fake_supabase, session):
        fake_supabase.auth.sign_in("u1", email="u1@example.com")

        principal = await session.get_current_principal()

        assert isinstance(principal, Principal)
        assert principal.id == "u1"
        assert principal.email == "u1@example.com"
        assert await session.get_current_principal_id() == "u1"

    @pytest.mark.asyncio
    async def test_no_session_raises_unauthenticated(self, session):
        with pytest.raises(Unauthenticated) as exc_info:
            await session.get_current_principal_id()

        assert exc_info.value.kind == ErrorKind.UNAUTHENTICATED
        assert exc_info.value.details == "User is not logged in!"

    @pytest.mark.asyncio
    async def test_no_session_emits_log_event(self, session, caplog):
        with caplog.at_level(logging.ERROR, logger="wispio.telemetry"):
            with pytest.raises(Unauthenticated):
                await session.get_current_principal_id()

        assert any("User is not logged in!" in record.getMessage() for record in caplog.records)

    @pytest.mark.asyncio
    async def test_id_follows_session_changes(self, fake_supabase, session):
        fake_supabase.auth.sign_in("u1")
        assert await session.get_current_principal_id() == "u1"

        fake_supabase.auth.sign_in("u2")
        assert await session.get_current_principal_id() == "u2"

        fake_supabase.auth.sign_out()
        with pytest.raises(Unauthenticated):
            await session.get_current_principal_id()

    @pytest.mark.asyncio
    async def test_optional_principal_is_none_without_session(self, session):
        assert await session.get_optional_principal() is None
        assert await session.is_authenticated() is False

    @pytest.mark.asyncio
    async def test_provider_failure_becomes_transport_error(self, fake_supabase, session):
        fake_supabase.auth.session_error = RuntimeError("connection reset")

        with pytest.raises(TransportError) as exc_info:
            await session.get_current_principal()

        assert exc_info.value.details == "connection reset"


class TestPrincipalToken:
    @pytest.mark.asyncio
    async def test_fetch_token_refreshes_every_time(self, fake_supabase, session):
        fake_supabase.auth.sign_in("u1")
        principal = await session.get_current_principal()

        await principal.fetch_token()
        await principal.fetch_token()

        assert fake_supabase.auth.refresh_count == 2

    @pytest.mark.asyncio
    async def test_refresh_failure_is_logged_and_normalized(self, fake_supabase, session, caplog):
        fake_supabase.auth.sign_in("u1")
        principal = await session.get_current_principal()
        fake_supabase.auth.refresh_error = RuntimeError("refresh token revoked")

        with caplog.at_level(logging.ERROR, logger="wispio.telemetry"):
            with pytest.raises(TransportError) as exc_info:
                await principal.fetch_token()

        assert exc_info.value.details == "refresh token revoked"
        assert any("refresh token revoked" in record.getMessage() for record in caplog.records)

    @pytest.mark.asyncio
    async def test_principal_repr_hides_auth_handle(self, fake_supabase, session):
        fake_supabase.auth.sign_in("u1")
        principal = await session.get_current_principal()

        assert "_auth" not in repr(principal)


class TestUpdatePassword:
    @pytest.mark.asyncio
    async def test_delegates_to_provider(self, fake_supabase, session):
        fake_supabase.auth.sign_in("u1")

        await session.update_password("n3w-p4ss")

        assert fake_supabase.auth.update_calls == [{"password": "n3w-p4ss"}]

    @pytest.mark.asyncio
    async def test_requires_session(self, fake_supabase, session):
        with pytest.raises(Unauthenticated):
            await session.update_password("n3w-p4ss")

        assert fake_supabase.auth.update_calls == []
