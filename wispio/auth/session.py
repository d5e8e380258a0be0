"""
Session context for the signed-in user.

This module is the ONLY place a principal id is derived. Every scoping decision
downstream (document paths, claims lookups) goes through SessionContext.

Security:
    - The user id comes from the Supabase Auth session, never from caller input
    - Access tokens are handed to callers on demand and never logged
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from wispio.errors import TransportError, Unauthenticated
from wispio.utils.telemetry import Telemetry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Principal:
    """
    The authenticated identity of the current session.

    Attributes:
        id: The user's UUID (auth.uid())
        email: The user's email, when the provider exposes one
    """
    id: str
    email: Optional[str] = None
    _auth: Any = field(default=None, repr=False, compare=False)
    _telemetry: Optional[Telemetry] = field(default=None, repr=False, compare=False)

    async def fetch_token(self) -> str:
        """
        Ask the auth provider for a freshly issued access token.

        Always refreshes the session, so claims set server-side since the last
        sign-in are present on the returned token.

        Raises:
            Unauthenticated: If the session disappeared before the refresh
            TransportError: If the auth provider could not be reached
        """
        try:
            response = await self._auth.refresh_session()
        except Exception as e:
            if self._telemetry is not None:
                self._telemetry.log_error(e)
            raise TransportError(str(e)) from e

        session = getattr(response, "session", None)
        if session is None or not session.access_token:
            error = Unauthenticated()
            if self._telemetry is not None:
                self._telemetry.log_error(error)
            raise error
        return session.access_token


class SessionContext:
    """Holds and queries the current authenticated principal."""

    def __init__(self, auth: Any, telemetry: Telemetry):
        """
        Args:
            auth: The Supabase auth handle (client.auth)
            telemetry: Error sink for failed lookups
        """
        self._auth = auth
        self._telemetry = telemetry

    async def get_optional_principal(self) -> Optional[Principal]:
        """
        Return the current principal, or None when no session is active.

        Raises:
            TransportError: If the auth provider failed while reading the session
        """
        try:
            session = await self._auth.get_session()
        except Exception as e:
            self._telemetry.log_error(e)
            raise TransportError(str(e)) from e

        user = getattr(session, "user", None) if session is not None else None
        if user is None or not getattr(user, "id", None):
            return None

        return Principal(
            id=str(user.id),
            email=getattr(user, "email", None),
            _auth=self._auth,
            _telemetry=self._telemetry,
        )

    async def get_current_principal(self) -> Principal:
        """
        Return the current principal.

        Raises:
            Unauthenticated: If no session is active
        """
        principal = await self.get_optional_principal()
        if principal is None:
            error = Unauthenticated()
            self._telemetry.log_error(error)
            raise error
        return principal

    async def get_current_principal_id(self) -> str:
        """
        Return the current principal's id.

        This is the single source of truth for every scoped path.

        Raises:
            Unauthenticated: If no session is active (a log event is emitted)
        """
        principal = await self.get_current_principal()
        return principal.id

    async def is_authenticated(self) -> bool:
        return await self.get_optional_principal() is not None

    async def update_password(self, password: str) -> None:
        """
        Update the current principal's password with the identity provider.

        Provider errors are raised unchanged; domain services translate them.

        Raises:
            Unauthenticated: If no session is active
        """
        principal = await self.get_current_principal()
        logger.info(f"Updating password for user {principal.id}")
        await self._auth.update_user({"password": password})
        logger.info(f"Password updated for user {principal.id}")
