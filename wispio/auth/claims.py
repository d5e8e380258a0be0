"""
Authorization claims read from the session's access token.

Claims are fetched from a freshly issued token on every call; nothing is cached.
That costs one auth round trip per query and guarantees the value matches what
the server currently holds. A cache would need invalidation on every session
change.

The token signature is not verified here: on the client the claims are only
advisory, and the server re-checks them under RLS.
"""

import logging
from typing import Any, Dict, Optional

import jwt

from wispio.auth.session import SessionContext
from wispio.utils.constants import APP_METADATA_CLAIM, UserAccessibleClaim

logger = logging.getLogger(__name__)


def decode_claims(token: str) -> Dict[str, Any]:
    """Decode a JWT payload without verifying its signature or expiry."""
    return jwt.decode(token, options={"verify_signature": False})


class ClaimsResolver:
    """Resolves named claims for the current principal."""

    def __init__(self, session: SessionContext):
        self._session = session

    async def get_claim(self, claim: UserAccessibleClaim) -> Optional[Any]:
        """
        Return the value of `claim` on a freshly issued token.

        Returns:
            The claim value, or None if no principal is signed in or the claim
            is unset. Top-level claims win over `app_metadata` ones.
        """
        principal = await self._session.get_optional_principal()
        if principal is None:
            return None

        name = UserAccessibleClaim(claim).value
        token = await principal.fetch_token()
        claims = decode_claims(token)

        if name in claims:
            return claims[name]

        app_metadata = claims.get(APP_METADATA_CLAIM)
        value = app_metadata.get(name) if isinstance(app_metadata, dict) else None
        if value is None:
            logger.debug(f"Claim '{name}' is not set for user {principal.id}")
        return value
