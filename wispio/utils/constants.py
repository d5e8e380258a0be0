"""
Closed name spaces shared by the core.

Collections, remote procedures and claims are enumerated here so that a
misspelled or unlisted name is caught by the type checker (and by enum
coercion at runtime) before any network call is attempted.
"""

from enum import Enum


class UserAccessibleCollection(str, Enum):
    """Logical collections a user may read and write inside their namespace."""

    TASKS = "tasks"


class RemoteProcedure(str, Enum):
    """Allow-list of remote procedures callable through the RPC bridge."""

    GET_BILLING_INFORMATIONS = "get_billing_informations"


class UserAccessibleClaim(str, Enum):
    """Claims the client is allowed to read from its session token."""

    EMAIL_VERIFIED = "email_verified"
    CURRENT_PLAN = "current_plan"
    BILLING_ACTIVE = "billing_active"


# Returned as ordinary response data by a remote procedure that failed server-side
INTERNAL_ERROR_SENTINEL = "internal-error"

# Postgres resolves the literal 'now' to the transaction timestamp, server-side
SERVER_TIMESTAMP = "now"

# Supabase puts provider-managed claims under this key of the JWT payload
APP_METADATA_CLAIM = "app_metadata"
