"""
Composition root for the Wispio core.

Builds the Supabase client once, wires every component around it and hands
the result to the caller. Nothing in the core is constructed at import time.

Usage:
    >>> from wispio.core import build_core
    >>> core = await build_core()
    >>> # ... sign in through core.client.auth (outside the core) ...
    >>> info = await core.account_settings.get_billing_information()
    >>> await core.aclose()
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from wispio.auth.claims import ClaimsResolver
from wispio.auth.session import SessionContext
from wispio.config import Settings, settings
from wispio.db.client import create_supabase_client
from wispio.db.store import ScopedDocumentStore
from wispio.rpc.bridge import RemoteProcedureBridge
from wispio.services.access import AccessMediator
from wispio.services.account_settings_service import AccountSettingsService
from wispio.services.authentication_service import AuthenticationService
from wispio.services.task_service import TaskService
from wispio.utils.telemetry import Telemetry

logger = logging.getLogger(__name__)


@dataclass
class Core:
    """Every long-lived component, sharing one Supabase client."""

    client: Any
    telemetry: Telemetry
    session: SessionContext
    store: ScopedDocumentStore
    claims: ClaimsResolver
    bridge: RemoteProcedureBridge
    access: AccessMediator
    account_settings: AccountSettingsService
    authentication: AuthenticationService
    tasks: TaskService

    async def aclose(self) -> None:
        """
        Release the client's HTTP resources. The core is unusable afterwards.

        Closes the PostgREST session (tables and rpc) and the auth client's
        HTTP session. The user is not signed out.
        """
        postgrest = getattr(self.client, "postgrest", None)
        if postgrest is not None:
            await postgrest.aclose()

        close_auth = getattr(self.client.auth, "close", None)
        if close_auth is not None:
            await close_auth()

        logger.info("Wispio core closed")


def assemble_core(
    supabase_client: Any,
    config: Optional[Settings] = None,
    telemetry: Optional[Telemetry] = None,
) -> Core:
    """
    Wire the core around an existing Supabase client.

    Args:
        supabase_client: The process-wide AsyncClient (or a test double)
        config: Settings to read the document root, locale and profile from
        telemetry: Overrides the profile-derived Telemetry

    Returns:
        A fully wired Core
    """
    config = config or settings
    telemetry = telemetry or Telemetry(production=config.is_production(), level=config.LOG_LEVEL)

    session = SessionContext(supabase_client.auth, telemetry)
    store = ScopedDocumentStore(supabase_client, session, telemetry, root=config.DOCUMENT_ROOT)
    claims = ClaimsResolver(session)
    bridge = RemoteProcedureBridge(supabase_client, telemetry)
    access = AccessMediator(session, store, claims, bridge, telemetry)

    return Core(
        client=supabase_client,
        telemetry=telemetry,
        session=session,
        store=store,
        claims=claims,
        bridge=bridge,
        access=access,
        account_settings=AccountSettingsService(access, locale=config.LOCALE),
        authentication=AuthenticationService(access),
        tasks=TaskService(access),
    )


async def build_core(config: Optional[Settings] = None) -> Core:
    """Create the Supabase client and assemble the core around it."""
    config = config or settings
    client = await create_supabase_client(config)
    core = assemble_core(client, config)
    logger.info(f"Wispio core ready (environment={config.ENVIRONMENT})")
    return core
