"""
Supabase client factory.

CRITICAL SECURITY RULES:
1. NEVER use the service_role key in the core
2. ALWAYS use the publishable key; the signed-in user's session drives RLS
3. Build ONE client per process in the composition root and pass it down
"""

import logging
from typing import Optional

from supabase import AsyncClient, acreate_client

from wispio.config import Settings, settings

logger = logging.getLogger(__name__)


def resolve_supabase_url(config: Settings) -> str:
    """Return the local stack URL in development, the project URL otherwise."""
    if config.use_local_stack():
        return config.SUPABASE_LOCAL_URL
    return config.SUPABASE_URL


async def create_supabase_client(config: Optional[Settings] = None) -> AsyncClient:
    """
    Create the process-wide Supabase client.

    The client starts without a session. Sign-in happens outside the core;
    once it does, auth, table and rpc calls on this client run as that user.

    Args:
        config: Settings to read the URL and key from (defaults to the
                module singleton)

    Returns:
        An async Supabase client using the publishable key.
    """
    config = config or settings
    url = resolve_supabase_url(config)

    client: AsyncClient = await acreate_client(
        supabase_url=url,
        supabase_key=config.SUPABASE_PUBLISHABLE_KEY,
    )

    if config.use_local_stack():
        logger.info(f"Created Supabase client bound to the local stack at {url}")
    else:
        logger.debug("Created Supabase client with publishable key (RLS enforced)")

    return client
