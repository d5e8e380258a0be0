"""
Service layer for the Wispio core.

Domain services compose the access-mediation primitives:
- Validate input locally before any network call
- Read and write documents through the scoped store (never raw tables)
- Call allow-listed remote procedures through the RPC bridge
- Translate provider errors into user-facing messages

Services receive one shared AccessMediator from the composition root.
"""

from .access import AccessMediator, DataAccess
from .account_settings_service import AccountSettingsService
from .authentication_service import AuthenticationService, PostLoginStep
from .provider_errors import provider_error_from, translate_provider_error
from .task_service import TaskService

__all__ = [
    "AccessMediator",
    "AccountSettingsService",
    "AuthenticationService",
    "DataAccess",
    "PostLoginStep",
    "TaskService",
    "provider_error_from",
    "translate_provider_error",
]
