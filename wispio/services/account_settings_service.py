"""
Account settings service.

Handles security settings (password change) and billing lookups for the
signed-in user.
"""

import logging
from typing import Any

from wispio.errors import ServiceError, ValidationError
from wispio.services.access import DataAccess
from wispio.services.provider_errors import DEFAULT_LOCALE, provider_error_from
from wispio.utils.constants import RemoteProcedure

logger = logging.getLogger(__name__)

PASSWORD_MISMATCH_MESSAGE = "Password entries are different, please try again !"
PASSWORD_UPDATED_MESSAGE = "Mot de passe mis à jour avec succès !"


class AccountSettingsService:
    """Account settings operations for the current principal."""

    def __init__(self, access: DataAccess, locale: str = DEFAULT_LOCALE):
        self._access = access
        self._locale = locale

    async def change_password(self, password: str, password_retype: str) -> str:
        """
        Change the signed-in user's password.

        The two entries are compared locally first; on mismatch no network
        call is made.

        Args:
            password: The new password
            password_retype: The confirmation entry

        Returns:
            A localized success message

        Raises:
            ValidationError: If the entries differ
            Unauthenticated: If no session is active
            ProviderError: If the provider rejected the update with a known code
            UnmappedProviderError: For any other provider failure
        """
        if password != password_retype:
            raise ValidationError(PASSWORD_MISMATCH_MESSAGE)

        try:
            await self._access.update_password(password)
        except ServiceError:
            raise
        except Exception as e:
            self._access.log_error(e)
            # Raw provider codes stay out of the caller-visible chain
            raise provider_error_from(e, self._locale) from None

        self._access.analytics("password_updated")
        return PASSWORD_UPDATED_MESSAGE

    async def get_billing_information(self) -> Any:
        """Fetch billing information for the signed-in user."""
        return await self._access.invoke(RemoteProcedure.GET_BILLING_INFORMATIONS, {})
