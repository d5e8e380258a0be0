"""
Translation of identity-provider error codes into user-facing messages.

translate_provider_error is total: every (code, locale) pair yields a message.
Codes missing from the table resolve to the locale's fallback text, and the
raw provider code is never part of the result.

Codes are Supabase Auth error codes (AuthApiError.code).
"""

import logging
from typing import Dict, Optional

from wispio.errors import ProviderError, ServiceError, UnmappedProviderError

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "fr"

PROVIDER_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "fr": {
        "same_password": "Le nouveau mot de passe doit être différent de l'ancien.",
        "weak_password": "Le mot de passe est trop faible, veuillez en choisir un plus robuste.",
        "reauthentication_needed": "Veuillez vous reconnecter avant de modifier votre mot de passe.",
        "session_not_found": "Votre session a expiré, veuillez vous reconnecter.",
        "session_expired": "Votre session a expiré, veuillez vous reconnecter.",
        "bad_jwt": "Votre session est invalide, veuillez vous reconnecter.",
        "no_authorization": "Vous devez être connecté pour effectuer cette action.",
        "user_not_found": "Aucun compte ne correspond à cet utilisateur.",
        "user_banned": "Ce compte a été suspendu.",
        "over_request_rate_limit": "Trop de tentatives, veuillez réessayer plus tard.",
        "validation_failed": "Les informations saisies sont invalides.",
    },
    "en": {
        "same_password": "The new password must be different from the current one.",
        "weak_password": "The password is too weak, please choose a stronger one.",
        "reauthentication_needed": "Please sign in again before changing your password.",
        "session_not_found": "Your session has expired, please sign in again.",
        "session_expired": "Your session has expired, please sign in again.",
        "bad_jwt": "Your session is invalid, please sign in again.",
        "no_authorization": "You must be signed in to do this.",
        "user_not_found": "No account matches this user.",
        "user_banned": "This account has been suspended.",
        "over_request_rate_limit": "Too many attempts, please try again later.",
        "validation_failed": "The submitted information is invalid.",
    },
}

FALLBACK_MESSAGES: Dict[str, str] = {
    "fr": "Une erreur inattendue est survenue, veuillez réessayer.",
    "en": "An unexpected error occurred, please try again.",
}


def _messages_for(locale: str) -> Dict[str, str]:
    return PROVIDER_ERROR_MESSAGES.get(locale) or PROVIDER_ERROR_MESSAGES[DEFAULT_LOCALE]


def fallback_message(locale: str = DEFAULT_LOCALE) -> str:
    return FALLBACK_MESSAGES.get(locale) or FALLBACK_MESSAGES[DEFAULT_LOCALE]


def is_mapped(code: Optional[str], locale: str = DEFAULT_LOCALE) -> bool:
    return bool(code) and code in _messages_for(locale)


def translate_provider_error(code: Optional[str], locale: str = DEFAULT_LOCALE) -> str:
    """
    Map a provider error code to a localized message.

    Args:
        code: Provider error code, or None when the error carried none
        locale: Message language; unknown locales use DEFAULT_LOCALE

    Returns:
        The localized message, or the fallback message for unmapped codes
    """
    if is_mapped(code, locale):
        return _messages_for(locale)[code]
    return fallback_message(locale)


def provider_error_from(error: BaseException, locale: str = DEFAULT_LOCALE) -> ServiceError:
    """
    Normalize a provider exception.

    Returns:
        ProviderError for mapped codes, UnmappedProviderError otherwise
    """
    code = getattr(error, "code", None)
    code = str(code) if code else None

    if is_mapped(code, locale):
        return ProviderError(translate_provider_error(code, locale))

    logger.warning(f"Unmapped provider error ({type(error).__name__}), using fallback message")
    return UnmappedProviderError(fallback_message(locale))
