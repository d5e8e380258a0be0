"""
Configuration module for the Wispio core.

Loads environment variables and validates required settings.
"""
import logging
import os

from dotenv import load_dotenv

# Load .env file
load_dotenv()

logger = logging.getLogger(__name__)


class Settings:
    """Core settings loaded from environment variables."""

    # Supabase Configuration
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    # Publishable key only: every call runs under the signed-in user's RLS
    SUPABASE_PUBLISHABLE_KEY: str = os.getenv("SUPABASE_PUBLISHABLE_KEY", "")

    # Local Supabase stack (supabase start)
    SUPABASE_LOCAL_URL: str = os.getenv("SUPABASE_LOCAL_URL", "http://localhost:54321")
    USE_LOCAL_STACK: str = os.getenv("USE_LOCAL_STACK", "")

    # Table holding every user-scoped document: (owner_id, collection, id) -> data
    DOCUMENT_ROOT: str = os.getenv("DOCUMENT_ROOT", "user_documents")

    # Language used for user-facing provider error messages
    LOCALE: str = os.getenv("LOCALE", "fr")

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ValueError: If any required setting is missing.
        """
        required_settings = {
            "SUPABASE_URL": cls.SUPABASE_URL,
            "SUPABASE_PUBLISHABLE_KEY": cls.SUPABASE_PUBLISHABLE_KEY,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"

    @classmethod
    def use_local_stack(cls) -> bool:
        """
        Whether clients should target the local Supabase stack.

        Defaults to True in development unless USE_LOCAL_STACK says otherwise.
        """
        if cls.USE_LOCAL_STACK:
            return cls.USE_LOCAL_STACK.lower() == "true"
        return cls.is_development()


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash
        if settings.is_development():
            logger.warning(f"{e} The core may not work correctly until you configure your .env file.")
        else:
            raise
