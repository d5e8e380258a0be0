"""
Session and claims for the signed-in user.

SessionContext is the only source of the principal id; ClaimsResolver reads
claims from a fresh token through it.
"""

from .claims import ClaimsResolver
from .session import Principal, SessionContext

__all__ = ["ClaimsResolver", "Principal", "SessionContext"]
