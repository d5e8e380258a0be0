"""
Document access layer for the Wispio core.

All document operations MUST:
- Resolve their path from the current session at call time
- Respect Row Level Security (RLS): owner_id = auth.uid()
- Never bypass RLS

Includes:
- Supabase client initialization
- ScopedPath, the per-principal path type
- ScopedDocumentStore, the only way feature code reads or writes documents
"""

from .client import create_supabase_client
from .paths import ScopedPath
from .store import ScopedDocumentStore

__all__ = ["ScopedDocumentStore", "ScopedPath", "create_supabase_client"]
