"""
Wispio core: user-scoped access to Supabase documents, remote procedures and
session claims.
"""

__version__ = "0.1.0"
