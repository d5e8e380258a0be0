"""
Pydantic schemas for values returned by the core.
"""

from .documents import DocumentRecord

__all__ = ["DocumentRecord"]
