from dataclasses import dataclass
from typing import Optional, Tuple

from wispio.utils.constants import UserAccessibleCollection


@dataclass(frozen=True)
class ScopedPath:
    """
    A storage path bound to exactly one principal's namespace.

    Example:
      ScopedPath("user_documents", "uid123", "tasks", "t1")
      => user_documents/uid123/tasks/t1

    Built per call from the current session; never cache one across calls.
    """

    root: str
    principal_id: str
    collection: UserAccessibleCollection
    document_id: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.principal_id:
            raise ValueError("ScopedPath requires a principal id")
        if self.document_id is not None and not self.document_id:
            raise ValueError("ScopedPath document id must not be empty")

    @property
    def segments(self) -> Tuple[str, ...]:
        segments = (self.root, self.principal_id, UserAccessibleCollection(self.collection).value)
        if self.document_id is not None:
            segments += (self.document_id,)
        return segments

    @property
    def is_document(self) -> bool:
        return self.document_id is not None

    def __str__(self) -> str:
        return "/".join(self.segments)
