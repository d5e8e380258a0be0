"""
User-scoped document store on top of Supabase.

Every document lives in one table (settings.DOCUMENT_ROOT) keyed by
(owner_id, collection, id). A ScopedPath maps onto that key:

    root / principal_id / collection / document_id
    table  owner_id       collection   id

CRITICAL SECURITY RULES:
1. The owner segment ALWAYS comes from SessionContext at call time
2. Paths are never pre-computed or reused across calls
3. RLS on the table enforces owner_id = auth.uid(); the owner_id filter here
   keeps the client's view consistent with that policy
4. An empty result is reported as NotFoundOrUnauthorized, whether the row is
   missing or owned by someone else
"""

import logging
from typing import Any, Dict, List, cast

from wispio.auth.session import SessionContext
from wispio.db.paths import ScopedPath
from wispio.errors import NotFoundOrUnauthorized, TransportError
from wispio.schemas.documents import DocumentRecord
from wispio.utils.constants import SERVER_TIMESTAMP, UserAccessibleCollection
from wispio.utils.telemetry import Telemetry

logger = logging.getLogger(__name__)

OWNER_COLUMN = "owner_id"
COLLECTION_COLUMN = "collection"
ID_COLUMN = "id"
DATA_COLUMN = "data"
LAST_UPDATE_COLUMN = "last_update"


class ScopedDocumentStore:
    """Reads and writes documents inside the current principal's namespace."""

    def __init__(
        self,
        supabase_client: Any,
        session: SessionContext,
        telemetry: Telemetry,
        root: str = "user_documents",
    ):
        """
        Args:
            supabase_client: Authenticated Supabase AsyncClient
            session: Source of the current principal id
            telemetry: Error sink for store failures
            root: Table holding user documents
        """
        self._client = supabase_client
        self._session = session
        self._telemetry = telemetry
        self._root = root

    async def resolve_document_path(
        self,
        collection: UserAccessibleCollection,
        document_id: str,
    ) -> ScopedPath:
        """
        Build the path of a document in the current principal's namespace.

        Raises:
            Unauthenticated: If no session is active
        """
        principal_id = await self._session.get_current_principal_id()
        return ScopedPath(
            root=self._root,
            principal_id=principal_id,
            collection=UserAccessibleCollection(collection),
            document_id=document_id,
        )

    async def resolve_collection_path(self, collection: UserAccessibleCollection) -> ScopedPath:
        """
        Build the path of a collection in the current principal's namespace.

        Raises:
            Unauthenticated: If no session is active
        """
        principal_id = await self._session.get_current_principal_id()
        return ScopedPath(
            root=self._root,
            principal_id=principal_id,
            collection=UserAccessibleCollection(collection),
        )

    def _scoped(self, query: Any, path: ScopedPath) -> Any:
        query = query.eq(OWNER_COLUMN, path.principal_id).eq(COLLECTION_COLUMN, path.collection.value)
        if path.document_id is not None:
            query = query.eq(ID_COLUMN, path.document_id)
        return query

    def _transport_error(self, error: Exception, path: ScopedPath) -> TransportError:
        logger.error(f"Document store call failed for {path}: {error}")
        self._telemetry.log_error(error)
        return TransportError(str(error))

    async def read_document(
        self,
        collection: UserAccessibleCollection,
        document_id: str,
    ) -> DocumentRecord:
        """
        Read one document from the caller's namespace.

        Returns:
            An immutable snapshot of the document

        Raises:
            Unauthenticated: If no session is active (no store call is made)
            NotFoundOrUnauthorized: If the store returns no row
            TransportError: If the store call fails
        """
        path = await self.resolve_document_path(collection, document_id)
        logger.debug(f"Reading document {path}")

        try:
            result = await (
                self._scoped(self._client.table(path.root).select(f"{ID_COLUMN}, {DATA_COLUMN}"), path)
                .limit(1)
                .execute()
            )
        except Exception as e:
            raise self._transport_error(e, path) from e

        if not result.data or len(result.data) == 0:
            error = NotFoundOrUnauthorized()
            logger.warning(f"Document {path} not found or not accessible")
            self._telemetry.log_error(error)
            raise error

        row: Dict[str, Any] = cast(Dict[str, Any], result.data[0])
        return DocumentRecord(id=str(row[ID_COLUMN]), data=row.get(DATA_COLUMN) or {})

    async def read_all_documents(self, collection: UserAccessibleCollection) -> List[DocumentRecord]:
        """
        Read every document of a collection in the caller's namespace.

        Ordering is not guaranteed and may differ between calls.

        Raises:
            Unauthenticated: If no session is active
            TransportError: If the store call fails
        """
        path = await self.resolve_collection_path(collection)
        logger.debug(f"Reading all documents of {path}")

        try:
            result = await self._scoped(
                self._client.table(path.root).select(f"{ID_COLUMN}, {DATA_COLUMN}"), path
            ).execute()
        except Exception as e:
            raise self._transport_error(e, path) from e

        rows: List[Dict[str, Any]] = cast(List[Dict[str, Any]], result.data or [])
        logger.info(f"Found {len(rows)} documents in {path}")
        return [DocumentRecord(id=str(row[ID_COLUMN]), data=row.get(DATA_COLUMN) or {}) for row in rows]

    async def write_document(
        self,
        collection: UserAccessibleCollection,
        document_id: str,
        data: Dict[str, Any],
    ) -> DocumentRecord:
        """
        Create or replace a document in the caller's namespace.

        Also sets last_update to the server's current time.

        Raises:
            Unauthenticated: If no session is active
            TransportError: If the store rejects the write
        """
        path = await self.resolve_document_path(collection, document_id)
        row = {
            OWNER_COLUMN: path.principal_id,
            COLLECTION_COLUMN: path.collection.value,
            ID_COLUMN: path.document_id,
            DATA_COLUMN: dict(data),
            LAST_UPDATE_COLUMN: SERVER_TIMESTAMP,
        }

        logger.info(f"Writing document {path}")
        try:
            await self._client.table(path.root).upsert(row).execute()
        except Exception as e:
            raise self._transport_error(e, path) from e

        return DocumentRecord(id=document_id, data=dict(data))

    async def touch_timestamp(
        self,
        document_id: str,
        collection: UserAccessibleCollection = UserAccessibleCollection.TASKS,
    ) -> None:
        """
        Best-effort update of last_update to the server's current time.

        Store failures are logged and swallowed. A missing session still
        raises Unauthenticated, like every other scoped operation.
        """
        path = await self.resolve_document_path(collection, document_id)

        try:
            await self._scoped(
                self._client.table(path.root).update({LAST_UPDATE_COLUMN: SERVER_TIMESTAMP}),
                path,
            ).execute()
        except Exception as e:
            # Non-critical: the document itself is unchanged
            logger.warning(f"Failed to touch last_update for {path}: {e}")
            self._telemetry.log_error(e)
            return

        logger.debug(f"Touched last_update for {path}")
