"""
The access-mediation capability handed to every domain service.

Domain services hold an AccessMediator by reference instead of inheriting
from a shared base. The composition root builds one and injects it everywhere.
"""

from typing import Any, Dict, List, Optional, Protocol, Union

from wispio.auth.claims import ClaimsResolver
from wispio.auth.session import Principal, SessionContext
from wispio.db.store import ScopedDocumentStore
from wispio.rpc.bridge import RemoteProcedureBridge
from wispio.schemas.documents import DocumentRecord
from wispio.utils.constants import RemoteProcedure, UserAccessibleClaim, UserAccessibleCollection
from wispio.utils.telemetry import Telemetry


class DataAccess(Protocol):
    """What a domain service may do against the backend."""

    async def current_principal(self) -> Principal: ...

    async def read_document(self, collection: UserAccessibleCollection, document_id: str) -> DocumentRecord: ...

    async def read_all_documents(self, collection: UserAccessibleCollection) -> List[DocumentRecord]: ...

    async def write_document(
        self, collection: UserAccessibleCollection, document_id: str, data: Dict[str, Any]
    ) -> DocumentRecord: ...

    async def touch_timestamp(
        self, document_id: str, collection: UserAccessibleCollection = UserAccessibleCollection.TASKS
    ) -> None: ...

    async def invoke(self, procedure: RemoteProcedure, payload: Optional[Dict[str, Any]] = None) -> Any: ...

    async def get_claim(self, claim: UserAccessibleClaim) -> Optional[Any]: ...

    async def update_password(self, password: str) -> None: ...

    def log_error(self, error: Union[BaseException, str]) -> None: ...

    def analytics(self, event: str, payload: Optional[Dict[str, Any]] = None) -> None: ...


class AccessMediator:
    """Delegates the DataAccess capability to the core components."""

    def __init__(
        self,
        session: SessionContext,
        store: ScopedDocumentStore,
        claims: ClaimsResolver,
        bridge: RemoteProcedureBridge,
        telemetry: Telemetry,
    ):
        self._session = session
        self._store = store
        self._claims = claims
        self._bridge = bridge
        self._telemetry = telemetry

    async def current_principal(self) -> Principal:
        return await self._session.get_current_principal()

    async def read_document(self, collection: UserAccessibleCollection, document_id: str) -> DocumentRecord:
        return await self._store.read_document(collection, document_id)

    async def read_all_documents(self, collection: UserAccessibleCollection) -> List[DocumentRecord]:
        return await self._store.read_all_documents(collection)

    async def write_document(
        self, collection: UserAccessibleCollection, document_id: str, data: Dict[str, Any]
    ) -> DocumentRecord:
        return await self._store.write_document(collection, document_id, data)

    async def touch_timestamp(
        self, document_id: str, collection: UserAccessibleCollection = UserAccessibleCollection.TASKS
    ) -> None:
        await self._store.touch_timestamp(document_id, collection)

    async def invoke(self, procedure: RemoteProcedure, payload: Optional[Dict[str, Any]] = None) -> Any:
        return await self._bridge.invoke(procedure, payload)

    async def get_claim(self, claim: UserAccessibleClaim) -> Optional[Any]:
        return await self._claims.get_claim(claim)

    async def update_password(self, password: str) -> None:
        await self._session.update_password(password)

    def log_error(self, error: Union[BaseException, str]) -> None:
        self._telemetry.log_error(error)

    def analytics(self, event: str, payload: Optional[Dict[str, Any]] = None) -> None:
        self._telemetry.analytics(event, payload)
