"""
Bridge to the allow-listed remote procedures (Supabase RPC).

The transport result is turned into a tagged Ok/Err value here, once. The
in-band INTERNAL_ERROR_SENTINEL is detected at this boundary, so no caller
ever receives it as if it were data.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar, Union

from wispio.errors import ErrorKind, RemoteInternalError, ServiceError, error_for
from wispio.utils.constants import INTERNAL_ERROR_SENTINEL, RemoteProcedure
from wispio.utils.telemetry import Telemetry

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    def to_error(self) -> ServiceError:
        return error_for(self.kind, self.message)


RemoteResult = Union[Ok[T], Err]


class RemoteProcedureBridge:
    """Invokes named remote procedures and normalizes their results."""

    def __init__(self, supabase_client: Any, telemetry: Telemetry):
        self._client = supabase_client
        self._telemetry = telemetry

    async def call(
        self,
        procedure: RemoteProcedure,
        payload: Optional[Dict[str, Any]] = None,
    ) -> RemoteResult[Any]:
        """
        Invoke `procedure` and return a tagged result.

        Args:
            procedure: A member of the RemoteProcedure allow-list
            payload: JSON-like parameters (defaults to {})

        Returns:
            Ok(data) on success, Err(kind, message) on transport failure or
            when the server answered with the internal-error sentinel

        Raises:
            ValueError: If `procedure` is not on the allow-list (before any
                        network call)
        """
        name = RemoteProcedure(procedure).value
        logger.debug(f"Invoking remote procedure '{name}'")

        try:
            response = await self._client.rpc(name, payload or {}).execute()
        except Exception as e:
            logger.error(f"Remote procedure '{name}' transport failure: {e}")
            return Err(ErrorKind.TRANSPORT, str(e))

        data = getattr(response, "data", None)
        if isinstance(data, str) and data == INTERNAL_ERROR_SENTINEL:
            logger.warning(f"Remote procedure '{name}' reported an internal error")
            return Err(ErrorKind.REMOTE_INTERNAL, RemoteInternalError.default_message)

        return Ok(data)

    async def invoke(
        self,
        procedure: RemoteProcedure,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Invoke `procedure` and return its data.

        Raises:
            TransportError: If the call itself failed
            RemoteInternalError: If the server reported an internal error
        """
        result = await self.call(procedure, payload)

        if isinstance(result, Err):
            error = result.to_error()
            self._telemetry.log_error(error)
            raise error

        return result.value
