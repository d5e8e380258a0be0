"""
Remote procedure calls for the Wispio core.

Only procedures listed in RemoteProcedure can be invoked.
"""

from .bridge import Err, Ok, RemoteProcedureBridge, RemoteResult

__all__ = ["Err", "Ok", "RemoteProcedureBridge", "RemoteResult"]
