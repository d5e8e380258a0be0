"""
Task service.

Tasks are documents of the `tasks` collection in the signed-in user's
namespace. Saving a task also stamps its last_update with server time.
"""

import logging
from typing import Any, Dict, List

from wispio.schemas.documents import DocumentRecord
from wispio.services.access import DataAccess
from wispio.utils.constants import UserAccessibleCollection

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, access: DataAccess):
        self._access = access

    async def list_tasks(self) -> List[DocumentRecord]:
        """All tasks of the signed-in user, in no particular order."""
        return await self._access.read_all_documents(UserAccessibleCollection.TASKS)

    async def get_task(self, task_id: str) -> DocumentRecord:
        return await self._access.read_document(UserAccessibleCollection.TASKS, task_id)

    async def save_task(self, task_id: str, data: Dict[str, Any]) -> DocumentRecord:
        """
        Create or replace a task, then refresh its last_update.

        The timestamp refresh is best effort and never fails the save.
        """
        record = await self._access.write_document(UserAccessibleCollection.TASKS, task_id, data)
        await self._access.touch_timestamp(task_id, UserAccessibleCollection.TASKS)
        logger.info(f"Task {task_id} saved")
        return record
