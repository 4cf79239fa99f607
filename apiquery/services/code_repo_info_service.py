"""
Code Repo Info Service - read access to repository metadata of task builds.

Thin layer over CodeRepoInfoRepository that maps entities to response DTOs.
Errors from the repository propagate unchanged.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

from pymongo.database import Database

from apiquery.core.tracing import TracingContext
from apiquery.dtos.code_repo_info import CodeRepoInfoResponse
from apiquery.repositories.code_repo_info import CodeRepoInfoRepository

logger = logging.getLogger(__name__)


class CodeRepoInfoService:
    """Service for querying code repository info by task and build."""

    def __init__(self, db: Database):
        self.db = db
        self.code_repo_info_repo = CodeRepoInfoRepository(db)

    def get_code_repo_info(
        self,
        task_ids: Iterable[int],
        build_ids: Iterable[str],
        cancel_event: Optional[threading.Event] = None,
    ) -> List[CodeRepoInfoResponse]:
        """Get code repo info of every (task, build) pair in the cross product of the inputs."""
        records = self.code_repo_info_repo.find_by_task_id_and_build_id(
            task_ids, build_ids, cancel_event=cancel_event
        )
        logger.info(
            f"{TracingContext.get_log_prefix()} Loaded {len(records)} code repo records"
        )
        return [CodeRepoInfoResponse.from_entity(record) for record in records]

    def get_code_repo_info_by_task(
        self,
        task_ids: Iterable[int],
        build_ids: Iterable[str],
        cancel_event: Optional[threading.Event] = None,
    ) -> Dict[int, List[CodeRepoInfoResponse]]:
        """
        Get code repo info grouped by task_id.

        Tasks without any record are absent from the result.
        """
        grouped: Dict[int, List[CodeRepoInfoResponse]] = {}
        for item in self.get_code_repo_info(task_ids, build_ids, cancel_event=cancel_event):
            grouped.setdefault(item.task_id, []).append(item)
        return grouped

    def count_code_repo_info(
        self, task_ids: Iterable[int], build_ids: Iterable[str]
    ) -> int:
        return self.code_repo_info_repo.count_by_task_id_and_build_id(task_ids, build_ids)
