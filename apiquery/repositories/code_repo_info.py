"""Repository for CodeRepoInfo documents in the defect database."""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Iterable, List, Optional, TypeVar

from pymongo.database import Database

from apiquery.config import settings
from apiquery.core.exceptions import ConfigurationError, QueryCancelledError
from apiquery.entities.code_repo_info import CODE_REPO_INFO_COLLECTION, CodeRepoInfo
from apiquery.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

V = TypeVar("V")


def _unique(values: Iterable[V]) -> List[V]:
    """De-duplicate while keeping first-seen order."""
    return list(dict.fromkeys(values))


def _chunks(values: List[V], size: int) -> List[List[V]]:
    if size <= 0 or len(values) <= size:
        return [values]
    return [values[i : i + size] for i in range(0, len(values), size)]


class CodeRepoInfoRepository(BaseRepository[CodeRepoInfo]):
    """
    Read access to t_code_repo_info.

    Bound to the defect database handle passed in and to the
    t_code_repo_info collection; neither changes per call.
    """

    def __init__(
        self,
        db: Optional[Database],
        chunk_size: Optional[int] = None,
        max_time_ms: Optional[int] = None,
    ) -> None:
        if db is None:
            raise ConfigurationError("Defect database handle is not available")
        super().__init__(db, CODE_REPO_INFO_COLLECTION, CodeRepoInfo)
        self.chunk_size = (
            settings.CODE_REPO_QUERY_CHUNK_SIZE if chunk_size is None else chunk_size
        )
        self.max_time_ms = (
            settings.MONGODB_QUERY_TIMEOUT_MS if max_time_ms is None else max_time_ms
        )

    def _build_queries(
        self, task_ids: List[int], build_ids: List[str]
    ) -> List[Dict[str, Any]]:
        """
        Split the (task_id, build_id) filter into disjoint sub-filters.

        Each sub-filter covers one task chunk crossed with one build chunk, so
        no document can match two of them.
        """
        queries = [
            {"task_id": {"$in": task_chunk}, "build_id": {"$in": build_chunk}}
            for task_chunk in _chunks(task_ids, self.chunk_size)
            for build_chunk in _chunks(build_ids, self.chunk_size)
        ]
        if len(queries) > 1:
            logger.warning(
                f"Splitting {CODE_REPO_INFO_COLLECTION} query into {len(queries)} parts "
                f"({len(task_ids)} task ids, {len(build_ids)} build ids, "
                f"chunk size {self.chunk_size})",
                extra={"collection": CODE_REPO_INFO_COLLECTION},
            )
        return queries

    def find_by_task_id_and_build_id(
        self,
        task_ids: Iterable[int],
        build_ids: Iterable[str],
        cancel_event: Optional[threading.Event] = None,
    ) -> List[CodeRepoInfo]:
        """
        Find code repo info whose task_id is in task_ids and build_id is in build_ids.

        Args:
            task_ids: Task IDs; duplicates are ignored
            build_ids: Build IDs; duplicates are ignored
            cancel_event: Set it to abandon the query

        Returns:
            Every matching record, in the order the store yields them.
            Empty when either input is empty (the store is not contacted).

        Raises:
            TransportError, DecodeError, QueryCancelledError
        """
        task_ids = _unique(task_ids)
        build_ids = _unique(build_ids)
        if not task_ids or not build_ids:
            return []

        records: List[CodeRepoInfo] = []
        for query in self._build_queries(task_ids, build_ids):
            if cancel_event is not None and cancel_event.is_set():
                raise QueryCancelledError(
                    f"Query on {CODE_REPO_INFO_COLLECTION} was cancelled"
                )
            records.extend(
                self.find_many(
                    query, max_time_ms=self.max_time_ms, cancel_event=cancel_event
                )
            )

        logger.debug(
            f"Found {len(records)} code repo records for "
            f"{len(task_ids)} tasks / {len(build_ids)} builds"
        )
        return records

    def count_by_task_id_and_build_id(
        self, task_ids: Iterable[int], build_ids: Iterable[str]
    ) -> int:
        """Count records matching the same filter as find_by_task_id_and_build_id."""
        task_ids = _unique(task_ids)
        build_ids = _unique(build_ids)
        if not task_ids or not build_ids:
            return 0

        return sum(
            self.count(query, max_time_ms=self.max_time_ms)
            for query in self._build_queries(task_ids, build_ids)
        )
