"""Read-only base repository over a single MongoDB collection."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import ValidationError
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import (
    ExecutionTimeout,
    NetworkTimeout,
    PyMongoError,
    ServerSelectionTimeoutError,
)

from apiquery.core.exceptions import DecodeError, QueryCancelledError, TransportError
from apiquery.entities.base import BaseEntity, validate_object_id

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseEntity)

_TIMEOUT_ERRORS = (ExecutionTimeout, NetworkTimeout, ServerSelectionTimeoutError)


class BaseRepository(Generic[T]):
    """Base repository: query helpers that decode documents into entities."""

    def __init__(self, db: Database, collection_name: str, model_class: Type[T]):
        self.db = db
        self.collection_name = collection_name
        self.collection: Collection = db[collection_name]
        self.model_class = model_class

    @contextmanager
    def _store_errors(self) -> Iterator[None]:
        """Translate PyMongo failures into TransportError."""
        try:
            yield
        except _TIMEOUT_ERRORS as exc:
            logger.error(
                f"Query on {self.collection_name} timed out: {exc}",
                extra={"collection": self.collection_name},
            )
            raise TransportError(f"Query on {self.collection_name} timed out") from exc
        except PyMongoError as exc:
            logger.error(
                f"Query on {self.collection_name} failed: {exc}",
                extra={"collection": self.collection_name},
            )
            raise TransportError(f"Query on {self.collection_name} failed: {exc}") from exc

    def _to_model(self, doc: Dict[str, Any]) -> T:
        try:
            return self.model_class(**doc)
        except ValidationError as exc:
            doc_id = doc.get("_id")
            logger.error(
                f"Cannot decode document {doc_id} from {self.collection_name}: {exc}",
                extra={"collection": self.collection_name},
            )
            raise DecodeError(
                f"Document {doc_id} in {self.collection_name} does not match "
                f"{self.model_class.__name__}",
                collection=self.collection_name,
                document_id=doc_id,
            ) from exc

    def find_one(self, query: Dict[str, Any]) -> Optional[T]:
        with self._store_errors():
            doc = self.collection.find_one(query)
        return self._to_model(doc) if doc else None

    def find_by_id(self, entity_id: Any) -> Optional[T]:
        oid = validate_object_id(entity_id)
        if not oid:
            return None
        return self.find_one({"_id": oid})

    def find_many(
        self,
        query: Dict[str, Any],
        sort: Optional[Sequence[Tuple[str, int]]] = None,
        limit: int = 0,
        max_time_ms: int = 0,
        cancel_event: Optional[threading.Event] = None,
    ) -> List[T]:
        """
        Run a query and decode every matching document.

        The cursor is drained into a local list before anything is returned,
        so a failure part-way through never yields a partial result.

        Raises:
            TransportError: If the store fails or times out.
            DecodeError: If a document does not match the entity.
            QueryCancelledError: If cancel_event is set while reading.
        """
        items: List[T] = []
        with self._store_errors():
            cursor = self.collection.find(query)
            try:
                if sort:
                    cursor = cursor.sort(list(sort))
                if limit:
                    cursor = cursor.limit(limit)
                if max_time_ms:
                    cursor = cursor.max_time_ms(max_time_ms)

                for doc in cursor:
                    if cancel_event is not None and cancel_event.is_set():
                        raise QueryCancelledError(
                            f"Query on {self.collection_name} was cancelled"
                        )
                    items.append(self._to_model(doc))
            finally:
                cursor.close()
        return items

    def count(self, query: Dict[str, Any], max_time_ms: int = 0) -> int:
        kwargs: Dict[str, Any] = {}
        if max_time_ms:
            kwargs["maxTimeMS"] = max_time_ms
        with self._store_errors():
            return self.collection.count_documents(query, **kwargs)
