"""Base entity shared by every document model stored in MongoDB."""

from typing import Annotated, Any, Optional

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer


def validate_object_id(value: Any) -> Optional[ObjectId]:
    """Return an ObjectId for ObjectId/hex-string input, None otherwise."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def _coerce_object_id(value: Any) -> ObjectId:
    oid = validate_object_id(value)
    if oid is None:
        raise ValueError(f"Invalid ObjectId: {value!r}")
    return oid


PyObjectId = Annotated[
    ObjectId,
    BeforeValidator(_coerce_object_id),
    PlainSerializer(str, return_type=str, when_used="json"),
]


class BaseEntity(BaseModel):
    """Base class for MongoDB documents; maps `_id` onto `id`."""

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    id: Optional[PyObjectId] = Field(None, alias="_id")
