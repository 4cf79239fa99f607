"""Database entity models - represents the actual structure stored in MongoDB"""

from .base import BaseEntity, PyObjectId, validate_object_id
from .code_repo_info import CODE_REPO_INFO_COLLECTION, CodeRepo, CodeRepoInfo

__all__ = [
    # Base
    "BaseEntity",
    "PyObjectId",
    "validate_object_id",
    # Defect database
    "CODE_REPO_INFO_COLLECTION",
    "CodeRepo",
    "CodeRepoInfo",
]
