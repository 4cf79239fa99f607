"""Repository layer for database operations"""

from .base import BaseRepository
from .code_repo_info import CodeRepoInfoRepository

__all__ = [
    "BaseRepository",
    "CodeRepoInfoRepository",
]
