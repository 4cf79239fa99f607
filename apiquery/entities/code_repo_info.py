"""
CodeRepoInfo Entity - Source repository metadata recorded per scan build.

Documents are written by the ingestion side of the platform, one per
(task_id, build_id, repo) observation. The pair (task_id, build_id) is not
unique. This package only reads them.

Collection: t_code_repo_info (defect database)
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import BaseEntity

CODE_REPO_INFO_COLLECTION = "t_code_repo_info"


def _none_to_empty(value: Any) -> Any:
    return "" if value is None else value


class CodeRepo(BaseModel):
    """One repository checked out by a multi-repo build."""

    model_config = ConfigDict(populate_by_name=True)

    repo_id: str = ""
    url: str = ""
    revision: str = ""
    branch: str = ""
    alias_name: str = ""
    repo_type: str = Field("", alias="type")

    @field_validator(
        "repo_id", "url", "revision", "branch", "alias_name", "repo_type", mode="before"
    )
    @classmethod
    def empty_when_none(cls, value: Any) -> Any:
        return _none_to_empty(value)


class CodeRepoInfo(BaseEntity):
    """Code repository information observed during a build of a scan task."""

    class Config:
        collection = CODE_REPO_INFO_COLLECTION

    # Identifiers
    task_id: int = Field(..., description="Scan task ID")
    build_id: str = Field(..., description="Build invocation under the task")

    # Repository
    url: str = Field("", description="Repository URL")
    revision: str = Field("", description="Revision or commit scanned")
    branch: str = Field("", description="Branch name")
    repo_type: str = Field("", alias="type", description="SCM type: git, svn, ...")
    alias_name: str = ""

    repo_list: List[CodeRepo] = Field(
        default_factory=list,
        description="Per-repository entries when a build checks out several repos",
    )
    repo_white_list: List[str] = Field(default_factory=list)

    # Audit (epoch millis, as written by ingestion)
    create_date: Optional[int] = None
    created_by: Optional[str] = None
    updated_date: Optional[int] = None
    updated_by: Optional[str] = None

    @field_validator("url", "revision", "branch", "repo_type", "alias_name", mode="before")
    @classmethod
    def empty_when_none(cls, value: Any) -> Any:
        return _none_to_empty(value)

    @field_validator("repo_list", "repo_white_list", mode="before")
    @classmethod
    def empty_list_when_none(cls, value: Any) -> Any:
        return [] if value is None else value
