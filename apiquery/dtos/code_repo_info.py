"""DTOs for code repository info returned to the service layer."""

from typing import List, Optional

from pydantic import BaseModel, Field

from apiquery.entities.code_repo_info import CodeRepo, CodeRepoInfo


class CodeRepoResponse(BaseModel):
    """One repository of a multi-repo build."""

    repo_id: str = ""
    url: str = ""
    revision: str = ""
    branch: str = ""
    alias_name: str = ""
    type: str = ""

    @classmethod
    def from_entity(cls, repo: CodeRepo) -> "CodeRepoResponse":
        return cls(
            repo_id=repo.repo_id,
            url=repo.url,
            revision=repo.revision,
            branch=repo.branch,
            alias_name=repo.alias_name,
            type=repo.repo_type,
        )


class CodeRepoInfoResponse(BaseModel):
    """Code repository info of one task build."""

    id: Optional[str] = Field(None, alias="_id")
    task_id: int
    build_id: str
    url: str = ""
    revision: str = ""
    branch: str = ""
    type: str = ""
    alias_name: str = ""
    repo_list: List[CodeRepoResponse] = []
    repo_white_list: List[str] = []
    create_date: Optional[int] = None
    updated_date: Optional[int] = None

    class Config:
        populate_by_name = True

    @classmethod
    def from_entity(cls, info: CodeRepoInfo) -> "CodeRepoInfoResponse":
        return cls(
            id=str(info.id) if info.id else None,
            task_id=info.task_id,
            build_id=info.build_id,
            url=info.url,
            revision=info.revision,
            branch=info.branch,
            type=info.repo_type,
            alias_name=info.alias_name,
            repo_list=[CodeRepoResponse.from_entity(repo) for repo in info.repo_list],
            repo_white_list=list(info.repo_white_list),
            create_date=info.create_date,
            updated_date=info.updated_date,
        )
