"""Pydantic models for GitHub webhook payloads and REST API responses."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Base(BaseModel):
    """Shared config: silently ignore unknown fields from GitHub."""

    model_config = ConfigDict(extra="ignore")


class GitRef(_Base):
    sha: str = ""
    ref: str | None = None

    @field_validator("sha", mode="before")
    @classmethod
    def _null_sha(cls, v: object) -> object:
        return "" if v is None else v


class PullRequest(_Base):
    number: int | None = None
    base: GitRef = Field(default_factory=GitRef)
    head: GitRef = Field(default_factory=GitRef)

    @field_validator("base", "head", mode="before")
    @classmethod
    def _null_ref(cls, v: object) -> object:
        return {} if v is None else v


class PullRequestEvent(_Base):
    action: str = ""
    pull_request: PullRequest | None = None

    @field_validator("action", mode="before")
    @classmethod
    def _null_action(cls, v: object) -> object:
        return "" if v is None else v


class ComparisonFile(_Base):
    filename: str
    status: str | None = None


class Comparison(_Base):
    files: list[ComparisonFile] = Field(default_factory=list)
