from pydantic import BaseModel, ConfigDict, Field, field_validator


class Check(BaseModel):
    """One declared CI job and the path globs that make it relevant.

    Unknown keys in the declaration are ignored; a missing or null ``paths``
    reads as no paths.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    job: str = ""
    paths: list[str] = Field(default_factory=list)

    @field_validator("job", mode="before")
    @classmethod
    def _null_job(cls, v: object) -> object:
        return "" if v is None else v

    @field_validator("paths", mode="before")
    @classmethod
    def _null_paths(cls, v: object) -> object:
        return [] if v is None else v


class CheckDecision(BaseModel):
    job: str
    relevant: bool
    matched_file: str | None = None


class ChecksDecision(BaseModel):
    """Per-check relevance, in declaration order."""

    decisions: list[CheckDecision] = Field(default_factory=list)

    def relevant_jobs(self) -> list[str]:
        return [d.job for d in self.decisions if d.relevant]

    def skipped_jobs(self) -> list[str]:
        return [d.job for d in self.decisions if not d.relevant]
