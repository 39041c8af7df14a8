"""The typed, immutable configuration for one Composite run."""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field


class Config(BaseModel):
    """Parameters for one invocation, built from action inputs and workflow context.

    Built once by ``build_config`` and checked once by ``validate_config``;
    read-only afterwards.
    """

    model_config = ConfigDict(frozen=True)

    # Excluded from repr so the token never lands in log lines.
    github_token: str = Field(default="", repr=False)
    timeout: timedelta = timedelta(0)
    interval: timedelta = timedelta(0)
    checks_yaml: str = ""
    checks_filename: str = ""
    github_root_url: str = ""
    event_name: str = ""
    event_action: str = ""
    github_org: str = ""
    github_repo: str = ""
    base_sha: str = ""
    head_sha: str = ""

    @property
    def repository(self) -> str:
        return f"{self.github_org}/{self.github_repo}"
