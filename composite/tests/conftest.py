import asyncio
from pathlib import Path

import pytest

from composite.adapters.github_actions import InputSource
from composite.adapters.github_client import GitHubClientError

TESTDATA = Path(__file__).parent / "testdata"
EVENT_PATH = str((TESTDATA / "event.json").resolve())

TOKEN = "561427eed114801b0f69b28593c0ce4ab193d038"
BASE_SHA = "ef3237727fcb36295e462cd2c2b71e38d48fd772"
HEAD_SHA = "fb8bcd85860b706ad2d5a776775b4ad9bbf2520f"
CHECKS_YAML = "- job: court\n  paths:\n  - spotlight/**\n  - docs/**\n"

VALID_ENV = {
    "INPUT_GITHUB-TOKEN": TOKEN,
    "INPUT_TIMEOUT": "31m",
    "INPUT_INTERVAL": "37s",
    "INPUT_CHECKS-YAML": CHECKS_YAML,
    "GITHUB_EVENT_PATH": EVENT_PATH,
    "GITHUB_REPOSITORY": "mess/clean",
    "GITHUB_EVENT_NAME": "pull_request",
    "GITHUB_API_URL": "https://ghe.k8s.invalid/api/v3",
}


class FakeGateway:
    """In-memory GitHubGateway that records every call it receives."""

    def __init__(
        self,
        files: dict[str, bytes] | None = None,
        changed_files: list[str] | None = None,
        error: GitHubClientError | None = None,
        block: bool = False,
    ) -> None:
        self.files = files or {}
        self.changed_files = changed_files or []
        self.error = error
        self.block = block
        self.calls: list[tuple] = []

    async def get_file_contents(self, org: str, repo: str, path: str, ref: str) -> bytes:
        self.calls.append(("get_file_contents", org, repo, path, ref))
        if self.block:
            await asyncio.Event().wait()
        if self.error is not None:
            raise self.error
        return self.files[path]

    async def compare_commits(self, org: str, repo: str, base: str, head: str) -> list[str]:
        self.calls.append(("compare_commits", org, repo, base, head))
        return list(self.changed_files)


@pytest.fixture
def make_inputs():
    """Build an InputSource from the valid environment with per-test overrides."""

    def _factory(overrides: dict[str, str] | None = None) -> InputSource:
        return InputSource.from_mapping({**VALID_ENV, **(overrides or {})})

    return _factory
