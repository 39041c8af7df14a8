"""Adapters for the GitHub Actions runner environment (inputs and outputs)."""

import os
import uuid
from collections.abc import Callable, Mapping
from pathlib import Path

Getenv = Callable[[str], str | None]


class InputSource:
    """Key/value lookup over the runner environment.

    The lookup function is injected so that callers (and tests) never have to
    mutate the process environment. Absent keys read as the empty string.
    """

    def __init__(self, getenv: Getenv) -> None:
        self._getenv = getenv

    @classmethod
    def from_environ(cls) -> "InputSource":
        return cls(os.environ.get)

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "InputSource":
        return cls(values.get)

    def getenv(self, key: str) -> str:
        return self._getenv(key) or ""

    def get_input(self, name: str) -> str:
        """Return the action input ``name`` (``INPUT_<NAME>``), stripped of surrounding whitespace."""
        key = "INPUT_" + name.upper().replace(" ", "_")
        return self.getenv(key).strip()


class OutputWriter:
    """Appends step outputs to the file named by ``GITHUB_OUTPUT``.

    Values are written with the heredoc-style delimiter syntax so that
    multi-line values survive intact.
    """

    def __init__(self, path: str | None) -> None:
        self._path = Path(path) if path else None

    @property
    def enabled(self) -> bool:
        return self._path is not None

    def set_output(self, name: str, value: str) -> None:
        if self._path is None:
            return
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with open(self._path, "a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def escape_command_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def error_command(message: str) -> str:
    """Render an ``::error::`` workflow command for ``message``."""
    return f"::error::{escape_command_data(message)}"
