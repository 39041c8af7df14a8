"""Fail-fast validation of a built Config.

Rules run in a fixed priority order and only the first failure is reported,
so a Config that breaks several rules always yields the same single message.
"""

from collections.abc import Callable

from composite.errors import ConfigValidationError
from composite.schemas.config import Config
from composite.services.config_builder import PULL_REQUEST_EVENT

# Pull request actions that mean the code under review changed. Anything else
# (draft toggles, labels, edits, closing, unknown actions) is rejected.
CODE_CHANGE_ACTIONS = frozenset({"opened", "reopened", "synchronize"})

_Rule = tuple[Callable[[Config], bool], Callable[[Config], str]]


def _checks_source_message(c: Config) -> str:
    state = "both are set" if c.checks_yaml and c.checks_filename else "neither are set"
    return f"The Composite Action requires exactly one of checks YAML or checks filename; {state}"


_RULES: list[_Rule] = [
    (
        lambda c: c.event_name == PULL_REQUEST_EVENT,
        lambda c: f'The Composite Action can only run on pull requests; Event Name: "{c.event_name}"',
    ),
    (
        lambda c: c.event_action in CODE_CHANGE_ACTIONS,
        lambda c: (
            "The Composite Action can only run on pull request types spawned by code changes; "
            f'Event Action: "{c.event_action}"'
        ),
    ),
    (lambda c: bool(c.base_sha), lambda c: "Could not determine the base SHA for this pull request"),
    (lambda c: bool(c.head_sha), lambda c: "Could not determine the head SHA for this pull request"),
    (lambda c: bool(c.github_org), lambda c: "The Composite Action requires a GitHub owner or org"),
    (lambda c: bool(c.github_repo), lambda c: "The Composite Action requires a GitHub repository"),
    (lambda c: bool(c.github_root_url), lambda c: "The Composite Action requires a GitHub root URL"),
    (lambda c: bool(c.github_token), lambda c: "The Composite Action requires a GitHub API token"),
    (lambda c: bool(c.checks_yaml) != bool(c.checks_filename), _checks_source_message),
]


def validate_config(config: Config) -> None:
    """Raise ConfigValidationError for the highest-priority rule ``config`` breaks."""
    for is_valid, message in _RULES:
        if not is_valid(config):
            raise ConfigValidationError(message(config))
