"""Builds a typed Config from action inputs and the workflow context.

Only input-level syntax is checked here (durations, the event JSON and the
repository slug); cross-field rules belong to ``validate_config``.
"""

import json
from datetime import timedelta
from pathlib import Path

import structlog

from composite.adapters.github_actions import InputSource
from composite.adapters.github_models import PullRequestEvent
from composite.config.config import Settings, settings
from composite.errors import InputError
from composite.schemas.config import Config
from composite.services.durations import parse_duration

logger = structlog.get_logger(__name__)

PULL_REQUEST_EVENT = "pull_request"


def build_config(inputs: InputSource, defaults: Settings | None = None) -> Config:
    """Read every input and context variable into a Config.

    Raises:
        InputError: A duration, the event file or the repository slug is malformed.
    """
    defaults = defaults or settings

    timeout = _duration_input(inputs, "timeout", defaults.default_timeout)
    interval = _duration_input(inputs, "interval", defaults.default_interval)

    event_name = inputs.getenv("GITHUB_EVENT_NAME")
    event = load_event(inputs.getenv("GITHUB_EVENT_PATH"))
    org, repo = split_repository(inputs.getenv("GITHUB_REPOSITORY"))

    event_action = base_sha = head_sha = ""
    if event_name == PULL_REQUEST_EVENT:
        event_action = event.action
        if event.pull_request is not None:
            base_sha = event.pull_request.base.sha
            head_sha = event.pull_request.head.sha

    config = Config(
        github_token=inputs.get_input("github-token"),
        timeout=timeout,
        interval=interval,
        checks_yaml=inputs.get_input("checks-yaml"),
        checks_filename=inputs.get_input("checks-filename"),
        github_root_url=inputs.getenv("GITHUB_API_URL") or defaults.default_api_url,
        event_name=event_name,
        event_action=event_action,
        github_org=org,
        github_repo=repo,
        base_sha=base_sha,
        head_sha=head_sha,
    )
    logger.info(
        "config_built",
        repository=config.repository,
        event_name=config.event_name,
        event_action=config.event_action,
        head_sha=config.head_sha,
        timeout=str(config.timeout),
        interval=str(config.interval),
    )
    return config


def _duration_input(inputs: InputSource, name: str, default: str) -> timedelta:
    raw = inputs.get_input(name) or default
    try:
        return parse_duration(raw)
    except ValueError as exc:
        raise InputError(f'Invalid input; Input: "{name}", Value: "{raw}"', cause=exc) from exc


def load_event(path: str) -> PullRequestEvent:
    """Parse the webhook payload at ``path``; an empty path reads as an empty payload."""
    if not path:
        return PullRequestEvent()
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise InputError(f"Failed to read GitHub Event file; Path: {path}", cause=exc) from exc
    try:
        return PullRequestEvent.model_validate(json.loads(raw))
    except ValueError as exc:
        raise InputError(f"Failed to parse GitHub Event file as JSON; Path: {path}", cause=exc) from exc


def split_repository(slug: str) -> tuple[str, str]:
    """Split an ``org/repo`` slug; both halves must be present and non-empty."""
    parts = slug.split("/")
    if len(parts) != 2 or not all(parts):
        raise InputError(f'Unexpected GitHub repository format; Repository: "{slug}"')
    return parts[0], parts[1]
