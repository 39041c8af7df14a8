"""Resolves the checks declaration for a validated Config.

The declaration is either inline YAML or a file in the repository, read at
the pull request's head SHA through the GitHub gateway.
"""

import pydantic
import structlog
import yaml

from composite.adapters.github_client import GitHubClientError, GitHubGateway
from composite.errors import ChecksParseError, DownloadError
from composite.schemas.checks import Check
from composite.schemas.config import Config

logger = structlog.get_logger(__name__)

_CHECK_LIST = pydantic.TypeAdapter(list[Check])


def parse_checks(document: str | bytes) -> list[Check]:
    """Parse a YAML sequence of ``{job, paths}`` mappings, keeping declaration order.

    An empty document yields no checks.
    """
    try:
        data = yaml.safe_load(document)
    except yaml.YAMLError as exc:
        raise ChecksParseError("Failed to parse checks file as YAML", cause=exc) from exc
    if data is None:
        return []
    try:
        return _CHECK_LIST.validate_python(data)
    except pydantic.ValidationError as exc:
        raise ChecksParseError("Failed to parse checks file as YAML", cause=exc) from exc


def dump_checks(checks: list[Check]) -> str:
    return yaml.safe_dump([c.model_dump() for c in checks], default_flow_style=False, sort_keys=False)


async def get_checks(config: Config, gateway: GitHubGateway) -> list[Check]:
    """Return the declared checks; the gateway is only used for ``checks_filename``.

    Raises:
        DownloadError: The checks file could not be fetched.
        ChecksParseError: The declaration is not a YAML list of checks.
    """
    if config.checks_yaml:
        checks = parse_checks(config.checks_yaml)
        logger.info("checks_resolved", source="inline", count=len(checks))
        return checks

    try:
        contents = await gateway.get_file_contents(
            config.github_org,
            config.github_repo,
            config.checks_filename,
            config.head_sha,
        )
    except GitHubClientError as exc:
        raise DownloadError(
            f"Failed to download file; Repository: {config.repository}, "
            f"Ref: {config.head_sha}, Path: {config.checks_filename}",
            cause=exc,
        ) from exc
    logger.info("checks_downloaded", repository=config.repository, ref=config.head_sha, path=config.checks_filename)

    checks = parse_checks(contents)
    logger.info("checks_resolved", source="file", path=config.checks_filename, count=len(checks))
    return checks
