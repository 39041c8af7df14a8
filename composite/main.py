import asyncio
import json
import logging
import sys

import structlog

from composite.adapters.github_actions import InputSource, OutputWriter, error_command
from composite.adapters.github_client import GitHubClient, GitHubClientError
from composite.config.config import Settings, settings
from composite.errors import CompositeError
from composite.schemas.checks import ChecksDecision
from composite.services.check_matcher import match_checks
from composite.services.check_resolver import get_checks
from composite.services.config_builder import build_config
from composite.services.config_validator import validate_config

logger = structlog.get_logger(__name__)


def configure_logging(config: Settings) -> None:
    renderer = structlog.processors.JSONRenderer() if config.log_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(config.log_level.upper())),
    )


async def run(inputs: InputSource, config_settings: Settings | None = None) -> ChecksDecision:
    """Build and validate the Config, resolve the checks and decide which are relevant."""
    config_settings = config_settings or settings
    config = build_config(inputs, config_settings)
    validate_config(config)

    async with GitHubClient(
        base_url=config.github_root_url,
        token=config.github_token,
        timeout=config_settings.http_timeout_seconds,
        page_size=config_settings.compare_page_size,
    ) as client:
        checks = await get_checks(config, client)
        try:
            changed_files = await client.compare_commits(
                config.github_org, config.github_repo, config.base_sha, config.head_sha
            )
        except GitHubClientError as exc:
            raise CompositeError(
                f"Failed to list changed files; Repository: {config.repository}, "
                f"Base: {config.base_sha}, Head: {config.head_sha}",
                cause=exc,
            ) from exc
    logger.info("changed_files_listed", repository=config.repository, count=len(changed_files))

    return match_checks(checks, changed_files)


def write_outputs(decision: ChecksDecision, writer: OutputWriter) -> None:
    outputs = {
        "relevant-jobs": json.dumps(decision.relevant_jobs()),
        "skipped-jobs": json.dumps(decision.skipped_jobs()),
        "checks": json.dumps([d.model_dump() for d in decision.decisions]),
    }
    for name, value in outputs.items():
        writer.set_output(name, value)
    logger.info("outputs_written", enabled=writer.enabled, **{k.replace("-", "_"): v for k, v in outputs.items()})


def main() -> int:
    configure_logging(settings)
    inputs = InputSource.from_environ()
    try:
        decision = asyncio.run(run(inputs))
    except CompositeError as exc:
        logger.error("composite_failed", error=str(exc), error_type=type(exc).__name__)
        print(error_command(str(exc)))
        return 1

    write_outputs(decision, OutputWriter(inputs.getenv("GITHUB_OUTPUT")))
    return 0


if __name__ == "__main__":
    sys.exit(main())
