"""Matches declared checks against the files a pull request changed."""

import pathspec
import structlog

from composite.schemas.checks import Check, CheckDecision, ChecksDecision

logger = structlog.get_logger(__name__)


def first_match(check: Check, changed_files: list[str]) -> str | None:
    """Return the first changed file matched by any of the check's path globs."""
    if not check.paths:
        return None
    spec = pathspec.GitIgnoreSpec.from_lines(check.paths)
    return next((f for f in changed_files if spec.match_file(f)), None)


def match_checks(checks: list[Check], changed_files: list[str]) -> ChecksDecision:
    decisions = []
    for check in checks:
        matched = first_match(check, changed_files)
        decisions.append(CheckDecision(job=check.job, relevant=matched is not None, matched_file=matched))

    decision = ChecksDecision(decisions=decisions)
    logger.info(
        "checks_matched",
        changed_files=len(changed_files),
        relevant=decision.relevant_jobs(),
        skipped=decision.skipped_jobs(),
    )
    return decision
