import pytest

from composite.schemas.checks import Check
from composite.services.check_matcher import first_match, match_checks

CHECKS = [
    Check(job="court", paths=["spotlight/**", "docs/**"]),
    Check(job="lint", paths=["**/*.py"]),
    Check(job="nothing", paths=[]),
]


class TestFirstMatch:
    def test_double_star_matches_nested_files(self) -> None:
        assert first_match(CHECKS[0], ["spotlight/a/b/c.txt"]) == "spotlight/a/b/c.txt"

    def test_returns_first_matching_file(self) -> None:
        files = ["README.md", "docs/intro.md", "spotlight/x.go"]
        assert first_match(CHECKS[0], files) == "docs/intro.md"

    def test_no_match(self) -> None:
        assert first_match(CHECKS[0], ["src/main.go", "spotlightish/x"]) is None

    @pytest.mark.filterwarnings("error::DeprecationWarning")
    def test_matching_emits_no_deprecation_warnings(self) -> None:
        assert first_match(CHECKS[1], ["tools/build.py"]) == "tools/build.py"

    def test_no_paths_never_matches(self) -> None:
        assert first_match(CHECKS[2], ["anything"]) is None


class TestMatchChecks:
    def test_decision_keeps_declaration_order(self) -> None:
        decision = match_checks(CHECKS, ["tools/build.py", "docs/index.md"])
        assert [d.job for d in decision.decisions] == ["court", "lint", "nothing"]
        assert decision.relevant_jobs() == ["court", "lint"]
        assert decision.skipped_jobs() == ["nothing"]
        assert decision.decisions[0].matched_file == "docs/index.md"
        assert decision.decisions[1].matched_file == "tools/build.py"

    def test_no_changed_files_skips_everything(self) -> None:
        decision = match_checks(CHECKS, [])
        assert decision.relevant_jobs() == []
        assert decision.skipped_jobs() == ["court", "lint", "nothing"]
