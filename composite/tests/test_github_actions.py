from pathlib import Path

from composite.adapters.github_actions import InputSource, OutputWriter, error_command


class TestInputSource:
    def test_get_input_uses_upper_case_key_and_strips(self) -> None:
        inputs = InputSource.from_mapping({"INPUT_GITHUB-TOKEN": "  abc \n"})
        assert inputs.get_input("github-token") == "abc"

    def test_spaces_in_names_become_underscores(self) -> None:
        inputs = InputSource.from_mapping({"INPUT_CHECKS_YAML": "x"})
        assert inputs.get_input("checks yaml") == "x"

    def test_absent_keys_are_empty(self) -> None:
        inputs = InputSource.from_mapping({})
        assert inputs.get_input("timeout") == ""
        assert inputs.getenv("GITHUB_REPOSITORY") == ""

    def test_getenv_is_not_stripped(self) -> None:
        inputs = InputSource(lambda key: " value " if key == "GITHUB_REF" else None)
        assert inputs.getenv("GITHUB_REF") == " value "


class TestOutputWriter:
    def test_appends_delimited_outputs(self, tmp_path: Path) -> None:
        path = tmp_path / "output"
        path.write_text("existing=1\n")
        writer = OutputWriter(str(path))
        writer.set_output("relevant-jobs", '["court"]')
        writer.set_output("multi", "a\nb")

        lines = path.read_text().splitlines()
        assert lines[0] == "existing=1"
        assert lines[1].startswith("relevant-jobs<<ghadelimiter_")
        assert lines[2] == '["court"]'
        assert lines[3] == lines[1].split("<<", 1)[1]
        assert lines[4].startswith("multi<<")
        assert lines[5:7] == ["a", "b"]

    def test_disabled_without_path(self, tmp_path: Path) -> None:
        writer = OutputWriter(None)
        assert not writer.enabled
        writer.set_output("checks", "[]")


def test_error_command_escapes_newlines() -> None:
    assert error_command("first\nsecond 100%") == "::error::first%0Asecond 100%25"
