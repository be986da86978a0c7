"""Tests for CollectService — session driving and CSV persistence."""

from pathlib import Path

import pytest

from recordctl.config.settings import RecordSettings
from recordctl.infrastructure.filesystem import WriteOutcome
from recordctl.services.collect import FILE_NAME_PROMPT, CollectService
from tests.conftest import RecordingSink, scripted

ANN = ["Ann", "Lee", "000001", "a@b.com", "1990"]
BOB = ["Bob", "Ray", "000002", "bob@example.org", "1985"]


class TestCollect:
    def test_single_record(self, settings: RecordSettings) -> None:
        result = CollectService(settings).collect(scripted(*ANN, "N"), RecordingSink())
        assert result.ok
        assert result.op == "collect_records"
        assert result.data["count"] == 1
        assert result.data["records"] == [["Ann", "Lee", "000001", "a@b.com", 1990]]
        assert result.data["fields"][0] == "firstName"

    def test_exhausted_input(self, settings: RecordSettings) -> None:
        result = CollectService(settings).collect(scripted(*ANN, "Y", "Bob"), RecordingSink())
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INPUT_EXHAUSTED"
        assert result.error.detail["discarded_records"] == 1
        assert result.error.detail["prompt"] == "Enter Last Name"

    def test_birth_year_range_from_config(self, tmp_path: Path) -> None:
        config = tmp_path / "recordctl.toml"
        config.write_text("[collect]\nbirth_year_max = 1980\n")
        settings = RecordSettings.from_cli(project_root=tmp_path, config_path=str(config))
        sink = RecordingSink()
        result = CollectService(settings).collect(
            scripted("Ann", "Lee", "000001", "a@b.com", "1990", "1975", "N"), sink
        )
        assert result.ok
        assert result.data["records"][0][-1] == 1975
        assert any("between 1900 and 1980" in line for line in sink.lines)


class TestSave:
    def test_writes_file_in_output_dir(self, settings: RecordSettings, tmp_path: Path) -> None:
        result = CollectService(settings).save([("Ann", "Lee", "000001", "a@b.com", 1990)], "people")
        assert result.ok
        path = tmp_path / "src" / "people.csv"
        assert path.read_bytes() == b"Ann,Lee,000001,a@b.com,1990\n"
        assert result.data["file_name"] == "people.csv"
        assert result.data["count"] == 1
        assert Path(result.data["path"]) == path.absolute()
        assert Path(result.data["created_dir"]) == path.parent.absolute()

    def test_existing_dir_not_reported_as_created(
        self, settings: RecordSettings, tmp_path: Path
    ) -> None:
        (tmp_path / "src").mkdir()
        result = CollectService(settings).save([("x",)], "people")
        assert result.ok
        assert "created_dir" not in result.data

    def test_overwrite_warns(self, settings: RecordSettings, tmp_path: Path) -> None:
        svc = CollectService(settings)
        assert svc.save([("old",)], "people").warnings == []
        result = svc.save([("new",)], "people")
        assert result.ok
        assert result.warnings == ["Overwrote existing file: people.csv"]
        assert (tmp_path / "src" / "people.csv").read_text() == "new\n"

    def test_explicit_output_dir(self, settings: RecordSettings, tmp_path: Path) -> None:
        out = tmp_path / "elsewhere"
        result = CollectService(settings).save([("x", 1)], "data.CSV", output_dir=out)
        assert result.ok
        assert (out / "data.CSV").read_text() == "x,1\n"

    def test_no_records(self, settings: RecordSettings, tmp_path: Path) -> None:
        result = CollectService(settings).save([], "people")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_RECORDS"
        assert not (tmp_path / "src").exists()

    def test_blank_name(self, settings: RecordSettings) -> None:
        result = CollectService(settings).save([("x",)], "   ")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_NAME"

    def test_write_failure_reported(self, settings: RecordSettings, tmp_path: Path) -> None:
        (tmp_path / "src").write_text("a file where the directory should be")
        records = [("Ann", 30)]
        result = CollectService(settings).save(records, "people")
        assert not result.ok
        assert result.error is not None
        assert result.error.code in {"WRITE_FAILED", "PERMISSION_DENIED"}
        assert result.error.detail["path"].endswith("people.csv")
        assert records == [("Ann", 30)]

    def test_permission_error_code(
        self, settings: RecordSettings, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _deny(path: Path, records: object) -> WriteOutcome:
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr("recordctl.services.collect.write_records", _deny)
        result = CollectService(settings).save([("x",)], "people")
        assert result.error is not None
        assert result.error.code == "PERMISSION_DENIED"


class TestCollectAndSave:
    def test_prompts_for_file_name(self, settings: RecordSettings, tmp_path: Path) -> None:
        sink = RecordingSink()
        source = scripted(*ANN, "y", *BOB, "n", "", "people")
        result = CollectService(settings).collect_and_save(source, sink)
        assert result.ok
        assert result.op == "save_records"
        assert result.data["count"] == 2
        assert (tmp_path / "src" / "people.csv").read_text() == (
            "Ann,Lee,000001,a@b.com,1990\nBob,Ray,000002,bob@example.org,1985\n"
        )
        assert sink.prompts[-1] == f"{FILE_NAME_PROMPT}: "
        assert sink.prompts.count(f"{FILE_NAME_PROMPT}: ") == 2

    def test_given_file_name_skips_prompt(self, settings: RecordSettings, tmp_path: Path) -> None:
        sink = RecordingSink()
        result = CollectService(settings).collect_and_save(
            scripted(*ANN, "N"), sink, file_name="given"
        )
        assert result.ok
        assert (tmp_path / "src" / "given.csv").is_file()
        assert f"{FILE_NAME_PROMPT}: " not in sink.prompts

    def test_banner_lines(self, settings: RecordSettings) -> None:
        sink = RecordingSink()
        CollectService(settings).collect_and_save(scripted(*ANN, "N", "x"), sink)
        assert sink.lines[0] == "--- Data Collection for CSV File ---"
        assert "--- Data Collection Complete ---" in sink.lines

    def test_exhausted_at_file_name(self, settings: RecordSettings, tmp_path: Path) -> None:
        result = CollectService(settings).collect_and_save(scripted(*ANN, "N"), RecordingSink())
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INPUT_EXHAUSTED"
        assert result.error.detail["prompt"] == FILE_NAME_PROMPT
        assert result.error.detail["discarded_records"] == 1
        assert not (tmp_path / "src").exists()

    def test_exhausted_mid_session(self, settings: RecordSettings) -> None:
        result = CollectService(settings).collect_and_save(scripted("Ann"), RecordingSink())
        assert result.op == "collect_records"
        assert result.error is not None
        assert result.error.detail["discarded_records"] == 0
