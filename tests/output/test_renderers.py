"""Tests for operation-specific Rich renderers."""

from recordctl.output.renderers import render_quiet, render_result
from recordctl.services.result import ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        result = ServiceResult.failure("save_records", "WRITE_FAILED", "disk full")
        output = render_result(result)
        assert "ERROR" in output
        assert "save_records" in output
        assert "disk full" in output

    def test_path_detail_always_shown(self) -> None:
        result = ServiceResult.failure("inspect_file", "NOT_FOUND", "missing", path="/x/y.txt")
        assert "/x/y.txt" in render_result(result)

    def test_other_detail_only_when_verbose(self) -> None:
        result = ServiceResult.failure(
            "collect_records", "INPUT_EXHAUSTED", "ended", discarded_records=2
        )
        assert "discarded_records" not in render_result(result)
        assert "discarded_records: 2" in render_result(result, verbose=True)

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="test"))
        assert "Unknown error" in output


# ── Save renderer ────────────────────────────────────────────────────


class TestSaveRenderer:
    def test_saved(self) -> None:
        output = render_result(
            _ok("save_records", path="/data/people.csv", file_name="people.csv", count=2, bytes=64)
        )
        assert "OK" in output
        assert "Data successfully saved to: /data/people.csv" in output
        assert "records: 2" in output
        assert "bytes" not in output

    def test_created_directory_shown(self) -> None:
        output = render_result(
            _ok("save_records", path="/d/p.csv", count=1, bytes=2, created_dir="/d")
        )
        assert "Created directory: /d" in output
        plain = render_result(_ok("save_records", path="/p.csv", count=1))
        assert "Created directory" not in plain

    def test_verbose_shows_bytes(self) -> None:
        output = render_result(
            _ok("save_records", path="/p.csv", count=1, bytes=29), verbose=True
        )
        assert "bytes: 29" in output


# ── Inspect renderer ─────────────────────────────────────────────────


class TestInspectRenderer:
    def test_summary_report(self) -> None:
        output = render_result(
            _ok(
                "inspect_file",
                file_name="notes.txt",
                path="/p/notes.txt",
                lines=4,
                words=9,
                characters=46,
            )
        )
        assert "File Summary Report" in output
        assert "notes.txt" in output
        assert "Number of Lines:" in output
        assert "Number of Words:" in output
        assert "46" in output


class TestGenericAndQuiet:
    def test_generic_fallback(self) -> None:
        output = render_result(_ok("unknown_op", items=[1, 2], name="x"))
        assert "unknown_op" in output
        assert "items: [1,2]" in output
        assert "name: x" in output

    def test_quiet_ok(self) -> None:
        assert render_quiet(_ok("collect_records", count=1)) == "OK: collect_records"

    def test_quiet_error(self) -> None:
        result = ServiceResult.failure("inspect_file", "NOT_FOUND", "missing")
        assert render_quiet(result) == "ERROR: inspect_file — missing"

    def test_warnings_rendered(self) -> None:
        result = ServiceResult(ok=True, op="unknown_op", warnings=["careful"])
        assert "careful" in render_result(result)
