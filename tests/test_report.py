"""Tests for report rendering."""

import json
from pathlib import Path

import pytest
from rich.console import Console

from siteguard.modules.checks import CHECK_NAMES, Verdict
from siteguard.modules.evaluator import Unreachable
from siteguard.modules.report import (
    UNREACHABLE_MARK,
    build_details,
    build_json_report,
    build_results_table,
    build_row,
    write_json_report,
)
from siteguard.modules.scanner import Site, SiteReport


@pytest.fixture
def reports() -> list[SiteReport]:
    result = {name: Verdict.pass_(f"{name} ok") for name in CHECK_NAMES}
    result["STS"] = Verdict.warn("Strict-Transport-Security set between 6 months and 1 year")
    result["CSP"] = Verdict.fail("No Content Security Policy headers")
    return [
        SiteReport(site=Site("Good Bank", "https://good.example"), result=result, status_code=200),
        SiteReport(
            site=Site("Down Bank", "https://down.example"),
            result=Unreachable(reason="ConnectTimeout"),
        ),
    ]


class TestTable:
    """Test glyph rows and the rich table."""

    def test_row_glyphs_follow_check_order(self, reports):
        assert build_row(CHECK_NAMES, reports[0]) == ["Good Bank", "!", "✔", "✔", "✔", "✘", "✔"]

    def test_unreachable_row_is_all_marks(self, reports):
        assert build_row(CHECK_NAMES, reports[1]) == ["Down Bank"] + [UNREACHABLE_MARK] * 6

    def test_table_has_site_and_check_columns(self, reports):
        table = build_results_table(CHECK_NAMES, reports)
        assert [column.header for column in table.columns] == ["Site", *CHECK_NAMES]
        assert table.row_count == 2

    def test_table_renders(self, reports):
        console = Console(width=160, record=True)
        console.print(build_results_table(CHECK_NAMES, reports))
        output = console.export_text()
        assert "Good Bank" in output
        assert "Down Bank" in output
        assert "✘" in output


class TestDetails:
    """Test the per-site explanation listing."""

    def test_lists_non_pass_messages_and_unreachable_reason(self, reports):
        details = dict(build_details(CHECK_NAMES, reports))
        assert details["Good Bank"] == [
            "STS (warning): Strict-Transport-Security set between 6 months and 1 year",
            "CSP (failure): No Content Security Policy headers",
        ]
        assert details["Down Bank"] == ["unreachable: ConnectTimeout"]

    def test_all_pass_site_is_omitted(self):
        result = {name: Verdict.pass_("ok") for name in CHECK_NAMES}
        report = SiteReport(site=Site("Fine", "https://fine.example"), result=result)
        assert list(build_details(CHECK_NAMES, [report])) == []


class TestJsonReport:
    """Test the JSON report."""

    def test_structure(self, reports):
        data = build_json_report(CHECK_NAMES, reports)

        assert data["checks"] == list(CHECK_NAMES)
        assert data["summary"] == {"total_sites": 2, "unreachable": 1}
        good, down = data["sites"]
        assert list(good["checks"]) == list(CHECK_NAMES)
        assert good["checks"]["STS"]["classification"] == "warning"
        assert good["status_code"] == 200
        assert down == {
            "name": "Down Bank",
            "url": "https://down.example",
            "reachable": False,
            "reason": "ConnectTimeout",
        }

    def test_write(self, reports, temp_dir: Path):
        path = write_json_report(temp_dir / "out" / "report.json", CHECK_NAMES, reports)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["sites"][0]["checks"]["Mixed Content"]["classification"] == "pass"
