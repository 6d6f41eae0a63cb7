"""Console table rendering of scan results."""

from collections.abc import Iterator, Sequence

from rich.markup import escape
from rich.table import Table

from siteguard.modules.checks import Classification, Verdict
from siteguard.modules.evaluator import Unreachable
from siteguard.modules.scanner import SiteReport

GLYPHS = {
    Classification.PASS: "✔",
    Classification.FAIL: "✘",
    Classification.WARN: "!",
}
UNREACHABLE_MARK = "E"

_STYLES = {
    Classification.PASS: "green",
    Classification.FAIL: "red",
    Classification.WARN: "yellow",
}


def glyph_for(verdict: Verdict) -> str:
    """Return the report symbol for a verdict."""
    return GLYPHS[verdict.classification]


def build_row(check_names: Sequence[str], report: SiteReport) -> list[str]:
    """Return one plain table row: site name followed by a symbol per check."""
    if isinstance(report.result, Unreachable):
        return [report.site.name, *(UNREACHABLE_MARK for _ in check_names)]
    return [report.site.name, *(glyph_for(report.result[name]) for name in check_names)]


def build_results_table(check_names: Sequence[str], reports: Sequence[SiteReport]) -> Table:
    """Build a rich table with one row per site and one column per check."""
    table = Table(title="Transport security checks")
    table.add_column("Site", style="bold white", no_wrap=True)
    for name in check_names:
        table.add_column(name, justify="center")

    for report in reports:
        name, *symbols = build_row(check_names, report)
        if isinstance(report.result, Unreachable):
            table.add_row(escape(name), *(f"[magenta]{symbol}[/]" for symbol in symbols))
            continue
        styled = [
            f"[{_STYLES[report.result[check].classification]}]{symbol}[/]"
            for check, symbol in zip(check_names, symbols, strict=True)
        ]
        table.add_row(escape(name), *styled)
    return table


def build_details(
    check_names: Sequence[str], reports: Sequence[SiteReport]
) -> Iterator[tuple[str, list[str]]]:
    """Yield (site name, explanation lines) for sites with anything to report."""
    for report in reports:
        if isinstance(report.result, Unreachable):
            yield report.site.name, [f"unreachable: {report.result.reason or 'unknown error'}"]
            continue
        lines = []
        for name in check_names:
            verdict = report.result[name]
            if verdict.passed:
                continue
            for message in verdict.messages or (verdict.message,):
                lines.append(f"{name} ({verdict.classification.label}): {message}")
        if lines:
            yield report.site.name, lines
