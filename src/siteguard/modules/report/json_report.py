"""JSON report rendering."""

import json
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from siteguard.modules.evaluator import Unreachable
from siteguard.modules.scanner import SiteReport


def build_json_report(check_names: Sequence[str], reports: Sequence[SiteReport]) -> dict[str, Any]:
    """Return a JSON-serialisable summary of a scan."""
    sites = []
    for report in reports:
        entry: dict[str, Any] = {
            "name": report.site.name,
            "url": report.site.url,
            "reachable": report.reachable,
        }
        if isinstance(report.result, Unreachable):
            entry["reason"] = report.result.reason
        else:
            entry["status_code"] = report.status_code
            entry["checks"] = {
                name: {
                    "classification": report.result[name].classification.label,
                    "message": report.result[name].message,
                    "messages": list(report.result[name].messages),
                }
                for name in check_names
            }
        sites.append(entry)

    return {
        "report_metadata": {
            "generated_at": datetime.now().isoformat(),
            "tool": "siteguard",
        },
        "checks": list(check_names),
        "summary": {
            "total_sites": len(reports),
            "unreachable": sum(1 for report in reports if not report.reachable),
        },
        "sites": sites,
    }


def write_json_report(
    path: Path, check_names: Sequence[str], reports: Sequence[SiteReport]
) -> Path:
    """Write the JSON report to a file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    report_data = build_json_report(check_names, reports)
    path.write_text(json.dumps(report_data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path
