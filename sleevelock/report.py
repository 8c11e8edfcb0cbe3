"""Run summary (JSON) and Markdown report."""
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from . import __version__


def build_summary(results: list[dict], params: dict, run_id: str,
                  combined: list[str] | None = None) -> dict:
    """Build a summary dict from per-part export results."""
    total = len(results)
    passed = [r for r in results if r["all_pass"]]
    return {
        "run_id": run_id,
        "run_date": datetime.now().isoformat(),
        "version": __version__,
        "total": total,
        "pass": len(passed),
        "fail": total - len(passed),
        "total_volume": round(sum(r["metrics"]["volume"] for r in results), 2),
        "parts": results,
        "combined_files": combined or [],
        "parameters": params,
    }


def generate_report(summary: dict) -> str:
    """Generate a Markdown report from a run summary."""
    lines: list[str] = []
    a = lines.append

    a(f"# Sleevelock Generation Report, {summary['run_date'][:10]}")
    a("")
    a(f"**Run ID:** {summary['run_id']}  ")
    a(f"**Version:** {summary['version']}")
    a("")

    a("## Summary")
    a("")
    a("| Metric | Value |")
    a("|--------|-------|")
    a(f"| Parts | {summary['total']} |")
    a(f"| Checks passed | {summary['pass']}/{summary['total']} |")
    a(f"| Total volume | {_fmt(summary['total_volume'])} mm3 |")
    a("")

    a("## Parts")
    a("")
    a("| Part | Size (mm) | Volume (mm3) | Solids | Checks | Files |")
    a("|------|-----------|--------------|--------|--------|-------|")
    for r in summary["parts"]:
        m = r["metrics"]
        size = " x ".join(f"{s:.2f}" for s in m["size"])
        status = "OK" if r["all_pass"] else "FAIL"
        a(f"| {r['name']} | {size} | {_fmt(m['volume'])} | {m['solid_count']} "
          f"| {status} | {', '.join(r['files'])} |")
    a("")

    failed = [r for r in summary["parts"] if not r["all_pass"]]
    if failed:
        a("## Failed Checks")
        a("")
        a("| Part | Check | Detail |")
        a("|------|-------|--------|")
        for r in failed:
            for name, check in r["checks"].items():
                if not check["pass"]:
                    a(f"| {r['name']} | {name} | {check['detail']} |")
        a("")

    if summary["combined_files"]:
        a("## Combined Output")
        a("")
        for name in summary["combined_files"]:
            a(f"- {name}")
        a("")

    a("## Parameters")
    a("")
    a("| Key | Value |")
    a("|-----|-------|")
    for key, value in sorted(summary["parameters"].items()):
        a(f"| {key} | {_fmt(value)} |")
    a("")

    return "\n".join(lines)


def write_outputs(summary: dict, out_dir: Path) -> tuple[Path, Path]:
    """Write summary.json and report.md into `out_dir`."""
    summary_file = out_dir / "summary.json"
    summary_file.write_text(json.dumps(summary, indent=2))
    report_file = out_dir / "report.md"
    report_file.write_text(generate_report(summary))
    return summary_file, report_file


def _fmt(val) -> str:
    """Format a value for display."""
    if val is None:
        return "N/A"
    if isinstance(val, bool):
        return str(val).lower()
    if isinstance(val, float):
        return f"{val:.4g}"
    return str(val)
