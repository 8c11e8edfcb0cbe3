"""Command line entry point.

Usage:
  sleevelock params --set body_width=34
  sleevelock generate --params my_tool.json --format stl step --combined
  sleevelock compare out/run1/body.stl out/run2/body.stl
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from . import config
from .errors import ConfigurationError, DerivationError
from .params import ParameterSet, describe

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Parameter input
# ---------------------------------------------------------------------------

def parse_assignment(text: str) -> tuple[str, object]:
    """Split `key=value`; the value is read as a JSON scalar, else kept as a string."""
    key, sep, raw = text.partition("=")
    key = key.strip()
    if not sep or not key:
        raise ConfigurationError(f"invalid override {text!r}: expected key=value", [text])
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return key, value


def load_values(params_file: Path | None, assignments: list[str], draft: bool = False) -> dict:
    """Merge a JSON parameter file with --set overrides."""
    values: dict = {}
    if params_file is not None:
        try:
            loaded = json.loads(params_file.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"{params_file}: not valid JSON ({exc})") from exc
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"{params_file}: expected a JSON object of parameters")
        values.update(loaded)
    for text in assignments:
        key, value = parse_assignment(text)
        values[key] = value
    if draft:
        values["draft"] = True
    return values


def _parse_only(text: str | None) -> list[str] | None:
    from .parts import PART_GROUPS

    if not text:
        return None
    groups = [s.strip() for s in text.split(",") if s.strip()]
    unknown = [g for g in groups if g not in PART_GROUPS]
    if unknown:
        raise ConfigurationError(
            f"unknown part group(s): {', '.join(unknown)} (choose from {', '.join(PART_GROUPS)})",
            unknown)
    return groups


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_params(args) -> int:
    if args.describe:
        for row in describe():
            print(f"{row['key']:<24} {str(row['default']):<14} {row['description']}")
        return 0
    params = ParameterSet.from_mapping(load_values(args.params, args.set, args.draft))
    print(json.dumps(params.as_dict(), indent=2))
    return 0


def cmd_generate(args) -> int:
    from .parts import build_parts
    from .report import build_summary, write_outputs
    from .services.export_service import export_combined, export_part

    params = ParameterSet.from_mapping(load_values(args.params, args.set, args.draft))
    only = _parse_only(args.only)
    formats = args.format or config.EXPORT_FORMATS

    run_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = args.out or config.OUT_DIR
    out_dir.mkdir(parents=True, exist_ok=True)
    log.info("Run %s -> %s", run_id, out_dir)

    parts = build_parts(params, only)
    if not parts:
        log.warning("No parts selected; check the generate_* toggles and --only")
        return 1

    results = [
        export_part(part, out_dir, formats, params.angular_tolerance)
        for part in parts
    ]
    combined = None
    if args.combined:
        combined = export_combined(parts, out_dir, formats, params.angular_tolerance)

    summary = build_summary(results, params.as_dict(), run_id, combined)
    summary_file, report_file = write_outputs(summary, out_dir)
    log.info("Summary: %s", summary_file)
    log.info("Report: %s", report_file)
    log.info("%d/%d parts passed checks", summary["pass"], summary["total"])
    return 0


def cmd_compare(args) -> int:
    from .services.mesh_metrics import compare

    result = compare(args.a, args.b, n_samples=args.samples)
    print(json.dumps(result.as_dict(), indent=2))
    same = result.within(args.tolerance)
    log.info("Meshes %s within %.4g mm", "match" if same else "differ", args.tolerance)
    return 0 if same else 1


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sleevelock",
        description="Parametric sliding-sleeve tool generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sleevelock params --describe
  sleevelock params --set lock_diagonal=false --set lock_right=1.5
  sleevelock generate --only body,sleeve --draft
  sleevelock generate --params tool.json --format stl step --combined
  sleevelock compare out/a/body.stl out/b/body.stl --tolerance 0.01
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_param_inputs(p):
        p.add_argument("--params", type=Path, help="JSON file with parameter values")
        p.add_argument(
            "--set",
            action="append",
            default=[],
            metavar="KEY=VALUE",
            help="Override one parameter (repeatable); VALUE is read as JSON",
        )
        p.add_argument("--draft", action="store_true",
                       help="Fast preview: no chamfer/overhang, coarse mesh")

    p = sub.add_parser("params", help="Print the resolved parameter set as JSON")
    add_param_inputs(p)
    p.add_argument("--describe", action="store_true",
                   help="List primary parameters with defaults instead")
    p.set_defaults(func=cmd_params)

    p = sub.add_parser("generate", help="Build parts and export them")
    add_param_inputs(p)
    p.add_argument("--out", type=Path, help=f"Output directory (default: {config.OUT_DIR})")
    p.add_argument(
        "--format",
        nargs="+",
        choices=["stl", "step"],
        help=f"Export formats (default: {','.join(config.EXPORT_FORMATS)})",
    )
    p.add_argument("--only", type=str,
                   help="Comma-separated part groups: body,sleeve,cap,bolts")
    p.add_argument("--combined", action="store_true",
                   help="Also write all parts laid out in one file per format")
    p.set_defaults(func=cmd_generate)

    p = sub.add_parser("compare", help="Compare two exported meshes")
    p.add_argument("a", type=Path)
    p.add_argument("b", type=Path)
    p.add_argument("--tolerance", type=float, default=0.01,
                   help="Maximum allowed difference in mm (default: 0.01)")
    p.add_argument("--samples", type=int, default=10_000,
                   help="Surface samples per mesh (default: 10000)")
    p.set_defaults(func=cmd_compare)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )
    try:
        return args.func(args)
    except (ConfigurationError, DerivationError) as exc:
        print(f"sleevelock: error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
