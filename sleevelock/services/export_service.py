"""Measurement, sanity checks and file export for finished parts."""
import logging
from pathlib import Path

import cadquery as cq

from .. import config
from ..layout import place_parts

log = logging.getLogger(__name__)

FORMATS = ("stl", "step")


def measure(wp: cq.Workplane) -> dict:
    """Bounding box, size, volume and solid count of a Workplane."""
    shape = wp.val()
    bb = shape.BoundingBox()
    return {
        "bounding_box": {
            "min": [round(bb.xmin, 4), round(bb.ymin, 4), round(bb.zmin, 4)],
            "max": [round(bb.xmax, 4), round(bb.ymax, 4), round(bb.zmax, 4)],
        },
        "size": [round(bb.xlen, 4), round(bb.ylen, 4), round(bb.zlen, 4)],
        "volume": round(shape.Volume(), 4),
        "solid_count": len(shape.Solids()),
    }


def run_checks(metrics: dict, expected_solid_count: int = 1) -> dict:
    """Non-fatal geometry sanity checks on measured metrics."""
    checks = {}

    size = metrics["size"]
    checks["bounding_box"] = {
        "pass": all(s > 0 for s in size),
        "detail": f"{size[0]:.1f} x {size[1]:.1f} x {size[2]:.1f} mm",
    }

    checks["volume"] = {
        "pass": metrics["volume"] > 0,
        "detail": f"{metrics['volume']:.0f} mm3",
    }

    checks["single_solid"] = {
        "pass": metrics["solid_count"] == expected_solid_count,
        "detail": f"{metrics['solid_count']} solid(s) (expected {expected_solid_count})",
    }

    bb_vol = size[0] * size[1] * size[2]
    fill_ratio = metrics["volume"] / bb_vol if bb_vol > 0 else 0
    checks["fill_ratio"] = {
        "pass": fill_ratio > 0.001,
        "detail": f"{fill_ratio:.4f}",
    }

    return {
        "all_pass": all(c["pass"] for c in checks.values()),
        "checks": checks,
    }


def _write(wp, path: Path, fmt: str, angular_tolerance: float):
    if fmt == "stl":
        cq.exporters.export(wp, str(path), tolerance=config.STL_TOLERANCE,
                            angularTolerance=angular_tolerance)
    else:
        cq.exporters.export(wp, str(path))


def _check_formats(formats):
    unknown = [f for f in formats if f not in FORMATS]
    if unknown:
        raise ValueError(f"unsupported export format(s): {', '.join(unknown)}")


def export_part(part, out_dir: Path, formats=None, angular_tolerance=0.1) -> dict:
    """Measure, check and write one part. Returns its result record."""
    formats = list(formats or config.EXPORT_FORMATS)
    _check_formats(formats)
    out_dir.mkdir(parents=True, exist_ok=True)

    metrics = measure(part.solid)
    checks = run_checks(metrics)
    for name, check in checks["checks"].items():
        if not check["pass"]:
            log.warning("%s: %s check failed (%s)", part.name, name, check["detail"])

    files = []
    for fmt in formats:
        path = out_dir / f"{part.name}.{fmt}"
        _write(part.solid, path, fmt, angular_tolerance)
        log.info("Wrote %s", path)
        files.append(path.name)

    return {"name": part.name, "files": files, "metrics": metrics, **checks}


def export_combined(parts, out_dir: Path, formats=None, angular_tolerance=0.1,
                    name="assembly") -> list[str]:
    """Write every part into one file per format, laid out without overlap.

    STL gets a single compound mesh, STEP a `cq.Assembly` with one named
    child per part.
    """
    formats = list(formats or config.EXPORT_FORMATS)
    _check_formats(formats)
    out_dir.mkdir(parents=True, exist_ok=True)

    placed = place_parts(parts)
    files = []
    for fmt in formats:
        path = out_dir / f"{name}.{fmt}"
        if fmt == "step":
            assy = cq.Assembly(name=name)
            for part in placed:
                assy.add(part.placed(), name=part.name)
            assy.export(str(path))
        else:
            compound = cq.Compound.makeCompound([p.placed().val() for p in placed])
            _write(cq.Workplane("XY").add(compound), path, fmt, angular_tolerance)
        log.info("Wrote %s (%d parts)", path, len(placed))
        files.append(path.name)
    return files
