"""Derived parameters: one-directional formulas over primary values.

Every derived key declares the keys it reads. `resolve()` evaluates the
definitions depth-first, so a definition may read primary values or other
derived values in any declaration order. Definitions must form a DAG.
"""
import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from .errors import DerivationError

log = logging.getLogger(__name__)

DRAFT_FACETS = 16  # circular subdivision cap in draft mode


@dataclass(frozen=True)
class Derived:
    """Formula `fn(*deps)` producing one derived value."""

    deps: tuple[str, ...]
    fn: Callable[..., Any]


DEFINITIONS: dict[str, Derived] = {
    # === QUALITY ===
    "edge_chamfer": Derived(
        ("chamfer", "chamfer_size", "draft"),
        lambda on, size, draft: float(size) if on and not draft else 0.0),
    "edge_overhang": Derived(
        ("overhang", "overhang_size", "draft"),
        lambda on, size, draft: float(size) if on and not draft else 0.0),
    "rim_chamfer": Derived(("edge_chamfer", "edge_overhang"), max),
    "facets": Derived(
        ("segments", "draft"),
        lambda n, draft: min(n, DRAFT_FACETS) if draft else n),
    "angular_tolerance": Derived(("facets",), lambda n: 2 * math.pi / n),  # [rad]

    # === BOLT ===
    "bolt_diameter": Derived(
        ("hole_diameter", "bolt_clearance"), lambda d, cl: d - 2 * cl),
    "pin_diameter": Derived(("bolt_diameter",), lambda d: d / 2),
    "bolt_length": Derived(
        ("body_thickness", "clearance", "wall"),
        lambda t, cl, wall: t + 2 * (cl + wall)),
    "socket_depth": Derived(("knob_height",), lambda h: h / 2),

    # === SLEEVE ===
    "lock_offset": Derived(
        ("hole_diameter", "lock_right", "lock_left"), lambda d, r, left: d * (r + left)),
    "body_offset": Derived(
        ("hole_diameter", "lock_left", "lock_offset"),
        lambda d, left, off: d * left - off / 2),
    "sleeve_inner_width": Derived(
        ("body_width", "clearance", "lock_offset"),
        lambda w, cl, off: w + 2 * cl + off),
    "sleeve_inner_thickness": Derived(
        ("body_thickness", "clearance"), lambda t, cl: t + 2 * cl),
    "sleeve_outer_width": Derived(
        ("sleeve_inner_width", "wall"), lambda w, wall: w + 2 * wall),
    "sleeve_outer_thickness": Derived(
        ("sleeve_inner_thickness", "wall"), lambda t, wall: t + 2 * wall),
    "sleeve_length": Derived(
        ("body_length", "cap_depth", "clearance"),
        lambda length, depth, cl: length + depth + cl),
    "slot_width": Derived(("hole_diameter",), lambda d: d),
    "slot_start": Derived(("cap_depth", "hole_position"), lambda depth, pos: depth + pos),
    "slot_end": Derived(("slot_start", "travel"), lambda start, travel: start + travel),
    "grip_start": Derived(("slot_end", "slot_width"), lambda end, w: end + 1.5 * w),
    "marker_position": Derived(
        ("detent_position", "slot_start", "slot_width", "marker_size"),
        lambda detent, start, w, size: (detent + start - w - size) / 2),

    # === END CAP ===
    "detent_position": Derived(("cap_depth",), lambda depth: depth / 2),
    "plug_width": Derived(
        ("sleeve_inner_width", "cap_clearance"), lambda w, cl: w - 2 * cl),
    "plug_thickness": Derived(
        ("sleeve_inner_thickness", "cap_clearance"), lambda t, cl: t - 2 * cl),

    # === BODY ===
    "hook_z": Derived(("body_length", "hook_position"), lambda length, pos: length - pos),
}


def resolve(primary: Mapping[str, Any],
            definitions: Mapping[str, Derived] | None = None) -> dict[str, Any]:
    """Evaluate every definition over `primary` and return primary + derived.

    A key present in `primary` is never re-derived, so callers may pin a
    derived value by supplying it. Raises DerivationError when a definition
    reads a key that is neither primary nor defined, or when definitions
    form a cycle.
    """
    if definitions is None:
        definitions = DEFINITIONS
    values: dict[str, Any] = dict(primary)
    active: list[str] = []

    def visit(name: str) -> Any:
        if name in values:
            return values[name]
        if name in active:
            cycle = active[active.index(name):] + [name]
            raise DerivationError(
                "cyclic parameter definition: " + " -> ".join(cycle), cycle)
        if name not in definitions:
            owner = active[-1] if active else "<root>"
            raise DerivationError(
                f"'{owner}' depends on unresolved parameter '{name}'",
                active + [name])
        active.append(name)
        definition = definitions[name]
        args = [visit(dep) for dep in definition.deps]
        active.pop()
        values[name] = definition.fn(*args)
        return values[name]

    for name in definitions:
        visit(name)
    log.debug("Resolved %d derived parameters", len(values) - len(primary))
    return values
