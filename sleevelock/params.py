"""Parameter Set: validated primary values plus derived dimensions.

`Parameters` documents and validates every primary key (defaults, units,
ranges, enum domains). `ParameterSet` is the immutable mapping handed to
every shape builder: primary values merged with the derived values computed
by `derivation.resolve()`.
"""
import logging
from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .derivation import DEFINITIONS, Derived, resolve
from .errors import ConfigurationError

log = logging.getLogger(__name__)


class Attachment(str, Enum):
    """Lanyard feature cut through the end cap flange."""

    NONE = "none"
    HOLE = "hole"
    SLOT = "slot"


class BoltType(str, Enum):
    """How the bolt that rides in the sleeve slot is split into printable pieces."""

    PAIRED_SHEATH = "paired_sheath"
    SPLIT_HALVES = "split_halves"
    CLASSIC = "classic"
    KNOB_ONLY = "knob_only"


class Parameters(BaseModel):
    """Primary (user-set) parameters with defaults and valid ranges."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # === GENERATION ===
    generate_body: bool = Field(True, description="emit the body")
    generate_sleeve: bool = Field(True, description="emit the sleeve")
    generate_cap: bool = Field(True, description="emit the end cap")
    generate_bolts: bool = Field(True, description="emit the bolt pieces")

    # === BODY ===
    body_width: float = Field(30.0, gt=0, description="[mm] body width (X)")
    body_thickness: float = Field(5.0, gt=0, description="[mm] body thickness (Y)")
    body_length: float = Field(80.0, gt=0, description="[mm] body length (Z)")
    tip_length: float = Field(20.0, ge=0, description="[mm] diagonal tip cut along Z, 0 = off")
    hook: bool = Field(True, description="cut the hook notch")
    hook_width: float = Field(4.0, gt=0, description="[mm] hook notch width")
    hook_depth: float = Field(8.0, gt=0, description="[mm] hook notch depth into the body")
    hook_position: float = Field(30.0, ge=0, description="[mm] hook centre from the tip")
    edge: bool = Field(True, description="thin the +X side into a working edge")
    edge_width: float = Field(6.0, gt=0, description="[mm] width of the thinned edge band")
    edge_thickness: float = Field(1.0, ge=0, description="[mm] thickness left at the edge")
    hole_diameter: float = Field(6.0, gt=0, description="[mm] bolt hole diameter")
    hole_position: float = Field(20.0, ge=0, description="[mm] bolt hole centre from the rear end")

    # === SLEEVE ===
    clearance: float = Field(0.3, ge=0, description="[mm] body/sleeve sliding clearance")
    wall: float = Field(2.0, gt=0, description="[mm] sleeve wall thickness")
    travel: float = Field(30.0, ge=0, description="[mm] bolt travel along the slot")
    lock_diagonal: bool = Field(True, description="diagonal lock extension instead of L-shaped")
    lock_right: float = Field(1.0, ge=0, description="lock extension sideways, in slot widths")
    lock_back: float = Field(1.0, ge=0, description="lock extension rearwards, in slot widths")
    lock_left: float = Field(0.0, ge=0, description="lock extension towards -X, in slot widths")
    grip: bool = Field(True, description="grip serrations on sleeve and knobs")
    grip_count: int = Field(6, ge=0, description="number of sleeve grip grooves")
    grip_pitch: float = Field(2.5, gt=0, description="[mm] distance between grip grooves")
    grip_depth: float = Field(0.6, gt=0, description="[mm] grip groove depth")
    marker: bool = Field(True, description="engrave the orientation arrow")
    marker_size: float = Field(5.0, gt=0, description="[mm] orientation arrow size")
    marker_depth: float = Field(0.4, gt=0, description="[mm] orientation arrow depth")

    # === END CAP ===
    cap_thickness: float = Field(8.0, gt=0, description="[mm] cap flange thickness (Z)")
    cap_depth: float = Field(6.0, gt=0, description="[mm] cap plug depth into the sleeve")
    cap_clearance: float = Field(0.15, ge=0, description="[mm] plug/sleeve clearance")
    detent_diameter: float = Field(2.5, gt=0, description="[mm] detent pin diameter")
    detent_height: float = Field(0.6, gt=0, description="[mm] detent pin height")
    attachment: Attachment = Field(Attachment.HOLE, description="lanyard feature: none, hole or slot")
    attachment_diameter: float = Field(4.0, gt=0, description="[mm] lanyard hole/slot width")
    attachment_length: float = Field(10.0, ge=0, description="[mm] lanyard slot length")

    # === BOLTS ===
    bolt_type: BoltType = Field(
        BoltType.SPLIT_HALVES,
        description="paired_sheath, split_halves, classic or knob_only")
    bolt_clearance: float = Field(0.2, ge=0, description="[mm] bolt/hole radial clearance")
    bolt_fit: float = Field(0.1, ge=0, description="[mm] socket diametral fit allowance")
    knob_diameter: float = Field(12.0, gt=0, description="[mm] knob diameter")
    knob_height: float = Field(3.0, gt=0, description="[mm] knob height")
    knob_grips: int = Field(12, ge=0, description="number of knob grip grooves")
    screw_diameter: float = Field(3.2, gt=0, description="[mm] screw hole for knob_only")

    # === QUALITY ===
    chamfer: bool = Field(True, description="chamfer edges")
    chamfer_size: float = Field(0.5, ge=0, description="[mm] chamfer size")
    overhang: bool = Field(True, description="add 45 degree overhang reinforcement")
    overhang_size: float = Field(0.5, ge=0, description="[mm] overhang depth")
    segments: int = Field(64, ge=8, description="circular subdivisions for mesh export")
    draft: bool = Field(False, description="fast preview: no chamfer/overhang, coarse mesh")


def _format_errors(exc: ValidationError) -> tuple[str, list[str]]:
    keys, reasons = [], []
    for err in exc.errors():
        key = ".".join(str(p) for p in err["loc"]) or "<root>"
        reason = "unknown parameter" if err["type"] == "extra_forbidden" else err["msg"]
        keys.append(key)
        reasons.append(f"{key}: {reason}")
    return "invalid parameters: " + "; ".join(reasons), keys


class ParameterSet(Mapping):
    """Immutable mapping of primary and derived parameter values.

    Values are read by key (`params["sleeve_length"]`) or attribute
    (`params.sleeve_length`).
    """

    def __init__(self, values: Mapping[str, Any], primary: Parameters,
                 pinned: Mapping[str, Any] | None = None,
                 definitions: Mapping[str, Derived] | None = None):
        self._values = MappingProxyType(dict(values))
        self._primary = primary
        self._pinned = MappingProxyType(dict(pinned or {}))
        self._definitions = DEFINITIONS if definitions is None else definitions

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None = None,
                     definitions: Mapping[str, Derived] | None = None) -> "ParameterSet":
        """Validate `values`, then resolve every derived parameter.

        Keys naming a derived parameter pin that value instead of deriving it.
        Raises ConfigurationError or DerivationError before any geometry exists.
        """
        if definitions is None:
            definitions = DEFINITIONS
        given = dict(values or {})
        pinned = {
            key: given.pop(key) for key in list(given)
            if key in definitions and key not in Parameters.model_fields
        }
        bad = [k for k, v in pinned.items()
               if isinstance(v, bool) or not isinstance(v, (int, float))]
        if bad:
            raise ConfigurationError(
                "invalid parameters: " + "; ".join(f"{k}: derived override must be a number" for k in bad),
                bad)
        try:
            primary = Parameters(**given)
        except ValidationError as exc:
            message, keys = _format_errors(exc)
            raise ConfigurationError(message, keys) from exc
        if pinned:
            log.info("Pinned derived parameters: %s", ", ".join(sorted(pinned)))
        resolved = resolve({**primary.model_dump(), **pinned}, definitions)
        return cls(resolved, primary, pinned, definitions)

    @classmethod
    def defaults(cls) -> "ParameterSet":
        return cls.from_mapping({})

    @property
    def primary(self) -> Parameters:
        return self._primary

    @property
    def pinned(self) -> Mapping[str, Any]:
        return self._pinned

    @property
    def definitions(self) -> Mapping[str, Derived]:
        return self._definitions

    def replace(self, **changes: Any) -> "ParameterSet":
        """Return a new set with `changes` applied and derived values recomputed.

        The derived values are recomputed with the same definitions this set
        was built from.
        """
        merged = {**self._primary.model_dump(exclude_defaults=True), **self._pinned, **changes}
        return ParameterSet.from_mapping(merged, self._definitions)

    def as_dict(self) -> dict[str, Any]:
        """Plain dict with enum members replaced by their string values."""
        return {k: (v.value if isinstance(v, Enum) else v) for k, v in self._values.items()}

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(f"no parameter named {name!r}") from None

    def __repr__(self) -> str:
        return f"ParameterSet({len(self._values)} values, pinned={sorted(self._pinned)})"


def describe() -> list[dict[str, Any]]:
    """Key, default and description of every primary parameter."""
    rows = []
    for name, field in Parameters.model_fields.items():
        default = field.default.value if isinstance(field.default, Enum) else field.default
        rows.append({"key": name, "default": default, "description": field.description or ""})
    return rows
