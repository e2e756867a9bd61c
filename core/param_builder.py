# core/param_builder.py
from __future__ import annotations
import math
from dataclasses import fields, replace
from typing import Dict, Any, Optional
from urllib.parse import parse_qs

from core.types import TowerSpec, WaistGeometry
from core.config import TowerDefaults, optionsConfig
from builders.build_modules.hyperboloid_helpers import calculate_waist_geometry

options = optionsConfig()

# query-string key -> TowerSpec field (only these can be overridden from a URL)
QUERY_PARAM_MAP = {
    "height":       "height",
    "baseRadius":   "base_radius",
    "topRadius":    "top_radius",
    "sectionCount": "section_count",
    "ringCount":    "ring_count",
    "twistAngle":   "twist_angle",
}

_INT_FIELDS = ("section_count", "strut_count", "ring_count")
_BOOL_FIELDS = ("show_rings", "auto_waist")
_SPEC_FIELDS = {f.name for f in fields(TowerSpec)}

# CSV columns may use the camelCase names of the web panel
_ROW_ALIASES = {
    "baseRadius":    "base_radius",
    "topRadius":     "top_radius",
    "sectionCount":  "section_count",
    "strutCount":    "strut_count",
    "ringCount":     "ring_count",
    "strutRadius":   "strut_radius",
    "showRings":     "show_rings",
    "twistAngle":    "twist_angle",
    "autoWaist":     "auto_waist",
    "waistRadius":   "waist_radius",
    "waistPosition": "waist_position",
    "partitionMode": "partition_mode",
}

def default_spec(defaults: Optional[TowerDefaults] = None, partition_mode: Optional[str] = None) -> TowerSpec:
    d = defaults if defaults is not None else TowerDefaults()
    return TowerSpec(
        height         = d.height,
        base_radius    = d.base_radius,
        top_radius     = d.top_radius,
        section_count  = d.section_count,
        strut_count    = d.strut_count,
        ring_count     = d.ring_count,
        strut_radius   = d.strut_radius,
        show_rings     = d.show_rings,
        twist_angle    = d.twist_angle,
        auto_waist     = d.auto_waist,
        waist_radius   = d.waist_radius,
        waist_position = d.waist_position,
        partition_mode = partition_mode or options.partition_mode,
    )

def _coerce(field_name: str, value: Any) -> Any:
    if field_name in _INT_FIELDS:
        return int(round(float(value)))
    if field_name in _BOOL_FIELDS:
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "yes", "on")
        return bool(value)
    if field_name == "partition_mode":
        return str(value).strip().lower()
    return float(value)

def validate_tower_spec(spec: TowerSpec) -> TowerSpec:
    """
    Caller-side contract check. The geometry functions never call this;
    they absorb degenerate values instead of raising.
    """
    if not math.isfinite(spec.height) or spec.height <= 0:
        raise ValueError(f"height must be a finite number > 0 (got {spec.height})")
    if spec.base_radius < 0 or spec.top_radius < 0:
        raise ValueError("base_radius and top_radius must be >= 0")
    for name in _INT_FIELDS:
        if getattr(spec, name) < 1:
            raise ValueError(f"{name} must be at least 1 (got {getattr(spec, name)})")
    if spec.strut_radius <= 0:
        raise ValueError(f"strut_radius must be > 0 (got {spec.strut_radius})")
    if not math.isfinite(spec.twist_angle):
        raise ValueError("twist_angle must be finite")
    if spec.partition_mode not in ("uniform", "weighted"):
        raise ValueError(f"Unknown partition_mode '{spec.partition_mode}' (expected 'uniform' or 'weighted')")
    return spec

def build_spec_from_row(
    row: Dict[str, Any],
    defaults: Optional[TowerDefaults] = None,
    partition_mode: Optional[str] = None,
) -> TowerSpec:
    """
    Build a TowerSpec from one CSV row. Missing or empty cells fall back to
    the defaults. Returns the validated spec.
    """
    spec = default_spec(defaults, partition_mode)
    overrides: Dict[str, Any] = {}
    for key, value in row.items():
        if key is None or value is None:
            continue
        name = _ROW_ALIASES.get(key.strip(), key.strip())
        if name not in _SPEC_FIELDS:
            continue
        try:
            overrides[name] = _coerce(name, value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Could not parse column '{key}' value {value!r}: {e}") from e
    return validate_tower_spec(replace(spec, **overrides))

def apply_query_params(spec: TowerSpec, query: str) -> TowerSpec:
    """
    Override spec fields from a URL query string, e.g. "?height=250&twistAngle=40".
    Unknown keys and values that are not finite numbers are ignored.
    """
    parsed = parse_qs(query.lstrip("?"), keep_blank_values=False)
    overrides: Dict[str, Any] = {}
    for url_key, field_name in QUERY_PARAM_MAP.items():
        values = parsed.get(url_key)
        if not values:
            continue
        try:
            num = float(values[0])
        except ValueError:
            continue
        if not math.isfinite(num):
            continue
        overrides[field_name] = int(num) if field_name in _INT_FIELDS else num
    if not overrides:
        return spec
    return replace(spec, **overrides)

def resolve_waist(spec: TowerSpec) -> WaistGeometry:
    """
    Waist shown for the whole tower: derived from base/top radius and twist
    when auto_waist is set, otherwise the user's values.
    """
    if spec.auto_waist or spec.waist_radius is None or spec.waist_position is None:
        return calculate_waist_geometry(spec.base_radius, spec.top_radius, spec.twist_radians)
    return WaistGeometry(
        waist_position=min(1.0, max(0.0, float(spec.waist_position))),
        waist_radius=max(0.0, float(spec.waist_radius)),
    )

def with_auto_waist(spec: TowerSpec) -> TowerSpec:
    """Copy of spec with waist_radius/waist_position filled from the formula (auto mode only)."""
    if not spec.auto_waist:
        return spec
    waist = calculate_waist_geometry(spec.base_radius, spec.top_radius, spec.twist_radians)
    return replace(spec, waist_radius=waist.waist_radius, waist_position=waist.waist_position)
