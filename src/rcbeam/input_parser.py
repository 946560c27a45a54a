"""Parse and validate YAML input for RC beam design.

Reads a project YAML file holding either a single beam or a ``beams`` list,
applies defaults for optional fields, and validates every beam against the
input models.  All problems are collected and reported together.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, NamedTuple

import yaml
from pydantic import ValidationError

from rcbeam.config import DesignSettings
from rcbeam.models.inputs import DesignInputs, slab_side_from_flags


class InputError(ValueError):
    """Raised when the input file fails validation."""


class ParsedInput(NamedTuple):
    """Validated contents of one input file."""

    settings: DesignSettings
    beams: tuple[tuple[str, DesignInputs], ...]


_BEAM_SECTIONS = ("slab", "beam", "wall", "point_loads", "materials")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _format_validation_error(exc: ValidationError, prefix: str) -> list[str]:
    """Flatten a pydantic error into ``path: message`` strings."""
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        path = f"{prefix}.{loc}" if loc else prefix
        messages.append(f"{path}: {err['msg']}")
    return messages


def _normalise_slab_side(side: Any) -> Any:
    """Accept the flag form (``enabled``/``span_type``) as well as ``type``.

    ``None`` or ``false`` means no slab on that side.
    """
    if side is None or side is False:
        return {"type": "none"}
    if isinstance(side, dict) and "enabled" in side:
        return slab_side_from_flags(
            enabled=bool(side["enabled"]),
            span_type=str(side.get("span_type", "OneWay")),
            lx=float(side.get("lx", 0.0)),
            ly=side.get("ly"),
            support_edge=str(side.get("support_edge", "Short")),
        ).model_dump()
    return side


def build_design_inputs(data: dict[str, Any]) -> DesignInputs:
    """Build :class:`DesignInputs` from one beam mapping.

    Raises
    ------
    pydantic.ValidationError
        If any field is missing or out of range.
    """
    beam_data = {key: data[key] for key in _BEAM_SECTIONS if key in data}
    slab = beam_data.get("slab")
    if isinstance(slab, dict):
        slab = dict(slab)
        for side in ("left", "right"):
            if side in slab:
                slab[side] = _normalise_slab_side(slab[side])
        beam_data["slab"] = slab
    if beam_data.get("point_loads") is None:
        beam_data.pop("point_loads", None)
    return DesignInputs.model_validate(beam_data)


def _parse_beam(data: Any, label: str, errors: list[str]) -> DesignInputs | None:
    if not isinstance(data, dict):
        errors.append(f"{label}: must be a mapping")
        return None

    unknown = set(data) - set(_BEAM_SECTIONS) - {"name"}
    for key in sorted(unknown):
        errors.append(f"{label}.{key}: unknown section")

    try:
        return build_design_inputs(data)
    except ValidationError as exc:
        errors.extend(_format_validation_error(exc, label))
    except (TypeError, ValueError) as exc:
        errors.append(f"{label}: {exc}")
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_config(raw: Any) -> ParsedInput:
    """Validate an already-loaded YAML document.

    Parameters
    ----------
    raw:
        Parsed YAML content.

    Returns
    -------
    ParsedInput
        Engine settings and the named beams, in file order.

    Raises
    ------
    InputError
        If validation fails (the message lists every problem found).
    """
    if not isinstance(raw, dict):
        raise InputError("YAML root must be a mapping (dict)")

    errors: list[str] = []

    # ------------------------------------------------------------------
    # 1. Settings
    # ------------------------------------------------------------------
    settings = DesignSettings()
    settings_raw = raw.get("settings")
    if settings_raw is not None:
        try:
            settings = DesignSettings.model_validate(settings_raw)
        except ValidationError as exc:
            errors.extend(_format_validation_error(exc, "settings"))

    # ------------------------------------------------------------------
    # 2. Beams
    # ------------------------------------------------------------------
    beams: list[tuple[str, DesignInputs]] = []
    if "beams" in raw:
        entries = raw["beams"]
        if not isinstance(entries, list) or not entries:
            errors.append("beams: must be a non-empty list")
            entries = []
        names: set[str] = set()
        for i, entry in enumerate(entries):
            default_name = f"B{i + 1}"
            name = str(entry.get("name", default_name)) if isinstance(entry, dict) else default_name
            if name in names:
                errors.append(f"beams[{i}].name: duplicate beam name {name!r}")
            names.add(name)
            inputs = _parse_beam(entry, f"beams[{i}]", errors)
            if inputs is not None:
                beams.append((name, inputs))
    else:
        beam_raw = {k: v for k, v in raw.items() if k != "settings"}
        inputs = _parse_beam(beam_raw, "beam", errors)
        if inputs is not None:
            beams.append((str(raw.get("name", "B1")), inputs))

    # ------------------------------------------------------------------
    # Report
    # ------------------------------------------------------------------
    if errors:
        bullet_list = "\n  - ".join(errors)
        raise InputError(
            f"Input validation failed with {len(errors)} error(s):\n"
            f"  - {bullet_list}"
        )

    return ParsedInput(settings=settings, beams=tuple(beams))


def parse_input(yaml_path: str | Path) -> ParsedInput:
    """Read and validate a project YAML file.

    Raises
    ------
    FileNotFoundError
        If *yaml_path* does not exist.
    InputError
        If the YAML is malformed or validation fails.
    """
    path = Path(yaml_path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {yaml_path}")

    with open(path, "r", encoding="utf-8") as fh:
        try:
            raw = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise InputError(f"YAML syntax error: {exc}") from exc

    return parse_config(raw)


# ---------------------------------------------------------------------------
# Template generator
# ---------------------------------------------------------------------------

_TEMPLATE_YAML = """\
# RC Beam Design Input File (IS 456:2000)
# =======================================
# Units: mm for sections and bars, m for spans and heights, kN for loads.

settings:
  concrete_unit_weight: 25      # kN/m3
  load_factor: 1.5              # Partial safety factor on all loads
  diagram_segments: 40          # Samples for BMD/SFD (>= 20)

beams:
  - name: "B1"
    slab:
      thickness: 125            # mm
      live_load: 3.0            # kN/m2
      floor_finish: 1.0         # kN/m2
      left:                     # type: none | one_way | two_way
        type: two_way
        lx: 3.0                 # m - Short span
        ly: 4.5                 # m - Long span
        support_edge: short     # short (triangular) | long (trapezoidal)
      right:
        type: none
    beam:
      width: 230                # mm
      depth: 450                # mm
      span: 3.0                 # m - Clear span
      effective_cover: 25       # mm
    wall:
      height: 3.0               # m
      thickness: 230            # mm
      density: 20               # kN/m3 - Use ~10-12 for AAC blocks
    point_loads: []             # - {value: 10, distance: 1.5}  (kN, m from left)
    materials:
      concrete_grade: M20       # Options: M20 | M25 | M30 | M35 | M40
      steel_grade: Fe500        # Options: Fe415 | Fe500 | Fe550
      main_bar_dia: 16          # mm
      stirrup_bar_dia: 8        # mm
"""


def generate_template() -> str:
    """Return a complete sample YAML input template as a string."""
    return _TEMPLATE_YAML
