"""Engine settings.

The constants the load aggregator and the diagram sampler rely on, made
explicit so a caller (or the ``settings:`` section of an input file) can
override them per run.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from rcbeam.utils.constants import CONCRETE_UNIT_WEIGHT, LOAD_FACTOR


class DesignSettings(BaseModel):
    """Per-run engine constants."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    concrete_unit_weight: float = Field(
        default=CONCRETE_UNIT_WEIGHT,
        gt=0,
        description="Unit weight of reinforced concrete in kN/m³",
    )
    load_factor: float = Field(
        default=LOAD_FACTOR,
        gt=0,
        description="Partial safety factor applied to all service loads",
    )
    diagram_segments: int = Field(
        default=40,
        ge=20,
        description="Number of segments used to sample moment/shear diagrams",
    )


DEFAULT_SETTINGS = DesignSettings()
