"""
Input data models for RC beam design using Pydantic for validation.
Beam supporting slab panels, a masonry wall and point loads per IS 456:2000.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rcbeam.utils.constants import MASONRY_UNIT_WEIGHT, STANDARD_BAR_SIZES, STIRRUP_BAR_SIZES


class ConcreteGrade(str, Enum):
    """Available concrete grades per IS 456."""
    M20 = "M20"
    M25 = "M25"
    M30 = "M30"
    M35 = "M35"
    M40 = "M40"

    @property
    def fck(self) -> float:
        """Characteristic compressive strength in MPa."""
        return float(self.value[1:])


class SteelGrade(str, Enum):
    """Available steel grades."""
    FE415 = "Fe415"
    FE500 = "Fe500"
    FE550 = "Fe550"

    @property
    def fy(self) -> float:
        """Characteristic yield strength in MPa."""
        return float(self.value[2:])


class SupportEdge(str, Enum):
    """Edge of a two-way panel carried by the beam."""
    SHORT = "short"  # triangular load
    LONG = "long"    # trapezoidal load


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class DisabledSlab(_Frozen):
    """No slab on this side of the beam."""
    type: Literal["none"] = "none"


class OneWaySlab(_Frozen):
    """One-way panel spanning onto the beam."""
    type: Literal["one_way"] = "one_way"
    lx: float = Field(..., gt=0, description="Span of the panel in meters")


class TwoWaySlab(_Frozen):
    """Two-way panel; the beam carries either its short or its long edge."""
    type: Literal["two_way"] = "two_way"
    lx: float = Field(..., gt=0, description="Short span of the panel in meters")
    ly: float = Field(..., gt=0, description="Long span of the panel in meters")
    support_edge: SupportEdge = SupportEdge.SHORT

    @model_validator(mode="after")
    def _check_spans(self) -> "TwoWaySlab":
        if self.ly < self.lx:
            raise ValueError(f"ly ({self.ly}) must not be less than lx ({self.lx})")
        return self

    @property
    def aspect_ratio(self) -> float:
        """β = Ly / Lx."""
        return self.ly / self.lx


SlabSide = Annotated[
    Union[DisabledSlab, OneWaySlab, TwoWaySlab],
    Field(discriminator="type"),
]


def slab_side_from_flags(
    enabled: bool,
    span_type: str = "OneWay",
    lx: float = 0.0,
    ly: Optional[float] = None,
    support_edge: str = "Short",
):
    """Build a slab side from the flat enabled/span-type/edge form."""
    if not enabled:
        return DisabledSlab()
    if span_type.replace("_", "").lower() == "oneway":
        return OneWaySlab(lx=lx)
    return TwoWaySlab(
        lx=lx,
        ly=ly if ly is not None else lx,
        support_edge=SupportEdge(support_edge.lower()),
    )


class SlabInput(_Frozen):
    """Slab loading and the panels on either side of the beam."""
    thickness: float = Field(..., gt=0, le=500, description="Slab thickness in mm")
    live_load: float = Field(..., ge=0, description="Imposed load in kN/m²")
    floor_finish: float = Field(default=1.0, ge=0, description="Floor finish in kN/m²")
    left: SlabSide = Field(default_factory=DisabledSlab)
    right: SlabSide = Field(default_factory=DisabledSlab)


class BeamInput(_Frozen):
    """Rectangular beam section and span."""
    width: float = Field(..., gt=0, description="Beam width b in mm")
    depth: float = Field(..., gt=0, description="Overall depth D in mm")
    span: float = Field(..., gt=0, description="Clear span in meters")
    effective_cover: float = Field(..., ge=0, description="Effective cover in mm")

    @model_validator(mode="after")
    def _check_cover(self) -> "BeamInput":
        if self.depth <= self.effective_cover:
            raise ValueError(
                f"beam depth ({self.depth} mm) must exceed effective cover "
                f"({self.effective_cover} mm)"
            )
        return self

    @property
    def effective_depth(self) -> float:
        """d = D - effective cover (mm)."""
        return self.depth - self.effective_cover


class WallInput(_Frozen):
    """Masonry wall sitting on the beam."""
    height: float = Field(default=0.0, ge=0, description="Wall height in meters")
    thickness: float = Field(default=0.0, ge=0, description="Wall thickness in mm")
    density: float = Field(
        default=MASONRY_UNIT_WEIGHT,
        gt=0,
        description="Unit weight of masonry in kN/m³",
    )


class PointLoad(_Frozen):
    """Concentrated load measured from the left support."""
    value: float = Field(..., ge=0, description="Load in kN")
    distance: float = Field(..., ge=0, description="Distance from left support in meters")


class MaterialInput(_Frozen):
    """Material grades and bar selection."""
    concrete_grade: ConcreteGrade = ConcreteGrade.M20
    steel_grade: SteelGrade = SteelGrade.FE500
    main_bar_dia: float = Field(default=16, gt=0, description="Main bar diameter in mm")
    stirrup_bar_dia: float = Field(default=8, gt=0, description="Stirrup diameter in mm")

    @field_validator("main_bar_dia")
    @classmethod
    def _standard_main_bar(cls, v: float) -> float:
        if v not in STANDARD_BAR_SIZES:
            raise ValueError(f"main bar must be one of {STANDARD_BAR_SIZES} mm, got {v:g}")
        return v

    @field_validator("stirrup_bar_dia")
    @classmethod
    def _standard_stirrup(cls, v: float) -> float:
        if v not in STIRRUP_BAR_SIZES:
            raise ValueError(f"stirrup must be one of {STIRRUP_BAR_SIZES} mm, got {v:g}")
        return v


class DesignInputs(_Frozen):
    """Complete input model for one simply supported beam."""
    slab: SlabInput
    beam: BeamInput
    wall: WallInput = Field(default_factory=WallInput)
    point_loads: Tuple[PointLoad, ...] = ()
    materials: MaterialInput = Field(default_factory=MaterialInput)

    @model_validator(mode="after")
    def _check_point_loads(self) -> "DesignInputs":
        span = self.beam.span
        for i, load in enumerate(self.point_loads):
            if load.distance > span:
                raise ValueError(
                    f"point_loads[{i}]: distance {load.distance} m lies beyond "
                    f"the span ({span} m)"
                )
        return self

    @property
    def fck(self) -> float:
        """Characteristic compressive strength in MPa."""
        return self.materials.concrete_grade.fck

    @property
    def fy(self) -> float:
        """Characteristic yield strength in MPa."""
        return self.materials.steel_grade.fy
