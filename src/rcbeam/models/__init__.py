# Data models for IS 456 beam design
from .inputs import (
    DesignInputs, SlabInput, BeamInput, WallInput, PointLoad, MaterialInput,
    ConcreteGrade, SteelGrade, SupportEdge,
    DisabledSlab, OneWaySlab, TwoWaySlab, SlabSide, slab_side_from_flags,
)
from .outputs import (
    LoadResult, AnalysisResult, DesignResult, DesignSnapshot,
    FlexuralDesignOutput, ShearDesignOutput, DeflectionCheckOutput,
    CalculationStep, DesignStatus,
)
