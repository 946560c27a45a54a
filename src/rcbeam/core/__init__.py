# Core calculation engine
from .beam_design import BeamDesignEngine, design
from .loads import LoadAggregator, slab_udl
from .analysis import SectionAnalyzer
from .flexure import FlexureDesigner
from .shear import ShearDesigner
from .serviceability import ServiceabilityChecker
