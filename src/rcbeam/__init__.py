"""IS 456:2000 design of simply supported RC beams."""

from loguru import logger

from rcbeam.config import DesignSettings
from rcbeam.core.beam_design import BeamDesignEngine, design
from rcbeam.models import (
    AnalysisResult, DesignInputs, DesignResult, DesignSnapshot, LoadResult,
)

__version__ = "0.1.0"

# Silent as a library; configure_logging() turns it on.
logger.disable("rcbeam")
