from rcbeam.reports.diagrams.cross_section import cross_section_for, generate_cross_section
from rcbeam.reports.diagrams.force_diagrams import generate_force_diagrams

__all__ = ["cross_section_for", "generate_cross_section", "generate_force_diagrams"]
