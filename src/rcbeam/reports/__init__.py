"""Report consumers: review prompt, AI report and diagrams."""

from rcbeam.reports.ai_report import (
    ReportGenerator, generate_design_report, request_design_report,
)
from rcbeam.reports.prompt import build_report_prompt

__all__ = [
    "ReportGenerator",
    "build_report_prompt",
    "generate_design_report",
    "request_design_report",
]
