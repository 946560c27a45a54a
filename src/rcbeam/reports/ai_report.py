"""
Natural-language design report from an injected text generator.

The generator is any ``async (prompt: str) -> str`` callable (an LLM client
wrapper, a stub in tests).  Report generation never raises and never
touches the numeric result: failures come back as a fallback string.
"""

import asyncio
from typing import Awaitable, Callable

from loguru import logger

from rcbeam.models.outputs import DesignSnapshot
from rcbeam.reports.prompt import build_report_prompt

ReportGenerator = Callable[[str], Awaitable[str]]

EMPTY_REPORT = "Could not generate report."
FAILED_REPORT = "Error generating AI report. Please check your API key and connection."
TIMEOUT_REPORT = "AI report timed out. The numeric design above is unaffected."


async def generate_design_report(
    snapshot: DesignSnapshot,
    generator: ReportGenerator,
    timeout: float = 60.0,
) -> str:
    """
    Ask *generator* for a review of *snapshot*.

    Args:
        snapshot: Completed design run
        generator: Async text generator
        timeout: Seconds to wait before giving up

    Returns:
        Report text, or a fallback message on any failure
    """
    prompt = build_report_prompt(snapshot)
    try:
        text = await asyncio.wait_for(generator(prompt), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("Report generator timed out after {}s", timeout)
        return TIMEOUT_REPORT
    except Exception as exc:
        logger.opt(exception=exc).error("Report generator failed: {}", exc)
        return FAILED_REPORT

    if not text or not text.strip():
        return EMPTY_REPORT
    return text


def request_design_report(
    snapshot: DesignSnapshot,
    generator: ReportGenerator,
    timeout: float = 60.0,
) -> "asyncio.Task[str]":
    """Schedule report generation on the running loop and return the task."""
    return asyncio.get_running_loop().create_task(
        generate_design_report(snapshot, generator, timeout=timeout)
    )
