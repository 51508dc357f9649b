"""Prompt assembly and model invocation for dependency analysis."""

from renovate_ai.analysis.envelope import COMMENT_HEADER, HEADER_MARKER, wrap_analysis
from renovate_ai.analysis.orchestrator import AnalysisOrchestrator
from renovate_ai.analysis.prompts import assemble_prompt

__all__ = [
    "AnalysisOrchestrator",
    "COMMENT_HEADER",
    "HEADER_MARKER",
    "assemble_prompt",
    "wrap_analysis",
]
