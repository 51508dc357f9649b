"""Pipeline data model.

Every value here is built once by one pipeline stage and handed to the next;
none of them is mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChangedFile:
    """A file changed by the pull request, as reported by GitHub."""
    name: str
    patch: str | None = None  # None for binary or oversized diffs


@dataclass(frozen=True)
class FileDiff:
    """A dependency file retained for analysis, with its bounded diff."""
    file_name: str
    diff_text: str


@dataclass(frozen=True)
class PullRequestSummary:
    """The parts of the pull request used as prompt context."""
    title: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class AnalysisResult:
    """A fully formatted analysis, ready to publish."""
    body: str
