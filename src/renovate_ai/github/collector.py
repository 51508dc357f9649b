"""Collect bounded diffs for the dependency files changed by a pull request."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from renovate_ai.github.classifier import is_dependency_file
from renovate_ai.github.models import ChangedFile, FileDiff

logger = logging.getLogger(__name__)

MAX_DIFF_CHARS = 2000
TRUNCATION_MARKER = "\n... (diff truncated)"


def truncate_diff(diff_text: str, limit: int = MAX_DIFF_CHARS) -> str:
    """Cut ``diff_text`` to ``limit`` characters and flag the cut.

    Applying it to its own output returns the same string.
    """
    if len(diff_text) > limit:
        return diff_text[:limit] + TRUNCATION_MARKER
    return diff_text


def collect_diffs(files: Iterable[ChangedFile]) -> list[FileDiff]:
    """Keep the dependency files that have a patch, in their original order.

    Files without a patch (binary or too large for GitHub to render) are
    skipped whatever their name. Duplicate names are kept as-is.
    """
    files = list(files)
    logger.info("Processing %d file(s)...", len(files))

    diffs: list[FileDiff] = []
    for changed in files:
        if changed.patch is None:
            continue
        if not is_dependency_file(changed.name):
            continue

        logger.debug("Collecting diff for %s", changed.name)
        diffs.append(FileDiff(file_name=changed.name, diff_text=truncate_diff(changed.patch)))

    logger.info(
        "Found %d dependency-related file(s) out of %d total file(s)",
        len(diffs), len(files),
    )
    return diffs
