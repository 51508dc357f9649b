"""Provenance envelope placed around every published analysis."""

from __future__ import annotations

HEADER_MARKER = "## 🤖 Renovate AI Analysis"
COMMENT_HEADER = f"{HEADER_MARKER} (Self-Hosted Models)"


def has_header(text: str) -> bool:
    return HEADER_MARKER in text


def wrap_analysis(body: str, source: str) -> str:
    """Wrap ``body`` in the header and a footer naming ``source``.

    ``source`` is ``provider/model`` when known, otherwise just the provider.
    """
    return (
        f"{COMMENT_HEADER}\n\n"
        f"{body}\n\n"
        "---\n"
        "*This analysis was automatically generated by Renovate AI using "
        f"self-hosted models ({source}).*"
    )
