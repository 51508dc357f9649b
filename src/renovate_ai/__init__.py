"""Renovate AI - dependency-update pull request analysis with self-hosted models."""

__version__ = "0.1.0"
