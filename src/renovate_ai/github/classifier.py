"""Dependency file classification.

Decides from a file path alone whether a changed file declares package or
image versions. The rules are a declarative table so they can be extended
and tested without touching the collector.

Matching is deliberately permissive: manifest names match anywhere in the
path, so ``my-requirements.txt.bak`` counts. A YAML file is only considered
when its *name* carries a deployment marker; ``app.yaml`` that bumps an
``image:`` tag is not picked up.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RuleKind(str, Enum):
    MANIFEST = "manifest"
    DEPLOYMENT_YAML = "deployment_yaml"
    DOCKERFILE = "dockerfile"


@dataclass(frozen=True)
class DependencyRule:
    """One classification rule. ``suffixes`` restricts the rule to those extensions."""
    kind: RuleKind
    markers: tuple[str, ...]
    suffixes: tuple[str, ...] = ()

    def matches(self, name: str) -> bool:
        """Match against an already lower-cased path."""
        if self.suffixes and not name.endswith(self.suffixes):
            return False
        return any(marker in name or name.endswith(marker) for marker in self.markers)


# Package manager files. "*.csproj" and "*.sln" are literal substrings, not globs.
MANIFEST_FILES = (
    "package.json", "package-lock.json", "yarn.lock", "pnpm-lock.yaml",
    "requirements.txt", "pipfile", "poetry.lock", "pyproject.toml",
    "go.mod", "go.sum",
    "cargo.toml", "cargo.lock",
    "pom.xml", "build.gradle", "gradle.properties",
    "*.csproj", "*.sln", "packages.config",
    "gemfile", "gemfile.lock",
    "composer.json", "composer.lock",
    "pubspec.yaml",
    "mix.exs", "mix.lock",
    "podfile", "podfile.lock",
)

DEPLOYMENT_MARKERS = (
    "docker-compose", "kubernetes", "k8s", "values.yaml", "chart", "helm",
)

YAML_SUFFIXES = (".yml", ".yaml")

DEPENDENCY_RULES: tuple[DependencyRule, ...] = (
    DependencyRule(RuleKind.MANIFEST, MANIFEST_FILES),
    DependencyRule(RuleKind.DEPLOYMENT_YAML, DEPLOYMENT_MARKERS, suffixes=YAML_SUFFIXES),
    DependencyRule(RuleKind.DOCKERFILE, ("dockerfile",)),
)


def classify(name: str, rules: tuple[DependencyRule, ...] = DEPENDENCY_RULES) -> RuleKind | None:
    """Return the kind of the first rule matching ``name``, or None."""
    lowered = name.lower()
    for rule in rules:
        if rule.matches(lowered):
            return rule.kind
    return None


def is_dependency_file(name: str) -> bool:
    """Check if a file is likely to contain dependency information."""
    return classify(name) is not None
