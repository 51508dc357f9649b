"""Tests for dependency file classification."""

from __future__ import annotations

import pytest

from renovate_ai.github.classifier import (
    DEPENDENCY_RULES,
    DependencyRule,
    RuleKind,
    classify,
    is_dependency_file,
)


class TestManifests:
    @pytest.mark.parametrize("name", [
        "package.json",
        "package-lock.json",
        "frontend/yarn.lock",
        "requirements.txt",
        "Pipfile",
        "pyproject.toml",
        "go.mod",
        "go.sum",
        "Cargo.toml",
        "pom.xml",
        "app/build.gradle",
        "Gemfile.lock",
        "composer.json",
        "pubspec.yaml",
        "mix.exs",
        "ios/Podfile",
    ])
    def test_known_manifests(self, name: str):
        assert is_dependency_file(name)

    def test_case_insensitive(self):
        assert is_dependency_file("GO.MOD") == is_dependency_file("go.mod") is True

    def test_substring_match(self):
        assert is_dependency_file("my-requirements.txt.bak")

    def test_csproj_is_literal(self):
        # The "*" is part of the pattern, not a wildcard
        assert not is_dependency_file("src/App.csproj")
        assert is_dependency_file("weird/*.csproj")

    def test_non_dependency(self):
        assert not is_dependency_file("README.md")
        assert not is_dependency_file("src/main.go")


class TestDeploymentYaml:
    def test_values_yaml(self):
        assert is_dependency_file("infra/k8s/values.yaml")

    @pytest.mark.parametrize("name", [
        "docker-compose.yml",
        "deploy/kubernetes/api.yaml",
        "charts/api/templates/deployment.yaml",
        "helm/release.yml",
    ])
    def test_markers(self, name: str):
        assert classify(name) is RuleKind.DEPLOYMENT_YAML

    def test_generic_yaml_not_matched(self):
        assert not is_dependency_file("infra/generic.yaml")
        assert not is_dependency_file("app.yaml")

    def test_marker_without_yaml_suffix(self):
        assert not is_dependency_file("k8s/README.md")


class TestDockerfile:
    @pytest.mark.parametrize("name", ["Dockerfile", "build/api.Dockerfile", "DOCKERFILE.dev"])
    def test_dockerfiles(self, name: str):
        assert classify(name) is RuleKind.DOCKERFILE


class TestRules:
    def test_manifest_rule_wins_first(self):
        assert classify("pnpm-lock.yaml") is RuleKind.MANIFEST

    def test_custom_rule_table(self):
        rules = (DependencyRule(RuleKind.MANIFEST, ("deps.edn",)),)
        assert classify("deps.edn", rules) is RuleKind.MANIFEST
        assert classify("go.mod", rules) is None

    def test_default_table_has_all_kinds(self):
        assert {r.kind for r in DEPENDENCY_RULES} == set(RuleKind)
