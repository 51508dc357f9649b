"""Prompt for the dependency-update analysis.

The section headings in ``ANALYSIS_TEMPLATE`` are what downstream readers of
the comment key off; changing them is a breaking change.
"""

from __future__ import annotations

from collections.abc import Sequence

from renovate_ai.github.models import FileDiff, PullRequestSummary

TEMPLATE_VERSION = "1"
MAX_DESCRIPTION_CHARS = 2000
DESCRIPTION_ELLIPSIS = "..."

SYSTEM_PREFACE = (
    "You are an expert software engineer specializing in dependency management "
    "and breaking change analysis. Your responses must be clear, actionable, and "
    "structured according to the format provided."
)

TEMPLATE_VARIABLES = ("pr_title", "pr_description", "diff_summary")

ANALYSIS_TEMPLATE = """\
You are an expert software engineer specializing in dependency management and breaking change analysis. Your task is to provide clear, actionable insights that help developers make informed decisions about dependency updates.

## Context

**PR Title:** {pr_title}

**PR Description:** {pr_description}

**Code Changes (Diffs):**
{diff_summary}

## Analysis Requirements

Analyze the provided diffs and provide a comprehensive, structured analysis. Follow this exact format:

### 📦 1. Dependency Changes Summary

List ALL dependency changes found in the diffs. For each change, specify:
- **Package/Image Name**: Exact name from the diff
- **Version Change**: Old version → New version (e.g., "1.2.3 → 2.0.0")
- **Update Type**: Major / Minor / Patch / Docker image tag
- **File Location**: Which file(s) contain this change

Supported formats:
- Node.js: package.json, package-lock.json, yarn.lock, pnpm-lock.yaml
- Python: requirements.txt, Pipfile, poetry.lock, pyproject.toml
- Go: go.mod, go.sum
- Rust: Cargo.toml, Cargo.lock
- Java: pom.xml, build.gradle
- .NET: *.csproj, *.sln, packages.config
- Ruby: Gemfile, Gemfile.lock
- PHP: composer.json, composer.lock
- Docker/Kubernetes: Look for "image:" lines or "repository:" + "tag:" pairs in YAML files

### ⚠️ 2. Breaking Changes Risk Assessment

For EACH dependency change, assess breaking change risk:

**Risk Level**: 🔴 HIGH / 🟡 MEDIUM / 🟢 LOW

**Reasoning**:
- Semantic versioning analysis (major bumps = HIGH risk)
- Known breaking changes in changelogs/release notes
- Deprecation warnings or removed features
- API/interface changes detected

**Specific Breaking Changes** (if any):
- List concrete breaking changes (e.g., "API method X removed", "Configuration format changed")
- Reference specific versions or changelog entries if known

### 📊 3. Impact Analysis

Assess the potential impact on the codebase:

**Affected Areas**:
- List specific files, modules, or components that might be affected
- Identify services or features that depend on these changes
- Note any transitive dependencies that might be impacted

**Potential Issues**:
- Runtime errors or exceptions that might occur
- Build/compilation issues
- Performance implications
- Security considerations

**Severity**: 🔴 Critical / 🟡 Moderate / 🟢 Low

### 🔄 4. Migration Requirements

Provide actionable migration steps if needed:

**Required Actions** (if breaking changes detected):
1. [Specific step 1 with code examples if applicable]
2. [Specific step 2]
3. [Continue as needed]

**Code Changes Needed**:
- List specific code locations that need updates
- Provide code examples or patterns if helpful
- Note any configuration file changes

**Estimated Effort**: [X hours/days] or "No changes required"

### 🧪 5. Testing Recommendations

Provide specific, actionable testing guidance:

**Critical Test Areas**:
- [Specific feature/component to test]
- [Specific functionality to verify]
- [Specific integration to check]

**Test Types**:
- **Unit Tests**: [Specific test files or functions to update/run]
- **Integration Tests**: [Specific integration scenarios to verify]
- **Manual Testing**: [Specific user flows or features to manually test]

**Regression Risks**:
- List specific areas where regressions are most likely
- Suggest test cases to add if missing

### 🎯 6. Confidence Level & Recommendation

**Confidence Level**: 
- 🔴 **LOW**: Significant uncertainty, requires thorough review
- 🟡 **MEDIUM**: Some uncertainty, review recommended
- 🟢 **HIGH**: High confidence, likely safe

**Reasoning**: [Explain why you assigned this confidence level]

**Recommendation**: 
- ✅ **MERGE**: Safe to merge, no action needed
- ⚠️ **REVIEW REQUIRED**: Requires human review before merging
- ❌ **DO NOT MERGE**: Contains breaking changes that need migration first

**Next Steps** (if not MERGE):
1. [Specific action item 1]
2. [Specific action item 2]
3. [Continue as needed]

## Output Format Guidelines

- Use clear markdown formatting with headers, lists, and code blocks
- Be specific and concrete - avoid vague statements
- Provide actionable guidance - tell developers exactly what to do
- Use emojis for visual clarity (as shown in the format above)
- If no issues found, clearly state "No breaking changes detected" and recommend merge
- If issues found, prioritize them by severity and provide clear remediation steps

## Important Notes

- Base your analysis ONLY on the diffs provided - do not make assumptions
- For Docker images, check both formats:
  - Direct: image: registry/image:tag
  - Structured: repository: "image" with tag: "version"
- When in doubt about breaking changes, err on the side of caution
- Provide specific file paths, function names, or code locations when possible
- If you cannot determine something from the diffs, state "Cannot determine from provided diffs" rather than guessing"""


def truncate_description(description: str | None) -> str:
    if not description:
        return ""
    if len(description) > MAX_DESCRIPTION_CHARS:
        return description[:MAX_DESCRIPTION_CHARS] + DESCRIPTION_ELLIPSIS
    return description


def render_diff_block(diff: FileDiff) -> str:
    return f"\n**File: {diff.file_name}**\n```diff\n{diff.diff_text}\n```\n"


def render_diff_summary(diffs: Sequence[FileDiff]) -> str:
    """Render every diff in order as a labelled ``diff`` code block."""
    return "".join(render_diff_block(d) for d in diffs)


def assemble_prompt(summary: PullRequestSummary, diffs: Sequence[FileDiff]) -> str:
    """Build the full request text sent to the model.

    Deterministic: the same summary and diffs always give the same string.
    """
    rendered = ANALYSIS_TEMPLATE.format(
        pr_title=summary.title or "",
        pr_description=truncate_description(summary.description),
        diff_summary=render_diff_summary(diffs),
    )
    return f"{SYSTEM_PREFACE}\n\n{rendered}"
