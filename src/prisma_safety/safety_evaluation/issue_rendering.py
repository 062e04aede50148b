"""Human-readable rendering of safety issues."""

from __future__ import annotations

from collections.abc import Sequence

from .safety_outcomes import SafetyIssue


def render_safety_issues(issues: Sequence[SafetyIssue]) -> str:
    """Render one line per issue in the order the issues were produced."""
    return "\n".join(f'Unsafe change to "{issue.location}": {issue.message}' for issue in issues)
