"""
rcli.evaluator

Password strength feedback on top of zxcvbn:
- evaluate_strength(password): StrengthReport with score (0-4), label,
  optional warning and suggestions
- render_report(report, console): print the report to a diagnostic console

The report is advisory. Nothing here rejects a password, and
evaluate_strength never raises: input the estimator cannot score gets a
report with UNSCORED and the Unknown label.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from zxcvbn import zxcvbn

from .generator import MAX_LENGTH

logger = logging.getLogger(__name__)

WEAK = "Weak password - consider adding more characters or complexity"
MODERATE = "Moderate password strength"
STRONG = "Strong password"
UNKNOWN = "Unknown password strength score"

LABELS = {
    0: WEAK,
    1: WEAK,
    2: MODERATE,
    3: MODERATE,
    4: STRONG,
}

# outside the 0-4 range, so label_for() gives UNKNOWN
UNSCORED = -1

_STYLES = {WEAK: "red", MODERATE: "yellow", STRONG: "green"}


@dataclass(frozen=True)
class StrengthReport:
    score: int
    label: str
    warning: Optional[str] = None
    suggestions: List[str] = field(default_factory=list)


def label_for(score: int) -> str:
    return LABELS.get(score, UNKNOWN)


def _unscored(warning: str) -> StrengthReport:
    return StrengthReport(score=UNSCORED, label=label_for(UNSCORED), warning=warning)


def evaluate_strength(password: str) -> StrengthReport:
    if not password:
        return _unscored("Password is empty")
    if len(password) > MAX_LENGTH:
        return _unscored(f"Password is longer than {MAX_LENGTH} characters and was not scored")
    try:
        # zxcvbn refuses passwords longer than max_length (72 by default)
        result = zxcvbn(password, max_length=MAX_LENGTH)
    except ValueError as e:
        logger.debug("strength estimator rejected a %d-character password: %s", len(password), e)
        return _unscored("Password could not be scored")
    score = result["score"]
    feedback = result.get("feedback") or {}
    return StrengthReport(
        score=score,
        label=label_for(score),
        warning=feedback.get("warning") or None,
        suggestions=list(feedback.get("suggestions") or []),
    )


def render_report(report: StrengthReport, console: Console) -> None:
    style = _STYLES.get(report.label, "magenta")
    console.print(f"Password strength: {report.score}")
    console.print(f"[{style}]{report.label}[/{style}]")
    if report.warning:
        console.print(f"[bold]Warning:[/bold] {escape(report.warning)}", highlight=False)
    if report.suggestions:
        console.print("[bold]Suggestions:[/bold]")
        for s in report.suggestions:
            console.print(f"  - {escape(s)}", highlight=False)
