"""lint_parity.domain

Domain objects that form the *contract* between the linter adapters, the
reconciliation engine and the report presenter.

Key idea
--------
ESLint and Oxlint report findings in different JSON shapes and different rule
naming schemes. Adapters reduce both to :class:`Violation` records keyed by the
ESLint rule id so the engine never needs to know vendor quirks.
"""

from __future__ import annotations

from .report import ComparisonReport
from .violation import Violation

__all__ = [
    "ComparisonReport",
    "Violation",
]
