"""Daily hours accounting: duration, per-day aggregation, budget check, summary."""

from .aggregator import DailyTotal, aggregate, same_day_total_hours
from .duration import duration_ms, hours
from .summary import DailyEmployeeSummary, DailySummaryReport, build
from .validator import BudgetDecision, validate

__all__ = [
    "BudgetDecision",
    "DailyEmployeeSummary",
    "DailySummaryReport",
    "DailyTotal",
    "aggregate",
    "build",
    "duration_ms",
    "hours",
    "same_day_total_hours",
    "validate",
]
