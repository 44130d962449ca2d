from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DAILY_HOURS_LIMIT, DAILY_LIMIT_MS
from ..core.enums import RejectionReason
from ..core.exceptions import BudgetRejection, ExceedsDailyLimit, ExceedsSingleTaskLimit, InvalidRange
from ..tasks.model import TaskDraft
from .duration import duration_ms, hours_to_ms, ms_to_hours


@dataclass(frozen=True)
class BudgetDecision:
    """Outcome of checking a candidate task against the daily budget."""

    reason: Optional[RejectionReason] = None
    remaining_hours: Optional[float] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    def to_error(self) -> Optional[BudgetRejection]:
        if self.reason is None:
            return None
        if self.reason == RejectionReason.INVALID_RANGE:
            return InvalidRange()
        if self.reason == RejectionReason.EXCEEDS_SINGLE_TASK_LIMIT:
            return ExceedsSingleTaskLimit(DAILY_HOURS_LIMIT)
        return ExceedsDailyLimit(DAILY_HOURS_LIMIT, self.remaining_hours or 0.0)

    def raise_for_rejection(self) -> None:
        error = self.to_error()
        if error is not None:
            raise error


ACCEPT = BudgetDecision()


def validate(candidate: TaskDraft, same_day_total_excluding_candidate: float) -> BudgetDecision:
    """Decide whether ``candidate`` fits in the employee's daily budget.

    Checks run in a fixed order and the first failure wins:
    invalid range, single task over the limit, day total over the limit.
    Arithmetic is done in whole milliseconds so that exactly 8h is accepted.
    """
    candidate_ms = duration_ms(candidate.start, candidate.end)
    if candidate_ms <= 0:
        return BudgetDecision(reason=RejectionReason.INVALID_RANGE)

    if candidate_ms > DAILY_LIMIT_MS:
        return BudgetDecision(reason=RejectionReason.EXCEEDS_SINGLE_TASK_LIMIT)

    booked_ms = hours_to_ms(same_day_total_excluding_candidate)
    if booked_ms + candidate_ms > DAILY_LIMIT_MS:
        return BudgetDecision(
            reason=RejectionReason.EXCEEDS_DAILY_LIMIT,
            remaining_hours=ms_to_hours(max(0, DAILY_LIMIT_MS - booked_ms)),
        )

    return ACCEPT
