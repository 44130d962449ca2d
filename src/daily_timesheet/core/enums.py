from __future__ import annotations

from enum import Enum


class RejectionReason(str, Enum):
    """Why a candidate task was refused by the daily budget check."""

    INVALID_RANGE = "InvalidRange"
    EXCEEDS_SINGLE_TASK_LIMIT = "ExceedsSingleTaskLimit"
    EXCEEDS_DAILY_LIMIT = "ExceedsDailyLimit"
