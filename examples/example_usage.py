"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the hours accounting lives in services and the
accounting package.
"""

import importlib
from datetime import date

from daily_timesheet.config import get_settings_module
from daily_timesheet.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    report = container.task_service.daily_summary(date.today())
    for employee_id, summary in report.employee_summaries.items():
        print(employee_id, f"{summary.total_hours:.2f}h booked, {summary.remaining_hours:.2f}h left")


if __name__ == "__main__":
    main()
