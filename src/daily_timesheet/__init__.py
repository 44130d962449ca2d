"""Daily Timesheet package.

Organized by feature modules (tasks, employees) around a pure accounting
engine, with a thin Flask controller layer over service/repository layers.
"""
