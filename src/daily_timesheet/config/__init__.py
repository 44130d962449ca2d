import os


def get_settings_module() -> str:
    # Environment comes from APP_ENV, defaulting to development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "daily_timesheet.config.production"

    if env in {"test", "testing"}:
        return "daily_timesheet.config.testing"

    return "daily_timesheet.config.development"
