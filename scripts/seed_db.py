from __future__ import annotations

import importlib

from dotenv import load_dotenv

from daily_timesheet.config import get_settings_module
from daily_timesheet.database.bootstrap import SEED_PATH, apply_seed_sql
from daily_timesheet.database.connection import DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=SEED_PATH)
    print(f"OK: Seeded employees -> {DBConfig.from_dict(db_config).describe()}")


if __name__ == "__main__":
    main()
