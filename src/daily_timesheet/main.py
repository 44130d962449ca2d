from __future__ import annotations

import importlib
import logging
from typing import Optional
from zoneinfo import ZoneInfo

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container
from .core.constants import DEFAULT_TIMEZONE
from .core.logging_config import setup_logging
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig
from .employees.controller import register as register_employees
from .tasks.controller import register as register_tasks

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    Pass ``container`` to run against prepared repositories (tests); otherwise
    MySQL repositories are built from the settings module picked by APP_ENV.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["TIMEZONE_INFO"] = ZoneInfo(getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), json_output=bool(getattr(settings, "LOG_JSON", False)))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if getattr(settings, "AUTO_SEED_DB", False):
            apply_seed_sql(db_config)
            logger.info("demo seed ready")

        container = build_container(db_config=db_config)

    register_employees(app, container)
    register_tasks(app, container)

    return app


if __name__ == "__main__":
    create_app().run(port=5000)
