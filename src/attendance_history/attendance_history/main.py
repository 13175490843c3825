from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging_setup import setup_logging
from .container import Container, build_container
from .core.constants import ADMIN_RECORD_LIMIT
from .database.connection import DBConfig

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app; pass `container` to run against other repositories."""

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["LOGIN_URL"] = getattr(settings, "LOGIN_URL", "/login")

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())
        container = build_container(
            db_config=db_config,
            admin_record_limit=int(getattr(settings, "ADMIN_RECORD_LIMIT", ADMIN_RECORD_LIMIT)),
        )

    register_attendance(app, container)
    return app
