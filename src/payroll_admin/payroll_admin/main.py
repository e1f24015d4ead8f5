from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .allowances.controller import register as register_allowances
from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import Container, build_container
from .deductions.controller import register as register_deductions
from .leaves.controller import register as register_leaves
from .users.controller import register as register_users

logger = logging.getLogger("payroll_admin")


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    api_config = getattr(settings, "API_CONFIG")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        # Fails on startup when API_BASE_URL is missing.
        container = build_container(api_config=api_config)
    logger.info("settings=%s backend=%s", settings_module, api_config.get("base_url"))

    register_error_handlers(app)
    register_users(app, container)
    register_deductions(app, container)
    register_allowances(app, container)
    register_leaves(app, container)
    register_attendance(app, container)

    return app
