from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .analytics.controller import register as register_analytics
from .assistant.controller import register as register_assistant
from .employees.controller import register as register_employees
from .persistence.controller import register as register_settings
from .shift_logs.controller import register as register_shift_logs
from .transfer.controller import register as register_transfer

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    container = container or build_container(settings=settings)
    logger.info(
        "roster-manager settings=%s employees=%d remote_sync=%s",
        settings_module,
        len(container.store.snapshot.employees),
        "on" if container.gateway.remote else "off",
    )

    register_employees(app, container)
    register_analytics(app, container)
    register_shift_logs(app, container)
    register_transfer(app, container)
    register_assistant(app, container)
    register_settings(app, container)

    return app
